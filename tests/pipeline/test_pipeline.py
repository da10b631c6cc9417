import os
import subprocess
import sys

import pytest

from intcode.common.errors import ProtocolViolation
from intcode.runtime.pipeline import Pipeline, run_chain, run_feedback

import unit_utils


def test_chain():
    program = unit_utils.load_program('amp_chain')

    assert run_chain(program, [4, 3, 2, 1, 0]) == 43210


def test_chain_negative_phases():
    program = [
        3, 23, 3, 24, 1002, 24, 10, 24, 1002, 23, -1, 23,
        101, 5, 23, 23, 1, 24, 23, 23, 4, 23, 99, 0, 0
    ]

    assert run_chain(program, [0, 1, 2, 3, 4]) == 54321


def test_feedback():
    program = unit_utils.load_program('amp_feedback')

    assert run_feedback(program, [9, 8, 7, 6, 5]) == 139629729


def test_repeated_runs_start_fresh():
    program = unit_utils.load_program('amp_feedback')
    results = {run_feedback(program, [9, 8, 7, 6, 5]) for _ in range(3)}

    assert results == {139629729}


def test_stages_own_memory():
    pipeline = Pipeline(unit_utils.load_program('amp_chain'), [0, 1])

    assert len(pipeline) == 2
    assert pipeline.stages[0].memory is not pipeline.stages[1].memory
    assert list(pipeline.stages[1].inputs) == [1]


def test_silent_stage():
    with pytest.raises(ProtocolViolation):
        run_chain([3, 0, 99], [1, 2])


def test_core_does_not_load_click():
    src = unit_utils.find_file('..') / 'src'
    script = (
        'import sys\n'
        'import intcode.runtime.pipeline\n'
        'import intcode.runtime.network\n'
        'sys.exit(int("click" in sys.modules))\n'
    )
    env = dict(os.environ, PYTHONPATH=str(src.resolve()))

    assert subprocess.run([sys.executable, '-c', script], env=env).returncode == 0
