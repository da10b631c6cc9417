# type: ignore
import pytest

import intcode.runtime.cpu as cpu

import unit_utils


@pytest.fixture
def with_quine():
    yield unit_utils.load_program('quine')


@pytest.fixture
def with_echo():
    yield cpu.CPU(unit_utils.load_program('echo'))


@pytest.fixture
def with_program_file(tmp_path):
    def write(text: str):
        path = tmp_path / 'program.txt'
        path.write_text(text)
        return path

    yield write
