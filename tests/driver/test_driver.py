import pytest

import intcode.runtime.cpu as cpu
import intcode.runtime.driver as driver
from intcode.common.errors import NeedsInputViolation

import unit_utils
from fixtures import with_quine, with_echo  # noqa: F401


def test_execute(with_quine):  # noqa: F811
    assert driver.execute(with_quine) == list(with_quine)


def test_execute_with_inputs():
    assert driver.execute(unit_utils.load_program('compare8'), [8]) == [1000]
    assert driver.execute([3, 9, 8, 9, 10, 9, 4, 9, 99, -1, 8], [8]) == [1]
    assert driver.execute([3, 9, 8, 9, 10, 9, 4, 9, 99, -1, 8], [3]) == [0]


def test_execute_without_input():
    with pytest.raises(NeedsInputViolation):
        driver.execute([3, 0, 99])


def test_next_output():
    proc = cpu.CPU([3, 7, 4, 7, 4, 7, 99])

    assert driver.next_output(proc, 11) == 11
    assert driver.next_output(proc) == 11
    assert driver.next_output(proc) is None


def test_next_output_needs_input():
    proc = cpu.CPU([3, 7, 99])

    with pytest.raises(NeedsInputViolation):
        driver.next_output(proc)

    assert proc.pc == 0
    assert driver.next_output(proc, 1) is None


def test_drain_stops_on_input(with_echo):  # noqa: F811
    assert driver.drain(with_echo) == []
    assert with_echo.pc == 0


def test_send_text(with_echo):  # noqa: F811
    assert driver.send_text(with_echo, 'hi\n') == [104, 105, 10]
    assert driver.send_text(with_echo, 'ok') == [111, 107]


def test_drain_stops_on_halt():
    proc = cpu.CPU(unit_utils.load_program('greeter'))

    assert driver.drain(proc) == [72, 105, 10]
    assert driver.send_text(proc, 'x\n') == [120]
    assert proc.halted


def test_decode_ascii():
    text, other = driver.decode_ascii([72, 105, 10, 256, 19999, -1, 0])

    assert text == 'Hi\n\x00'
    assert other == [256, 19999, -1]
