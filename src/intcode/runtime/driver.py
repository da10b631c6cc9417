from typing import Iterable, Tuple

import intcode.common.hwconf as hw
from intcode.common.errors import NeedsInputViolation
import intcode.runtime.cpu as cpu


def next_output(proc: cpu.CPU, value: int | None = None) -> int | None:
    event = proc.run(value)

    match event:
        case cpu.Output(value=out):
            return out
        case cpu.Halted():
            return None
        case _:
            raise NeedsInputViolation(f'CPU blocked on input at {proc.pc}')


def execute(program: Iterable[int], inputs: Iterable[int] = ()) -> list[int]:
    proc = cpu.CPU(program)
    proc.feed(*inputs)
    outputs = []

    while (value := next_output(proc)) is not None:
        outputs.append(value)

    return outputs


def drain(proc: cpu.CPU) -> list[int]:
    outputs = []

    while isinstance(event := proc.run(), cpu.Output):
        outputs.append(event.value)

    return outputs


def send_text(proc: cpu.CPU, text: str) -> list[int]:
    proc.feed(*(ord(c) for c in text))
    return drain(proc)


def decode_ascii(values: Iterable[int]) -> Tuple[str, list[int]]:
    text = []
    other = []

    for value in values:
        if hw.ASCII_MIN <= value <= hw.ASCII_MAX:
            text.append(chr(value))
        else:
            other.append(value)

    return ''.join(text), other
