from dataclasses import dataclass

import intcode.common.ops as ops
from intcode.common.errors import InvalidOpcode, InvalidMode


@dataclass(frozen=True)
class Instruction:
    opcode: int
    modes: tuple[int, ...]

    @property
    def width(self) -> int:
        return len(self.modes) + 1


def decode(word: int, address: int | None = None) -> Instruction:
    opcode = word % 100

    if word < 0 or opcode not in ops.PARAMS:
        raise InvalidOpcode(word, address)

    # All three mode digits are validated, even for short instructions
    modes = []

    for k in range(1, ops.MAX_MODES + 1):
        mode = (word // 10 ** (k + 1)) % 10

        if mode not in ops.MODES:
            raise InvalidMode(word, mode, address)

        modes.append(mode)

    return Instruction(opcode, tuple(modes[:ops.PARAMS[opcode]]))
