import logging as lg
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable

import intcode.common.ops as ops
from intcode.runtime.memory import Memory
from intcode.runtime.decoder import Instruction, decode


@dataclass(frozen=True)
class Halted:
    pass


@dataclass(frozen=True)
class Output:
    value: int


@dataclass(frozen=True)
class NeedsInput:
    pass


Event = Halted | Output | NeedsInput

HALTED = Halted()
NEEDS_INPUT = NeedsInput()


class CPU():
    pc: int  # Program counter
    rb: int  # Relative base
    memory: Memory
    inputs: deque[int]
    halted: bool
    trace: bool

    def __init__(self, program: Iterable[int], trace: bool = False):
        self.memory = Memory(program)   # Private copy of the image
        self.pc = 0
        self.rb = 0
        self.inputs = deque()
        self.halted = False
        self.trace = trace

    # - Helpers - #

    def debug_dump(self):
        word = self.memory[self.pc]
        lg.debug(f'PC:{self.pc} RB:{self.rb} W:{word} IN:{list(self.inputs)}')

    def peek(self, address: int) -> int:
        return self.memory[address]

    def poke(self, address: int, value: int):
        self.memory[address] = value

    def feed(self, *values: int):
        self.inputs.extend(values)

    def address(self, ins: Instruction, n: int) -> int:
        operand = self.pc + n

        match ins.modes[n - 1]:
            case ops.POSITION:
                return self.memory[operand]
            case ops.RELATIVE:
                return self.memory[operand] + self.rb
            case _:
                return operand

    def read(self, ins: Instruction, n: int) -> int:
        return self.memory[self.address(ins, n)]

    def write(self, ins: Instruction, n: int, value: int):
        self.memory[self.address(ins, n)] = value

    def advance(self, ins: Instruction):
        self.pc += ins.width

    def arithm_pair(self, ins: Instruction, op: Callable[[int, int], int]):
        a = self.read(ins, 1)
        b = self.read(ins, 2)
        self.write(ins, 3, op(a, b))
        self.advance(ins)

    def jump_if(self, ins: Instruction, cond: Callable[[int], bool]):
        if cond(self.read(ins, 1)):
            self.pc = self.read(ins, 2)
        else:
            self.advance(ins)

    # - Operations - #

    def add(self, ins: Instruction):
        self.arithm_pair(ins, lambda a, b: a + b)

    def mul(self, ins: Instruction):
        self.arithm_pair(ins, lambda a, b: a * b)

    def inp(self, ins: Instruction):
        if not self.inputs:
            return NEEDS_INPUT

        self.write(ins, 1, self.inputs.popleft())
        self.advance(ins)

    def out(self, ins: Instruction):
        value = self.read(ins, 1)
        self.advance(ins)
        return Output(value)

    def jit(self, ins: Instruction):
        self.jump_if(ins, lambda a: a != 0)

    def jif(self, ins: Instruction):
        self.jump_if(ins, lambda a: a == 0)

    def lth(self, ins: Instruction):
        self.arithm_pair(ins, lambda a, b: int(a < b))

    def equ(self, ins: Instruction):
        self.arithm_pair(ins, lambda a, b: int(a == b))

    def arb(self, ins: Instruction):
        self.rb += self.read(ins, 1)
        self.advance(ins)

    def hlt(self, ins: Instruction):
        self.halted = True
        return HALTED

    HANDLERS = {
        ops.ADD: add,
        ops.MUL: mul,
        ops.INP: inp,
        ops.OUT: out,
        ops.JIT: jit,
        ops.JIF: jif,
        ops.LTH: lth,
        ops.EQU: equ,
        ops.ARB: arb,
        ops.HLT: hlt,
    }

    # -- Implementation -- #

    def exec_next(self) -> Halted | Output | NeedsInput | None:
        ins = decode(self.memory[self.pc], self.pc)

        if self.trace:
            self.debug_dump()

        handler = self.HANDLERS[ins.opcode]
        return handler(self, ins)

    def run(self, value: int | None = None) -> Event:
        if value is not None:
            self.feed(value)

        while True:
            event = self.exec_next()

            if event is not None:
                if self.trace:
                    lg.debug(f'PC:{self.pc} suspended with {event}')

                return event
