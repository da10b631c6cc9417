import logging as lg
from typing import Iterable, Sequence

from intcode.common.errors import ProtocolViolation
from intcode.runtime.driver import next_output
import intcode.runtime.cpu as cpu


class Pipeline:
    stages: list[cpu.CPU]

    def __init__(self, program: Iterable[int], settings: Sequence[int]):
        program = tuple(program)
        self.stages = []

        for setting in settings:
            stage = cpu.CPU(program)
            stage.feed(setting)
            self.stages.append(stage)

    def __len__(self) -> int:
        return len(self.stages)

    def chain(self, signal: int = 0) -> int:
        for n, stage in enumerate(self.stages):
            out = next_output(stage, signal)

            if out is None:
                raise ProtocolViolation(f'Stage {n} halted without a signal')

            signal = out

        return signal

    def feedback(self, signal: int = 0) -> int:
        rounds = 0

        while True:
            for n, stage in enumerate(self.stages):
                out = next_output(stage, signal)

                if out is None:
                    lg.debug(f'Stage {n} halted after {rounds} rounds')
                    return signal

                signal = out

            rounds += 1


def run_chain(program: Iterable[int], settings: Sequence[int], signal: int = 0) -> int:
    return Pipeline(program, settings).chain(signal)


def run_feedback(program: Iterable[int], settings: Sequence[int], signal: int = 0) -> int:
    return Pipeline(program, settings).feedback(signal)
