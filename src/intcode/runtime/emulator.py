import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Tuple

import click

from intcode.common.errors import IntcodeError, NeedsInputViolation
from intcode.runtime.driver import next_output, drain, send_text, decode_ascii
from intcode.runtime.program import load_file
import intcode.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_NEEDS_INPUT = 1
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


def parse_poke(_ctx, _param, values: Tuple[str, ...]) -> list[Tuple[int, int]]:
    pokes = []

    for value in values:
        try:
            address, word = value.split('=')
            pokes.append((int(address), int(word)))
        except ValueError:
            raise click.BadParameter(f'Expected ADDR=VALUE, got {value}')

    return pokes


def interact(proc: cpu.CPU):
    outputs = drain(proc)

    while True:
        text, other = decode_ascii(outputs)
        click.echo(text, nl=False)

        for value in other:
            click.echo(value)

        if proc.halted:
            return

        line = sys.stdin.readline()

        if not line:
            raise NeedsInputViolation('Input closed while CPU waits for text')

        outputs = send_text(proc, line)


def emulate(proc: cpu.CPU, text_mode: bool):
    if text_mode:
        interact(proc)
        return

    while (value := next_output(proc)) is not None:
        click.echo(value)


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--trace', is_flag=True, help='Dumps CPU state on every instruction')
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Input value')
@click.option('-a', '--ascii', 'text_mode', is_flag=True, help='Interactive text mode')
@click.option('-p', '--poke', 'pokes', multiple=True, callback=parse_poke,
              help='Write ADDR=VALUE into memory before running')
@click.argument('program_filename', type=Path)
def run(
    verbose: bool,
    trace: bool,
    inputs: Tuple[int, ...],
    text_mode: bool,
    pokes: list[Tuple[int, int]],
    program_filename: Path
):
    lg.basicConfig(level=lg.DEBUG if verbose or trace else lg.INFO)
    lg.info("INTCODE")

    try:
        proc = cpu.CPU(load_file(program_filename), trace=trace)

        for address, value in pokes:
            lg.info(f'Poking {value} into {address}')
            proc.poke(address, value)

        proc.feed(*inputs)
        emulate(proc, text_mode)
        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except NeedsInputViolation as e:
        lg.info(f'Execution halted waiting for input: {e}')
        sys.exit(EXIT_NEEDS_INPUT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except IntcodeError as e:
        lg.info(f'Execution halted on error {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
