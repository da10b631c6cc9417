import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Tuple

import click

from intcode.common.errors import IntcodeError
from intcode.runtime.emulator import EXIT_KEYBOARD, EXIT_EXEC_ERROR
from intcode.runtime.program import load_file
from intcode.runtime.pipeline import Pipeline


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-p', '--phase', 'phases', type=int, multiple=True, required=True,
              help='Phase setting of the next stage')
@click.option('-s', '--signal', type=int, default=0, help='Initial signal')
@click.option('-f', '--feedback', is_flag=True, help='Loop the last stage back to the first')
@click.argument('program_filename', type=Path)
def amplify(
    verbose: bool,
    phases: Tuple[int, ...],
    signal: int,
    feedback: bool,
    program_filename: Path
):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("INTCODE AMPLIFIER")

    try:
        pipeline = Pipeline(load_file(program_filename), phases)
        lg.info(f'Running {len(pipeline)} stages')
        result = pipeline.feedback(signal) if feedback else pipeline.chain(signal)
        click.echo(result)

    except IntcodeError as e:
        lg.info(f'Pipeline halted on error {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    amplify()
