import sys
from pathlib import Path
import logging as lg
import traceback

import click

import intcode.common.hwconf as hw
from intcode.common.errors import IntcodeError
from intcode.runtime.emulator import EXIT_KEYBOARD, EXIT_EXEC_ERROR
from intcode.runtime.program import load_file
from intcode.runtime.network import Network


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-n', '--size', type=click.IntRange(1, hw.BROADCAST_ADDRESS),
              default=hw.NETWORK_SIZE, help='Number of nodes')
@click.argument('program_filename', type=Path)
def serve(verbose: bool, size: int, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("INTCODE NETWORK")

    try:
        network = Network(load_file(program_filename), size)
        y = network.run()
        click.echo(f'First broadcast y: {network.nat.first_y}')
        click.echo(f'Repeated monitor y: {y}')

    except IntcodeError as e:
        lg.info(f'Network halted on error {e}')
        sys.exit(EXIT_EXEC_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    serve()
