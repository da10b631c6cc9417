from pathlib import Path
import logging as lg

import pyparsing as pp

from intcode.common.errors import ProgramLoadError


Program = tuple[int, ...]

integer = pp.Regex(r'[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
program = integer + pp.ZeroOrMore(pp.Suppress(',') + integer)


def load(text: str) -> Program:
    try:
        words = program.parse_string(text.strip(), parse_all=True)
    except pp.ParseException as e:
        raise ProgramLoadError(f'Malformed program text: {e}') from e

    lg.debug(f'Loaded program of {len(words)} words')
    return tuple(words)


def load_file(filepath: str | Path) -> Program:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program from {filepath}')
    return load(filepath.read_text())
