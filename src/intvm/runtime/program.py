''' Program text grammar '''

from pathlib import Path
import logging as lg

import pyparsing as pp

from intvm.common.errors import ParseError
from intvm.common.vmconf import PROGRAM_SEPARATOR


integer = pp.Regex('[+-]?[0-9]+').set_parse_action(lambda r: int(r[0]))
separator = pp.Suppress(pp.Literal(PROGRAM_SEPARATOR))

program = (integer + pp.ZeroOrMore(separator - integer) + pp.StringEnd())
program.leave_whitespace()


def parse_program(text: str) -> list[int]:
    # Columns count from the start of the unstripped text, 1-based
    offset = len(text) - len(text.lstrip())

    try:
        values = program.parse_string(text.strip(), parse_all=True)

    except pp.ParseBaseException as e:
        column = offset + e.loc + 1
        raise ParseError(f'Malformed program text at column {column}: {e.msg}', column) from e

    lg.debug(f'Parsed program of {len(values)} words')
    return list(values)


def load_program(filepath: str | Path) -> str:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Loading program {filepath}')
    return filepath.read_text().strip()
