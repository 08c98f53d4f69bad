from pathlib import Path
import logging as lg

import click

from intvm.common.errors import DecodeError
from intvm.runtime.decoder import decode
from intvm.runtime.memory import Memory
from intvm.runtime.program import parse_program, load_program


def disassemble(text: str, start: int = 0) -> list[str]:
    ''' Static listing from `start` to the end of the program.

    Words that do not decode are emitted as DATA and the walk resumes at the
    next word. Jumps are not followed, so data embedded after code shows up
    as whatever it happens to decode to.
    '''

    memory = Memory(parse_program(text))
    lines = []
    addr = start

    while addr < len(memory):
        try:
            instruction = decode(memory, addr)
        except DecodeError as e:
            lg.debug(f'Listing data word: {e}')
            lines.append(f'{addr}: DATA {memory.read(addr)}')
            addr += 1
            continue

        lines.append(f'{addr}: {instruction.dump()}')
        addr += instruction.width

    return lines


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-s', '--start', type=int, default=0, help='Address to start listing from')
@click.argument('program_filename', type=Path)
def disasm(verbose: bool, start: int, program_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('INTVM DISASM')

    for line in disassemble(load_program(program_filename), start):
        click.echo(line)


if __name__ == '__main__':
    disasm()
