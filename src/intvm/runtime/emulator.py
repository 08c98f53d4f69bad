import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Iterable, Tuple

import click

from intvm.common.errors import ParseError, DecodeError, AddressError
import intvm.runtime.cpu as cpu
import intvm.runtime.helpers as h
from intvm.runtime.program import load_program


EXIT_HALT = 0
EXIT_WAIT = 1
EXIT_DECODE_ERROR = 2
EXIT_KEYBOARD = 3
EXIT_PARSE_ERROR = 4
EXIT_EXEC_ERROR = 100


def execute(
    text: str,
    inputs: Iterable[int] = (),
    pokes: dict[int, int] | None = None,
    trace: bool = False
) -> cpu.Engine:
    engine = cpu.Engine(text, trace=trace)

    for addr, value in (pokes or {}).items():
        engine.poke(addr, value)

    engine.extend_input(inputs)
    engine.run()
    engine.debug_dump()
    return engine


def run_and_dump(text: str) -> str:
    return execute(text).dump_memory()


def run_and_dump_with_output(text: str) -> Tuple[str, str]:
    engine = execute(text)
    return engine.dump_memory(), engine.dump_output()


def run_with_input_output(text: str, inputs: Iterable[int]) -> str:
    return execute(text, inputs).dump_output()


def poke_option(ctx: click.Context, param: click.Parameter, value: Tuple[str, ...]):
    try:
        return dict(h.parse_poke(p) for p in value)
    except (UserWarning, ValueError) as e:
        raise click.BadParameter(str(e))


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--trace', is_flag=True, help='Log every instruction before it runs')
@click.option('-m', '--dump-memory', is_flag=True, help='Print final memory')
@click.option('-i', '--input', 'inputs', type=int, multiple=True, help='Value for the input queue')
@click.option(
    '-p', '--poke', 'pokes', multiple=True, callback=poke_option,
    help='ADDR=VALUE written before the run'
)
@click.option('--profile', type=click.Path(exists=True, path_type=Path), help='TOML run profile')
@click.argument('program_filename', type=Path)
def run(
    ctx: click.Context, program_filename: Path, profile: Path | None,
    verbose: bool, trace: bool, dump_memory: bool,
    inputs: Tuple[int, ...], pokes: dict[int, int]
):
    ctx.ensure_object(h.RunSettings)
    settings: h.RunSettings = ctx.obj

    if profile is not None:
        settings.load_profile(profile)

    # Unset flags leave the profile's values alone
    settings.update(
        verbose=verbose or None,
        trace=trace or None,
        dump_memory=dump_memory or None,
        inputs=list(inputs),
        pokes=pokes
    )

    lg.basicConfig(level=lg.DEBUG if settings.verbose else lg.INFO)
    lg.info('INTVM')

    try:
        engine = execute(
            load_program(program_filename),
            settings.inputs,
            settings.pokes,
            settings.trace
        )

        click.echo(engine.dump_output())

        if settings.dump_memory:
            click.echo(engine.dump_memory())

        if engine.state == cpu.State.WAIT:
            lg.info('Execution suspended waiting for input')
            sys.exit(EXIT_WAIT)

        lg.info('Execution halted gracefully')
        sys.exit(EXIT_HALT)

    except ParseError as e:
        lg.error(f'Program rejected: {e}')
        sys.exit(EXIT_PARSE_ERROR)

    except (DecodeError, AddressError) as e:
        lg.error(f'Execution halted on fatal error: {e}')
        sys.exit(EXIT_DECODE_ERROR)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    run()
