import functools
import sys
from pathlib import Path
import logging as lg
import traceback

import click

from intvm.common.errors import VMError
from intvm.runtime.cpu import Engine
import intvm.runtime.helpers as h
import intvm.drivers.alarm as alarm
import intvm.drivers.amplifiers as amplifiers
import intvm.drivers.maze as maze
from intvm.drivers.arcade import Arcade, Tile
from intvm.drivers.robot import PaintingRobot, Color


EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_VM_ERROR = 2
EXIT_EXEC_ERROR = 100


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--trace', is_flag=True, help='Log every instruction before it runs')
@click.pass_context
def solve(ctx: click.Context, verbose: bool, trace: bool):
    ctx.ensure_object(h.RunSettings)
    settings: h.RunSettings = ctx.obj
    settings.update(verbose=verbose, trace=trace)

    lg.basicConfig(level=lg.DEBUG if settings.verbose else lg.INFO)
    lg.info('INTVM SOLVE')


def load(ctx: click.Context, program_filename: Path) -> Engine:
    return Engine.from_file(program_filename, trace=ctx.obj.trace)


def guarded(func):
    ''' Maps driver failures to exit codes '''

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)

        except VMError as e:
            lg.error(f'VM failure: {e}')
            sys.exit(EXIT_VM_ERROR)

        except UserWarning as e:
            lg.error(f'Driver failure: {e}')
            sys.exit(EXIT_EXEC_ERROR)

        except Exception as e:
            lg.info(f'Halted on general error {e}')
            traceback.print_exc()
            sys.exit(EXIT_EXEC_ERROR)

    return wrapper


@solve.command('alarm')
@click.option('--target', type=int, help='Search boot parameters producing this value')
@click.argument('program_filename', type=Path)
@click.pass_context
@guarded
def alarm_cmd(ctx: click.Context, target: int | None, program_filename: Path):
    ''' Run with the 1202 alarm state, or search noun and verb '''

    engine = load(ctx, program_filename)

    if target is None:
        alarm.restore_alarm_state(engine)
        engine.run()
        click.echo(engine.peek_memory(0))
        return

    found = alarm.find_boot_parameters(engine, target)

    if found is None:
        lg.info(f'No noun and verb give {target}')
        sys.exit(EXIT_NOT_FOUND)

    click.echo(found)


@solve.command('amplifiers')
@click.option('--feedback', is_flag=True, help='Wire the amplifiers in a feedback loop')
@click.argument('program_filename', type=Path)
@click.pass_context
@guarded
def amplifiers_cmd(ctx: click.Context, feedback: bool, program_filename: Path):
    ''' Highest thruster signal over all phase orders '''

    engine = load(ctx, program_filename)

    if feedback:
        signal, phases = amplifiers.find_max_feedback_thruster_signal(engine)
    else:
        signal, phases = amplifiers.find_max_thruster_signal(engine)

    lg.info(f'Phase order {",".join(str(p) for p in phases)}')
    click.echo(signal)


@solve.command('robot')
@click.option('--white', is_flag=True, help='Start on a white panel and print the hull')
@click.argument('program_filename', type=Path)
@click.pass_context
@guarded
def robot_cmd(ctx: click.Context, white: bool, program_filename: Path):
    ''' Paint the hull '''

    robot = PaintingRobot(load(ctx, program_filename))
    robot.run(Color.WHITE if white else Color.BLACK)

    if white:
        click.echo(robot.render())
    else:
        click.echo(robot.painted_count())


@solve.command('arcade')
@click.option('--play', is_flag=True, help='Insert quarters and play to the end')
@click.argument('program_filename', type=Path)
@click.pass_context
@guarded
def arcade_cmd(ctx: click.Context, play: bool, program_filename: Path):
    ''' Count blocks on screen, or play and report the score '''

    arcade = Arcade(load(ctx, program_filename))

    if play:
        click.echo(arcade.play())
    else:
        arcade.draw()
        click.echo(arcade.count(Tile.BLOCK))


@solve.command('maze')
@click.option('--show', is_flag=True, help='Print the explored map')
@click.argument('program_filename', type=Path)
@click.pass_context
@guarded
def maze_cmd(ctx: click.Context, show: bool, program_filename: Path):
    ''' Fewest moves to the oxygen system and minutes to refill '''

    grid = maze.explore(maze.Droid(load(ctx, program_filename)))

    if show:
        click.echo(maze.render(grid, maze.ORIGIN))

    oxygen = maze.find(grid, maze.Status.OXYGEN)

    if oxygen is None:
        lg.info('Oxygen system not found')
        sys.exit(EXIT_NOT_FOUND)

    click.echo(maze.shortest_path(grid, maze.ORIGIN, oxygen))
    click.echo(maze.fill_time(grid, oxygen))


if __name__ == '__main__':
    solve()
