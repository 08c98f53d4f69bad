import pytest

from intvm.drivers.robot import PaintingRobot, Color, Direction
import intvm.runtime.cpu as cpu

import unit_utils


def scripted(pairs: list[tuple[int, int]]) -> cpu.Engine:
    ''' A robot brain that ignores the camera and replays fixed moves '''

    words = []
    for color, turn in pairs:
        words.extend([3, 100, 104, color, 104, turn])
    words.append(99)
    return cpu.Engine(unit_utils.join(*words))


EXAMPLE = [(1, 0), (0, 0), (1, 0), (1, 0), (0, 1), (1, 0), (1, 0)]


def test_turns():
    assert Direction.UP.turn(0) == Direction.LEFT
    assert Direction.UP.turn(1) == Direction.RIGHT
    assert Direction.LEFT.turn(0) == Direction.DOWN
    assert Direction.LEFT.turn(1) == Direction.UP

    with pytest.raises(UserWarning):
        Direction.UP.turn(2)


def test_paint_example():
    robot = PaintingRobot(scripted(EXAMPLE))
    robot.run()

    assert robot.painted_count() == 6
    assert robot.position == (0, -1)
    assert robot.direction == Direction.LEFT
    assert robot.render() == '  #\n  #\n##'


def test_start_on_white():
    robot = PaintingRobot(scripted([(0, 1)]))
    panels = robot.run(Color.WHITE)

    assert panels[(0, 0)] == Color.BLACK
    assert robot.painted_count() == 1
    assert robot.render() == ''


def test_camera_reading():
    # Paints whatever colour it sees inverted, then turns right
    brain = cpu.Engine('3,100,1008,100,0,101,4,101,104,1,99')
    robot = PaintingRobot(brain)
    robot.run(Color.BLACK)
    assert robot.panels[(0, 0)] == Color.WHITE
