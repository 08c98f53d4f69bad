import pytest

import intvm.drivers.maze as maze
import intvm.runtime.cpu as cpu


LAYOUT = '''\
 ##
#..##
#.#..#
#.O.#
 ###
'''


class FakeDroid():
    ''' Walks a drawn map; the droid starts on the cell marked S or at (1, 1) '''

    def __init__(self, layout: str, start: maze.Point):
        self.cells = {
            (x, y): ch
            for y, line in enumerate(layout.splitlines())
            for x, ch in enumerate(line)
        }
        self.position = start
        self.origin = start
        self.moves = 0

    def move(self, direction: maze.Direction) -> maze.Status:
        self.moves += 1
        target = direction.apply(self.position)
        cell = self.cells.get(target, '#')

        if cell in '# ':
            return maze.Status.WALL

        self.position = target
        return maze.Status.OXYGEN if cell == 'O' else maze.Status.MOVED


def test_directions():
    assert maze.Direction.NORTH.opposite == maze.Direction.SOUTH
    assert maze.Direction.WEST.apply((0, 0)) == (-1, 0)
    assert [d.value for d in maze.Direction] == [1, 2, 3, 4]


def test_explore_fake_map():
    droid = FakeDroid(LAYOUT, (1, 1))
    grid = maze.explore(droid)

    assert droid.position == droid.origin

    oxygen = maze.find(grid, maze.Status.OXYGEN)
    assert oxygen == (1, 2)
    assert maze.shortest_path(grid, maze.ORIGIN, oxygen) == 3
    assert maze.fill_time(grid, oxygen) == 4


def test_explore_walled_in():
    # Every move bumps into a wall
    droid = maze.Droid(cpu.Engine('3,100,104,0,1105,1,0'))
    grid = maze.explore(droid)

    assert len(grid) == 5
    assert maze.find(grid, maze.Status.OXYGEN) is None
    assert maze.render(grid, maze.ORIGIN) == ' # \n#D#\n # '


def test_droid_reply_checked():
    droid = maze.Droid(cpu.Engine('3,100,104,7,1105,1,0'))

    with pytest.raises(UserWarning):
        droid.move(maze.Direction.NORTH)


def test_shortest_path_unreachable():
    grid = {maze.ORIGIN: maze.Status.MOVED, (5, 5): maze.Status.OXYGEN}
    assert maze.shortest_path(grid, maze.ORIGIN, (5, 5)) is None
