from collections import deque
from enum import Enum, IntEnum
import logging as lg
from typing import Protocol

from intvm.runtime.cpu import Engine, State
from intvm.drivers.common import take_output


Point = tuple[int, int]
Grid = dict[Point, 'Status']

ORIGIN: Point = (0, 0)


class Direction(Enum):
    NORTH = 1
    SOUTH = 2
    WEST = 3
    EAST = 4

    @property
    def offset(self) -> Point:
        return OFFSETS[self]

    @property
    def opposite(self) -> 'Direction':
        return OPPOSITES[self]

    def apply(self, position: Point) -> Point:
        dx, dy = self.offset
        return (position[0] + dx, position[1] + dy)


OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
    Direction.EAST: (1, 0),
}

OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}


class Status(IntEnum):
    WALL = 0
    MOVED = 1
    OXYGEN = 2


class Mover(Protocol):
    def move(self, direction: Direction) -> Status:
        ...


class Droid():
    ''' Remote-controlled repair droid driven by a program '''

    def __init__(self, engine: Engine):
        self.engine = engine

    def move(self, direction: Direction) -> Status:
        self.engine.push_input(direction.value)
        state = self.engine.run()
        reply = take_output(self.engine)

        if state == State.EXIT:
            lg.warning('Droid program exited')

        try:
            return Status(reply)
        except ValueError:
            raise UserWarning(f'Unknown droid status {reply}') from None


def explore(droid: Mover) -> Grid:
    ''' Map every reachable cell by depth-first search with backtracking.

    The droid ends up back at the origin. Cells are keyed relative to the
    starting position, which is open floor.
    '''

    grid: Grid = {ORIGIN: Status.MOVED}
    path: list[Direction] = []
    position = ORIGIN

    while True:
        unexplored = [d for d in Direction if d.apply(position) not in grid]

        if not unexplored:
            if not path:
                lg.debug(f'Exploration complete, {len(grid)} cells known')
                return grid

            back = path.pop().opposite

            if droid.move(back) == Status.WALL:
                raise UserWarning(f'Droid cannot backtrack from {position}')

            position = back.apply(position)
            continue

        direction = unexplored[0]
        target = direction.apply(position)
        status = droid.move(direction)
        grid[target] = status

        if status != Status.WALL:
            position = target
            path.append(direction)


def distances(grid: Grid, start: Point) -> dict[Point, int]:
    seen = {start: 0}
    queue = deque([start])

    while queue:
        position = queue.popleft()

        for direction in Direction:
            nxt = direction.apply(position)

            if nxt in seen or grid.get(nxt, Status.WALL) == Status.WALL:
                continue

            seen[nxt] = seen[position] + 1
            queue.append(nxt)

    return seen


def find(grid: Grid, status: Status) -> Point | None:
    for position, s in grid.items():
        if s == status:
            return position

    return None


def shortest_path(grid: Grid, start: Point, goal: Point) -> int | None:
    return distances(grid, start).get(goal)


def fill_time(grid: Grid, source: Point) -> int:
    return max(distances(grid, source).values())


def render(grid: Grid, droid: Point | None = None) -> str:
    if not grid:
        return ''

    xs = [x for x, _ in grid]
    ys = [y for _, y in grid]
    glyphs = {Status.WALL: '#', Status.MOVED: '.', Status.OXYGEN: 'O'}

    rows = []
    for y in range(min(ys), max(ys) + 1):
        row = ''
        for x in range(min(xs), max(xs) + 1):
            if (x, y) == droid:
                row += 'D'
            elif (x, y) in grid:
                row += glyphs[grid[(x, y)]]
            else:
                row += ' '
        rows.append(row)

    return '\n'.join(rows)
