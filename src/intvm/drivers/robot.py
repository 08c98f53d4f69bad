from enum import Enum, IntEnum
import logging as lg

from intvm.runtime.cpu import Engine, State


Point = tuple[int, int]


class Color(IntEnum):
    BLACK = 0
    WHITE = 1


class Direction(Enum):
    # Screen coordinates, y grows downwards
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def turn(self, code: int) -> 'Direction':
        if code not in (0, 1):
            raise UserWarning(f'Unknown turn code {code}')

        order = list(Direction)
        shift = 1 if code == 1 else -1
        return order[(order.index(self) + shift) % len(order)]


class PaintingRobot():
    panels: dict[Point, Color]
    painted: set[Point]         # Panels painted at least once
    position: Point
    direction: Direction

    def __init__(self, engine: Engine):
        self.engine = engine
        self.panels = {}
        self.painted = set()
        self.position = (0, 0)
        self.direction = Direction.UP

    def color_under(self) -> Color:
        return self.panels.get(self.position, Color.BLACK)

    def apply(self, color: int, turn: int):
        if color not in (Color.BLACK, Color.WHITE):
            raise UserWarning(f'Unknown paint color {color}')

        self.panels[self.position] = Color(color)
        self.painted.add(self.position)
        self.direction = self.direction.turn(turn)
        dx, dy = self.direction.value
        x, y = self.position
        self.position = (x + dx, y + dy)

    def run(self, start_color: Color = Color.BLACK) -> dict[Point, Color]:
        self.panels[self.position] = start_color

        while True:
            self.engine.push_input(int(self.color_under()))
            state = self.engine.run()
            outputs = self.engine.drain_output()

            if len(outputs) % 2 != 0:
                raise UserWarning(f'Robot emitted an odd number of values {outputs}')

            for i in range(0, len(outputs), 2):
                self.apply(outputs[i], outputs[i + 1])

            if state == State.EXIT:
                break

        lg.debug(f'Robot stopped after painting {self.painted_count()} panels')
        return self.panels

    def painted_count(self) -> int:
        return len(self.painted)

    def render(self) -> str:
        white = [p for p, c in self.panels.items() if c == Color.WHITE]

        if not white:
            return ''

        xs = [x for x, _ in white]
        ys = [y for _, y in white]

        rows = []
        for y in range(min(ys), max(ys) + 1):
            row = ''.join(
                '#' if self.panels.get((x, y)) == Color.WHITE else ' '
                for x in range(min(xs), max(xs) + 1)
            )
            rows.append(row.rstrip())

        return '\n'.join(rows)
