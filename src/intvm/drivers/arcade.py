from enum import IntEnum
import logging as lg

from intvm.common.vmconf import FREE_PLAY_ADDR, FREE_PLAY_QUARTERS
from intvm.runtime.cpu import Engine, State
from intvm.drivers.common import sign


Point = tuple[int, int]

SCORE_POSITION: Point = (-1, 0)


class Tile(IntEnum):
    EMPTY = 0
    WALL = 1
    BLOCK = 2
    PADDLE = 3
    BALL = 4


GLYPHS = {
    Tile.EMPTY: ' ',
    Tile.WALL: '#',
    Tile.BLOCK: '=',
    Tile.PADDLE: '-',
    Tile.BALL: 'o',
}


class Arcade():
    screen: dict[Point, Tile]
    score: int

    def __init__(self, engine: Engine):
        self.engine = engine
        self.screen = {}
        self.score = 0

    def update(self, outputs: list[int]):
        if len(outputs) % 3 != 0:
            raise UserWarning(f'Cabinet emitted a partial draw command {outputs}')

        for i in range(0, len(outputs), 3):
            x, y, value = outputs[i:i + 3]

            if (x, y) == SCORE_POSITION:
                self.score = value
                continue

            try:
                self.screen[(x, y)] = Tile(value)
            except ValueError:
                raise UserWarning(f'Unknown tile id {value}') from None

    def find(self, tile: Tile) -> Point | None:
        for position, t in self.screen.items():
            if t == tile:
                return position

        return None

    def count(self, tile: Tile) -> int:
        return sum(1 for t in self.screen.values() if t == tile)

    def joystick(self) -> int:
        ball = self.find(Tile.BALL)
        paddle = self.find(Tile.PADDLE)

        if ball is None or paddle is None:
            return 0

        return sign(ball[0] - paddle[0])

    def draw(self) -> dict[Point, Tile]:
        self.engine.run()
        self.update(self.engine.drain_output())
        return self.screen

    def play(self, free_play: bool = True) -> int:
        if free_play:
            self.engine.poke(FREE_PLAY_ADDR, FREE_PLAY_QUARTERS)

        while True:
            state = self.engine.run()
            self.update(self.engine.drain_output())

            if state == State.EXIT:
                break

            self.engine.push_input(self.joystick())

        lg.debug(f'Game over, score {self.score}, {self.count(Tile.BLOCK)} blocks left')
        return self.score

    def render(self) -> str:
        if not self.screen:
            return ''

        xs = [x for x, _ in self.screen]
        ys = [y for _, y in self.screen]

        rows = [
            ''.join(GLYPHS[self.screen.get((x, y), Tile.EMPTY)] for x in range(min(xs), max(xs) + 1))
            for y in range(min(ys), max(ys) + 1)
        ]

        return '\n'.join(rows)
