from typing import Iterable

from intvm.common.errors import AddressError
from intvm.common.vmconf import PROGRAM_SEPARATOR


class Memory():
    ''' Open-ended integer store.

    Reads beyond the current extent yield zero, writes beyond it grow the
    store, zero-filling every cell in between. The store never shrinks.
    '''

    cells: list[int]

    def __init__(self, cells: Iterable[int] = ()):
        self.cells = list(cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Memory):
            return NotImplemented

        return self.cells == other.cells

    def __repr__(self) -> str:
        return f'Memory({len(self.cells)} cells)'

    def check(self, addr: int):
        if addr < 0:
            raise AddressError(f'Negative address {addr}')

    def read(self, addr: int) -> int:
        self.check(addr)

        if addr >= len(self.cells):
            return 0

        return self.cells[addr]

    def write(self, addr: int, value: int):
        self.check(addr)

        extent = len(self.cells)

        if addr >= extent:
            self.cells.extend([0] * (addr - extent + 1))

        self.cells[addr] = value

    def span(self, start: int, count: int) -> list[int]:
        return [self.read(start + i) for i in range(count)]

    def copy(self) -> 'Memory':
        return Memory(self.cells)

    def dump(self) -> str:
        return PROGRAM_SEPARATOR.join(str(v) for v in self.cells)
