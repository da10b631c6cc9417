from typing import Iterable

from intcode.common.errors import NegativeAddress


class Memory:
    cells: dict[int, int]   # Sparse, unwritten cells read as 0
    size: int               # One past the highest cell ever held

    def __init__(self, image: Iterable[int]):
        # Always a private copy, never an alias of the program image
        self.cells = dict(enumerate(image))
        self.size = len(self.cells)

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, address: int) -> int:
        self.check(address)
        return self.cells.get(address, 0)

    def __setitem__(self, address: int, value: int):
        self.check(address)
        self.cells[address] = value
        self.size = max(self.size, address + 1)

    def check(self, address: int):
        if address < 0:
            raise NegativeAddress(address)

    def dump(self) -> list[int]:
        return [self.cells.get(address, 0) for address in range(self.size)]
