from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from .errors import PointerOverflow, PointerUnderflow, ValueOverflow, ValueUnderflow

DEFAULT_TAPE_CAPACITY = 16384
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


@dataclass
class Tape:
    """Fixed-capacity row of signed cells and the data pointer into it.

    Only ``increment`` and ``decrement`` enforce the cell range; ``write``
    stores whatever it is given.
    """

    capacity: int = DEFAULT_TAPE_CAPACITY
    cell_min: int = INT32_MIN
    cell_max: int = INT32_MAX

    cells: List[int] = field(init=False, repr=False)
    pointer: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError("Tape capacity must be at least 1")
        if self.cell_min > 0 or self.cell_max < 0:
            raise ValueError("Cell range must include zero")
        self.cells = [0] * self.capacity

    def move_left(self) -> None:
        if self.pointer == 0:
            raise PointerUnderflow("Pointer moved before start of tape", pointer=self.pointer)
        self.pointer -= 1

    def move_right(self) -> None:
        if self.pointer >= self.capacity - 1:
            raise PointerOverflow(
                f"Pointer moved beyond the tape capacity of {self.capacity}",
                pointer=self.pointer,
            )
        self.pointer += 1

    def increment(self) -> None:
        if self.cells[self.pointer] >= self.cell_max:
            raise ValueOverflow(
                f"Cell value would exceed maximum {self.cell_max}", pointer=self.pointer
            )
        self.cells[self.pointer] += 1

    def decrement(self) -> None:
        if self.cells[self.pointer] <= self.cell_min:
            raise ValueUnderflow(
                f"Cell value would fall below minimum {self.cell_min}", pointer=self.pointer
            )
        self.cells[self.pointer] -= 1

    def read(self) -> int:
        return self.cells[self.pointer]

    def write(self, value: int) -> None:
        self.cells[self.pointer] = value

    def window(self, radius: int) -> Tuple[int, List[int]]:
        """Return ``(start, cells)`` for the cells within ``radius`` of the pointer."""
        start = max(0, self.pointer - radius)
        end = min(self.capacity, self.pointer + radius + 1)
        return start, self.cells[start:end].copy()


__all__ = ["DEFAULT_TAPE_CAPACITY", "INT32_MAX", "INT32_MIN", "Tape"]
