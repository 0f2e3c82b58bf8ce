"""A multi-bit register made of D flip-flops; index 0 is the MSB."""

from typing import List, Sequence

from .flipflop import DFlipFlop


class Register:
    """A fixed-width word of storage."""

    def __init__(self, size: int = 16) -> None:
        self._cells = [DFlipFlop() for _ in range(size)]

    def __len__(self) -> int:
        return len(self._cells)

    def write(self, value: Sequence[bool]) -> None:
        """Store a bit list of exactly the register's width."""
        if len(value) != len(self._cells):
            raise ValueError(
                f"expected {len(self._cells)} bits, got {len(value)}"
            )
        for cell, bit in zip(self._cells, value):
            cell.update(bool(bit), True)

    def read(self) -> List[bool]:
        """Return the stored bits, MSB first."""
        return [cell.q for cell in self._cells]

    def reset(self) -> None:
        """Clear every bit to zero."""
        for cell in self._cells:
            cell.update(False, True)