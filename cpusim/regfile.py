"""A bank of general-purpose registers."""

from typing import List, Sequence

from .register import Register


class RegFile:
    """``num_registers`` registers, each ``word_size`` bits wide."""

    def __init__(self, num_registers: int = 8, word_size: int = 16) -> None:
        self._word_size = word_size
        self._registers = [Register(word_size) for _ in range(num_registers)]

    def __len__(self) -> int:
        return len(self._registers)

    def _register(self, address: int) -> Register:
        if not 0 <= address < len(self._registers):
            raise IndexError(f"register address {address} out of range")
        return self._registers[address]

    def write(self, address: int, value: Sequence[bool]) -> None:
        """Store a word in the register at ``address``."""
        self._register(address).write(value)

    def read(self, address: int) -> List[bool]:
        """Return the word held by the register at ``address``."""
        return self._register(address).read()