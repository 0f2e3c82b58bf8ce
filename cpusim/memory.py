"""Word-addressable memory built from registers."""

from typing import List, Sequence

from .register import Register


class Memory:
    """A bank of ``num_words`` registers, each ``word_size`` bits wide.

    Address 0 is the first word. Out-of-range addresses raise IndexError.
    """

    def __init__(self, num_words: int = 256, word_size: int = 16) -> None:
        self._num_words = num_words
        self._word_size = word_size
        self._words = [Register(word_size) for _ in range(num_words)]

    def _check(self, address: int) -> None:
        if not 0 <= address < self._num_words:
            raise IndexError("Segmentation fault: Address out of bounds")

    def write(self, address: int, value: Sequence[bool]) -> None:
        """Store a whole word at ``address``."""
        self._check(address)
        self._words[address].write(value)

    def read(self, address: int) -> List[bool]:
        """Return the word stored at ``address``."""
        self._check(address)
        return self._words[address].read()

    def reset(self) -> None:
        """Clear every word to zero."""
        for word in self._words:
            word.reset()

    @property
    def size_bytes(self) -> int:
        """Total capacity in bytes."""
        return self._num_words * self._word_size // 8