"""Conversions between integers and bit lists.

Bit lists are most-significant-bit first: index 0 holds the MSB.
"""

from typing import List, Sequence


def _bits_of(pattern: int, size: int) -> List[bool]:
    return [bool((pattern >> position) & 1) for position in reversed(range(size))]


def to_unsigned_bits(value: int, size: int) -> List[bool]:
    """Encode a non-negative integer as an unsigned bit list of ``size`` bits.

    Raises ValueError when the value does not fit in ``0 .. 2**size - 1``.
    """
    max_val = (1 << size) - 1
    if value < 0 or value > max_val:
        raise ValueError(
            f"value {value} cannot be represented in {size} unsigned bits"
        )
    return _bits_of(value, size)


def to_signed_bits(value: int, size: int) -> List[bool]:
    """Encode an integer as a two's-complement bit list of ``size`` bits.

    Raises ValueError when the value does not fit in
    ``-(2**(size-1)) .. 2**(size-1) - 1``.
    """
    min_val = -(1 << (size - 1))
    max_val = (1 << (size - 1)) - 1
    if value < min_val or value > max_val:
        raise ValueError(
            f"value {value} cannot be represented in {size} signed bits"
        )
    return _bits_of(value & ((1 << size) - 1), size)


def from_unsigned_bits(bits: Sequence[bool]) -> int:
    """Decode an unsigned bit list into a non-negative integer."""
    result = 0
    for bit in bits:
        result = (result << 1) | int(bool(bit))
    return result


def from_signed_bits(bits: Sequence[bool]) -> int:
    """Decode a two's-complement bit list into an integer."""
    if not bits or not bits[0]:
        return from_unsigned_bits(bits)
    flipped = [not bit for bit in bits]
    return -(from_unsigned_bits(flipped) + 1)