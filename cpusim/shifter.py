"""Logical shifters; bit lists are MSB first, vacated bits become zero."""

from typing import List, Sequence

from .gates import and_gate


def _check_amount(n: int) -> None:
    if n < 0:
        raise ValueError(f"shift amount must be non-negative, got {n}")


def shift_left(bits: Sequence[bool], n: int) -> List[bool]:
    """Shift towards the MSB by ``n`` positions, zero-filling the LSB side."""
    _check_amount(n)
    size = len(bits)
    zero = and_gate(True, False)
    return [bool(bits[i + n]) if i + n < size else zero for i in range(size)]


def shift_right(bits: Sequence[bool], n: int) -> List[bool]:
    """Shift towards the LSB by ``n`` positions, zero-filling the MSB side."""
    _check_amount(n)
    size = len(bits)
    zero = and_gate(True, False)
    return [bool(bits[i - n]) if i - n >= 0 else zero for i in range(size)]