"""Bitwise operations over equal-width bit lists."""

from typing import List, Sequence

from .gates import and_gate, not_gate, or_gate, xor_gate


def _check_widths(a: Sequence[bool], b: Sequence[bool]) -> None:
    if len(a) != len(b):
        raise ValueError(f"operand widths differ: {len(a)} and {len(b)}")


def bitwise_and(a: Sequence[bool], b: Sequence[bool]) -> List[bool]:
    """AND two bit lists bit by bit."""
    _check_widths(a, b)
    return [and_gate(x, y) for x, y in zip(a, b)]


def bitwise_or(a: Sequence[bool], b: Sequence[bool]) -> List[bool]:
    """OR two bit lists bit by bit."""
    _check_widths(a, b)
    return [or_gate(x, y) for x, y in zip(a, b)]


def bitwise_xor(a: Sequence[bool], b: Sequence[bool]) -> List[bool]:
    """XOR two bit lists bit by bit."""
    _check_widths(a, b)
    return [xor_gate(x, y) for x, y in zip(a, b)]


def bitwise_not(a: Sequence[bool]) -> List[bool]:
    """Invert every bit of a bit list."""
    return [not_gate(x) for x in a]