"""Ripple-carry adders and a two's-complement subtractor built from gates.

Bit lists are MSB first: the last element is the least significant bit.
"""

from typing import List, NamedTuple, Sequence

from .gates import and_gate, not_gate, or_gate, xor_gate


class AdderOutput(NamedTuple):
    """The sum bit and carry-out bit of a one-bit adder."""

    sum: bool
    carry_out: bool


def half_adder(a: bool, b: bool) -> AdderOutput:
    """Add two bits, returning the sum and carry-out."""
    return AdderOutput(xor_gate(a, b), and_gate(a, b))


def full_adder(a: bool, b: bool, carry_in: bool) -> AdderOutput:
    """Add two bits and a carry-in using two half adders."""
    first = half_adder(a, b)
    second = half_adder(first.sum, carry_in)
    return AdderOutput(second.sum, or_gate(first.carry_out, second.carry_out))


def add(a: Sequence[bool], b: Sequence[bool], carry_in: bool = False) -> List[bool]:
    """Add two equal-width bit lists; the final carry-out is discarded."""
    if len(a) != len(b):
        raise ValueError(f"operand widths differ: {len(a)} and {len(b)}")
    result: List[bool] = []
    carry = bool(carry_in)
    for bit_a, bit_b in zip(reversed(a), reversed(b)):
        bit_sum, carry = full_adder(bit_a, bit_b, carry)
        result.append(bit_sum)
    result.reverse()
    return result


def subtract(a: Sequence[bool], b: Sequence[bool]) -> List[bool]:
    """Compute ``a - b`` as ``a + ~b + 1`` in the operands' width."""
    inverted = [not_gate(bit) for bit in b]
    return add(a, inverted, True)