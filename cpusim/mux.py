"""Multiplexers that route one of several bit lists to the output."""

from typing import List, Sequence

from .gates import and_gate, not_gate, or_gate


def mux2(a: Sequence[bool], b: Sequence[bool], sel: bool) -> List[bool]:
    """Return ``a`` when ``sel`` is low and ``b`` when it is high."""
    if len(a) != len(b):
        raise ValueError(f"input widths differ: {len(a)} and {len(b)}")
    not_sel = not_gate(sel)
    return [
        or_gate(and_gate(bit_a, not_sel), and_gate(bit_b, sel))
        for bit_a, bit_b in zip(a, b)
    ]


def mux4(
    a: Sequence[bool],
    b: Sequence[bool],
    c: Sequence[bool],
    d: Sequence[bool],
    sel: Sequence[bool],
) -> List[bool]:
    """Select one of four inputs; ``sel[0]`` is the LSB and ``sel[1]`` the MSB."""
    if len(sel) < 2:
        raise ValueError("selector needs two bits")
    low, high = sel[0], sel[1]
    return mux2(mux2(a, b, low), mux2(c, d, low), high)