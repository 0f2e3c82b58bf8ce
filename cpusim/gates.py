"""Primitive combinational logic gates operating on single bits."""


def or_gate(a: bool, b: bool) -> bool:
    """Return the logical OR of two bits."""
    return bool(a) or bool(b)


def and_gate(a: bool, b: bool) -> bool:
    """Return the logical AND of two bits."""
    return bool(a) and bool(b)


def not_gate(a: bool) -> bool:
    """Return the logical inverse of a bit."""
    return not a


def xor_gate(a: bool, b: bool) -> bool:
    """Return the exclusive OR of two bits."""
    return bool(a) != bool(b)


def nand_gate(a: bool, b: bool) -> bool:
    """Return the NAND of two bits, built from AND and NOT."""
    return not_gate(and_gate(a, b))