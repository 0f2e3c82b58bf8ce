"""Status flags register holding Zero, Negative, Carry and Overflow bits."""

from .flipflop import DFlipFlop


class FlagsRegister:
    """Four D flip-flops, one per status flag; all start cleared."""

    def __init__(self) -> None:
        self._z = DFlipFlop()
        self._n = DFlipFlop()
        self._c = DFlipFlop()
        self._v = DFlipFlop()

    def update(self, z: bool, n: bool, c: bool, v: bool) -> None:
        """Latch new values into all four flags."""
        self._z.update(z, True)
        self._n.update(n, True)
        self._c.update(c, True)
        self._v.update(v, True)

    @property
    def z(self) -> bool:
        """Zero flag."""
        return self._z.q

    @property
    def n(self) -> bool:
        """Negative flag."""
        return self._n.q

    @property
    def c(self) -> bool:
        """Carry flag."""
        return self._c.q

    @property
    def v(self) -> bool:
        """Overflow flag."""
        return self._v.q