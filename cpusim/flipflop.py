"""A gated D latch built from cross-coupled NAND gates."""

from .gates import nand_gate


class DFlipFlop:
    """Stores one bit; the stored bit follows D while enable is high."""

    def __init__(self) -> None:
        self._q = False
        self._not_q = True

    def update(self, d: bool, enable: bool) -> None:
        """Drive the latch with data ``d`` and the ``enable`` line."""
        r = nand_gate(d, d)
        s = d
        set_line = nand_gate(s, enable)
        reset_line = nand_gate(r, enable)

        # Iterate the cross-coupled NANDs until the latch settles.
        q, not_q = self._q, self._not_q
        for _ in range(2):
            q = nand_gate(set_line, not_q)
            not_q = nand_gate(reset_line, q)
        self._q, self._not_q = q, not_q

    @property
    def q(self) -> bool:
        """The stored bit."""
        return self._q