"""Gate-level building blocks for a simple CPU: gates, bit conversions, adders,
bitwise logic, multiplexers, shifters, a clock, flip-flops, registers, memory,
a register file, a flags register and a few demo programs."""

__version__ = "0.1.0"