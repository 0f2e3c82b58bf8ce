# cpusim

Gate-level building blocks for a small CPU, modelled in plain Python.
Bit vectors are lists of booleans with the most significant bit at index 0.

## Install

```
pip install .
pip install ".[test]"   # with pytest, to run the test suite
```

## What is inside

- `cpusim.gates` – `and_gate`, `or_gate`, `not_gate`, `xor_gate`, `nand_gate`
  (NAND is built from AND and NOT).
- `cpusim.bits` – `to_unsigned_bits`, `to_signed_bits` (two's complement),
  `from_unsigned_bits`, `from_signed_bits`. Encoding a value that does not fit
  in the given width raises `ValueError`.
- `cpusim.adders` – `half_adder` and `full_adder` return an `AdderOutput`
  named tuple (`sum`, `carry_out`); `add(a, b, carry_in=False)` is a
  ripple-carry adder that drops the final carry; `subtract(a, b)` computes
  `a + ~b + 1`. Operands of different widths raise `ValueError`.
- `cpusim.bitwise` – `bitwise_and`, `bitwise_or`, `bitwise_xor`, `bitwise_not`.
- `cpusim.mux` – `mux2(a, b, sel)` and `mux4(a, b, c, d, sel)`, where for
  `mux4` `sel[0]` is the low bit and `sel[1]` the high bit.
- `cpusim.shifter` – `shift_left(bits, n)` and `shift_right(bits, n)` with
  zero fill; a negative shift amount raises `ValueError`.
- `cpusim.clock` – `Clock(delay_ms=0)` with `tick()`, `reset()` and a `cycle`
  property; a positive delay makes each tick sleep that many milliseconds.
- `cpusim.flipflop` – `DFlipFlop` built from cross-coupled NAND gates;
  `update(d, enable)` latches `d` while `enable` is high, and the `q`
  property holds the stored bit.
- `cpusim.register` – `Register(size=16)` with `write`, `read` and `reset`;
  writing a value of the wrong width raises `ValueError`.
- `cpusim.memory` – word-addressable `Memory(num_words=256, word_size=16)` with
  `write`, `read`, `reset` and a `size_bytes` property; out-of-range addresses
  raise `IndexError`.
- `cpusim.regfile` – `RegFile(num_registers=8, word_size=16)` with `write` and
  `read`; out-of-range addresses raise `IndexError`.
- `cpusim.flags` – `FlagsRegister` with `update(z, n, c, v)` and the `z`, `n`,
  `c`, `v` properties, all cleared at start.
- `cpusim.demos` – small sample programs (see below).

## Example

```python
from cpusim.bits import to_unsigned_bits, from_unsigned_bits
from cpusim.adders import add, subtract
from cpusim.memory import Memory

a = to_unsigned_bits(100, 16)
b = to_unsigned_bits(200, 16)
print(from_unsigned_bits(add(a, b)))             # 300
print(from_unsigned_bits(subtract(b, a)))        # 100

mem = Memory(256, 16)
mem.write(0, a)
print(from_unsigned_bits(mem.read(0)))           # 100
print(mem.size_bytes)                            # 512
```

## Demo programs

The `cpusim-demo` command prints the output of one sample program:

```
cpusim-demo hello
cpusim-demo factorial               # 0! through 12!, iterative
cpusim-demo factorial --recursive
cpusim-demo fibonacci --count 10    # first 10 Fibonacci numbers
cpusim-demo fibonacci --recursive
```

The same values are available from Python through `factorial_iterative`,
`factorial_recursive`, `fibonacci_iterative`, `fibonacci_recursive`,
`hello_world_lines`, `factorial_lines` and `fibonacci_lines` in
`cpusim.demos`.

## What it does not do

There is no ALU, instruction set, decoder or control unit: the package gives
the separate parts of a datapath and storage, but nothing that fetches and
executes programs. The demo programs are ordinary Python and do not run on the
simulated parts.

## Tests

```
pytest
```