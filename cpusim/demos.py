"""Small sample programs: greeting, factorials and Fibonacci numbers."""

import argparse
from typing import List, Optional, Sequence

FACTORIAL_LIMIT = 12
FIBONACCI_TERMS = 10


def factorial_iterative(n: int) -> int:
    """Return ``n!`` computed with a loop."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n: {n}")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def factorial_recursive(n: int) -> int:
    """Return ``n!`` computed recursively."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n: {n}")
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def fibonacci_iterative(count: int) -> List[int]:
    """Return the first ``count`` Fibonacci numbers, starting from F(0) = 0."""
    if count < 0:
        raise ValueError(f"term count must be non-negative, got {count}")
    terms: List[int] = []
    a, b = 0, 1
    for _ in range(count):
        terms.append(a)
        a, b = b, a + b
    return terms


def fibonacci_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number (F(0) = 0, F(1) = 1)."""
    if n < 0:
        raise ValueError(f"index must be non-negative, got {n}")
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def hello_world_lines() -> List[str]:
    """Return the output of the greeting program."""
    return ["Hello, World!"]


def factorial_lines(recursive: bool = False) -> List[str]:
    """Return the factorial table for 0 through 12."""
    if recursive:
        compute, style = factorial_recursive, "recursive"
    else:
        compute, style = factorial_iterative, "iterative"
    lines = [f"Factorial ({style}):"]
    lines.extend(f"  {n}! = {compute(n)}" for n in range(FACTORIAL_LIMIT + 1))
    return lines


def fibonacci_lines(recursive: bool = False, count: int = FIBONACCI_TERMS) -> List[str]:
    """Return the listing of the first ``count`` Fibonacci numbers."""
    if recursive:
        if count < 0:
            raise ValueError(f"term count must be non-negative, got {count}")
        terms = [fibonacci_recursive(i) for i in range(count)]
        style = "recursive"
    else:
        terms = fibonacci_iterative(count)
        style = "iterative"
    lines = [f"Fibonacci sequence ({style}), first {count} terms:"]
    lines.extend(f"  F({i}) = {value}" for i, value in enumerate(terms))
    return lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpusim-demo", description="Run one of the sample programs."
    )
    parser.add_argument(
        "program",
        choices=["hello", "factorial", "fibonacci"],
        help="which sample program to run",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="use the recursive variant instead of the iterative one",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=FIBONACCI_TERMS,
        help="number of Fibonacci terms to print",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a sample program chosen on the command line and print its output."""
    args = _build_parser().parse_args(argv)
    if args.program == "hello":
        lines = hello_world_lines()
    elif args.program == "factorial":
        lines = factorial_lines(args.recursive)
    else:
        lines = fibonacci_lines(args.recursive, args.count)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())