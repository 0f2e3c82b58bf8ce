import pytest

from cpusim.demos import (
    factorial_iterative,
    factorial_lines,
    factorial_recursive,
    fibonacci_iterative,
    fibonacci_lines,
    fibonacci_recursive,
    hello_world_lines,
    main,
)


def test_hello_world_lines():
    assert hello_world_lines() == ["Hello, World!"]


@pytest.mark.parametrize("n", range(0, 13))
def test_factorial_variants_agree(n):
    assert factorial_iterative(n) == factorial_recursive(n)


@pytest.mark.parametrize("n", range(1, 13))
def test_factorial_recurrence(n):
    assert factorial_iterative(n) == n * factorial_iterative(n - 1)


def test_factorial_base_cases():
    assert factorial_iterative(0) == 1
    assert factorial_recursive(0) == 1
    assert factorial_recursive(1) == 1


@pytest.mark.parametrize("func", [factorial_iterative, factorial_recursive])
def test_factorial_negative_raises(func):
    with pytest.raises(ValueError):
        func(-1)


def test_fibonacci_starts_with_zero_one():
    terms = fibonacci_iterative(2)
    assert terms == [0, 1]


def test_fibonacci_recurrence():
    terms = fibonacci_iterative(20)
    assert len(terms) == 20
    for a, b, c in zip(terms, terms[1:], terms[2:]):
        assert c == a + b


def test_fibonacci_variants_agree():
    terms = fibonacci_iterative(15)
    assert terms == [fibonacci_recursive(i) for i in range(15)]


def test_fibonacci_zero_count_is_empty():
    assert fibonacci_iterative(0) == []


def test_fibonacci_errors():
    with pytest.raises(ValueError):
        fibonacci_iterative(-1)
    with pytest.raises(ValueError):
        fibonacci_recursive(-3)


@pytest.mark.parametrize("recursive, style", [(False, "iterative"), (True, "recursive")])
def test_factorial_lines(recursive, style):
    lines = factorial_lines(recursive)
    assert lines[0] == f"Factorial ({style}):"
    body = lines[1:]
    assert len(body) == len(range(13))
    for n, line in enumerate(body):
        assert line == f"  {n}! = {factorial_iterative(n)}"


@pytest.mark.parametrize("recursive, style", [(False, "iterative"), (True, "recursive")])
def test_fibonacci_lines(recursive, style):
    lines = fibonacci_lines(recursive, 10)
    assert lines[0] == f"Fibonacci sequence ({style}), first 10 terms:"
    values = [int(line.split("= ")[1]) for line in lines[1:]]
    assert values == fibonacci_iterative(10)
    assert lines[1] == "  F(0) = 0"


def test_fibonacci_lines_default_count():
    assert fibonacci_lines() == fibonacci_lines(False, 10)


def test_fibonacci_lines_recursive_negative_count():
    with pytest.raises(ValueError):
        fibonacci_lines(True, -1)


def test_main_hello(capsys):
    assert main(["hello"]) == 0
    assert capsys.readouterr().out == "Hello, World!\n"


def test_main_factorial_recursive(capsys):
    assert main(["factorial", "--recursive"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == factorial_lines(True)


def test_main_fibonacci_count(capsys):
    assert main(["fibonacci", "--count", "5"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == fibonacci_lines(False, 5)


def test_main_rejects_unknown_program(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2