"""Factorials and binomial coefficients computed several ways."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from algostructs.benchmarking import benchmark_function


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")


def _check_choice(n: int, r: int) -> None:
    if r < 0 or r > n:
        raise ValueError("r must satisfy 0 <= r <= n")


def factorial_recursive(n: int) -> int:
    """Return n! computed by recursion."""
    _check_non_negative(n)
    if n == 0:
        return 1
    return factorial_recursive(n - 1) * n


def factorial_iterative(n: int) -> int:
    """Return n! computed by a loop."""
    _check_non_negative(n)
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def combination_with_factorial_iteration(n: int, r: int) -> int:
    """Return C(n, r) from iteratively computed factorials."""
    _check_choice(n, r)
    return factorial_iterative(n) // (factorial_iterative(r) * factorial_iterative(n - r))


def combination_with_factorial_recursion(n: int, r: int) -> int:
    """Return C(n, r) from recursively computed factorials."""
    _check_choice(n, r)
    return factorial_recursive(n) // (factorial_recursive(r) * factorial_recursive(n - r))


def combination_with_pascal_triangle(n: int, r: int) -> int:
    """Return C(n, r) by the recurrence of Pascal's triangle."""
    _check_choice(n, r)
    if r == 0 or n == r:
        return 1
    return combination_with_pascal_triangle(n - 1, r - 1) + combination_with_pascal_triangle(
        n - 1, r
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Time the three ways of computing C(n, r) and print their results."""
    parser = argparse.ArgumentParser(description="Benchmark binomial coefficient methods.")
    parser.add_argument("n", type=int, nargs="?", default=11)
    parser.add_argument("r", type=int, nargs="?", default=5)
    args = parser.parse_args(argv)

    benchmark_function(
        "combination_with_fact_iteration: ", combination_with_factorial_iteration, args.n, args.r
    )
    benchmark_function(
        "combination_with_fact_recursion: ", combination_with_factorial_recursion, args.n, args.r
    )
    benchmark_function(
        "combination_with_pascal_three: ", combination_with_pascal_triangle, args.n, args.r
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())