"""Small number-theory helpers shared by the problem solvers."""

from __future__ import annotations

from math import isqrt

__all__ = ["is_even", "get_triangle_number", "get_factors", "get_next_collatz"]


def is_even(num: int) -> bool:
    """Return True when ``num`` is divisible by two."""
    return num % 2 == 0


def get_triangle_number(num: int) -> int:
    """Return the ``num``-th triangle number, ``num * (num + 1) / 2``."""
    return num * (num + 1) // 2


def get_factors(num: int) -> list[int]:
    """Return every divisor of ``num``.

    Divisors come in pairs: each small divisor ``i`` (up to the square root)
    is followed by its partner ``num // i`` unless the two are equal.
    Zero has no divisors listed.
    """
    if num < 0:
        raise ValueError(f"cannot factor a negative number: {num}")
    factors: list[int] = []
    for i in range(1, isqrt(num) + 1):
        if num % i == 0:
            factors.append(i)
            partner = num // i
            if partner != i:
                factors.append(partner)
    return factors


def get_next_collatz(current_num: int) -> int:
    """Return the term after ``current_num`` in its Collatz sequence."""
    if is_even(current_num):
        return current_num // 2
    return 3 * current_num + 1