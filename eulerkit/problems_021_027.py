"""Solutions to problems 21 through 27."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from math import factorial
from os import PathLike
from pathlib import Path
from typing import TypeVar, Union

from eulerkit.prime import create_prime_sieve
from eulerkit.util import get_factors

__all__ = [
    "NumberType",
    "sum_factors",
    "get_number_type",
    "parse_names",
    "name_scores_total",
    "nth_permutation",
    "solve_021",
    "solve_022",
    "solve_023",
    "solve_024",
    "solve_025",
    "solve_026",
    "solve_027",
]

T = TypeVar("T")

DEFAULT_NAMES_PATH = "input/0022_names.txt"


class NumberType(Enum):
    """How a number compares with the sum of its proper divisors."""

    DEFICIENT = "deficient"
    PERFECT = "perfect"
    ABUNDANT = "abundant"


def sum_factors(num: int) -> int:
    """Return the sum of the divisors of ``num`` other than ``num`` itself."""
    return sum(factor for factor in get_factors(num) if factor != num)


def _classify(num: int, divisor_sum: int) -> NumberType:
    if divisor_sum < num:
        return NumberType.DEFICIENT
    if divisor_sum == num:
        return NumberType.PERFECT
    return NumberType.ABUNDANT


def get_number_type(num: int) -> NumberType:
    """Classify ``num`` as deficient, perfect or abundant."""
    return _classify(num, sum_factors(num))


def parse_names(text: str) -> list[str]:
    """Split a comma-separated list of quoted names.

    Double quotes and newlines are dropped wherever they occur; every comma
    ends a name.
    """
    return text.replace('"', "").replace("\n", "").split(",")


def name_scores_total(names: Iterable[str]) -> int:
    """Sum each name's letter value times its position in sorted order.

    A letter is worth its place in the alphabet, counting 'A' as 1.
    """
    return sum(
        position * sum(ord(ch) - ord("A") + 1 for ch in name)
        for position, name in enumerate(sorted(names), start=1)
    )


def nth_permutation(digits: Sequence[T], index: int) -> tuple[T, ...]:
    """Return the permutation of ``digits`` at zero-based ``index``.

    Permutations are ordered lexicographically by position in ``digits``;
    indices past the last permutation wrap around.
    """
    if index < 0:
        raise ValueError(f"index must not be negative: {index}")
    remaining = list(digits)
    result: list[T] = []
    for size in range(len(remaining), 0, -1):
        divisor = factorial(size - 1)
        position = (index // divisor) % size
        result.append(remaining.pop(position))
        index %= divisor
    return tuple(result)


def solve_021() -> int:
    """Sum of all amicable numbers below 10000."""
    total = 0
    for number in range(1, 10000):
        partner = sum_factors(number)
        if partner != number and sum_factors(partner) == number:
            total += partner
    return total


def solve_022(path: Union[str, PathLike[str]] = DEFAULT_NAMES_PATH) -> int:
    """Total of all name scores in the names file at ``path``."""
    text = Path(path).read_text(encoding="ascii")
    return name_scores_total(parse_names(text))


def _proper_divisor_sums(limit: int) -> list[int]:
    sums = [0] * limit
    for divisor in range(1, limit // 2 + 1):
        for multiple in range(2 * divisor, limit, divisor):
            sums[multiple] += divisor
    return sums


def solve_023() -> int:
    """Sum of positive integers that are not the sum of two abundant numbers."""
    limit = 28123
    divisor_sums = _proper_divisor_sums(limit)
    abundants = [
        n
        for n in range(2, limit)
        if _classify(n, divisor_sums[n]) is NumberType.ABUNDANT
    ]
    abundant_mask = 0
    for n in abundants:
        abundant_mask |= 1 << n
    reachable = 0
    for n in abundants:
        reachable |= abundant_mask << n
    return sum(n for n in range(1, limit) if not (reachable >> n) & 1)


def solve_024() -> int:
    """The millionth lexicographic permutation of the digits 0 to 9."""
    permutation = nth_permutation(range(10), 999_999)
    return int("".join(str(digit) for digit in permutation))


def solve_025() -> int:
    """Index of the first Fibonacci term with 1000 digits."""
    threshold = 10**999
    previous, current = 1, 1
    index = 2
    while current < threshold:
        previous, current = current, previous + current
        index += 1
    return index


def _recurring_cycle_length(denominator: int, max_steps: int) -> int:
    """Length of the repeating part of 1/denominator, or 0 if it terminates."""
    seen: dict[tuple[int, int], int] = {}
    numerator = 10
    for step in range(max_steps):
        quotient, remainder = divmod(numerator, denominator)
        state = (quotient, remainder)
        if state in seen:
            return step - seen[state]
        seen[state] = step
        if remainder == 0:
            return 0
        numerator = remainder * 10
    return 0


def solve_026() -> int:
    """Denominator below 1000 whose unit fraction has the longest cycle."""
    limit = 1000
    best = 0
    longest = 0
    for denominator in range(1, limit):
        length = _recurring_cycle_length(denominator, limit)
        if length > longest:
            best, longest = denominator, length
    return best


def solve_027() -> int:
    """Product of a and b for n^2 + an + b yielding the most consecutive primes."""
    limit = 1000
    largest_value = (limit - 1) ** 2 * 2 + limit
    sieve = create_prime_sieve(largest_value + 1)

    def is_prime(value: int) -> bool:
        return value > 1 and sieve[value]

    solution = 0
    longest = 0
    for a in range(-limit, limit):
        for b in range(1, limit + 1):
            if not is_prime(b):
                continue  # n = 0 gives b itself, so the run is empty
            streak = 0
            for n in range(limit):
                if is_prime(n * n + a * n + b):
                    streak += 1
                    continue
                if streak > longest:
                    longest = streak
                    solution = a * b
                break
    return solution