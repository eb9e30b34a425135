from math import isqrt

import pytest

from eulerkit.problems_001_012 import (
    is_palindrome,
    reverse_number,
    solve_001,
    solve_002,
    solve_003,
    solve_004,
    solve_005,
    solve_006,
    solve_007,
    solve_008,
    solve_009,
    solve_010,
    solve_011,
    solve_012,
)
from eulerkit.util import get_factors


@pytest.mark.parametrize(
    ("solver", "expected"),
    [
        (solve_001, 233168),
        (solve_002, 4613732),
        (solve_003, 6857),
        (solve_004, 906609),
        (solve_005, 232792560),
        (solve_006, 25164150),
        (solve_007, 104743),
        (solve_008, 23514624000),
        (solve_009, 31875000),
        (solve_010, 142913828922),
        (solve_011, 70600674),
        (solve_012, 76576500),
    ],
)
def test_solutions(solver, expected):
    assert solver() == expected


@pytest.mark.parametrize("n", [1, 7, 12, 4613, 233168, 600851475143])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n


@pytest.mark.parametrize("n", [1, 42, 906609, 31875])
def test_reverse_number_ignores_trailing_zeros(n):
    assert reverse_number(n * 100) == reverse_number(n)


def test_reverse_number_of_zero():
    assert reverse_number(0) == 0


def test_reverse_number_keeps_palindrome():
    assert reverse_number(906609) == 906609


def test_reverse_number_rejects_negative():
    with pytest.raises(ValueError):
        reverse_number(-12)


def test_is_palindrome_rejects_negative():
    with pytest.raises(ValueError):
        is_palindrome(-1)


def test_is_palindrome_detects_non_palindrome():
    assert is_palindrome(906610) is False


def test_solve_004_result_is_palindrome():
    assert is_palindrome(solve_004()) is True


def test_solve_003_divides_target():
    assert 600851475143 % solve_003() == 0


def test_solve_005_divisible_by_one_to_twenty():
    result = solve_005()
    assert all(result % i == 0 for i in range(1, 21))


def test_solve_007_is_prime():
    result = solve_007()
    assert sorted(get_factors(result)) == [1, result]


def test_solve_012_has_over_500_divisors():
    assert len(get_factors(solve_012())) > 500


def test_solve_012_is_triangle_number():
    result = solve_012()
    root = isqrt(8 * result + 1)
    assert root * root == 8 * result + 1