import pytest

from eulerkit.util import get_factors, get_next_collatz, get_triangle_number, is_even


def test_is_even_alternates():
    for n in range(-10, 50):
        assert is_even(n) != is_even(n + 1)


def test_zero_is_even():
    assert is_even(0) is True


def test_triangle_numbers_grow_by_index():
    assert get_triangle_number(0) == 0
    for n in range(1, 200):
        assert get_triangle_number(n) - get_triangle_number(n - 1) == n


def test_triangle_number_with_over_500_divisors():
    triangle = get_triangle_number(12375)
    assert triangle == 76576500
    assert len(get_factors(triangle)) > 500


def test_factors_all_divide():
    for num in range(1, 300):
        factors = get_factors(num)
        assert all(num % f == 0 for f in factors)
        assert len(set(factors)) == len(factors)


def test_factors_start_with_one_and_self():
    factors = get_factors(600851475143)
    assert factors[:2] == [1, 600851475143]


def test_factors_of_prime():
    assert sorted(get_factors(104743)) == [1, 104743]


def test_square_root_listed_once():
    assert get_factors(144).count(12) == 1


def test_factors_pair_up():
    num = 232792560
    factors = get_factors(num)
    for f in factors:
        assert num // f in factors


def test_factors_of_zero_empty():
    assert get_factors(0) == []


def test_factors_negative_raises():
    with pytest.raises(ValueError):
        get_factors(-4)


def test_collatz_even_halves():
    assert get_next_collatz(1024) == 512
    for n in range(2, 200, 2):
        assert get_next_collatz(n) * 2 == n


def test_collatz_odd_step():
    assert get_next_collatz(5) == 16
    for n in range(1, 200, 2):
        nxt = get_next_collatz(n)
        assert is_even(nxt)
        assert nxt > n


def test_collatz_reaches_one():
    value = 837799
    steps = 0
    while value != 1:
        value = get_next_collatz(value)
        steps += 1
        assert steps < 10_000
    assert value == 1