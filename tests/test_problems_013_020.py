import datetime

import pytest

from eulerkit.problems_013_020 import (
    count_letters,
    day_of_week,
    max_path_sum,
    solve_013,
    solve_014,
    solve_015,
    solve_016,
    solve_017,
    solve_018,
    solve_019,
    solve_020,
)


def test_solve_013():
    assert solve_013() == 5537376230


def test_solve_014():
    assert solve_014() == 837799


def test_solve_015():
    assert solve_015() == 137846528820


def test_solve_016():
    assert solve_016() == 1366


def test_solve_017():
    assert solve_017() == 21124


def test_solve_018():
    assert solve_018() == 1074


def test_solve_019():
    assert solve_019() == 171


def test_solve_020():
    assert solve_020() == 648


def test_max_path_sum_small_example():
    triangle = [[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]]
    assert max_path_sum(triangle) == 23


def test_max_path_sum_single_row():
    assert max_path_sum([[42]]) == 42


def test_max_path_sum_at_least_any_straight_path():
    triangle = [[1], [2, 3], [4, 5, 6], [7, 8, 9, 10]]
    left_edge = sum(row[0] for row in triangle)
    right_edge = sum(row[-1] for row in triangle)
    assert max_path_sum(triangle) >= max(left_edge, right_edge)


def test_max_path_sum_does_not_modify_input():
    triangle = [[1], [2, 3], [4, 5, 6]]
    snapshot = [list(row) for row in triangle]
    max_path_sum(triangle)
    assert triangle == snapshot


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum([])


def test_max_path_sum_ragged_raises():
    with pytest.raises(ValueError):
        max_path_sum([[1], [2, 3, 4]])


@pytest.mark.parametrize("number, expected", [(342, 23), (115, 20)])
def test_count_letters_examples(number, expected):
    assert count_letters(number) == expected


def test_count_letters_hundred_adds_and():
    # "three hundred and forty-two" versus "forty-two" alone
    assert count_letters(342) > count_letters(42) + count_letters(300)


def test_count_letters_exact_hundreds_have_no_and():
    assert count_letters(300) == count_letters(3) + count_letters(100) - count_letters(1)


@pytest.mark.parametrize("number", [-1, 10000])
def test_count_letters_out_of_range(number):
    with pytest.raises(ValueError):
        count_letters(number)


@pytest.mark.parametrize("year", [1901, 1950, 1999, 2000, 2024])
@pytest.mark.parametrize("month", range(3, 11))
def test_day_of_week_matches_calendar_march_to_october(year, month):
    expected = datetime.date(year, month, 1).isoweekday() % 7
    assert day_of_week(year, month, 1) == expected


@pytest.mark.parametrize("month", range(1, 13))
def test_day_of_week_in_range(month):
    assert 0 <= day_of_week(1901, month, 1) <= 6


def test_day_of_week_consecutive_days():
    first = day_of_week(1950, 6, 1)
    assert day_of_week(1950, 6, 2) == (first + 1) % 7
    assert day_of_week(1950, 6, 8) == first


@pytest.mark.parametrize("month", [0, 13])
def test_day_of_week_invalid_month(month):
    with pytest.raises(ValueError):
        day_of_week(1901, month, 1)