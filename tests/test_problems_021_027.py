from itertools import permutations

import pytest

from eulerkit.problems_021_027 import (
    NumberType,
    get_number_type,
    name_scores_total,
    nth_permutation,
    parse_names,
    solve_021,
    solve_022,
    solve_023,
    solve_024,
    solve_025,
    solve_026,
    solve_027,
    sum_factors,
)


def test_solve_021():
    assert solve_021() == 31626


def test_solve_023():
    assert solve_023() == 4179871


def test_solve_024():
    assert solve_024() == 2783915460


def test_solve_025():
    assert solve_025() == 4782


def test_solve_026():
    assert solve_026() == 983


def test_solve_027():
    assert solve_027() == -59231


def test_sum_factors_amicable_round_trip():
    partner = sum_factors(220)
    assert partner != 220
    assert sum_factors(partner) == 220


def test_sum_factors_of_one_is_zero():
    assert sum_factors(1) == 0


@pytest.mark.parametrize("prime", [2, 3, 5, 7, 97, 104743])
def test_sum_factors_of_prime_is_one(prime):
    assert sum_factors(prime) == 1


@pytest.mark.parametrize("number", [6, 28, 496])
def test_perfect_numbers(number):
    assert get_number_type(number) is NumberType.PERFECT
    assert sum_factors(number) == number


@pytest.mark.parametrize("number", [12, 18, 20, 24])
def test_abundant_numbers(number):
    assert get_number_type(number) is NumberType.ABUNDANT
    assert sum_factors(number) > number


@pytest.mark.parametrize("number", [2, 3, 8, 13])
def test_deficient_numbers(number):
    assert get_number_type(number) is NumberType.DEFICIENT
    assert sum_factors(number) < number


def test_parse_names_strips_quotes_and_newlines():
    assert parse_names('"MARY","PATRICK",\n"LINDA"\n') == ["MARY", "PATRICK", "LINDA"]


def test_name_scores_total_ignores_input_order():
    names = ["MARY", "PATRICK", "LINDA", "BARBARA"]
    assert name_scores_total(names) == name_scores_total(list(reversed(names)))


def test_name_scores_total_empty():
    assert name_scores_total([]) == 0


def test_name_scores_total_single_letter():
    assert name_scores_total(["A"]) == 1


def test_solve_022_reads_file(tmp_path):
    text = '"MARY","PATRICK","LINDA","BARBARA","ELIZABETH"'
    path = tmp_path / "names.txt"
    path.write_text(text, encoding="ascii")
    assert solve_022(path) == name_scores_total(parse_names(text))


def test_solve_022_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        solve_022(tmp_path / "absent.txt")


def test_nth_permutation_first_is_identity():
    assert nth_permutation(range(10), 0) == tuple(range(10))


def test_nth_permutation_last_is_reversed():
    assert nth_permutation("abcd", 23) == tuple("dcba")


def test_nth_permutation_enumerates_in_order():
    items = "wxyz"
    expected = list(permutations(items))
    assert [nth_permutation(items, i) for i in range(len(expected))] == expected


def test_nth_permutation_negative_index():
    with pytest.raises(ValueError):
        nth_permutation("abc", -1)