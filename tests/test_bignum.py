import pytest

from eulerkit.bignum import BigNum


def test_digits_stored_backwards():
    assert BigNum.from_string("123").digits == (3, 2, 1)


def test_string_round_trip():
    for text in ("1", "5537376230", "37107287533902102798797998220837590246510135740250"):
        assert str(BigNum.from_string(text)) == text


def test_leading_zeros_kept_on_parse():
    num = BigNum.from_string("007")
    assert num.num_digits == 3
    assert str(num) == "007"


def test_zeros():
    num = BigNum.zeros(5)
    assert num.digits == (0,) * 5
    assert num.num_digits == 5


def test_zeros_negative_raises():
    with pytest.raises(ValueError):
        BigNum.zeros(-1)


def test_from_string_rejects_non_digits():
    with pytest.raises(ValueError):
        BigNum.from_string("12a")
    with pytest.raises(ValueError):
        BigNum.from_string("")


def test_carryover_worked_example():
    assert BigNum((10, 13, 4)).carryover().digits == (0, 4, 5)


def test_carryover_trims_leading_zeros():
    num = BigNum((3, 2, 0, 0)).carryover()
    assert num.digits == (3, 2)


def test_addition_matches_int():
    pairs = [
        ("46376937677490009712648124896970078050417018260538", "74324986199524741059474233309513058123726617309629"),
        ("999", "1"),
        ("123456789", "987654321987654321"),
    ]
    for a, b in pairs:
        total = BigNum.from_string(a) + BigNum.from_string(b)
        assert int(str(total)) == int(a) + int(b)
        assert str(total)[0] != "0"


def test_addition_grows_digit_count():
    total = BigNum.from_string("5") + BigNum.from_string("5")
    assert total.num_digits == 2
    assert str(total) == "10"


def test_sum_of_zeros():
    assert str(BigNum.zeros(3) + BigNum.zeros(2)) == "0"


def test_addition_is_commutative():
    a = BigNum.from_string("89261670696623633820136378418383684178734361726757")
    b = BigNum.from_string("28112879812849979408065481931592621691275889832738")
    assert a + b == b + a


def test_two_to_the_thousand_digit_sum():
    num = BigNum.from_string("1")
    for _ in range(1000):
        num = num + num
    assert sum(num.digits) == 1366


def test_multiplication_worked_examples():
    assert str(BigNum.from_string("12") * BigNum.from_string("45")) == "540"
    assert str(BigNum.from_string("99") * BigNum.from_string("99")) == "9801"


def test_multiplication_matches_int():
    a, b = "70386486105843025439939619828917593665686757934951", "62176457141856560629502157223196586755079324193331"
    product = BigNum.from_string(a) * BigNum.from_string(b)
    assert int(str(product)) == int(a) * int(b)


def test_factorial_digit_sum():
    num = BigNum.from_string("1")
    for i in range(2, 100):
        num = num * BigNum.from_string(str(i))
    assert sum(num.digits) == 648


def test_add_non_bignum_raises_type_error():
    with pytest.raises(TypeError):
        BigNum.from_string("1") + 1
    with pytest.raises(TypeError):
        BigNum.from_string("1") * 2


def test_negative_digit_rejected():
    with pytest.raises(ValueError):
        BigNum((1, -2))