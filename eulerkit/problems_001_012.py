"""Solutions to problems 1 through 12."""

from __future__ import annotations

from itertools import compress
from math import lcm, prod, sqrt

from eulerkit.prime import create_prime_sieve, get_nth_prime
from eulerkit.util import get_factors, get_triangle_number, is_even

__all__ = [
    "reverse_number",
    "is_palindrome",
    "solve_001",
    "solve_002",
    "solve_003",
    "solve_004",
    "solve_005",
    "solve_006",
    "solve_007",
    "solve_008",
    "solve_009",
    "solve_010",
    "solve_011",
    "solve_012",
]

_SERIES = "".join(
    (
        "731671765313306249192251",
        "196744265747423553491949",
        "349698352031277450632623",
        "957831801698480186947885",
        "184385861560789112949495",
        "459501737958331952853208",
        "805511125406987471585238",
        "630507156932909632952274",
        "430435576689664895044524",
        "452316173185640309871112",
        "172238311362229893423380",
        "308135336276614282806444",
        "486645238749303589072962",
        "904915604407723907138105",
        "158593079608667017242712",
        "188399879790879227492190",
        "169972088809377665727333",
        "001053367881220235421809",
        "751254540594752243525849",
        "077116705560136048395864",
        "467063244157221553975369",
        "781797784617406495514929",
        "086256932197846862248283",
        "972241375657056057490261",
        "407972968652414535100474",
        "821663704844031998900088",
        "952434506585412275886668",
        "811642717147992444292823",
        "086346567481391912316282",
        "458617866458359124566529",
        "476545682848912883142607",
        "690042242190226710556263",
        "211111093705442175069416",
        "589604080719840385096245",
        "544436298123098787992724",
        "428490918884580156166097",
        "919133875499200524063689",
        "912560717606058861164671",
        "094050775410022569831552",
        "000559357297257163626956",
        "188267042825248360082325",
        "7530420752963450",
    )
)

_GRID_ROWS = (
    "08 02 22 97 38 15 00 40 00 75 04 05 07 78 52 12 50 77 91 08",
    "49 49 99 40 17 81 18 57 60 87 17 40 98 43 69 48 04 56 62 00",
    "81 49 31 73 55 79 14 29 93 71 40 67 53 88 30 03 49 13 36 65",
    "52 70 95 23 04 60 11 42 69 24 68 56 01 32 56 71 37 02 36 91",
    "22 31 16 71 51 67 63 89 41 92 36 54 22 40 40 28 66 33 13 80",
    "24 47 32 60 99 03 45 02 44 75 33 53 78 36 84 20 35 17 12 50",
    "32 98 81 28 64 23 67 10 26 38 40 67 59 54 70 66 18 38 64 70",
    "67 26 20 68 02 62 12 20 95 63 94 39 63 08 40 91 66 49 94 21",
    "24 55 58 05 66 73 99 26 97 17 78 78 96 83 14 88 34 89 63 72",
    "21 36 23 09 75 00 76 44 20 45 35 14 00 61 33 97 34 31 33 95",
    "78 17 53 28 22 75 31 67 15 94 03 80 04 62 16 14 09 53 56 92",
    "16 39 05 42 96 35 31 47 55 58 88 24 00 17 54 24 36 29 85 57",
    "86 56 00 48 35 71 89 07 05 44 44 37 44 60 21 58 51 54 17 58",
    "19 80 81 68 05 94 47 69 28 73 92 13 86 52 17 77 04 89 55 40",
    "04 52 08 83 97 35 99 16 07 97 57 32 16 26 26 79 33 27 98 66",
    "88 36 68 87 57 62 20 72 03 46 33 67 46 55 12 32 63 93 53 69",
    "04 42 16 73 38 25 39 11 24 94 72 18 08 46 29 32 40 62 76 36",
    "20 69 36 41 72 30 23 88 34 62 99 69 82 67 59 85 74 04 36 16",
    "20 73 35 29 78 31 90 01 74 31 49 71 48 86 81 16 23 57 05 54",
    "01 70 54 71 83 51 54 69 16 92 33 48 61 43 52 01 89 19 67 48",
)

_GRID: tuple[tuple[int, ...], ...] = tuple(
    tuple(int(cell) for cell in row.split()) for row in _GRID_ROWS
)


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits in reverse order."""
    if n < 0:
        raise ValueError(f"cannot reverse a negative number: {n}")
    reversed_value = 0
    while n:
        n, last = divmod(n, 10)
        reversed_value = reversed_value * 10 + last
    return reversed_value


def is_palindrome(n: int) -> bool:
    """Return True when ``n`` reads the same forwards and backwards."""
    return reverse_number(n) == n


def solve_001() -> int:
    """Sum of all multiples of 3 or 5 below 1000."""
    return sum(i for i in range(1000) if i % 3 == 0 or i % 5 == 0)


def solve_002() -> int:
    """Sum of the even Fibonacci terms below four million."""
    limit = 4_000_000
    total = 0
    previous, current = 1, 2
    while current < limit:
        if is_even(current):
            total += current
        previous, current = current, previous + current
    return total


def solve_003() -> int:
    """Largest prime factor of 600851475143."""
    remaining = 600851475143
    i = 2
    while i < sqrt(remaining) / 2:
        while remaining % i == 0:
            remaining //= i
        i += 1
    return remaining


def solve_004() -> int:
    """Largest palindrome made from the product of two numbers below 1000."""
    best = 0
    for i in range(999, 0, -1):
        if i * 999 <= best:
            break
        for j in range(999, i - 1, -1):
            product = i * j
            if product <= best:
                break
            if is_palindrome(product):
                best = product
    return best


def solve_005() -> int:
    """Smallest positive number evenly divisible by every number from 1 to 20."""
    return lcm(*range(2, 21))


def solve_006() -> int:
    """Square of the sum minus the sum of the squares of 1..100."""
    numbers = range(101)
    return sum(numbers) ** 2 - sum(i * i for i in numbers)


def solve_007() -> int:
    """The 10001st prime."""
    return get_nth_prime(10001)


def solve_008() -> int:
    """Largest product of 13 adjacent digits in the 1000-digit series."""
    window = 13
    digits = [int(ch) for ch in _SERIES]
    return max(
        prod(digits[start : start + window])
        for start in range(len(digits) - window)
    )


def solve_009() -> int:
    """Product of the Pythagorean triplet whose sum is 1000.

    Euclid's formula with m(m + n) = 500 gives m = 20, n = 5.
    """
    m, n = 20, 5
    a = m * m - n * n
    b = 2 * m * n
    c = m * m + n * n
    return a * b * c


def solve_010() -> int:
    """Sum of all primes below two million."""
    limit = 2_000_000
    sieve = create_prime_sieve(limit)
    return sum(compress(range(2, limit), sieve[2:]))


def _grid_runs(grid: tuple[tuple[int, ...], ...], length: int):
    """Yield every run of ``length`` cells across, down and on both diagonals."""
    size = len(grid)
    span = range(length)
    for i in range(size):
        for j in range(size - length + 1):
            yield [grid[i][j + k] for k in span]
            yield [grid[j + k][i] for k in span]
    for i in range(size - length + 1):
        for j in range(size - length + 1):
            yield [grid[i + k][j + k] for k in span]
            yield [grid[i + length - 1 - k][j + k] for k in span]


def solve_011() -> int:
    """Greatest product of four adjacent numbers in the 20x20 grid."""
    return max(prod(run) for run in _grid_runs(_GRID, 4))


def _triangle_divisor_count(num: int) -> int:
    # n and n + 1 are coprime, so the divisor count of n(n + 1)/2 splits.
    if is_even(num):
        left, right = num // 2, num + 1
    else:
        left, right = num, (num + 1) // 2
    return len(get_factors(left)) * len(get_factors(right))


def solve_012() -> int:
    """First triangle number with over five hundred divisors."""
    num = 1
    while _triangle_divisor_count(num) <= 500:
        num += 1
    return get_triangle_number(num)