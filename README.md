# eulerkit

Worked solutions to Project Euler problems 1–27 and 67, together with the
small helpers they are built on. It has no dependencies outside the standard
library.

## Modules

- `eulerkit.util`: `is_even`, `get_triangle_number`, `get_factors` (every
  divisor of a number) and `get_next_collatz`.
- `eulerkit.prime`: `create_prime_sieve(size)` returns a list of booleans
  where `sieve[i]` tells whether `i` is prime. Indices 0 and 1 are left
  marked `True`, so callers must skip them. `get_nth_prime(n)` returns the
  n-th prime, counting 2 as the first.
- `eulerkit.bignum`: `BigNum`, an immutable non-negative decimal number stored
  least significant digit first. Build one with `BigNum.from_string("123")`
  or `BigNum.zeros(n)`; it supports `+`, `*`, `str()`, `carryover()` and the
  `num_digits` property.
- `eulerkit.problems_001_012`, `eulerkit.problems_013_020`,
  `eulerkit.problems_021_027`, `eulerkit.problem_067`: one `solve_NNN()`
  function per problem, plus the reusable pieces they use, such as
  `reverse_number`, `is_palindrome`, `max_path_sum`, `count_letters`,
  `day_of_week`, `sum_factors`, `get_number_type` (returning a `NumberType`),
  `parse_names`, `name_scores_total` and `nth_permutation`.
- `eulerkit.cli`: `run_problem(number)`, the `EXPECTED` answers, and `main`,
  the command line entry point.

## Installation

```
pip install .
```

## Command line

Run one or more problems, each answer checked against the known one:

```
eulerkit 1
eulerkit 7 10 67
```

With no problem numbers, every problem is run. Each line of output shows the
problem number and its answer, followed by `FAIL (expected ...)` when the
answer is wrong. The exit status is 0 only when every answer is correct.

Problem 22 reads its names file from `input/0022_names.txt` relative to the
current directory; point it elsewhere with `--names`:

```
eulerkit 22 --names path/to/names.txt
```

## Library use

```python
from eulerkit.prime import get_nth_prime
from eulerkit.bignum import BigNum
from eulerkit.problems_001_012 import solve_001
from eulerkit.cli import run_problem

get_nth_prime(10001)                                      # 104743
str(BigNum.from_string("12") * BigNum.from_string("45"))  # "540"
solve_001()                                               # 233168
run_problem(67)                                           # 7273
```

## What it does not do

The names file for problem 22 is not shipped with the package. Without it,
`solve_022` and `run_problem(22)` raise `FileNotFoundError`, and the command
reports an error for that problem and exits with status 1.

## Tests

```
pip install .[test]
pytest
```