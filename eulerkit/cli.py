"""Command line entry point that runs and checks the problem solvers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from eulerkit import problem_067, problems_001_012, problems_013_020, problems_021_027

__all__ = ["EXPECTED", "run_problem", "main"]

_SOLVERS: dict[int, Callable[[], int]] = {
    1: problems_001_012.solve_001,
    2: problems_001_012.solve_002,
    3: problems_001_012.solve_003,
    4: problems_001_012.solve_004,
    5: problems_001_012.solve_005,
    6: problems_001_012.solve_006,
    7: problems_001_012.solve_007,
    8: problems_001_012.solve_008,
    9: problems_001_012.solve_009,
    10: problems_001_012.solve_010,
    11: problems_001_012.solve_011,
    12: problems_001_012.solve_012,
    13: problems_013_020.solve_013,
    14: problems_013_020.solve_014,
    15: problems_013_020.solve_015,
    16: problems_013_020.solve_016,
    17: problems_013_020.solve_017,
    18: problems_013_020.solve_018,
    19: problems_013_020.solve_019,
    20: problems_013_020.solve_020,
    21: problems_021_027.solve_021,
    22: problems_021_027.solve_022,
    23: problems_021_027.solve_023,
    24: problems_021_027.solve_024,
    25: problems_021_027.solve_025,
    26: problems_021_027.solve_026,
    27: problems_021_027.solve_027,
    67: problem_067.solve_067,
}

EXPECTED: dict[int, int] = {
    1: 233168,
    2: 4613732,
    3: 6857,
    4: 906609,
    5: 232792560,
    6: 25164150,
    7: 104743,
    8: 23514624000,
    9: 31875000,
    10: 142913828922,
    11: 70600674,
    12: 76576500,
    13: 5537376230,
    14: 837799,
    15: 137846528820,
    16: 1366,
    17: 21124,
    18: 1074,
    19: 171,
    20: 648,
    21: 31626,
    22: 871198282,
    23: 4179871,
    24: 2783915460,
    25: 4782,
    26: 983,
    27: -59231,
    67: 7273,
}

_NAMES_PROBLEM = 22


def _solve(number: int, names_path: Path | str) -> int:
    if number not in _SOLVERS:
        raise ValueError(f"no solver for problem {number}")
    if number == _NAMES_PROBLEM:
        return problems_021_027.solve_022(names_path)
    return _SOLVERS[number]()


def run_problem(number: int) -> int:
    """Solve problem ``number`` and return its answer."""
    return _solve(number, problems_021_027.DEFAULT_NAMES_PATH)


def _problem_number(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a problem number: {text!r}") from None
    if number not in _SOLVERS:
        known = ", ".join(str(n) for n in sorted(_SOLVERS))
        raise argparse.ArgumentTypeError(
            f"no solver for problem {number} (known: {known})"
        )
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eulerkit",
        description="Solve problems and check each answer against the known one.",
    )
    parser.add_argument(
        "problems",
        nargs="*",
        type=_problem_number,
        help="problem numbers to run (default: all)",
    )
    parser.add_argument(
        "--names",
        default=problems_021_027.DEFAULT_NAMES_PATH,
        help="path of the names file used by problem 22",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen problems; return 0 when every answer is correct."""
    args = _build_parser().parse_args(argv)
    problems = args.problems or sorted(_SOLVERS)
    status = 0
    for number in problems:
        try:
            answer = _solve(number, args.names)
        except OSError as exc:
            print(f"{number:03d}: error: {exc}", file=sys.stderr)
            status = 1
            continue
        expected = EXPECTED[number]
        if answer == expected:
            print(f"{number:03d}: {answer}")
        else:
            print(f"{number:03d}: {answer} FAIL (expected {expected})")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())