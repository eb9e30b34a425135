import pytest

from eulerkit.cli import EXPECTED, main, run_problem


@pytest.mark.parametrize(
    ("number", "answer"),
    [(1, 233168), (6, 25164150), (9, 31875000), (16, 1366), (19, 171)],
)
def test_run_problem_returns_known_answer(number, answer):
    assert run_problem(number) == answer


@pytest.mark.parametrize("number", [1, 2, 9, 17, 18])
def test_run_problem_matches_expected_table(number):
    assert run_problem(number) == EXPECTED[number]


def test_run_problem_unknown_number_raises():
    with pytest.raises(ValueError):
        run_problem(99)


def test_main_success_prints_answers(capsys):
    assert main(["1", "6"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["001: 233168", "006: 25164150"]


def test_main_rejects_unknown_problem(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["99"])
    assert excinfo.value.code == 2
    assert "99" in capsys.readouterr().err


def test_main_rejects_non_numeric_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["abc"])
    assert excinfo.value.code == 2


def test_main_missing_names_file_fails(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["22", "--names", str(missing)]) == 1
    assert "022: error" in capsys.readouterr().err


def test_main_reports_mismatch_for_other_names(tmp_path, capsys):
    names_file = tmp_path / "names.txt"
    names_file.write_text('"COLIN"', encoding="ascii")
    assert main(["22", "--names", str(names_file)]) == 1
    out = capsys.readouterr().out
    assert out.strip() == "022: 53 FAIL (expected 871198282)"