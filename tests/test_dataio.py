import pytest

from nttlab.dataio import Problem, check_result, read_expected, read_problem, write_result


def _write(path, text):
    path.write_text(text)
    return path


def test_read_problem_parses_header_and_coefficients(tmp_path):
    path = _write(tmp_path / "0.in", "3 7\n1 2 3\n4 5 6\n")
    problem = read_problem(path)
    assert problem == Problem(n=3, p=7, a=(1, 2, 3), b=(4, 5, 6))


def test_read_problem_accepts_any_whitespace(tmp_path):
    path = _write(tmp_path / "0.in", "2\t998244353 10\n\n11   12 13")
    problem = read_problem(path)
    assert problem.a == (10, 11)
    assert problem.b == (12, 13)
    assert problem.p == 998244353


def test_result_length_is_two_n_minus_one(tmp_path):
    path = _write(tmp_path / "0.in", "4 17 1 1 1 1 2 2 2 2")
    problem = read_problem(path)
    assert problem.result_length == 2 * problem.n - 1


def test_read_problem_too_short(tmp_path):
    path = _write(tmp_path / "0.in", "3 7 1 2 3 4 5")
    with pytest.raises(ValueError):
        read_problem(path)


def test_read_problem_bad_token(tmp_path):
    path = _write(tmp_path / "0.in", "1 7 x 2")
    with pytest.raises(ValueError):
        read_problem(path)


def test_read_problem_negative_length(tmp_path):
    path = _write(tmp_path / "0.in", "-1 7")
    with pytest.raises(ValueError):
        read_problem(path)


def test_read_problem_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_problem(tmp_path / "absent.in")


def test_write_then_read_round_trip(tmp_path):
    values = [5, 0, 998244352, 42]
    path = tmp_path / "r.out"
    write_result(path, values)
    assert read_expected(path, len(values)) == values


def test_write_result_one_value_per_line(tmp_path):
    path = tmp_path / "r.out"
    write_result(path, [3, 10, 8])
    assert path.read_text() == "3\n10\n8\n"


def test_read_expected_takes_only_count(tmp_path):
    path = _write(tmp_path / "e.out", "1 2 3 4 5")
    assert read_expected(path, 2) == [1, 2]


def test_read_expected_too_short(tmp_path):
    path = _write(tmp_path / "e.out", "1 2")
    with pytest.raises(ValueError):
        read_expected(path, 3)


def test_read_expected_negative_count(tmp_path):
    path = _write(tmp_path / "e.out", "1 2")
    with pytest.raises(ValueError):
        read_expected(path, -1)


def test_check_result_matches(tmp_path):
    path = tmp_path / "e.out"
    write_result(path, [9, 8, 7])
    assert check_result(path, [9, 8, 7]) is True


def test_check_result_mismatch(tmp_path):
    path = tmp_path / "e.out"
    write_result(path, [9, 8, 7])
    assert check_result(path, [9, 8, 6]) is False


def test_check_result_short_file_is_mismatch(tmp_path):
    path = tmp_path / "e.out"
    write_result(path, [9])
    assert check_result(path, [9, 8]) is False


def test_check_result_ignores_trailing_values(tmp_path):
    path = tmp_path / "e.out"
    write_result(path, [1, 2, 3, 4])
    assert check_result(path, [1, 2, 3]) is True


def test_check_result_missing_file(tmp_path):
    with pytest.raises(OSError):
        check_result(tmp_path / "absent.out", [1])