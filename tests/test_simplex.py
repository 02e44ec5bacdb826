import io

import numpy as np
import pytest

from affinelp.simplex import Simplex

A4 = [[1, 1, 1], [2, 2, 1]]
B4 = [100, 150]
C4 = [-100, -10, -1]


def test_initial_tableau_layout():
    s = Simplex(C4, A4, B4)
    assert s.matrix.shape == (3, 6)
    assert list(s.matrix[0, :3]) == [100.0, 10.0, 1.0]
    assert np.array_equal(s.matrix[1:, 3:5], np.eye(2))
    assert list(s.matrix[1:, -1]) == [100.0, 150.0]
    assert s.base == [3, 4]
    assert s.basis_names() == ["s_1", "s_2"]


def test_entering_and_leaving_choice():
    s = Simplex(C4, A4, B4)
    assert s.is_optimal() is False
    assert s.entering_variable() == 0
    assert s.leaving_variable(0) == 2


def test_pivot_makes_unit_column():
    s = Simplex(C4, A4, B4)
    s.pivot(2, 0)
    column = s.matrix[:, 0]
    assert column == pytest.approx([0.0, 0.0, 1.0])
    assert s.base[1] == 0


def test_calculate_finds_minimum():
    s = Simplex(C4, A4, B4)
    out = io.StringIO()
    assert s.calculate(file=out) is True
    x = s.solution()
    assert s.objective_value() == pytest.approx(-7500.0)
    assert x == pytest.approx([75.0, 0.0, 0.0])
    assert float(np.dot(C4, x)) == pytest.approx(s.objective_value())
    assert np.all(np.array(A4) @ np.array(x) <= np.array(B4) + 1e-9)
    assert s.is_optimal() is True
    text = out.getvalue()
    assert "Pradine simplekso matrica:" in text
    assert "Iteracija 0:" in text
    assert "Ieinantis kintamasis: x_1, Iseinantis kintamasis: s_2" in text
    assert f"Minimali funkcijos reiksme: {s.objective_value():.3f}" in text


def test_unbounded_problem_reports_no_solution():
    s = Simplex([-1, 0], [[-1, 1]], [2])
    out = io.StringIO()
    assert s.calculate(file=out) is False
    assert "Sprendinys nerastas." in out.getvalue()
    assert s.leaving_variable(0) is None


def test_already_optimal_start():
    s = Simplex([1, 1], [[-1, 1]], [-2])
    out = io.StringIO()
    assert s.calculate(file=out) is True
    assert s.entering_variable() is None
    assert s.solution() == [0.0, 0.0]
    assert s.objective_value() == 0.0
    assert "Iteracija" not in out.getvalue()


def test_format_matrix_header_and_rows():
    s = Simplex([1, 2], [[3, 4]], [5])
    lines = s.format_matrix().splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Baze")
    assert lines[0].endswith("Rez")
    for name in ("x_1", "x_2", "s_1"):
        assert name in lines[0]
    assert lines[1].startswith("f")
    assert lines[2].startswith("s_1")
    assert "5.000" in lines[2]


def test_print_solution_lists_basis():
    s = Simplex(C4, A4, B4)
    s.calculate(file=io.StringIO())
    out = io.StringIO()
    s.print_solution(file=out)
    text = out.getvalue()
    names = s.basis_names()
    assert "Optimalus baziniai kintamieji: {" + ", ".join(names) + "}" in text
    assert f"x_1 = {s.solution()[0]:.3f}" in text


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Simplex([1, 2], [[1, 2, 3]], [4])