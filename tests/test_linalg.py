import math

import pytest

from jordan import InvalidDimensions, Row, SingularSystem, residuals, solve_dense
from jordan.linalg import backward_eliminate, check_diagonal, forward_eliminate, gauss_jordan


def _rows(pairs):
    return [Row.from_values(lhs, rhs) for lhs, rhs in pairs]


def test_forward_elimination_produces_unit_upper_triangle():
    rows = _rows([([2.0, 1.0], [5.0]), ([1.0, 3.0], [10.0])])
    forward_eliminate(rows)
    assert rows[0].lhs.values == pytest.approx([1.0, 0.5])
    assert rows[1].lhs.values == pytest.approx([0.0, 1.0])
    assert rows[1].rhs.values == pytest.approx([3.0])


def test_backward_elimination_clears_above_diagonal():
    rows = _rows([([1.0, 0.5], [2.5]), ([0.0, 1.0], [3.0])])
    backward_eliminate(rows)
    assert rows[0].lhs.values == pytest.approx([1.0, 0.0])
    assert rows[0].rhs.values == pytest.approx([1.0])


def test_check_diagonal_rejects_zero_and_nan():
    check_diagonal(_rows([([1.0, 5.0], [0.0]), ([0.0, 1.0], [0.0])]))
    with pytest.raises(SingularSystem):
        check_diagonal(_rows([([1.0, 0.0], [0.0]), ([0.0, 0.0], [0.0])]))
    with pytest.raises(SingularSystem):
        check_diagonal(_rows([([1.0, 0.0], [0.0]), ([0.0, math.nan], [0.0])]))


def test_gauss_jordan_returns_result_vectors_in_row_order():
    rows = _rows([([1.0, 1.0], [3.0]), ([1.0, -1.0], [1.0])])
    assert gauss_jordan(rows) == [pytest.approx([2.0]), pytest.approx([1.0])]


def test_gauss_jordan_raises_when_pivot_cancels():
    rows = _rows([([1.0, 2.0], [1.0]), ([2.0, 4.0], [2.0])])
    with pytest.raises(SingularSystem):
        gauss_jordan(rows)


def test_solve_dense_single_right_hand_side():
    matrix = [[2.0, 1.0], [1.0, 3.0]]
    rhs = [5.0, 10.0]
    assert solve_dense(matrix, rhs) == pytest.approx([1.0, 3.0])
    assert matrix == [[2.0, 1.0], [1.0, 3.0]]
    assert rhs == [5.0, 10.0]


def test_solve_dense_dimension_mismatch():
    with pytest.raises(InvalidDimensions):
        solve_dense([[1.0, 0.0], [0.0, 1.0]], [1.0])


def test_residuals_of_exact_solution_vanish():
    coefficients = [[2.0, 1.0], [1.0, 3.0]]
    results = [[5.0], [10.0]]
    assert residuals(coefficients, results, [[1.0], [3.0]]) == [[0.0], [0.0]]
    assert residuals(coefficients, results, [[0.0], [0.0]]) == [[-5.0], [-10.0]]


def test_residuals_shape_checks():
    with pytest.raises(InvalidDimensions):
        residuals([[1.0, 0.0], [0.0, 1.0]], [[1.0]], [[1.0], [1.0]])
    with pytest.raises(InvalidDimensions):
        residuals([[1.0, 0.0], [0.0, 1.0]], [[1.0], [1.0]], [[1.0]])
