import pytest

from jordan import InvalidDimensions, Row, RowSide


def test_row_side_coerces_values_to_float():
    side = RowSide([1, 2, 3])
    assert side.values == [1.0, 2.0, 3.0]
    assert all(isinstance(value, float) for value in side.values)
    assert side.width == 3


def test_row_side_subtract_multiple_leaves_other_untouched():
    side = RowSide([5.0, 10.0])
    other = RowSide([1.0, 2.0])
    side.subtract_multiple(other, 3.0)
    assert side.values == [2.0, 4.0]
    assert other.values == [1.0, 2.0]


def test_row_side_divide_by():
    side = RowSide([2.0, -4.0, 1.0])
    side.divide_by(2.0)
    assert side.values == [1.0, -2.0, 0.5]


def test_row_side_width_mismatch_raises():
    with pytest.raises(InvalidDimensions):
        RowSide([1.0, 2.0]).subtract_multiple(RowSide([1.0]), 1.0)


def test_row_operations_apply_to_both_sides():
    row = Row.from_values([2.0, 4.0], [6.0, 8.0])
    row.divide_by(2.0)
    assert row.lhs.values == [1.0, 2.0]
    assert row.rhs.values == [3.0, 4.0]

    other = Row.from_values([1.0, 1.0], [1.0, 2.0])
    row.subtract_multiple(other, 1.0)
    assert row.lhs.values == [0.0, 1.0]
    assert row.rhs.values == [2.0, 2.0]


def test_row_mismatch_leaves_row_unchanged():
    row = Row.from_values([1.0, 2.0], [3.0])
    other = Row.from_values([1.0, 1.0], [1.0, 1.0])
    with pytest.raises(InvalidDimensions):
        row.subtract_multiple(other, 2.0)
    assert row.lhs.values == [1.0, 2.0]
    assert row.rhs.values == [3.0]


def test_nonzero_indices():
    row = Row.from_values([0.0, 3.0, 0.0, -1.0], [1.0])
    assert row.nonzero_indices == [1, 3]
    assert row.coefficient_width == 4
    assert row.result_width == 1


def test_public_width_check():
    RowSide([1.0, 2.0]).check_width(RowSide([3.0, 4.0]))
    with pytest.raises(InvalidDimensions):
        RowSide([1.0, 2.0]).check_width(RowSide([3.0]))


def test_from_values_rejects_scalar_sides():
    with pytest.raises(InvalidDimensions):
        Row.from_values([1.0, 0.0], 2.0)
    with pytest.raises(InvalidDimensions):
        Row.from_values(1.0, [2.0])
