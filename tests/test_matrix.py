import pytest

from twentyq.matrix import SparseFeatureMatrix


def test_unset_cells_read_false():
    matrix = SparseFeatureMatrix(rows=3, cols=3)
    assert matrix.get(0, 0) is False
    assert matrix.get(2, 2) is False


def test_set_and_get():
    matrix = SparseFeatureMatrix(rows=3, cols=3)
    matrix.set(1, 2, True)
    assert matrix.get(1, 2) is True
    matrix.set(1, 2, False)
    assert matrix.get(1, 2) is False


def test_out_of_bounds_reads_false():
    matrix = SparseFeatureMatrix(rows=2, cols=2)
    assert matrix.get(5, 0) is False
    assert matrix.get(0, 5) is False
    assert matrix.get(-1, 0) is False


def test_out_of_bounds_write_raises():
    matrix = SparseFeatureMatrix(rows=2, cols=2)
    with pytest.raises(IndexError):
        matrix.set(2, 0, True)


def test_grow_scales_rows_and_cols_together():
    matrix = SparseFeatureMatrix(rows=2, cols=3, row_growth=2, col_growth=5)
    assert matrix.grow_to(3, 1) is True
    assert (matrix.rows, matrix.cols) == (4, 15)


def test_grow_preserves_cells():
    matrix = SparseFeatureMatrix(rows=2, cols=2)
    matrix.set(0, 1, True)
    matrix.set(1, 0, True)
    matrix.grow_to(2, 3)
    assert matrix.get(0, 1) is True
    assert matrix.get(1, 0) is True
    assert matrix.get(1, 1) is False
    assert matrix.get(3, 9) is False


def test_grow_repeats_until_large_enough():
    matrix = SparseFeatureMatrix(rows=1, cols=1, row_growth=2, col_growth=5)
    matrix.grow_to(5, 1)
    assert matrix.rows == 8
    assert matrix.cols == 125


def test_grow_noop_when_capacity_suffices():
    matrix = SparseFeatureMatrix(rows=4, cols=4)
    assert matrix.grow_to(4, 4) is False
    assert (matrix.rows, matrix.cols) == (4, 4)


def test_column_counts_restricted_to_rows():
    matrix = SparseFeatureMatrix(rows=3, cols=2)
    matrix.set(0, 0, True)
    matrix.set(1, 0, True)
    matrix.set(2, 1, True)
    assert list(matrix.column_counts([0, 1, 2], [0, 1])) == [2, 1]
    assert list(matrix.column_counts([1, 2], [1, 0])) == [1, 1]
    assert list(matrix.column_counts([], [0, 1])) == [0, 0]


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        SparseFeatureMatrix(rows=0, cols=3)
    with pytest.raises(ValueError):
        SparseFeatureMatrix(rows=3, cols=3, row_growth=1)
