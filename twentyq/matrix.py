"""
Growable boolean feature matrix.

Rows are candidates, columns are questions. Cells that were never set read
as False. The matrix knows nothing about what rows and columns mean.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


class SparseFeatureMatrix:
    """
    Boolean matrix indexed by (candidate row, question column).

    Growth allocates a new array, copies every cell and only then swaps it
    in, so a reader never observes a partially grown matrix.
    """

    def __init__(
        self,
        rows: int = 500,
        cols: int = 500,
        row_growth: int = 2,
        col_growth: int = 5,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("Matrix dimensions must be positive.")
        if row_growth < 2 or col_growth < 2:
            raise ValueError("Growth factors must be at least 2.")
        self._cells = np.zeros((rows, cols), dtype=bool)
        self._row_growth = row_growth
        self._col_growth = col_growth

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    def get(self, row: int, col: int) -> bool:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            return False
        return bool(self._cells[row, col])

    def set(self, row: int, col: int, value: bool = True) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) outside matrix of shape {self._cells.shape}."
            )
        self._cells[row, col] = bool(value)

    def grow_to(self, min_rows: int, min_cols: int) -> bool:
        """
        Ensure capacity for at least min_rows x min_cols.

        Each growth step scales rows by row_growth and columns by col_growth
        together. Returns True if the matrix was reallocated.
        """
        rows, cols = self.rows, self.cols
        if min_rows <= rows and min_cols <= cols:
            return False
        while min_rows > rows or min_cols > cols:
            rows *= self._row_growth
            cols *= self._col_growth
        grown = np.zeros((rows, cols), dtype=bool)
        grown[: self.rows, : self.cols] = self._cells
        self._cells = grown
        return True

    def column_counts(self, rows: Sequence[int], cols: Sequence[int]) -> np.ndarray:
        """Number of True cells per column, restricted to the given rows."""
        if len(rows) == 0 or len(cols) == 0:
            return np.zeros(len(cols), dtype=np.int64)
        block = self._cells[np.asarray(rows, dtype=np.intp)][:, np.asarray(cols, dtype=np.intp)]
        return block.sum(axis=0, dtype=np.int64)

    def __repr__(self) -> str:
        return f"SparseFeatureMatrix(rows={self.rows}, cols={self.cols}, set={int(self._cells.sum())})"
