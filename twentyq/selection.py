"""
Question and guess selection.

Pure functions over a state snapshot: they read the matrix and the given
orderings and never mutate anything. Ties go to whichever entry comes first
in the given order.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from .matrix import SparseFeatureMatrix


def select_question(
    matrix: SparseFeatureMatrix,
    active_rows: Sequence[int],
    askable: Sequence[Tuple[str, int]],
) -> Optional[str]:
    """
    Pick the askable question that best bisects the active rows.

    Args:
        matrix: feature matrix
        active_rows: matrix rows of the candidates still in play
        askable: (question name, column) pairs in enumeration order

    Returns:
        The question whose yes-fraction is closest to 0.5, or None when no
        question splits the active rows at all.
    """
    if not active_rows or not askable:
        return None
    cols = [col for _, col in askable]
    fractions = matrix.column_counts(active_rows, cols) / float(len(active_rows))
    distances = np.abs(0.5 - fractions)
    # argmin returns the first minimum, same as a strict running-best scan.
    best = int(np.argmin(distances))
    if distances[best] >= 0.5:
        return None
    return askable[best][0]


def split_fraction(
    matrix: SparseFeatureMatrix,
    active_rows: Sequence[int],
    col: int,
) -> float:
    if not active_rows:
        return 0.0
    return float(matrix.column_counts(active_rows, [col])[0]) / len(active_rows)


def select_best_guess(scores: Iterable[Tuple[str, int]]) -> Optional[str]:
    """Name with the strictly highest score; first seen wins ties."""
    best_name: Optional[str] = None
    best_score = 0
    for name, score in scores:
        if best_name is None or score > best_score:
            best_name = name
            best_score = score
    return best_name
