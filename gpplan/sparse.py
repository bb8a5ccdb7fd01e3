"""Compressed sparse column matrices built from dense arrays."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = ["CscMatrix", "dense_to_csc"]

_ZERO_EPSILON = 1e-9


@dataclass(frozen=True, eq=False)
class CscMatrix:
    """Sparse matrix in compressed sparse column form."""

    data: np.ndarray
    indices: np.ndarray
    indptr: np.ndarray
    shape: tuple[int, int]

    def to_dense(self) -> np.ndarray:
        """Expand into a dense array."""
        rows, cols = self.shape
        dense = np.zeros((rows, cols))
        col_of_entry = np.repeat(np.arange(cols), np.diff(self.indptr))
        dense[self.indices, col_of_entry] = self.data
        return dense


def dense_to_csc(matrix) -> CscMatrix:
    """Convert a dense 2-D matrix, dropping entries with magnitude below 1e-9."""
    dense = np.asarray(matrix, dtype=float)
    if dense.ndim != 2:
        raise ValueError(f"expected a 2-D matrix, got {dense.ndim} dimensions")

    data: list[float] = []
    indices: list[int] = []
    indptr: list[int] = [0]
    for column in dense.T:
        keep = np.flatnonzero(~(np.abs(column) < _ZERO_EPSILON))
        indices.extend(keep.tolist())
        data.extend(column[keep].tolist())
        indptr.append(len(data))

    return CscMatrix(
        data=np.array(data, dtype=float),
        indices=np.array(indices, dtype=int),
        indptr=np.array(indptr, dtype=int),
        shape=(dense.shape[0], dense.shape[1]),
    )