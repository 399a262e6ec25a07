"""
matrix.py (PURE)
- Input adaptation for term-document matrices (rows=terms, cols=docs).
- Accepts scipy sparse (any format), dense numpy, or any object with
  `shape` + `value_at(row, col)`.
"""
from __future__ import annotations
from typing import Any, Protocol, Tuple, runtime_checkable
import numpy as np
from scipy import sparse


@runtime_checkable
class ValueAt(Protocol):
    """Minimal matrix capability: dimensions plus element access."""

    shape: Tuple[int, int]

    def value_at(self, row: int, col: int) -> float: ...


def dims(matrix: Any) -> Tuple[int, int]:
    shape = tuple(matrix.shape)
    if len(shape) != 2:
        raise ValueError(f"expected a 2-D matrix, got shape={shape}")
    return int(shape[0]), int(shape[1])


def is_csr_convertible(matrix: Any) -> bool:
    return sparse.issparse(matrix) or callable(getattr(matrix, "tocsr", None))


def as_csr(matrix: Any) -> "sparse.csr_matrix":
    """Sparse / tocsr()-capable input -> csr_matrix (same storage if already CSR)."""
    csr = matrix.tocsr()
    if not isinstance(csr, sparse.csr_matrix):
        csr = sparse.csr_matrix(csr)
    return csr


def materialize(matrix: ValueAt) -> np.ndarray:
    """Scan a value_at() object into a dense float64 array."""
    m, n = dims(matrix)
    out = np.zeros((m, n), dtype=np.float64)
    for i in range(m):
        for j in range(n):
            out[i, j] = matrix.value_at(i, j)
    return out


def adapt(matrix: Any):
    """Coerce to CSR when the input supports it, else keep it usable as a right-hand operand."""
    if is_csr_convertible(matrix):
        return as_csr(matrix)
    if isinstance(matrix, ValueAt):
        return materialize(matrix)
    arr = np.asarray(matrix)
    dims(arr)
    return arr


def document_frequency(matrix: Any) -> np.ndarray:
    """Per-row count of columns holding a non-zero value.

    CSR-capable inputs read counts straight off `indptr`; explicit zeros and
    duplicate entries are folded first so the result matches a cell scan.
    """
    if is_csr_convertible(matrix):
        csr = as_csr(matrix)
        if not csr.has_canonical_format or (csr.data == 0).any():
            csr = csr.copy()
            csr.sum_duplicates()
            csr.eliminate_zeros()
        return np.diff(csr.indptr).astype(np.int64)

    if isinstance(matrix, ValueAt):
        m, n = dims(matrix)
        df = np.zeros(m, dtype=np.int64)
        for i in range(m):
            count = 0
            for j in range(n):
                if matrix.value_at(i, j) != 0:
                    count += 1
            df[i] = count
        return df

    arr = np.asarray(matrix)
    dims(arr)
    return np.count_nonzero(arr, axis=1).astype(np.int64)
