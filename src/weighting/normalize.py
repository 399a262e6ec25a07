"""
normalize.py (PURE)
- L2 normalization of CSR matrices along rows or columns.
- Rows whose sum of squares is exactly 0 are left untouched.
"""
from __future__ import annotations
import numpy as np
from scipy import sparse


def l2_normalize_rows(X: "sparse.csr_matrix", copy: bool = True) -> "sparse.csr_matrix":
    X = sparse.csr_matrix(X, dtype=np.float64, copy=copy)
    m = X.shape[0]
    # row bounds come from this matrix's own indptr
    row_ids = np.repeat(np.arange(m), np.diff(X.indptr))
    sums = np.bincount(row_ids, weights=X.data * X.data, minlength=m)
    norms = np.sqrt(sums)
    norms[sums == 0.0] = 1.0
    X.data /= norms[row_ids]
    return X


def transpose(X: "sparse.spmatrix") -> "sparse.csr_matrix":
    return sparse.csr_matrix(X.T.tocsr(), copy=True)


def l2_normalize_cols(X: "sparse.csr_matrix") -> "sparse.csr_matrix":
    return transpose(l2_normalize_rows(transpose(X), copy=False))
