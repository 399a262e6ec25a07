"""
idf.py (PURE)
- Smoothed IDF weights and the diagonal weight model built from them.
  w_i = ln((1 + n) / (1 + df_i)) + padding
"""
from __future__ import annotations
from typing import Any
import numpy as np
from scipy import sparse

from src.weighting.matrix import dims, document_frequency


def idf_weights(df: np.ndarray, n_docs: int, padding: float = 0.0) -> np.ndarray:
    # +1 on both sides keeps the log argument >= 1/(1+n) > 0
    df = np.asarray(df, dtype=np.float64)
    return np.log((1.0 + n_docs) / (1.0 + df)) + float(padding)


def diagonal(weights: np.ndarray) -> "sparse.dia_matrix":
    weights = np.asarray(weights, dtype=np.float64).ravel()
    m = weights.shape[0]
    return sparse.dia_matrix((weights[np.newaxis, :], [0]), shape=(m, m))


def diagonal_weights(model: "sparse.dia_matrix") -> np.ndarray:
    return np.asarray(model.diagonal(), dtype=np.float64)


def fit_idf(matrix: Any, padding: float = 0.0) -> "sparse.dia_matrix":
    """Term-document matrix (m x n) -> m x m diagonal IDF model."""
    _, n = dims(matrix)
    return diagonal(idf_weights(document_frequency(matrix), n, padding))
