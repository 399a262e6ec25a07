"""
transpose.py (PURE)
- Transformer protocol shared by pipeline stages.
- TransposeTransformer: stateless stage that flips terms x docs <-> docs x terms.
"""
from __future__ import annotations
from typing import Any, Protocol, runtime_checkable
from scipy import sparse

from src.weighting.matrix import adapt
from src.weighting.normalize import transpose


@runtime_checkable
class Transformer(Protocol):
    def fit(self, matrix: Any) -> "Transformer": ...

    def transform(self, matrix: Any) -> "sparse.csr_matrix": ...

    def fit_transform(self, matrix: Any) -> "sparse.csr_matrix": ...


class TransposeTransformer:
    """Transposes its input; fit() is a no-op kept for pipeline compatibility."""

    def fit(self, matrix: Any) -> "TransposeTransformer":
        return self

    def transform(self, matrix: Any) -> "sparse.csr_matrix":
        return transpose(sparse.csr_matrix(adapt(matrix)))

    def fit_transform(self, matrix: Any) -> "sparse.csr_matrix":
        X = adapt(matrix)
        return self.fit(X).transform(X)
