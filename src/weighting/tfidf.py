"""
tfidf.py
- TfidfTransformer: fit a diagonal IDF model on a term-document matrix
  (rows=terms, cols=docs) and weight raw term frequencies with it.
- Optional L2 normalization of the weighted result by row or by column.

Thread-safety: fit()/load() swap the model with one attribute assignment,
so concurrent transform() calls see either the old or the new model. Fit and
load themselves need external exclusive access.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Any, BinaryIO, Optional, Union
import numpy as np
from scipy import sparse

from src.weighting.codec import decode_diagonal, encode_diagonal
from src.weighting.errors import DimensionMismatchError, NotFittedError
from src.weighting.idf import diagonal_weights, fit_idf
from src.weighting.matrix import adapt, dims
from src.weighting.normalize import l2_normalize_cols, l2_normalize_rows

logger = logging.getLogger(__name__)


class NormalizationMode(str, Enum):
    NONE = "none"
    ROW = "row"
    COLUMN = "column"

    @classmethod
    def coerce(cls, value: Union["NormalizationMode", str, None]) -> "NormalizationMode":
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"unknown normalization {value!r} (choose from: {choices})") from None


class TfidfTransformer:
    """Weights each raw term frequency by how rare the term is across the corpus.

    Fit counts, per term row, the documents (columns) containing it and stores
    ln((1+n)/(1+df)) + weight_padding on the diagonal of an m x m matrix.
    Transform multiplies that diagonal with the input, so common terms such as
    "the" are weighted down. weight_padding keeps zero-idf terms from being
    suppressed entirely.

    >>> t = TfidfTransformer(normalization="row")
    >>> X_w = t.fit_transform(X_counts)
    """

    def __init__(self, weight_padding: float = 0.0,
                 normalization: Union[NormalizationMode, str] = NormalizationMode.NONE):
        self.weight_padding = weight_padding
        self.normalization = normalization
        self._transform: Optional[sparse.dia_matrix] = None

    @classmethod
    def from_config(cls, cfg) -> "TfidfTransformer":
        return cls(weight_padding=cfg.weight_padding, normalization=cfg.normalization)

    def __repr__(self) -> str:
        terms = None if self._transform is None else self._transform.shape[0]
        return (f"TfidfTransformer(weight_padding={self.weight_padding!r}, "
                f"normalization={self.normalization.value!r}, terms={terms})")

    # config surface
    @property
    def weight_padding(self) -> float:
        return self._weight_padding

    @weight_padding.setter
    def weight_padding(self, value: float) -> None:
        self._weight_padding = float(value)

    @property
    def normalization(self) -> NormalizationMode:
        return self._normalization

    @normalization.setter
    def normalization(self, value: Union[NormalizationMode, str]) -> None:
        self._normalization = NormalizationMode.coerce(value)

    def get_weight_padding(self) -> float:
        return self.weight_padding

    def set_weight_padding(self, value: float) -> None:
        self.weight_padding = value

    def get_normalization(self) -> NormalizationMode:
        return self.normalization

    def set_normalization(self, value: Union[NormalizationMode, str]) -> None:
        self.normalization = value

    # model
    @property
    def is_fitted(self) -> bool:
        return self._transform is not None

    @property
    def idf_model(self) -> "sparse.dia_matrix":
        if self._transform is None:
            raise NotFittedError("IDF model has not been computed. Call 'fit' or 'load' first.")
        return self._transform

    @property
    def weights(self) -> np.ndarray:
        return diagonal_weights(self.idf_model)

    def with_normalization(self, value: Union[NormalizationMode, str]) -> "TfidfTransformer":
        """Sibling transformer sharing this (read-only) model with another normalization."""
        sibling = type(self)(self.weight_padding, value)
        sibling._transform = self._transform
        return sibling

    def fit(self, matrix: Any) -> "TfidfTransformer":
        """Count term occurrences across documents and build the IDF diagonal."""
        model = fit_idf(matrix, self.weight_padding)
        self._transform = model
        logger.info("fitted idf weights for %i terms over %i documents", model.shape[0], dims(matrix)[1])
        return self

    def transform(self, matrix: Any) -> "sparse.csr_matrix":
        """Return W @ matrix as a new CSR matrix, L2-normalized if configured."""
        model = self.idf_model
        X = adapt(matrix)
        m, _ = dims(X)
        if model.shape[1] != m:
            raise DimensionMismatchError(
                f"idf model covers {model.shape[1]} terms but matrix has {m} term rows")

        product = sparse.csr_matrix(model @ X, dtype=np.float64)

        mode = self.normalization
        if mode is NormalizationMode.ROW:
            product = l2_normalize_rows(product, copy=False)
        elif mode is NormalizationMode.COLUMN:
            product = l2_normalize_cols(product)
        return product

    def fit_transform(self, matrix: Any) -> "sparse.csr_matrix":
        """Exactly fit(matrix) followed by transform(matrix)."""
        X = adapt(matrix)
        return self.fit(X).transform(X)

    # persistence
    def save(self, stream: BinaryIO) -> int:
        """Serialise the diagonal model only; returns bytes written."""
        return encode_diagonal(self.idf_model, stream)

    def load(self, stream: BinaryIO) -> "TfidfTransformer":
        """Replace the model from `stream`; the old one is kept if decoding fails."""
        model = decode_diagonal(stream)
        self._transform = model
        logger.info("loaded idf model with %i terms", model.shape[0])
        return self
