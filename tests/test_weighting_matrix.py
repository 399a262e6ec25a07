import numpy as np
import pytest
from scipy import sparse
from src.weighting.matrix import adapt, document_frequency, materialize

class Grid:
    """value_at() capability only: no tocsr, no array protocol."""
    def __init__(self, rows):
        self._rows = rows
        self.shape = (len(rows), len(rows[0]) if rows else 0)
    def value_at(self, row, col):
        return self._rows[row][col]

DENSE = np.array([
    [1, 0, 2, 0],
    [0, 0, 0, 0],
    [3, 1, 0, 5],
])

def test_fast_and_slow_paths_agree():
    expected = [2, 0, 3]
    assert document_frequency(sparse.csr_matrix(DENSE)).tolist() == expected
    assert document_frequency(sparse.csc_matrix(DENSE)).tolist() == expected
    assert document_frequency(DENSE).tolist() == expected
    assert document_frequency(Grid(DENSE.tolist())).tolist() == expected

def test_explicit_zeros_not_counted():
    X = sparse.csr_matrix((np.array([1.0, 0.0, 2.0]), np.array([0, 1, 2]), np.array([0, 2, 3])), shape=(2, 3))
    assert X.nnz == 3
    assert document_frequency(X).tolist() == [1, 1]
    # input left untouched
    assert X.nnz == 3

def test_adapt_forms():
    assert isinstance(adapt(sparse.coo_matrix(DENSE)), sparse.csr_matrix)
    assert isinstance(adapt(DENSE), np.ndarray)
    assert np.array_equal(adapt(Grid(DENSE.tolist())), DENSE)
    assert np.array_equal(materialize(Grid(DENSE.tolist())), DENSE)

def test_rejects_non_2d():
    with pytest.raises(ValueError):
        document_frequency(np.zeros(3))
