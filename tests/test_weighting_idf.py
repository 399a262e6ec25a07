import math
import numpy as np
from scipy import sparse
from src.weighting.idf import fit_idf, idf_weights, diagonal_weights

# 3 terms x 4 docs: term0 in all docs, term1 in 2, term2 in none
CORPUS = np.array([
    [1, 2, 1, 3],
    [0, 1, 0, 4],
    [0, 0, 0, 0],
])

def test_worked_example():
    w = diagonal_weights(fit_idf(CORPUS))
    assert abs(w[0] - 0.0) < 1e-12
    assert abs(w[1] - math.log(5 / 3)) < 1e-12
    assert abs(w[2] - math.log(5)) < 1e-12

def test_worked_example_padding():
    w = diagonal_weights(fit_idf(CORPUS, padding=1.0))
    assert np.allclose(w, [1.0, 1.5108256, 2.6094379], atol=1e-6)

def test_weights_finite_and_strictly_decreasing():
    for n in [0, 1, 2, 7, 100]:
        w = idf_weights(np.arange(n + 1), n)
        assert np.all(np.isfinite(w))
        assert np.all(np.diff(w) < 0)

def test_padding_is_uniform_shift():
    X = sparse.random(20, 15, density=0.3, format="csr", random_state=0)
    base = diagonal_weights(fit_idf(X))
    padded = diagonal_weights(fit_idf(X, padding=0.25))
    assert np.allclose(padded - base, 0.25)

def test_model_is_square_diagonal():
    model = fit_idf(CORPUS)
    assert model.shape == (3, 3)
    assert isinstance(model, sparse.dia_matrix)
