import numpy as np
from scipy import sparse
from src.weighting.tfidf import TfidfTransformer
from src.weighting.transpose import Transformer, TransposeTransformer

def test_transpose_shape_and_values():
    X = np.arange(6).reshape(2, 3)
    t = TransposeTransformer()
    assert t.fit(X) is t
    out = t.transform(X)
    assert isinstance(out, sparse.csr_matrix)
    assert out.shape == (3, 2)
    assert np.array_equal(out.toarray(), X.T)

def test_fit_transform_sparse_input():
    X = sparse.random(4, 9, density=0.5, format="coo", random_state=6)
    out = TransposeTransformer().fit_transform(X)
    assert np.array_equal(out.toarray(), X.toarray().T)

def test_both_stages_are_transformers():
    assert isinstance(TransposeTransformer(), Transformer)
    assert isinstance(TfidfTransformer(), Transformer)

def test_docs_by_terms_pipeline():
    # docs x terms input -> transpose -> tf-idf over terms x docs
    docs_terms = np.array([[1, 0, 0], [1, 1, 0], [1, 0, 0], [1, 1, 0]])
    Xw = TfidfTransformer().fit_transform(TransposeTransformer().fit_transform(docs_terms))
    assert Xw.shape == (3, 4)
    assert np.allclose(Xw.toarray()[0], 0.0)
