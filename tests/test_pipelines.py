import json
import numpy as np
import pytest
from scipy import sparse
from src.io_utils.storage import load_model
from src.pipelines import tfidf_apply, tfidf_fit
from src.weighting.errors import DimensionMismatchError

CORPUS = np.array([
    [1, 2, 1, 3],
    [0, 1, 0, 4],
    [0, 0, 0, 0],
])

def test_fit_then_apply(tmp_path):
    sparse.save_npz(tmp_path / "X.npz", sparse.csr_matrix(CORPUS))
    out = tmp_path / "artifacts"
    cfg = tfidf_fit.build_config(padding=1.0, norm="row")
    meta = tfidf_fit.run(str(tmp_path / "X.npz"), "demo", str(out), cfg)
    assert meta["rows"] == 3 and meta["cols"] == 4
    assert json.load(open(out / "meta_demo.json", encoding="utf-8"))["normalization"] == "row"
    assert (out / "weights_demo.csv").exists()

    t = load_model(str(out / "idf_demo.bin"))
    assert np.allclose(t.weights, [1.0, 1.5108256, 2.6094379], atol=1e-6)

    np.save(tmp_path / "new.npy", np.ones((3, 2)))
    meta = tfidf_apply.run(str(out / "idf_demo.bin"), str(tmp_path / "new.npy"), "new", str(out), norm="column")
    Xw = sparse.load_npz(out / "X_new.npz")
    assert meta["normalization"] == "column"
    assert np.allclose((Xw.toarray() ** 2).sum(axis=0), 1.0)

def test_config_file_with_override(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"weight_padding": 0.5, "normalization": "column"}), encoding="utf-8")
    cfg = tfidf_fit.build_config(str(p), norm="none")
    assert cfg.weight_padding == 0.5
    assert cfg.normalization.value == "none"

def test_apply_dimension_mismatch(tmp_path):
    sparse.save_npz(tmp_path / "X.npz", sparse.csr_matrix(CORPUS))
    tfidf_fit.run(str(tmp_path / "X.npz"), "demo", str(tmp_path))
    np.save(tmp_path / "bad.npy", np.ones((5, 2)))
    with pytest.raises(DimensionMismatchError):
        tfidf_apply.run(str(tmp_path / "idf_demo.bin"), str(tmp_path / "bad.npy"), "bad", str(tmp_path))
