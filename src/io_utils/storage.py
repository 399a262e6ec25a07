"""
storage.py
- Artifact utilities: timestamped folder, model .bin, result .npz + meta JSON,
  weights CSV for inspection.
"""
from __future__ import annotations
import datetime as dt, json, os
from typing import Dict
import numpy as np
import pandas as pd
from scipy import sparse

from src.weighting.tfidf import TfidfTransformer

def timestamp_dir(base: str = "artifacts/runs") -> str:
    ts = dt.datetime.now().strftime("%Y%m%d-%H%M%S")
    out = f"{base}/{ts}"
    os.makedirs(out, exist_ok=True)
    return out

def save_model(t: TfidfTransformer, path: str) -> int:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "wb") as f:
        return t.save(f)

def load_model(path: str, t: TfidfTransformer | None = None) -> TfidfTransformer:
    t = t if t is not None else TfidfTransformer()
    with open(path, "rb") as f:
        return t.load(f)

def save_weights_csv(t: TfidfTransformer, path: str) -> None:
    pd.DataFrame({"term": np.arange(len(t.weights)), "weight": t.weights}).to_csv(path, index=False)

def save_result(X: "sparse.csr_matrix", out_dir: str, name: str, extra: Dict | None = None) -> Dict:
    os.makedirs(out_dir, exist_ok=True)
    sparse.save_npz(f"{out_dir}/X_{name}.npz", X)
    meta = {"name": name, "rows": int(X.shape[0]), "cols": int(X.shape[1]), "nnz": int(X.nnz)}
    meta.update(extra or {})
    with open(f"{out_dir}/meta_{name}.json", "w", encoding="utf-8") as f:
        json.dump(meta, f, ensure_ascii=False, indent=2)
    return meta
