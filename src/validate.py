"""
validate.py
- Load term-document matrix artifact (.npz sparse / .npy dense) → shape check → stats.
- Weighting config schema (pydantic) loaded from JSON.
- 실행 코드
    python -c "from src.validate import load_matrix_with_stats as f; import pprint; _,s=f('data/X.npz'); pprint.pprint(s)"
"""
# 1. 행렬 로드 → 검증 → (행렬, 통계) 반환
from __future__ import annotations
import json, os
from typing import Dict, Tuple
import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator
from scipy import sparse

from src.weighting.tfidf import NormalizationMode

# 2. 가중치 설정 스키마
class WeightingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    weight_padding: float = 0.0
    normalization: NormalizationMode = NormalizationMode.NONE

    @field_validator("weight_padding")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not np.isfinite(v):
            raise ValueError("weight_padding must be finite")
        return v

    @field_validator("normalization", mode="before")
    @classmethod
    def _lower(cls, v):
        return v.lower() if isinstance(v, str) else v

# 3. 설정 파일 로드
def load_config(path: str) -> WeightingConfig:
    with open(path, "r", encoding="utf-8") as f:
        return WeightingConfig(**json.load(f))

# 4. 행렬 파일 로드(확장자 분기)
def load_matrix(path: str):
    if not os.path.exists(path):
        raise FileNotFoundError(f"No matrix at {path}")
    if path.endswith(".npz"):
        return sparse.load_npz(path).tocsr()
    if path.endswith(".npy"):
        arr = np.load(path, allow_pickle=False)
        if arr.ndim != 2:
            raise ValueError(f"expected a 2-D matrix in {path}, got ndim={arr.ndim}")
        return arr
    raise ValueError(f"Unsupported matrix format: {path} (use .npz or .npy)")

# 5. 통계 함께 반환
def load_matrix_with_stats(path: str) -> Tuple[object, Dict[str, int | str]]:
    X = load_matrix(path)
    nz = (X != 0)
    row_nnz = np.asarray(nz.sum(axis=1)).ravel()
    col_nnz = np.asarray(nz.sum(axis=0)).ravel()
    stats = {
        "path": path,
        "rows": int(X.shape[0]),
        "cols": int(X.shape[1]),
        "nnz": int(row_nnz.sum()),
        "empty_rows": int((row_nnz == 0).sum()),
        "empty_cols": int((col_nnz == 0).sum()),
    }
    return X, stats
