from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Optional, Tuple
import numpy as np, os
from scipy import sparse

from src.io_utils.storage import load_model

app = FastAPI()

# ✅ 환경 변수 (모델 경로)
MODEL_PATH_ENV = "TFIDF_MODEL_PATH"
DEFAULT_MODEL_PATH = "artifacts/idf_corpus.bin"

# ✅ 캐시된 모델 보관 (경로별)
_models = {}

def model_path() -> str:
    return os.getenv(MODEL_PATH_ENV, DEFAULT_MODEL_PATH)

def get_model(path: Optional[str] = None):
    path = path or model_path()
    if path in _models:
        return _models[path]
    if not os.path.exists(path):
        raise HTTPException(status_code=503, detail=f"model not available at {path}")
    _models[path] = load_model(path)
    return _models[path]


class CooMatrix(BaseModel):
    shape: Tuple[int, int]
    rows: List[int]
    cols: List[int]
    data: List[float]
    normalization: Optional[str] = None


@app.get("/")
def read_root():
    return {"message": "Hello, TF-IDF Weighting API!"}

@app.get("/info")
def get_info():
    t = get_model()
    return {
        "terms": int(t.weights.shape[0]),
        "weight_padding": t.weight_padding,
        "normalization": t.normalization.value,
    }

@app.post("/transform")
def transform(payload: CooMatrix):
    t = get_model()
    try:
        X = sparse.coo_matrix(
            (np.asarray(payload.data, dtype=np.float64), (payload.rows, payload.cols)),
            shape=payload.shape,
        ).tocsr()
        # 요청별 정규화는 공유 모델을 건드리지 않도록 별도 인스턴스로
        scoped = t if payload.normalization is None else t.with_normalization(payload.normalization)
        Xw = scoped.transform(X).tocoo()
    except ValueError as e:  # DimensionMismatchError 포함
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "shape": [int(Xw.shape[0]), int(Xw.shape[1])],
        "rows": Xw.row.tolist(),
        "cols": Xw.col.tolist(),
        "data": Xw.data.tolist(),
    }
