"""
tfidf_apply.py
- Load saved IDF model → weight a new term-document matrix → save result.
- 예)
    python -m src.pipelines.tfidf_apply --model artifacts/idf_corpus.bin --matrix data/X_new.npz --norm row
"""
from __future__ import annotations
import argparse
from typing import Dict, Optional
from src.validate import load_matrix_with_stats
from src.io_utils.storage import load_model, save_result


def run(model_path: str, matrix_path: str, name: str = "applied", outdir: str = "artifacts",
        norm: Optional[str] = None) -> Dict:
    # 1. 모델/행렬 로드
    t = load_model(model_path)
    if norm is not None:
        t.normalization = norm
    X, stats = load_matrix_with_stats(matrix_path)
    print(f"[APPLY] model terms={t.weights.shape[0]} | matrix {stats['rows']}x{stats['cols']} nnz={stats['nnz']}")

    # 2. 가중치 적용 (차원 불일치는 그대로 전파)
    Xw = t.transform(X)

    # 3. 저장
    meta = save_result(Xw, outdir, name, extra={"model": model_path, "normalization": t.normalization.value})
    print(f"[APPLY] saved {outdir}/X_{name}.npz (nnz={Xw.nnz})")
    return meta


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description="Apply a saved IDF model to a term-document matrix")
    ap.add_argument("--model", required=True)
    ap.add_argument("--matrix", required=True)
    ap.add_argument("--name", default="applied")
    ap.add_argument("--outdir", default="artifacts")
    ap.add_argument("--norm", choices=["none", "row", "column"], default=None)
    args = ap.parse_args()
    run(args.model, args.matrix, args.name, args.outdir, args.norm)
