"""
tfidf_fit.py
- Load term-document matrix → fit IDF + transform → save artifacts (+ optional WandB log)
"""
from __future__ import annotations
import argparse, os, time
from typing import Dict, Optional
from src.validate import WeightingConfig, load_config, load_matrix_with_stats
from src.weighting.tfidf import TfidfTransformer
from src.io_utils.storage import save_model, save_result, save_weights_csv
import wandb


def build_config(config_path: Optional[str] = None, padding: Optional[float] = None,
                 norm: Optional[str] = None) -> WeightingConfig:
    cfg = load_config(config_path) if config_path else WeightingConfig()
    overrides = {}
    if padding is not None:
        overrides["weight_padding"] = padding
    if norm is not None:
        overrides["normalization"] = norm
    if overrides:
        cfg = WeightingConfig(**{**cfg.model_dump(), **overrides})
    return cfg


def run(matrix_path: str, name: str = "corpus", outdir: str = "artifacts",
        cfg: Optional[WeightingConfig] = None, use_wandb: bool = False) -> Dict:
    os.makedirs(outdir, exist_ok=True)
    cfg = cfg or WeightingConfig()

    # 1. 행렬 불러오기
    X, stats = load_matrix_with_stats(matrix_path)
    if stats["rows"] == 0:
        raise SystemExit("Empty term-document matrix.")

    # 2. IDF 학습 + 가중치 적용
    t = TfidfTransformer.from_config(cfg)
    Xw = t.fit_transform(X)

    # 3. 로컬 저장
    model_path = f"{outdir}/idf_{name}.bin"
    nbytes = save_model(t, model_path)
    save_weights_csv(t, f"{outdir}/weights_{name}.csv")
    meta = save_result(Xw, outdir, name, extra={
        "weight_padding": cfg.weight_padding,
        "normalization": cfg.normalization.value,
        "empty_rows": stats["empty_rows"],
        "empty_cols": stats["empty_cols"],
        "model_bytes": nbytes,
    })

    print(f"[FIT] saved to {outdir}/ (terms={Xw.shape[0]}, docs={Xw.shape[1]}, nnz={Xw.nnz})")

    # 4. WandB 로깅 + Artifact 업로드
    if use_wandb:
        wandb.init(
            project="tfidf-weighting",
            job_type="tfidf_fit",
            name=f"fit_{name}_{time.strftime('%Y%m%d-%H%M%S')}",
        )
        wandb.config.update(cfg.model_dump(mode="json"))
        wandb.log({"terms": Xw.shape[0], "docs": Xw.shape[1], "nnz": Xw.nnz})

        artifact = wandb.Artifact(
            name=f"idf-{name}",
            type="model",
            description=f"IDF diagonal model for {name}",
        )
        artifact.add_file(model_path)
        artifact.add_file(f"{outdir}/X_{name}.npz")
        artifact.add_file(f"{outdir}/meta_{name}.json")
        artifact.add_file(f"{outdir}/weights_{name}.csv")

        wandb.log_artifact(artifact)
        wandb.finish()

    return meta


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--matrix", required=True, help="term-document matrix (.npz sparse or .npy dense)")
    ap.add_argument("--name", default="corpus")
    ap.add_argument("--outdir", default="artifacts")
    ap.add_argument("--config", default=None, help="JSON: {weight_padding, normalization}")
    ap.add_argument("--padding", type=float, default=None)
    ap.add_argument("--norm", choices=["none", "row", "column"], default=None)
    ap.add_argument("--wandb", action="store_true", help="log run + artifact to WandB")
    args = ap.parse_args()
    run(args.matrix, args.name, args.outdir, build_config(args.config, args.padding, args.norm), args.wandb)
