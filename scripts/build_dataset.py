import argparse
import logging
from colorpuzzle.utils.config import load_config
from colorpuzzle.utils.seed import seed_all
from colorpuzzle.complexity.estimator import EstimatorConfig
from colorpuzzle.data.dataset import DatasetConfig, build_or_load_dataset

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", required=True)
    ap.add_argument("--workers", type=int, default=1)
    args = ap.parse_args()

    cfg = load_config(args.config)
    seed_all(cfg["seed"])

    dcfg = DatasetConfig(**cfg["dataset"])
    est = EstimatorConfig.from_config(cfg)
    ds = build_or_load_dataset(cfg=dcfg, est=est, seed=cfg["seed"], workers=args.workers)
    print(f"Dataset ready: {len(ds)} puzzles. Cache: {dcfg.cache_path}")
    for k, v in ds.summary().items():
        print(f"  {k}: {v:.4f}" if isinstance(v, float) else f"  {k}: {v}")

if __name__ == "__main__":
    main()
