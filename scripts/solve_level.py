import argparse
import logging

from colorpuzzle.utils.config import load_config
from colorpuzzle.complexity.estimator import EstimatorConfig
from colorpuzzle.puzzle.level import analyze_level, load_level, save_report

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--level", required=True, help='JSON file: {"regions": [...], "edges": [[a, b], ...]}')
    ap.add_argument("--config", default=None)
    ap.add_argument("--out", default=None, help="Write the report as JSON here")
    ap.add_argument("--no-strip", action="store_true", help="Keep dangling regions when estimating")
    args = ap.parse_args()

    cfg = load_config(args.config)
    est = EstimatorConfig.from_config(cfg)
    if args.no_strip:
        est.strip_dangling = False

    level = load_level(args.level)
    report = analyze_level(level, est)

    print(f"Total colors: {report.colors}")
    print(f"Complexity: {report.complexity_label}")
    print(f"Total regions: {report.num_regions}")
    for rid, color in report.solution.items():
        print(f"  {rid}: {color}")

    if args.out:
        save_report(report, args.out)
        print(f"Report written to {args.out}")

if __name__ == "__main__":
    main()
