#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Standalone script to redraw figures from an evaluation_results.json file
"""

import argparse
import json
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from sentiment_analysis.experiments.visualization import save_all_plots  # noqa: E402


def main():
    ap = argparse.ArgumentParser(description="Plot saved evaluation results")
    ap.add_argument("--results-file", type=Path, default=Path("results/evaluation_results.json"))
    ap.add_argument("--out-dir", type=Path, default=None, help="Defaults to the results file's directory")
    args = ap.parse_args()

    results_file = args.results_file
    if not results_file.exists():
        print(f"Error: Results file not found: {results_file}")
        print("Run: python run_sentiment.py --results-dir results first.")
        raise SystemExit(1)

    print(f"Loading results from: {results_file}")
    with open(results_file, "r", encoding="utf-8") as f:
        results = json.load(f)

    if "metrics" not in results:
        print("Error: No metrics found in the file")
        raise SystemExit(1)

    out_dir = args.out_dir or results_file.parent
    save_all_plots(results, out_dir)
    print("\nVisualization complete!")


if __name__ == "__main__":
    main()
