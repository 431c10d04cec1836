#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Runner for the sentiment analysis program.

- Run from project root (paths default to ./Data/data.tsv, ./Data/test.tsv).
- Works without installing the package: src/ is put on sys.path.
- Same flags as the `sentiment-analysis` console script, e.g.
    python run_sentiment.py --results-dir results --plots
"""

import sys
from pathlib import Path

ROOT = Path(__file__).parent.resolve()
SRC_DIR = ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sentiment_analysis.experiments.sentiment_program import main  # noqa: E402


if __name__ == "__main__":
    main()
