#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Sentiment analysis program: train, evaluate, predict.

The program runs one linear sequence:
1. Build the pipeline (TSV loader → text featurizer → boosted-tree trainer)
2. Train it on Data/data.tsv and write the model to Data/Model.joblib
3. Evaluate the trained model on Data/test.tsv and print the metrics
4. Predict the sentiment of two fixed example sentences

Optional extras: --results-dir saves a JSON summary, --plots adds figures.
"""

from __future__ import annotations

import argparse
import json
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from sentiment_analysis.core.metrics import (
    BinaryClassificationMetrics,
    compute_binary_metrics,
    format_metrics_report,
    roc_points,
)
from sentiment_analysis.core.records import SentimentData, SentimentPrediction
from sentiment_analysis.models.models_registry import canonical_trainer_name, create_trainer
from sentiment_analysis.models.text_featurizer import TextFeaturizer
from sentiment_analysis.prepare_dataset import TextLoader
from .evaluation import BinaryClassificationEvaluator
from .learning_pipeline import LearningPipeline
from .prediction_model import PredictionModel

# --------------------------- Configuration ------------------------------
DATA_DIR = Path.cwd() / "Data"
DATA_PATH = DATA_DIR / "data.tsv"
TEST_DATA_PATH = DATA_DIR / "test.tsv"
MODEL_PATH = DATA_DIR / "Model.joblib"

# Tree sizes used by the program (small on purpose: tiny tutorial dataset)
PROGRAM_PARAMS: Dict[str, Any] = {
    "num_leaves": 5,
    "num_trees": 5,
    "min_documents_in_leafs": 2,
}

EXAMPLE_SENTENCES = (
    "Please refrain from adding nonsense to Wikipedia.",
    "He is the best, and the article should say that.",
)


def train(
    data_path: Path = DATA_PATH,
    model_path: Optional[Path] = MODEL_PATH,
    trainer: str = "fasttree",
    params: Optional[Dict[str, Any]] = None,
    use_hashing: bool = False,
) -> PredictionModel:
    if params is None:
        params = PROGRAM_PARAMS if canonical_trainer_name(trainer) == "fasttree" else {}

    pipeline = LearningPipeline()
    pipeline.add(TextLoader(data_path))
    pipeline.add(TextFeaturizer(use_hashing=use_hashing))
    pipeline.add(create_trainer(trainer, params))

    model = pipeline.train()
    if model_path is not None:
        path = model.write(model_path)
        print(f"[model] saved to {path}")
    return model


def evaluate(model: PredictionModel, test_data_path: Path = TEST_DATA_PATH) -> BinaryClassificationMetrics:
    metrics = BinaryClassificationEvaluator().evaluate(model, TextLoader(test_data_path))
    print(format_metrics_report(metrics))
    return metrics


def predict(
    model: PredictionModel, sentences: Sequence[str] = EXAMPLE_SENTENCES
) -> List[SentimentPrediction]:
    sentiments = [SentimentData(sentiment_text=s) for s in sentences]
    predictions = model.predict(sentiments)

    print()
    print("Sentiment Predictions")
    print("---------------------")
    for sentiment, prediction in zip(sentiments, predictions):
        print(f"Sentiment: {sentiment.sentiment_text} | Prediction: {prediction.label_name}")
    print()
    return predictions


def _finite_or_none(value: Any) -> Any:
    # JSON has no NaN/Infinity: undefined metrics are written as null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite_or_none(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_or_none(v) for v in value]
    return value


def save_results(
    results_dir: Path,
    trainer: str,
    params: Dict[str, Any],
    metrics: BinaryClassificationMetrics,
    roc: Dict[str, List[float]],
    sentences: Sequence[str],
    predictions: Sequence[SentimentPrediction],
) -> Dict[str, Any]:
    results = {
        "trainer": trainer,
        "params": params,
        "metrics": metrics.to_dict(),
        "roc_curve": roc,
        "predictions": [
            {"text": s, "sentiment": p.sentiment, "score": p.score, "probability": p.probability}
            for s, p in zip(sentences, predictions)
        ],
    }
    results_dir.mkdir(parents=True, exist_ok=True)
    out_path = results_dir / "evaluation_results.json"
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(_finite_or_none(results), f, ensure_ascii=False, indent=2, allow_nan=False)
    print(f"[results] Saved summary: {out_path}")
    return results


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Train, evaluate and run a binary sentiment classifier")
    ap.add_argument("--data", type=Path, default=DATA_PATH, help="Training TSV (label<TAB>text)")
    ap.add_argument("--test-data", type=Path, default=TEST_DATA_PATH, help="Held-out TSV")
    ap.add_argument("--model-path", type=Path, default=MODEL_PATH, help="Where to write the trained model")
    ap.add_argument("--trainer", choices=["fasttree", "logreg"], default="fasttree")
    ap.add_argument("--num-trees", type=int, default=None)
    ap.add_argument("--num-leaves", type=int, default=None)
    ap.add_argument("--min-docs-per-leaf", type=int, default=None)
    ap.add_argument("--learning-rate", type=float, default=None)
    ap.add_argument("--seed", type=int, default=None, help="Random seed for the tree builder")
    ap.add_argument("--use-hashing", action="store_true", help="Hash n-grams instead of fitting a vocabulary")
    ap.add_argument("--results-dir", type=Path, default=None, help="Save evaluation_results.json here")
    ap.add_argument("--plots", action="store_true", help="Also save figures into --results-dir")
    return ap


def _params_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    if args.trainer != "fasttree":
        return {}
    params = dict(PROGRAM_PARAMS)
    overrides = {
        "num_trees": args.num_trees,
        "num_leaves": args.num_leaves,
        "min_documents_in_leafs": args.min_docs_per_leaf,
        "learning_rate": args.learning_rate,
        "random_state": args.seed,
    }
    params.update({k: v for k, v in overrides.items() if v is not None})
    return params


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = _build_parser()
    args = ap.parse_args(argv)
    if args.plots and args.results_dir is None:
        raise SystemExit("--plots needs --results-dir")
    if args.trainer != "fasttree":
        tree_flags = [
            flag for flag, value in (
                ("--num-trees", args.num_trees),
                ("--num-leaves", args.num_leaves),
                ("--min-docs-per-leaf", args.min_docs_per_leaf),
                ("--learning-rate", args.learning_rate),
                ("--seed", args.seed),
            )
            if value is not None
        ]
        if tree_flags:
            ap.error(f"{', '.join(tree_flags)} only apply to --trainer fasttree")

    params = _params_from_args(args)
    model = train(args.data, args.model_path, args.trainer, params, args.use_hashing)

    if args.results_dir is None:
        evaluate(model, args.test_data)
        predict(model)
        return

    y_true, y_pred, y_score = BinaryClassificationEvaluator().score(model, TextLoader(args.test_data))
    metrics = compute_binary_metrics(y_true, y_pred, y_score)
    print(format_metrics_report(metrics))
    predictions = predict(model)

    results = save_results(
        args.results_dir, args.trainer, params, metrics,
        roc_points(y_true, y_score), EXAMPLE_SENTENCES, predictions,
    )
    if args.plots:
        from .visualization import save_all_plots

        save_all_plots(results, args.results_dir)


if __name__ == "__main__":
    main()
