#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Binary Classification Metrics

This module gathers the quality measures reported for a binary sentiment
model, all computed with sklearn.metrics:
- Accuracy
- Area under the ROC curve (AUC) and under the precision/recall curve
- F1-Score of the positive class
- Per-class precision / recall
- Log-loss, prior entropy and log-loss reduction (in bits)
- Confusion matrix

One-class ground truth leaves AUC/AUPRC undefined; those are reported as
nan with a warning instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

import numpy as np
from sklearn import metrics as skm

LN2 = math.log(2.0)


@dataclass
class BinaryClassificationMetrics:
    accuracy: float
    auc: float
    f1_score: float
    auprc: float
    positive_precision: float
    positive_recall: float
    negative_precision: float
    negative_recall: float
    log_loss: float
    log_loss_reduction: float
    entropy: float
    n_samples: int
    confusion_matrix: List[List[int]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _binary(y) -> np.ndarray:
    arr = np.asarray(y)
    if arr.dtype == bool:
        return arr.astype(int)
    return (arr.astype(float) > 0).astype(int)


def prior_entropy(y_true: np.ndarray) -> float:
    """Entropy (bits) of the label prior."""
    p = float(np.mean(y_true)) if len(y_true) else 0.0
    if p <= 0.0 or p >= 1.0:
        return 0.0
    return float(-(p * math.log2(p) + (1 - p) * math.log2(1 - p)))


def compute_binary_metrics(y_true, y_pred, y_score) -> BinaryClassificationMetrics:
    """
    Compute all binary classification metrics.

    Args:
        y_true: Ground truth labels (numeric, > 0 is positive, or bool)
        y_pred: Predicted labels (bool or 0/1)
        y_score: Predicted probability of the positive class

    Returns:
        BinaryClassificationMetrics
    """
    y_true = _binary(y_true)
    y_pred = _binary(y_pred)
    y_score = np.asarray(y_score, dtype=float)

    if len(y_true) == 0:
        raise ValueError("Cannot evaluate on an empty test set")
    if not (len(y_true) == len(y_pred) == len(y_score)):
        raise ValueError("y_true, y_pred and y_score must have the same length")

    if len(np.unique(y_true)) < 2:
        print("Warning: AUC is ill-defined when the test set holds a single class")
        auc = float("nan")
        auprc = float("nan")
    else:
        auc = float(skm.roc_auc_score(y_true, y_score))
        auprc = float(skm.average_precision_score(y_true, y_score))

    pos_prec, neg_prec = (
        skm.precision_score(y_true, y_pred, pos_label=label, zero_division=0)
        for label in (1, 0)
    )
    pos_rec, neg_rec = (
        skm.recall_score(y_true, y_pred, pos_label=label, zero_division=0)
        for label in (1, 0)
    )

    log_loss = float(skm.log_loss(y_true, y_score, labels=[0, 1])) / LN2
    entropy = prior_entropy(y_true)
    if entropy > 0:
        log_loss_reduction = (entropy - log_loss) / entropy
    else:
        log_loss_reduction = float("nan")

    cm = skm.confusion_matrix(y_true, y_pred, labels=[0, 1])

    return BinaryClassificationMetrics(
        accuracy=float(skm.accuracy_score(y_true, y_pred)),
        auc=auc,
        f1_score=float(skm.f1_score(y_true, y_pred, zero_division=0)),
        auprc=auprc,
        positive_precision=float(pos_prec),
        positive_recall=float(pos_rec),
        negative_precision=float(neg_prec),
        negative_recall=float(neg_rec),
        log_loss=log_loss,
        log_loss_reduction=float(log_loss_reduction),
        entropy=entropy,
        n_samples=int(len(y_true)),
        confusion_matrix=cm.tolist(),
    )


def format_metrics_report(m: BinaryClassificationMetrics) -> str:
    lines = [
        "",
        "PredictionModel quality metrics evaluation",
        "-------------------------------------------",
        f"Accuracy: {m.accuracy:.2%}",
        f"Auc: {m.auc:.2%}",
        f"F1Score: {m.f1_score:.2%}",
    ]
    return "\n".join(lines)


def roc_points(y_true, y_score) -> Dict[str, List[float]]:
    """FPR/TPR pairs for plotting; empty when the curve is undefined."""
    y_true = _binary(y_true)
    if len(np.unique(y_true)) < 2:
        return {"fpr": [], "tpr": []}
    fpr, tpr, _ = skm.roc_curve(y_true, np.asarray(y_score, dtype=float))
    return {"fpr": fpr.tolist(), "tpr": tpr.tolist()}
