# Records and metrics for binary sentiment classification

from .records import SentimentData, SentimentPrediction, label_to_bool
from .metrics import (
    BinaryClassificationMetrics,
    compute_binary_metrics,
    format_metrics_report,
    roc_points,
)

__all__ = [
    "SentimentData",
    "SentimentPrediction",
    "label_to_bool",
    "BinaryClassificationMetrics",
    "compute_binary_metrics",
    "format_metrics_report",
    "roc_points",
]
