#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Held-out evaluation of a trained sentiment model
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from sentiment_analysis.core.metrics import BinaryClassificationMetrics, compute_binary_metrics
from sentiment_analysis.models.fast_tree import to_bool_labels
from sentiment_analysis.prepare_dataset import LABEL_COL, TEXT_COL, TextLoader
from .prediction_model import PredictionModel


class BinaryClassificationEvaluator:
    def score(
        self, model: PredictionModel, test_data: TextLoader
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Run the model over the test file.

        Returns:
            (y_true, y_pred, y_score) where y_score is P(positive)
        """
        df = test_data.load()
        texts = df[TEXT_COL].tolist()
        y_true = to_bool_labels(df[LABEL_COL].to_numpy())
        y_score = model.predict_proba(texts)
        y_pred = model.decision_function(texts) > 0
        print(f"[eval] {test_data.path.name}: rows={len(df)}")
        return y_true, y_pred, y_score

    def evaluate(self, model: PredictionModel, test_data: TextLoader) -> BinaryClassificationMetrics:
        y_true, y_pred, y_score = self.score(model, test_data)
        return compute_binary_metrics(y_true, y_pred, y_score)
