#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Trained sentiment model: featurizer + classifier behind a record-level API.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

import joblib
import numpy as np
from sklearn.pipeline import Pipeline

from sentiment_analysis.core.records import SentimentData, SentimentPrediction

TextOrRecord = Union[str, SentimentData]


def _texts(items: Iterable[TextOrRecord]) -> List[str]:
    if isinstance(items, (str, SentimentData)):
        raise TypeError("Expected an iterable of sentences, got a single item; use predict_one()")
    out = []
    for it in items:
        if isinstance(it, SentimentData):
            out.append(it.sentiment_text or "")
        else:
            out.append("" if it is None else str(it))
    return out


class PredictionModel:
    def __init__(self, pipeline: Pipeline):
        """
        Args:
            pipeline: Fitted sklearn Pipeline whose last step is a binary
                classifier with predict/predict_proba/decision_function
        """
        self.pipeline = pipeline

    def __repr__(self) -> str:
        steps = ", ".join(name for name, _ in self.pipeline.steps)
        return f"PredictionModel(steps=[{steps}])"

    def decision_function(self, items: Iterable[TextOrRecord]) -> np.ndarray:
        return self.pipeline.decision_function(_texts(items))

    def predict_proba(self, items: Iterable[TextOrRecord]) -> np.ndarray:
        """Probability of the positive class for each sentence."""
        proba = self.pipeline.predict_proba(_texts(items))
        classes = list(self.pipeline.classes_)
        return proba[:, classes.index(True)]

    def predict(self, items: Iterable[TextOrRecord]) -> List[SentimentPrediction]:
        texts = _texts(items)
        if not texts:
            return []
        scores = self.decision_function(texts)
        probs = self.predict_proba(texts)
        return [
            SentimentPrediction(sentiment=bool(s > 0), score=float(s), probability=float(p))
            for s, p in zip(scores, probs)
        ]

    def predict_one(self, item: TextOrRecord) -> SentimentPrediction:
        return self.predict([item])[0]

    # ---------- persistence ----------
    def write(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(self, path, compress=3)
        return path

    @classmethod
    def read(cls, path: Union[str, Path]) -> "PredictionModel":
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Model file not found: {path}")
        obj = joblib.load(path)
        if not isinstance(obj, cls):
            raise TypeError(f"{path} does not hold a {cls.__name__} (got {type(obj).__name__})")
        return obj
