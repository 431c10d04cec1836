#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Learning pipeline: loader → featurizer(s) → trainer.

Stages are added in order. The loader supplies the labelled rows, every
middle stage is an sklearn transformer, and the last stage is the
classifier. train() fits the whole chain and returns a PredictionModel.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from sklearn.pipeline import Pipeline

from sentiment_analysis.prepare_dataset import LABEL_COL, TEXT_COL, TextLoader
from sentiment_analysis.models.fast_tree import to_bool_labels
from .prediction_model import PredictionModel


def _is_transformer(stage: Any) -> bool:
    return hasattr(stage, "fit") and hasattr(stage, "transform")


def _is_trainer(stage: Any) -> bool:
    return hasattr(stage, "fit") and hasattr(stage, "predict")


class LearningPipeline:
    def __init__(self):
        self.loader: Optional[TextLoader] = None
        self.transforms: List[Tuple[str, Any]] = []
        self.trainer: Any = None

    def add(self, stage: Any) -> "LearningPipeline":
        if isinstance(stage, TextLoader):
            if self.loader is not None:
                raise ValueError("Pipeline already has a loader")
            if self.transforms or self.trainer is not None:
                raise ValueError("The loader must be the first stage")
            self.loader = stage
        elif self.trainer is not None:
            raise ValueError("The trainer must be the last stage")
        elif _is_transformer(stage):
            name = f"{type(stage).__name__.lower()}_{len(self.transforms)}"
            self.transforms.append((name, stage))
        elif _is_trainer(stage):
            self.trainer = stage
        else:
            raise TypeError(f"Unsupported pipeline stage: {type(stage).__name__}")
        return self

    def build(self) -> Pipeline:
        if self.trainer is None:
            raise ValueError("Pipeline has no trainer")
        return Pipeline(self.transforms + [("classifier", self.trainer)])

    def train(self) -> PredictionModel:
        if self.loader is None:
            raise ValueError("Pipeline has no loader")
        pipe = self.build()

        df = self.loader.load()
        if not (df[TEXT_COL].str.strip() != "").any():
            raise ValueError(f"Every text in {self.loader.path} is empty")
        y = to_bool_labels(df[LABEL_COL].to_numpy())
        print(
            f"[data] {self.loader.path.name}: rows={len(df)}, "
            f"positive={int(y.sum())}, negative={int((~y).sum())}"
        )
        pipe.fit(df[TEXT_COL].tolist(), y)
        return PredictionModel(pipe)
