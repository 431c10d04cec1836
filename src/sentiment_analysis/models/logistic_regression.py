# logistic_regression.py
from __future__ import annotations

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.linear_model import LogisticRegression
from sklearn.utils.validation import check_is_fitted

from .fast_tree import to_bool_labels


class LogisticRegressionBinaryClassifier(ClassifierMixin, BaseEstimator):
    """Linear alternative to the boosted trees, same bool-label contract.

    params:
      - C, solver, max_iter: LogisticRegression parameters
    """

    def __init__(self, C: float = 1.0, solver: str = "liblinear", max_iter: int = 1000):
        self.C = C
        self.solver = solver
        self.max_iter = max_iter

    def fit(self, X, y):
        y = to_bool_labels(y)
        if len(np.unique(y)) < 2:
            raise ValueError(
                "Training data must contain both positive and negative rows"
            )
        print(f"[LogReg] rows={X.shape[0]}, features={X.shape[1]}, C={self.C}")
        self.model_ = LogisticRegression(
            C=self.C, solver=self.solver, max_iter=self.max_iter
        )
        self.model_.fit(X, y)
        self.classes_ = self.model_.classes_
        return self

    def decision_function(self, X) -> np.ndarray:
        check_is_fitted(self, "model_")
        return self.model_.decision_function(X)

    def predict_proba(self, X) -> np.ndarray:
        check_is_fitted(self, "model_")
        return self.model_.predict_proba(X)

    def predict(self, X) -> np.ndarray:
        return self.decision_function(X) > 0
