# fast_tree.py
from __future__ import annotations

from typing import Optional

import numpy as np
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.ensemble import GradientBoostingClassifier
from sklearn.utils.validation import check_is_fitted


class FastTreeBinaryClassifier(ClassifierMixin, BaseEstimator):
    """Gradient-boosted decision trees for a two-class (bool) target.

    params:
      - num_leaves: maximum number of leaves per tree
      - num_trees: number of boosting rounds
      - min_documents_in_leafs: minimum number of rows a leaf may hold
      - learning_rate: shrinkage applied to every tree
      - random_state: seed for the tree builder
    """

    def __init__(
        self,
        num_leaves: int = 20,
        num_trees: int = 100,
        min_documents_in_leafs: int = 10,
        learning_rate: float = 0.2,
        random_state: Optional[int] = 42,
    ):
        self.num_leaves = num_leaves
        self.num_trees = num_trees
        self.min_documents_in_leafs = min_documents_in_leafs
        self.learning_rate = learning_rate
        self.random_state = random_state

    def fit(self, X, y):
        y = to_bool_labels(y)
        if len(np.unique(y)) < 2:
            raise ValueError(
                "Training data must contain both positive and negative rows"
            )
        print(
            f"[FastTree] rows={X.shape[0]}, features={X.shape[1]}, "
            f"trees={self.num_trees}, leaves={self.num_leaves}, "
            f"min_docs_in_leaf={self.min_documents_in_leafs}"
        )
        self.model_ = GradientBoostingClassifier(
            n_estimators=self.num_trees,
            max_leaf_nodes=self.num_leaves,
            min_samples_leaf=self.min_documents_in_leafs,
            max_depth=None,
            learning_rate=self.learning_rate,
            random_state=self.random_state,
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
        # margin > 0 <=> P(positive) > 0.5
        return self.decision_function(X) > 0


def to_bool_labels(y) -> np.ndarray:
    arr = np.asarray(y)
    if arr.dtype == bool:
        return arr
    return arr.astype(float) > 0
