# Featurizer and trainers for sentiment classification

from .text_featurizer import TextFeaturizer
from .fast_tree import FastTreeBinaryClassifier
from .logistic_regression import LogisticRegressionBinaryClassifier
from .models_registry import TRAINER_DEFAULTS, create_trainer

__all__ = [
    "TextFeaturizer",
    "FastTreeBinaryClassifier",
    "LogisticRegressionBinaryClassifier",
    "TRAINER_DEFAULTS",
    "create_trainer",
]
