# Training, evaluation and prediction workflow

from .prediction_model import PredictionModel
from .learning_pipeline import LearningPipeline
from .evaluation import BinaryClassificationEvaluator

__all__ = [
    "PredictionModel",
    "LearningPipeline",
    "BinaryClassificationEvaluator",
]
