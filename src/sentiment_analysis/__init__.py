"""
Binary sentiment classification on top of scikit-learn.

A TSV loader, a text featurizer and a gradient-boosted tree trainer are
chained into a learning pipeline; the trained model is saved, evaluated on
a held-out file and used to predict new sentences.

Key modules:
- prepare_dataset: TSV loading and text normalization
- core: records and binary classification metrics
- models: featurizer, boosted-tree / logistic trainers, trainer registry
- experiments: learning pipeline, evaluator, the train/evaluate/predict program
"""

__version__ = "0.1.0"
