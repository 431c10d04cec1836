# models_registry.py
from typing import Any, Dict, Optional

from .fast_tree import FastTreeBinaryClassifier
from .logistic_regression import LogisticRegressionBinaryClassifier

# Library-side defaults for each trainer. The program itself overrides the
# tree sizes with PROGRAM_PARAMS (see experiments.sentiment_program).
TRAINER_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "fasttree": {
        "num_leaves": 20,
        "num_trees": 100,
        "min_documents_in_leafs": 10,
        "learning_rate": 0.2,
        "random_state": 42,
    },
    "logreg": {
        "C": 1.0,
        "solver": "liblinear",
        "max_iter": 1000,
    },
}

_ALIASES = {
    "fasttree": "fasttree",
    "fast_tree": "fasttree",
    "gbdt": "fasttree",
    "lr": "logreg",
    "logreg": "logreg",
    "logistic": "logreg",
}


def canonical_trainer_name(name: str) -> str:
    key = _ALIASES.get(name.lower())
    if key is None:
        raise ValueError(f"Unknown trainer: {name}")
    return key


def create_trainer(name: str, params: Optional[Dict[str, Any]] = None):
    """
    返回一个未训练的分类器。params 覆盖 TRAINER_DEFAULTS 中的同名键，
    其余键不允许出现。
    """
    key = canonical_trainer_name(name)
    cfg = dict(TRAINER_DEFAULTS[key])
    for k, v in (params or {}).items():
        if k not in cfg:
            raise ValueError(f"Unknown parameter for {key}: {k}")
        cfg[k] = v

    if key == "fasttree":
        return FastTreeBinaryClassifier(**cfg)
    return LogisticRegressionBinaryClassifier(**cfg)
