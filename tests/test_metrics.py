import math

import pytest

from sentiment_analysis.core.metrics import (
    compute_binary_metrics,
    format_metrics_report,
    prior_entropy,
    roc_points,
)

Y_TRUE = [0, 0, 1, 1]
Y_SCORE = [0.1, 0.4, 0.35, 0.8]
Y_PRED = [False, False, False, True]


def test_known_values():
    m = compute_binary_metrics(Y_TRUE, Y_PRED, Y_SCORE)
    assert m.accuracy == pytest.approx(0.75)
    assert m.auc == pytest.approx(0.75)
    assert m.f1_score == pytest.approx(2 / 3)
    assert m.positive_precision == pytest.approx(1.0)
    assert m.positive_recall == pytest.approx(0.5)
    assert m.negative_precision == pytest.approx(2 / 3)
    assert m.negative_recall == pytest.approx(1.0)
    assert m.entropy == pytest.approx(1.0)
    assert m.confusion_matrix == [[2, 0], [1, 1]]
    assert m.n_samples == 4


def test_log_loss_is_in_bits():
    m = compute_binary_metrics(Y_TRUE, Y_PRED, Y_SCORE)
    expected = -sum(
        math.log2(p if y else 1 - p) for y, p in zip(Y_TRUE, Y_SCORE)
    ) / len(Y_TRUE)
    assert m.log_loss == pytest.approx(expected)
    assert m.log_loss_reduction == pytest.approx((1.0 - expected) / 1.0)


def test_float_labels_above_zero_are_positive():
    m = compute_binary_metrics([0.0, 4.0], [False, True], [0.2, 0.9])
    assert m.accuracy == 1.0
    assert m.auc == 1.0


def test_single_class_gives_nan_auc(capsys):
    m = compute_binary_metrics([1, 1], [True, False], [0.9, 0.3])
    assert math.isnan(m.auc)
    assert math.isnan(m.auprc)
    assert math.isnan(m.log_loss_reduction)
    assert m.accuracy == 0.5
    assert "Warning" in capsys.readouterr().out


def test_empty_input_raises():
    with pytest.raises(ValueError):
        compute_binary_metrics([], [], [])


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        compute_binary_metrics([0, 1], [0], [0.1, 0.9])


def test_report_format():
    m = compute_binary_metrics(Y_TRUE, Y_PRED, Y_SCORE)
    lines = format_metrics_report(m).split("\n")
    assert lines == [
        "",
        "PredictionModel quality metrics evaluation",
        "-------------------------------------------",
        "Accuracy: 75.00%",
        "Auc: 75.00%",
        "F1Score: 66.67%",
    ]


def test_prior_entropy_edges():
    assert prior_entropy([1, 1, 1]) == 0.0
    assert prior_entropy([]) == 0.0


def test_roc_points():
    roc = roc_points(Y_TRUE, Y_SCORE)
    assert roc["fpr"][0] == 0.0 and roc["fpr"][-1] == 1.0
    assert len(roc["fpr"]) == len(roc["tpr"])
    assert roc_points([1, 1], [0.2, 0.3]) == {"fpr": [], "tpr": []}
