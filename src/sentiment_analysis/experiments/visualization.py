# visualization.py
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path


def plot_roc_curve(results: dict, save_dir: Path):
    roc = results.get("roc_curve", {})
    fpr, tpr = roc.get("fpr", []), roc.get("tpr", [])
    if not fpr:
        print("Warning: No ROC curve in results (single-class test set?)")
        return None
    auc = results["metrics"].get("auc")
    plt.figure(figsize=(6, 5))
    plt.plot(fpr, tpr, linewidth=2, label=f"AUC = {auc:.3f}")
    plt.plot([0, 1], [0, 1], linestyle="--", color="grey", alpha=0.6)
    plt.xlabel("False positive rate")
    plt.ylabel("True positive rate")
    plt.title("ROC Curve")
    plt.legend(loc="lower right")
    plt.tight_layout()
    out = Path(save_dir) / "roc_curve.png"
    plt.savefig(out, dpi=200)
    plt.close()
    return out


def plot_confusion_matrix(results: dict, save_dir: Path):
    """Heatmap of the test-set confusion matrix (rows = actual)."""
    cm = results["metrics"].get("confusion_matrix")
    if not cm:
        print("Warning: No confusion matrix in results")
        return None

    fig, ax = plt.subplots(figsize=(5, 4))
    sns.heatmap(
        np.asarray(cm, dtype=int),
        annot=True,
        fmt="d",
        cmap="Blues",
        ax=ax,
        cbar=True,
        square=True,
    )
    ax.set_title("Confusion Matrix")
    ax.set_xlabel("Predicted")
    ax.set_ylabel("Actual")
    ax.set_xticklabels(["Negative", "Positive"])
    ax.set_yticklabels(["Negative", "Positive"])

    plt.tight_layout()
    out = Path(save_dir) / "confusion_matrix.png"
    plt.savefig(out, dpi=200, bbox_inches="tight")
    plt.close()
    return out


def export_summary_table(results: dict, save_dir: Path):
    m = results["metrics"]
    rows = [
        {
            "Trainer": results.get("trainer"),
            "Accuracy": m.get("accuracy"),
            "AUC": m.get("auc"),
            "F1": m.get("f1_score"),
            "AUPRC": m.get("auprc"),
            "Pos_Precision": m.get("positive_precision"),
            "Pos_Recall": m.get("positive_recall"),
            "Neg_Precision": m.get("negative_precision"),
            "Neg_Recall": m.get("negative_recall"),
            "LogLoss": m.get("log_loss"),
            "Test_Size": m.get("n_samples"),
            "Params": str(results.get("params")),
        }
    ]
    df = pd.DataFrame(rows)
    save_dir = Path(save_dir)
    df.to_csv(save_dir / "metrics_summary.csv", index=False)
    (save_dir / "metrics_summary.md").write_text(
        df.to_markdown(index=False, floatfmt=".4f"), encoding="utf-8"
    )
    return df


def save_all_plots(results: dict, save_dir: Path):
    save_dir = Path(save_dir)
    save_dir.mkdir(parents=True, exist_ok=True)
    plot_roc_curve(results, save_dir)
    plot_confusion_matrix(results, save_dir)
    export_summary_table(results, save_dir)
    print(f"[plots] Saved roc_curve.png, confusion_matrix.png and metrics_summary.(csv|md) into {save_dir}")
