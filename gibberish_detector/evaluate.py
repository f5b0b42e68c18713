from typing import Dict, Iterable
import logging
logger = logging.getLogger(__name__)

import pandas as pd
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .detector import detect
from .model import Model

COLUMNS = ["text", "label", "score", "predicted_gibberish", "correct"]


def evaluate(model: Model, good_lines: Iterable[str], bad_lines: Iterable[str]) -> pd.DataFrame:
    """Score every labeled example and check the verdict against its label."""
    rows = []
    for label, lines in (("good", good_lines), ("bad", bad_lines)):
        for line in lines:
            score = detect(line, model, raw=True)
            predicted = score <= model.threshold
            rows.append({
                "text": line,
                "label": label,
                "score": score,
                "predicted_gibberish": predicted,
                "correct": predicted == (label == "bad"),
            })
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize(frame: pd.DataFrame) -> Dict:
    summary = {
        "total": len(frame),
        "accuracy": float(frame["correct"].mean()) if len(frame) else 0.0,
    }
    for label in ("good", "bad"):
        subset = frame[frame["label"] == label]
        summary[f"{label}_total"] = len(subset)
        summary[f"{label}_accuracy"] = float(subset["correct"].mean()) if len(subset) else 0.0
    return summary


def plot_scores(frame: pd.DataFrame, threshold: float, path: str) -> None:
    for label, color in (("good", "tab:green"), ("bad", "tab:red")):
        scores = frame.loc[frame["label"] == label, "score"]
        if len(scores):
            plt.hist(scores, bins=30, alpha=0.6, color=color, label=label)
    plt.axvline(threshold, color="black", linestyle="--", label="threshold")
    plt.xlabel("Average transition probability")
    plt.ylabel("Examples")
    plt.legend()
    plt.savefig(path)
    plt.clf()
    logger.info(f"Saved score plot to {path}")
