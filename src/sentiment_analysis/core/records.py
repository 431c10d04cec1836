# records.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class SentimentData:
    """One row of the sentiment TSV files.

    - sentiment: numeric label (0 = negative, 1 = positive); None for rows
      built only for prediction
    - sentiment_text: the free-form sentence
    """

    sentiment_text: str
    sentiment: Optional[float] = None

    @property
    def is_positive(self) -> Optional[bool]:
        if self.sentiment is None:
            return None
        return label_to_bool(self.sentiment)


@dataclass(frozen=True)
class SentimentPrediction:
    sentiment: bool
    score: float = 0.0
    probability: float = 0.5

    @property
    def label_name(self) -> str:
        return "Positive" if self.sentiment else "Negative"


def label_to_bool(label: float) -> bool:
    # any label above zero counts as the positive class
    return float(label) > 0
