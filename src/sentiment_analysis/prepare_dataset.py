#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Load the sentiment TSV files (label<TAB>text) and normalize raw text.

This module provides:
- TextLoader: reads a tab-separated file into a (label, text) DataFrame
- normalize_text: the text normalizer applied before featurization
"""
from __future__ import annotations

import csv
import re
import unicodedata
from pathlib import Path
from typing import Iterator, Optional, Union

import pandas as pd

from sentiment_analysis.core.records import SentimentData

PUNCT_RE = re.compile(r"[^\w\s]", flags=re.UNICODE)
DIGIT_RE = re.compile(r"\d+")
SPACE_RE = re.compile(r"\s+")

LABEL_COL = "label"
TEXT_COL = "text"


def strip_diacritics(s: str) -> str:
    decomposed = unicodedata.normalize("NFKD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(
    text: str,
    lowercase: bool = True,
    keep_diacritics: bool = False,
    keep_punctuation: bool = True,
    keep_numbers: bool = True,
) -> str:
    s = "" if text is None else str(text)
    if keep_diacritics:
        s = unicodedata.normalize("NFKC", s)
    else:
        s = strip_diacritics(s)
    if lowercase:
        s = s.lower()
    if not keep_punctuation:
        s = PUNCT_RE.sub(" ", s)
    if not keep_numbers:
        s = DIGIT_RE.sub(" ", s)
    s = SPACE_RE.sub(" ", s).strip()
    return s


def _is_number(value: str) -> bool:
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return True


class TextLoader:
    """
    Reads a delimited text file whose column 0 is the numeric label and
    column 1 is the sentence.

    Args:
        path: Path to the .tsv file
        separator: Column separator (tab by default)
        has_header: True/False, or None to detect a header row from the
            first line (a header's label cell is not a number)
    """

    def __init__(
        self,
        path: Union[str, Path],
        separator: str = "\t",
        has_header: Optional[bool] = None,
    ):
        self.path = Path(path)
        self.separator = separator
        self.has_header = has_header

    def __repr__(self) -> str:
        return f"TextLoader(path={str(self.path)!r}, separator={self.separator!r})"

    def load(self) -> pd.DataFrame:
        if not self.path.exists():
            raise FileNotFoundError(f"Data file not found: {self.path}")

        raw = pd.read_csv(
            self.path,
            sep=self.separator,
            header=None,
            names=[LABEL_COL, TEXT_COL],
            index_col=False,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            encoding="utf-8",
            skip_blank_lines=True,
        )

        has_header = self.has_header
        if has_header is None:
            has_header = len(raw) > 0 and not _is_number(raw.iloc[0][LABEL_COL])
        if has_header:
            raw = raw.iloc[1:]

        if raw.empty:
            raise ValueError(f"No data rows in {self.path}")

        df = pd.DataFrame(
            {
                LABEL_COL: pd.to_numeric(raw[LABEL_COL].str.strip(), errors="coerce"),
                TEXT_COL: raw[TEXT_COL].fillna("").astype(str),
            }
        )
        before = len(df)
        df = df.dropna(subset=[LABEL_COL]).reset_index(drop=True)
        dropped = before - len(df)
        if dropped:
            print(f"[data] {self.path.name}: dropped {dropped} rows without a numeric label")
        if df.empty:
            raise ValueError(f"No labelled rows in {self.path}")
        df[LABEL_COL] = df[LABEL_COL].astype(float)
        return df

    def records(self) -> Iterator[SentimentData]:
        df = self.load()
        for label, text in zip(df[LABEL_COL], df[TEXT_COL]):
            yield SentimentData(sentiment_text=text, sentiment=float(label))
