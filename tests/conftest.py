from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

POSITIVE = [
    "good great happy movie",
    "great good fun film",
    "happy good great story",
    "good fun great acting",
    "great happy good ending",
    "good great lovely music",
    "fun great good cast",
    "great good happy plot",
    "good lovely great scenes",
    "happy great good script",
]

NEGATIVE = [
    "bad awful boring movie",
    "awful bad dull film",
    "boring bad awful story",
    "bad dull awful acting",
    "awful boring bad ending",
    "bad awful terrible music",
    "dull awful bad cast",
    "awful bad boring plot",
    "bad terrible awful scenes",
    "boring awful bad script",
]


def write_tsv(path: Path, rows, header: bool = True) -> Path:
    lines = ["Sentiment\tSentimentText"] if header else []
    lines += [f"{label}\t{text}" for label, text in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def labelled_rows():
    rows = [(1, t) for t in POSITIVE] + [(0, t) for t in NEGATIVE]
    # interleave so the file is not sorted by label
    return [r for pair in zip(rows[:10], rows[10:]) for r in pair]


@pytest.fixture
def train_tsv(tmp_path, labelled_rows):
    return write_tsv(tmp_path / "data.tsv", labelled_rows)


@pytest.fixture
def test_tsv(tmp_path, labelled_rows):
    # same sentences: the small ensembles used in tests fit them exactly
    return write_tsv(tmp_path / "test.tsv", labelled_rows[:8])


@pytest.fixture
def make_tsv(tmp_path):
    def _make(name, rows, header=True):
        return write_tsv(tmp_path / name, rows, header=header)

    return _make
