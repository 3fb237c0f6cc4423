"""Shared test fixtures for bernoulli-nb tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from bernoulli_nb import MultivariateBernoulli, NBParam

TRAIN = [
    ("this book is awesome", "positive"),
    ("harry potter books suck", "negative"),
    ("these pretzles are making me thirsty", "negative"),
    ("they choppin my fingers off Ira", "negative"),
    ("supreme beings of leisure rock", "positive"),
    ("cheeto jesus is a tyrant", "negative"),
]

STOPWORDS = frozenset(["a", "this", "me", "are", "of", "is", "my", "these", "they"])


@pytest.fixture
def train() -> list[tuple[str, str]]:
    """The six-document positive/negative training set."""
    return list(TRAIN)


@pytest.fixture
def stopwords() -> frozenset[str]:
    return STOPWORDS


@pytest.fixture
def nb() -> MultivariateBernoulli:
    """Unsmoothed (MLE) classifier."""
    return MultivariateBernoulli(NBParam())


@pytest.fixture
def nb_map() -> MultivariateBernoulli:
    """Add-one smoothed (MAP, alpha=2) classifier."""
    return MultivariateBernoulli(NBParam(learning="MAP", alpha=2))


@pytest.fixture
def model(nb, train, stopwords):
    return nb.fit(train, stopwords)


@pytest.fixture
def smoothed_model(nb_map, train, stopwords):
    return nb_map.fit(train, stopwords)


@pytest.fixture
def train_file(tmp_path: Path, train) -> Path:
    """Training set written in the command-line 'label<TAB>document' format."""
    file = tmp_path / "train.tsv"
    lines = ["# label\tdocument", ""]
    lines += [f"{label}\t{doc}" for doc, label in train]
    file.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return file


@pytest.fixture
def stopwords_file(tmp_path: Path, stopwords) -> Path:
    file = tmp_path / "stopwords.txt"
    file.write_text(" ".join(sorted(stopwords)), encoding="utf-8")
    return file
