# coding=utf-8

"""Bernoulli Naive Bayes text classification."""

__version__ = "0.1.0"

from .const import (
    DEFAULT_STOPWORDS,
    LABEL_NEGATIVE,
    LABEL_POSITIVE,
    LABELS,
    LEARNING_MAP,
    LEARNING_MLE,
    TIE_PRIOR,
    TIE_RAISE,
    NBParam,
)
from .errors import (
    AmbiguousDecisionError,
    DegenerateModelError,
    EmptyClassError,
    EmptyVocabularyError,
    NaiveBayesError,
    UnknownClassError,
)
from .model import ClassPriors, NBModel, ScoredDocument, WordStats
from .naive_bayes import MultivariateBernoulli, NaiveBayes
from .vocab import Vocab, remove_stopwords, tokenize

__all__ = [
    # Classifier
    "NaiveBayes",
    "MultivariateBernoulli",
    "NBParam",
    # Values
    "NBModel",
    "ClassPriors",
    "WordStats",
    "ScoredDocument",
    "Vocab",
    "tokenize",
    "remove_stopwords",
    # Constants
    "LEARNING_MLE",
    "LEARNING_MAP",
    "TIE_PRIOR",
    "TIE_RAISE",
    "LABEL_POSITIVE",
    "LABEL_NEGATIVE",
    "LABELS",
    "DEFAULT_STOPWORDS",
    # Errors
    "NaiveBayesError",
    "DegenerateModelError",
    "EmptyVocabularyError",
    "UnknownClassError",
    "EmptyClassError",
    "AmbiguousDecisionError",
]
