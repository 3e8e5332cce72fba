"""Multinomial Naive Bayes classification over a fixed keyword vocabulary.

Ties the pipeline stages together:

- vocabulary initialization (:mod:`keyword_bayes.vocabulary`)
- per-category word counting (:mod:`keyword_bayes.training`)
- count-to-probability conversion (:mod:`keyword_bayes.estimation`)
- base-10 log-likelihood scoring (:mod:`keyword_bayes.scoring`)

The model is fit once and reused for every category. Scores are unnormalized
log-likelihoods with no class prior: higher (less negative) means the
document is more likely under that category's word distribution.

Also provides evaluation metrics and a stateful :class:`NaiveBayesClassifier`
wrapper with a train/predict interface.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

from .errors import UnknownCategoryError
from .estimation import estimate_probabilities
from .models import (
    Category,
    CategoryScore,
    CategoryWordCounts,
    CategoryWordProbabilities,
    Document,
    LabeledDocument,
    WordProbabilityMap,
)
from .scoring import log_likelihood
from .training import count_words
from .vocabulary import init_word_counts, validate_vocabulary

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Functional API
# ---------------------------------------------------------------------------

def train(
    vocabulary: Sequence[str],
    corpus: Iterable[LabeledDocument],
) -> CategoryWordCounts:
    """Count vocabulary words per category without converting to probabilities."""
    return count_words(corpus, init_word_counts(vocabulary))


def fit(
    vocabulary: Sequence[str],
    corpus: Iterable[LabeledDocument],
) -> CategoryWordProbabilities:
    """Fit per-category word probabilities from a labeled corpus.

    Args:
        vocabulary: Distinct words the model tracks.
        corpus: (category, tokenized document) pairs.

    Returns:
        Mapping of each distinct training category to its word probabilities.
        An empty corpus yields an empty mapping.

    Raises:
        DuplicateVocabularyEntryError: If the vocabulary repeats a word.
        EmptyCategoryModelError: If a category has no vocabulary-word
            occurrences.
    """
    model = estimate_probabilities(train(vocabulary, corpus))
    logger.info("Fitted %d categories over %d vocabulary words", len(model), len(vocabulary))
    return model


def score_category(
    vocabulary: Sequence[str],
    model: CategoryWordProbabilities,
    document: Document,
    category: Category,
) -> float:
    """Log-likelihood of ``document`` under a single category.

    Raises:
        DuplicateVocabularyEntryError: If the vocabulary repeats a word.
        UnknownCategoryError: If ``category`` is not in the model.
    """
    words = validate_vocabulary(vocabulary)
    return log_likelihood(document, words, _category_model(model, category))


def _category_model(model: CategoryWordProbabilities, category: Category) -> WordProbabilityMap:
    if category not in model:
        raise UnknownCategoryError(category, list(model))
    return model[category]


def classify(
    vocabulary: Sequence[str],
    model: CategoryWordProbabilities,
    document: Document,
    categories: Optional[Iterable[Category]] = None,
) -> list[CategoryScore]:
    """Score a document against every fitted category.

    Args:
        vocabulary: The vocabulary the model was fit with.
        model: Output of :func:`fit`.
        document: Tokenized query document.
        categories: Restrict scoring to these categories (default: all).

    Returns:
        One CategoryScore per distinct category, best first. Ties keep the
        model's category order.

    Raises:
        DuplicateVocabularyEntryError: If the vocabulary repeats a word.
        UnknownCategoryError: If a requested category is not in the model.
    """
    words = validate_vocabulary(vocabulary)
    selected = list(model) if categories is None else list(dict.fromkeys(categories))

    scores = [
        CategoryScore(category, log_likelihood(document, words, _category_model(model, category)))
        for category in selected
    ]
    scores.sort(key=lambda s: s.score, reverse=True)
    return scores


def most_informative_words(
    model: CategoryWordProbabilities,
    category: Category,
    top_n: int = 20,
) -> list[tuple[str, float]]:
    """Return the words most indicative of ``category``.

    Ranks words by ``log10 P(w|category)`` minus the mean ``log10 P(w|other)``
    over the remaining categories. With a single category the words are
    ranked by their own log probability.

    Raises:
        UnknownCategoryError: If ``category`` is not in the model.
    """
    target = _category_model(model, category)
    others = [model[c] for c in model if c != category]

    ratios: list[tuple[str, float]] = []
    for word, p in target.items():
        target_lp = math.log10(p)
        if others:
            other_lp = sum(math.log10(o[word]) for o in others) / len(others)
            ratios.append((word, round(target_lp - other_lp, 4)))
        else:
            ratios.append((word, round(target_lp, 4)))

    ratios.sort(key=lambda x: x[1], reverse=True)
    return ratios[:top_n]


# ---------------------------------------------------------------------------
# Evaluation Metrics
# ---------------------------------------------------------------------------

@dataclass
class ClassificationMetrics:
    """Evaluation metrics for a set of predictions.

    Attributes:
        accuracy: Fraction of correct predictions.
        per_class: Per-category precision, recall and F1.
        macro_f1: Unweighted mean F1 across categories.
        confusion_matrix: ``{true: {predicted: count}}``.
        support: Number of true examples per category (0 for categories
            that only appear as predictions).
    """

    accuracy: float = 0.0
    per_class: dict[str, dict[str, float]] = field(default_factory=dict)
    macro_f1: float = 0.0
    confusion_matrix: dict[str, dict[str, int]] = field(default_factory=dict)
    support: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "accuracy": round(self.accuracy, 4),
            "macro_f1": round(self.macro_f1, 4),
            "per_class": {
                cls: {k: round(v, 4) for k, v in metrics.items()}
                for cls, metrics in self.per_class.items()
            },
            "confusion_matrix": self.confusion_matrix,
            "support": self.support,
        }


def compute_metrics(
    y_true: Sequence[str],
    y_pred: Sequence[str],
) -> ClassificationMetrics:
    """Compute accuracy, per-category scores and a confusion matrix.

    Raises:
        ValueError: If the label sequences differ in length.
    """
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")

    pairs = Counter(zip(y_true, y_pred))
    labels = sorted(set(y_true) | set(y_pred))
    matrix = {
        actual: {predicted: pairs[actual, predicted] for predicted in labels}
        for actual in labels
    }

    # Row sums are true-label support, column sums are prediction volume.
    support = {label: sum(row.values()) for label, row in matrix.items()}
    predicted_totals = {
        label: sum(matrix[actual][label] for actual in labels) for label in labels
    }
    hits = {label: matrix[label][label] for label in labels}

    per_class: dict[str, dict[str, float]] = {}
    for label in labels:
        precision = hits[label] / predicted_totals[label] if predicted_totals[label] else 0.0
        recall = hits[label] / support[label] if support[label] else 0.0
        denom = precision + recall
        per_class[label] = {
            "precision": precision,
            "recall": recall,
            "f1": 2 * precision * recall / denom if denom else 0.0,
        }

    return ClassificationMetrics(
        accuracy=sum(hits.values()) / len(y_true) if y_true else 0.0,
        per_class=per_class,
        macro_f1=sum(m["f1"] for m in per_class.values()) / len(labels) if labels else 0.0,
        confusion_matrix=matrix,
        support=support,
    )


# ---------------------------------------------------------------------------
# Classification Pipeline (High-Level API)
# ---------------------------------------------------------------------------

class NaiveBayesClassifier:
    """Stateful train/predict wrapper around :func:`fit` and :func:`classify`.

    Example::

        nb = NaiveBayesClassifier(["buy", "cheap", "meeting"])
        nb.fit([("spam", ["buy", "cheap", "cheap"]), ("ham", ["meeting", "buy"])])

        nb.predict(["cheap", "cheap"])   # "spam"
        nb.classify(["cheap", "cheap"])  # [CategoryScore("spam", ...), ...]

    Args:
        vocabulary: Distinct words the model tracks.

    Raises:
        DuplicateVocabularyEntryError: If the vocabulary repeats a word.
    """

    def __init__(self, vocabulary: Sequence[str]) -> None:
        self._vocabulary = validate_vocabulary(vocabulary)
        self._counts: Optional[CategoryWordCounts] = None
        self._model: Optional[CategoryWordProbabilities] = None

    @property
    def vocabulary(self) -> list[str]:
        return list(self._vocabulary)

    @property
    def is_fitted(self) -> bool:
        """Whether :meth:`fit` has completed."""
        return self._model is not None

    @property
    def categories(self) -> list[Category]:
        """Fitted categories (empty before fitting)."""
        return list(self._model) if self._model is not None else []

    @property
    def word_counts(self) -> CategoryWordCounts:
        return dict(self._require_counts())

    @property
    def probabilities(self) -> CategoryWordProbabilities:
        return dict(self._require_model())

    def fit(self, corpus: Iterable[LabeledDocument]) -> "NaiveBayesClassifier":
        """Count and fit the model. Returns self for chaining.

        Raises:
            EmptyCategoryModelError: If a category has no vocabulary-word
                occurrences.
        """
        counts = train(self._vocabulary, corpus)
        self._model = estimate_probabilities(counts)
        self._counts = counts
        logger.info(
            "Fitted %d categories over %d vocabulary words",
            len(self._model),
            len(self._vocabulary),
        )
        return self

    def classify(
        self,
        document: Document,
        categories: Optional[Iterable[Category]] = None,
    ) -> list[CategoryScore]:
        """Ranked category scores for one document."""
        return classify(self._vocabulary, self._require_model(), document, categories)

    def classify_batch(self, documents: Iterable[Document]) -> list[list[CategoryScore]]:
        model = self._require_model()
        return [classify(self._vocabulary, model, doc) for doc in documents]

    def predict(self, document: Document) -> Category:
        """Best-scoring category for one document.

        Raises:
            RuntimeError: If the model is not fitted or has no categories.
        """
        ranked = self.classify(document)
        if not ranked:
            raise RuntimeError("Model has no categories to predict from.")
        return ranked[0].category

    def score(self, document: Document, category: Category) -> float:
        """Log-likelihood of ``document`` under ``category``."""
        return score_category(self._vocabulary, self._require_model(), document, category)

    def evaluate(self, corpus: Iterable[LabeledDocument]) -> ClassificationMetrics:
        """Predict every labeled document and compare against its label."""
        pairs = list(corpus)
        y_true = [category for category, _ in pairs]
        y_pred = [self.predict(document) for _, document in pairs]
        return compute_metrics(y_true, y_pred)

    def most_informative_words(
        self,
        category: Category,
        top_n: int = 20,
    ) -> list[tuple[str, float]]:
        return most_informative_words(self._require_model(), category, top_n)

    def _require_model(self) -> CategoryWordProbabilities:
        if self._model is None:
            raise RuntimeError("Classifier has not been fitted. Call fit() first.")
        return self._model

    def _require_counts(self) -> CategoryWordCounts:
        if self._counts is None:
            raise RuntimeError("Classifier has not been fitted. Call fit() first.")
        return self._counts
