"""Per-category word counting over a labeled corpus."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import Category, CategoryWordCounts, LabeledDocument, WordCountMap

logger = logging.getLogger(__name__)


def collect_categories(corpus: Iterable[LabeledDocument]) -> list[Category]:
    """Return the distinct categories in a corpus.

    The list follows first appearance, but callers must not attach any
    meaning to the order.
    """
    return list(dict.fromkeys(category for category, _ in corpus))


def count_words(
    corpus: Iterable[LabeledDocument],
    template: WordCountMap,
) -> CategoryWordCounts:
    """Count vocabulary-word occurrences per category.

    Each distinct category gets its own copy of ``template``. Tokens that
    are not vocabulary keys are ignored. The template is not modified.

    Args:
        corpus: (category, document) pairs.
        template: Zeroed WordCountMap over the vocabulary.

    Returns:
        Mapping of category to its aggregated WordCountMap.
    """
    pairs = list(corpus)
    counts: CategoryWordCounts = {
        category: template.copy() for category in collect_categories(pairs)
    }

    ignored = 0
    for category, document in pairs:
        word_counts = counts[category]
        for token in document:
            if not word_counts.increment(token):
                ignored += 1

    logger.debug(
        "Counted %d documents across %d categories (%d out-of-vocabulary tokens ignored)",
        len(pairs),
        len(counts),
        ignored,
    )
    return counts
