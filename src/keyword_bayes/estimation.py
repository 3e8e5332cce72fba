"""Conversion of per-category word counts into word probabilities.

For a category whose counts total ``T``, a word seen ``n > 0`` times gets
probability ``n / T``; a word never seen gets ``1 / T`` instead of zero.
That fallback keeps every log-likelihood term finite, at the price of the
distribution summing to more than 1 whenever a zero-count word exists.
There is no other smoothing.
"""

from __future__ import annotations

import logging

from .errors import EmptyCategoryModelError
from .models import (
    CategoryWordCounts,
    CategoryWordProbabilities,
    WordCountMap,
    WordProbabilityMap,
)

logger = logging.getLogger(__name__)


def word_probabilities(counts: WordCountMap, category: str = "") -> WordProbabilityMap:
    """Derive one category's WordProbabilityMap and freeze its counts.

    Raises:
        EmptyCategoryModelError: If the counts sum to zero.
    """
    total = counts.total
    if total <= 0:
        raise EmptyCategoryModelError(category)

    counts.freeze()
    fallback = 1 / total
    return WordProbabilityMap({
        word: (n / total if n > 0 else fallback)
        for word, n in counts.items()
    })


def estimate_probabilities(counts: CategoryWordCounts) -> CategoryWordProbabilities:
    """Convert every category's word counts into probabilities.

    All categories are checked before any count map is frozen, so a
    failure leaves every input map as it was.

    Raises:
        EmptyCategoryModelError: If any category has no vocabulary-word
            occurrences.
    """
    for category, word_counts in counts.items():
        if word_counts.total <= 0:
            raise EmptyCategoryModelError(category)

    probabilities: CategoryWordProbabilities = {}
    for category, word_counts in counts.items():
        probabilities[category] = word_probabilities(word_counts, category)
        zero = sum(1 for n in word_counts.values() if n == 0)
        if zero:
            logger.debug(
                "Category %r: %d of %d words use the 1/%d fallback",
                category,
                zero,
                len(word_counts),
                word_counts.total,
            )
    return probabilities
