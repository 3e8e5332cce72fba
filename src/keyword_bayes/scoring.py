"""Base-10 log-likelihood of a document under one category's model."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

from .models import Document, WordProbabilityMap


def log_likelihood(
    document: Document,
    vocabulary: Iterable[str],
    probabilities: WordProbabilityMap,
) -> float:
    """Sum ``count(w) * log10(P(w))`` over the vocabulary words ``w``.

    Tokens outside the vocabulary contribute nothing. The result is never
    positive since every probability is at most 1.

    Raises:
        KeyError: If a vocabulary word that occurs in the document is
            missing from ``probabilities``.
    """
    occurrences = Counter(document)
    score = 0.0
    for word in vocabulary:
        n = occurrences.get(word, 0)
        if n:
            score += n * math.log10(probabilities[word])
    return score
