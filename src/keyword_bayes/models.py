"""Data models for word counts, word probabilities, and category scores."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import NamedTuple

Category = str
Document = Sequence[str]
LabeledDocument = tuple[Category, Document]


class WordCountMap(Mapping[str, int]):
    """Word counts over a fixed vocabulary.

    The key set is established at construction and never changes afterwards:
    there is no way to insert or delete a word, only to increment the count
    of an existing one. Once :meth:`freeze` has been called the counts are
    read-only as well.

    Build zeroed maps with :func:`keyword_bayes.vocabulary.init_word_counts`
    rather than calling the constructor directly.
    """

    __slots__ = ("_counts", "_frozen")

    def __init__(self, counts: Mapping[str, int]) -> None:
        for word, count in counts.items():
            if count < 0:
                raise ValueError(f"Count for {word!r} must be non-negative, got {count}")
        self._counts: dict[str, int] = dict(counts)
        self._frozen = False

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"WordCountMap({self._counts!r})"

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def total(self) -> int:
        """Sum of all counts."""
        return sum(self._counts.values())

    def increment(self, word: str, by: int = 1) -> bool:
        """Add ``by`` to the count of ``word``.

        Returns:
            True if ``word`` is a vocabulary key and was counted, False if it
            is outside the vocabulary (the map is left untouched).

        Raises:
            RuntimeError: If the map has been frozen.
            ValueError: If ``by`` is negative.
        """
        if self._frozen:
            raise RuntimeError("WordCountMap is frozen and can no longer be updated.")
        if by < 0:
            raise ValueError(f"Increment must be non-negative, got {by}")
        if word not in self._counts:
            return False
        self._counts[word] += by
        return True

    def freeze(self) -> "WordCountMap":
        """Make the map read-only. Returns self for chaining."""
        self._frozen = True
        return self

    def copy(self) -> "WordCountMap":
        """Return an unfrozen copy with the same keys and counts."""
        return WordCountMap(self._counts)

    def to_dict(self) -> dict[str, int]:
        return dict(self._counts)


class WordProbabilityMap(Mapping[str, float]):
    """Immutable word-to-probability mapping derived from a WordCountMap.

    Values are strictly positive. They sum to 1 only when every word had a
    positive count; zero-count words carry the ``1 / total`` fallback, so the
    sum exceeds 1 otherwise.
    """

    __slots__ = ("_probs",)

    def __init__(self, probabilities: Mapping[str, float]) -> None:
        for word, p in probabilities.items():
            if not 0.0 < p <= 1.0:
                raise ValueError(f"Probability for {word!r} must be in (0, 1], got {p}")
        self._probs = MappingProxyType(dict(probabilities))

    def __getitem__(self, word: str) -> float:
        return self._probs[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._probs)

    def __len__(self) -> int:
        return len(self._probs)

    def __repr__(self) -> str:
        return f"WordProbabilityMap({dict(self._probs)!r})"

    @property
    def total(self) -> float:
        """Sum of all probabilities (1.0 only without fallback entries)."""
        return sum(self._probs.values())

    def to_dict(self) -> dict[str, float]:
        return dict(self._probs)


CategoryWordCounts = dict[Category, WordCountMap]
CategoryWordProbabilities = dict[Category, WordProbabilityMap]


class CategoryScore(NamedTuple):
    """Log-likelihood score of a document under one category's model."""

    category: Category
    score: float

    def to_dict(self) -> dict:
        return {"category": self.category, "score": round(self.score, 6)}
