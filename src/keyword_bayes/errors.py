"""Exceptions raised by the keyword-bayes pipeline.

Every error derives from :class:`KeywordBayesError` so callers can catch
the whole family at once, while also subclassing the builtin exception a
caller would naturally expect (``ValueError`` for bad input, ``KeyError``
for a missing category).
"""

from __future__ import annotations


class KeywordBayesError(Exception):
    """Base class for all keyword-bayes errors."""


class DuplicateVocabularyEntryError(KeywordBayesError, ValueError):
    """The vocabulary lists the same word more than once."""

    def __init__(self, word: str, position: int | None = None) -> None:
        self.word = word
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Duplicate vocabulary entry {word!r}{where}")


class EmptyCategoryModelError(KeywordBayesError, ValueError):
    """A category has no vocabulary-word occurrences and cannot be fit."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(
            f"Category {category!r} has no vocabulary-word occurrences; "
            "cannot derive word probabilities"
        )


class UnknownCategoryError(KeywordBayesError, KeyError):
    """A category was requested that the fitted model does not contain."""

    def __init__(self, category: str, known: list[str] | None = None) -> None:
        self.category = category
        self.known = list(known or [])
        super().__init__(category)

    def __str__(self) -> str:
        return f"Unknown category: {self.category!r}. Known: {self.known}"


class CorpusError(KeywordBayesError):
    """A vocabulary file or corpus directory on disk is unusable."""
