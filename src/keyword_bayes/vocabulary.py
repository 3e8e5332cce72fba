"""Vocabulary handling: validation, zeroed count maps, and file loading."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from .errors import CorpusError, DuplicateVocabularyEntryError
from .models import WordCountMap

logger = logging.getLogger(__name__)


def validate_vocabulary(vocabulary: Iterable[str]) -> list[str]:
    """Return the vocabulary as a list, rejecting repeated words.

    Raises:
        DuplicateVocabularyEntryError: On the first word seen twice.
    """
    seen: set[str] = set()
    words: list[str] = []
    for position, word in enumerate(vocabulary):
        if word in seen:
            raise DuplicateVocabularyEntryError(word, position)
        seen.add(word)
        words.append(word)
    return words


def init_word_counts(vocabulary: Sequence[str]) -> WordCountMap:
    """Build a WordCountMap with every vocabulary word mapped to 0.

    Keys keep vocabulary order.

    Raises:
        DuplicateVocabularyEntryError: If the vocabulary repeats a word.
    """
    words = validate_vocabulary(vocabulary)
    return WordCountMap(dict.fromkeys(words, 0))


def load_vocabulary(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a vocabulary file with one word per line.

    Surrounding whitespace is stripped; blank lines and lines starting
    with ``#`` are skipped.

    Raises:
        CorpusError: If the file does not exist.
        DuplicateVocabularyEntryError: If a word is listed twice.
    """
    path = Path(path)
    if not path.is_file():
        raise CorpusError(f"Vocabulary file not found: {path}")

    lines = path.read_text(encoding=encoding).splitlines()
    words = [
        line.strip()
        for line in lines
        if line.strip() and not line.lstrip().startswith("#")
    ]
    words = validate_vocabulary(words)
    logger.debug("Loaded %d vocabulary words from %s", len(words), path)
    return words
