"""Text tokenization for feeding raw text into the classifier.

The pipeline itself only sees token sequences; this module is the default
way to produce them from plain text.
"""

from __future__ import annotations

import re
import unicodedata

_WORD_RE = re.compile(r"[^\W\d_]+(?:['-][^\W\d_]+)*")


def normalize(text: str) -> str:
    """Apply NFKC normalization and unify curly apostrophes."""
    text = unicodedata.normalize("NFKC", text)
    return text.replace("’", "'").replace("‘", "'")


def tokenize(text: str, lowercase: bool = True) -> list[str]:
    """Extract word tokens from text.

    A token is a run of letters, optionally joined by single inner
    apostrophes or hyphens (``don't``, ``non-compete``). Digits and
    punctuation are dropped.

    Args:
        text: Raw text.
        lowercase: Fold tokens to lower case.

    Returns:
        Tokens in document order, duplicates kept.
    """
    tokens = [m.group() for m in _WORD_RE.finditer(normalize(text))]
    if lowercase:
        tokens = [t.lower() for t in tokens]
    return tokens
