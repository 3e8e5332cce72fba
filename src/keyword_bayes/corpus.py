"""Loading tokenized documents and labeled corpora from disk.

A corpus directory holds one subdirectory per category; every document
file inside a subdirectory is a training document for that category::

    corpus/
        spam/
            offer.txt
            winner.txt
        ham/
            standup.txt
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import Settings
from .errors import CorpusError
from .models import LabeledDocument
from .preprocessing import tokenize

logger = logging.getLogger(__name__)


def is_document(path: Path, settings: Optional[Settings] = None) -> bool:
    """Check whether a path is a file with a supported document suffix."""
    settings = settings or Settings()
    return path.is_file() and path.suffix.lower() in settings.extensions


def read_document(path: str | Path, settings: Optional[Settings] = None) -> list[str]:
    """Read a text file and tokenize it.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    settings = settings or Settings()
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    text = path.read_text(encoding=settings.encoding, errors="replace")
    return tokenize(text, lowercase=settings.lowercase)


def load_corpus(root: str | Path, settings: Optional[Settings] = None) -> list[LabeledDocument]:
    """Load a labeled corpus from a directory of category subdirectories.

    Documents are returned sorted by category, then file name. Category
    subdirectories without documents are skipped with a warning; files
    directly under ``root`` are ignored.

    Raises:
        CorpusError: If ``root`` is not a directory or holds no documents.
    """
    settings = settings or Settings()
    root = Path(root)
    if not root.is_dir():
        raise CorpusError(f"Corpus directory not found: {root}")

    corpus: list[LabeledDocument] = []
    for category_dir in sorted(p for p in root.iterdir() if p.is_dir()):
        files = sorted(p for p in category_dir.iterdir() if is_document(p, settings))
        if not files:
            logger.warning("Skipping category %r: no documents in %s", category_dir.name, category_dir)
            continue
        for file in files:
            corpus.append((category_dir.name, read_document(file, settings)))
        logger.debug("Loaded %d documents for category %r", len(files), category_dir.name)

    if not corpus:
        raise CorpusError(
            f"No documents found under {root} "
            f"(expected category subdirectories with {', '.join(settings.extensions)} files)"
        )

    logger.info("Loaded %d documents from %s", len(corpus), root)
    return corpus
