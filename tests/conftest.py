"""Shared test fixtures for keyword-bayes tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def vocabulary() -> list[str]:
    """Three-word vocabulary used by the spam/ham scenario."""
    return ["buy", "cheap", "meeting"]


@pytest.fixture
def spam_ham_corpus() -> list[tuple[str, list[str]]]:
    """Minimal two-category training corpus."""
    return [
        ("spam", ["buy", "cheap", "cheap"]),
        ("ham", ["meeting", "buy"]),
    ]


@pytest.fixture
def mail_vocabulary() -> list[str]:
    """Larger vocabulary for end-to-end tests."""
    return [
        "buy", "cheap", "offer", "free", "winner", "click",
        "meeting", "agenda", "report", "schedule", "project", "review",
    ]


@pytest.fixture
def mail_corpus() -> list[tuple[str, list[str]]]:
    """Labeled corpus with distinct vocabulary per category, plus noise tokens."""
    return [
        ("spam", "buy cheap pills now cheap offer".split()),
        ("spam", "you are a winner click here for free offer".split()),
        ("spam", "free free free click to buy".split()),
        ("ham", "meeting agenda attached please review".split()),
        ("ham", "project report due before the meeting".split()),
        ("ham", "schedule review for the project".split()),
    ]


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def vocab_file(tmp_path: Path, mail_vocabulary: list[str]) -> Path:
    """Vocabulary file with a comment header and a blank line."""
    return _write(
        tmp_path / "vocab.txt",
        "# mail keywords\n" + "\n".join(mail_vocabulary[:6]) + "\n\n" + "\n".join(mail_vocabulary[6:]) + "\n",
    )


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Corpus directory with one subdirectory per category."""
    root = tmp_path / "corpus"
    _write(root / "spam" / "01.txt", "Buy cheap pills now! Cheap offer.")
    _write(root / "spam" / "02.txt", "You are a WINNER. Click here for a free offer.")
    _write(root / "spam" / "03.md", "Free, free, free: click to buy.")
    _write(root / "ham" / "01.txt", "Meeting agenda attached, please review.")
    _write(root / "ham" / "02.txt", "Project report due before the meeting.")
    _write(root / "ham" / "notes.csv", "offer,offer,offer")
    _write(root / "README.txt", "not a category")
    return root


@pytest.fixture
def held_out_dir(tmp_path: Path) -> Path:
    """Labeled test corpus in the same layout as ``corpus_dir``."""
    root = tmp_path / "held_out"
    _write(root / "spam" / "a.txt", "free cheap offer, free cheap")
    _write(root / "ham" / "b.txt", "review the project schedule")
    return root


@pytest.fixture
def message_file(tmp_path: Path) -> Path:
    """Single query document."""
    return _write(tmp_path / "message.txt", "Cheap cheap offer, click for free!")
