"""Tests for text tokenization."""

from __future__ import annotations

from keyword_bayes.preprocessing import normalize, tokenize


class TestTokenize:
    def test_basic(self) -> None:
        assert tokenize("Buy cheap pills now!") == ["buy", "cheap", "pills", "now"]

    def test_keeps_duplicates_and_order(self) -> None:
        assert tokenize("cheap, cheap; CHEAP") == ["cheap", "cheap", "cheap"]

    def test_preserve_case(self) -> None:
        assert tokenize("Buy NOW", lowercase=False) == ["Buy", "NOW"]

    def test_inner_apostrophes_and_hyphens(self) -> None:
        assert tokenize("don't sign the non-compete") == ["don't", "sign", "the", "non-compete"]

    def test_trailing_punctuation_dropped(self) -> None:
        assert tokenize("'quoted' -dash- end-") == ["quoted", "dash", "end"]

    def test_digits_dropped(self) -> None:
        assert tokenize("win $1000 now 2day") == ["win", "now", "day"]

    def test_underscore_splits(self) -> None:
        assert tokenize("snake_case") == ["snake", "case"]

    def test_unicode_letters(self) -> None:
        assert tokenize("Réunion café") == ["réunion", "café"]

    def test_empty(self) -> None:
        assert tokenize("") == []
        assert tokenize("  \n\t 123 !!") == []


class TestNormalize:
    def test_curly_apostrophe(self) -> None:
        assert tokenize("don’t") == ["don't"]

    def test_nfkc(self) -> None:
        assert normalize("ﬁle") == "file"
