"""Tests for per-category word counting."""

from __future__ import annotations

from keyword_bayes.training import collect_categories, count_words
from keyword_bayes.vocabulary import init_word_counts


class TestCollectCategories:
    def test_distinct(self) -> None:
        corpus = [("a", []), ("b", []), ("a", []), ("c", [])]
        assert sorted(collect_categories(corpus)) == ["a", "b", "c"]

    def test_empty(self) -> None:
        assert collect_categories([]) == []


class TestCountWords:
    def test_spam_ham_counts(self, vocabulary, spam_ham_corpus) -> None:
        counts = count_words(spam_ham_corpus, init_word_counts(vocabulary))
        assert counts["spam"].to_dict() == {"buy": 1, "cheap": 2, "meeting": 0}
        assert counts["ham"].to_dict() == {"buy": 1, "cheap": 0, "meeting": 1}

    def test_one_entry_per_category(self, vocabulary) -> None:
        corpus = [("spam", ["buy"]), ("spam", ["cheap"]), ("ham", ["meeting"])]
        counts = count_words(corpus, init_word_counts(vocabulary))
        assert set(counts) == {"spam", "ham"}
        assert counts["spam"].to_dict() == {"buy": 1, "cheap": 1, "meeting": 0}

    def test_out_of_vocabulary_tokens_ignored(self, vocabulary) -> None:
        corpus = [("spam", ["free", "buy", "now", "buy", "!!!"])]
        counts = count_words(corpus, init_word_counts(vocabulary))
        assert counts["spam"].to_dict() == {"buy": 2, "cheap": 0, "meeting": 0}
        assert "free" not in counts["spam"]

    def test_total_equals_vocabulary_occurrences(self, mail_vocabulary, mail_corpus) -> None:
        counts = count_words(mail_corpus, init_word_counts(mail_vocabulary))
        vocab = set(mail_vocabulary)
        for category, word_counts in counts.items():
            expected = sum(
                1
                for label, doc in mail_corpus
                if label == category
                for token in doc
                if token in vocab
            )
            assert word_counts.total == expected

    def test_count_matches_occurrences_per_word(self, mail_vocabulary, mail_corpus) -> None:
        counts = count_words(mail_corpus, init_word_counts(mail_vocabulary))
        for word in mail_vocabulary:
            for category in counts:
                expected = sum(doc.count(word) for label, doc in mail_corpus if label == category)
                assert counts[category][word] == expected

    def test_template_untouched(self, vocabulary, spam_ham_corpus) -> None:
        template = init_word_counts(vocabulary)
        count_words(spam_ham_corpus, template)
        assert template.total == 0
        assert template.frozen is False

    def test_categories_have_separate_maps(self, vocabulary, spam_ham_corpus) -> None:
        counts = count_words(spam_ham_corpus, init_word_counts(vocabulary))
        assert counts["spam"] is not counts["ham"]

    def test_same_key_set_everywhere(self, mail_vocabulary, mail_corpus) -> None:
        counts = count_words(mail_corpus, init_word_counts(mail_vocabulary))
        for word_counts in counts.values():
            assert list(word_counts) == mail_vocabulary

    def test_empty_corpus(self, vocabulary) -> None:
        assert count_words([], init_word_counts(vocabulary)) == {}

    def test_accepts_generator(self, vocabulary, spam_ham_corpus) -> None:
        counts = count_words((pair for pair in spam_ham_corpus), init_word_counts(vocabulary))
        assert counts["spam"]["cheap"] == 2

    def test_order_independent(self, mail_vocabulary, mail_corpus) -> None:
        forward = count_words(mail_corpus, init_word_counts(mail_vocabulary))
        backward = count_words(list(reversed(mail_corpus)), init_word_counts(mail_vocabulary))
        assert {c: m.to_dict() for c, m in forward.items()} == {
            c: m.to_dict() for c, m in backward.items()
        }
