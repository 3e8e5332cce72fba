"""keyword-bayes -- multinomial Naive Bayes over a fixed keyword vocabulary."""

__version__ = "0.1.0"

from .classifier import (
    ClassificationMetrics,
    NaiveBayesClassifier,
    classify,
    compute_metrics,
    fit,
    most_informative_words,
    score_category,
    train,
)
from .config import Settings
from .corpus import load_corpus, read_document
from .errors import (
    CorpusError,
    DuplicateVocabularyEntryError,
    EmptyCategoryModelError,
    KeywordBayesError,
    UnknownCategoryError,
)
from .estimation import estimate_probabilities
from .models import (
    CategoryScore,
    CategoryWordCounts,
    CategoryWordProbabilities,
    WordCountMap,
    WordProbabilityMap,
)
from .preprocessing import tokenize
from .scoring import log_likelihood
from .training import collect_categories, count_words
from .vocabulary import init_word_counts, load_vocabulary

__all__ = [
    # Core pipeline
    "fit",
    "classify",
    "train",
    "score_category",
    "init_word_counts",
    "count_words",
    "collect_categories",
    "estimate_probabilities",
    "log_likelihood",
    # Classifier
    "NaiveBayesClassifier",
    "ClassificationMetrics",
    "compute_metrics",
    "most_informative_words",
    # Models
    "WordCountMap",
    "WordProbabilityMap",
    "CategoryWordCounts",
    "CategoryWordProbabilities",
    "CategoryScore",
    # Errors
    "KeywordBayesError",
    "DuplicateVocabularyEntryError",
    "EmptyCategoryModelError",
    "UnknownCategoryError",
    "CorpusError",
    # Input helpers
    "Settings",
    "tokenize",
    "load_vocabulary",
    "load_corpus",
    "read_document",
]
