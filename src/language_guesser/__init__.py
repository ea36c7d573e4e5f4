"""Language Guesser -- Naive Bayes identification of a text's language."""

__version__ = "0.1.0"

from .classifier import ClassificationResult, NaiveBayesClassifier, softmax
from .codec import load_from_bytes, load_from_file, save_to_bytes, save_to_file
from .config import Settings
from .corpus import Corpus, load_corpus
from .evaluation import (
    ClassificationMetrics,
    compute_metrics,
    cross_validate,
    stratified_k_fold,
)
from .exceptions import (
    CorpusError,
    InferenceError,
    LanguageGuesserError,
    ModelPersistenceError,
    TrainingInputError,
)
from .languages import Language, LanguageScore, display_name, rank_probabilities
from .model import LanguageModel
from .pipeline import load_or_train, train_from_corpus
from .preprocessing import normalize_word, normalize_words, tokenize

__all__ = [
    # Core
    "NaiveBayesClassifier",
    "ClassificationResult",
    "LanguageModel",
    "softmax",
    # Preprocessing
    "tokenize",
    "normalize_word",
    "normalize_words",
    # Persistence
    "save_to_bytes",
    "load_from_bytes",
    "save_to_file",
    "load_from_file",
    # Corpus and workflows
    "Corpus",
    "load_corpus",
    "train_from_corpus",
    "load_or_train",
    "Settings",
    # Presentation
    "Language",
    "LanguageScore",
    "display_name",
    "rank_probabilities",
    # Evaluation
    "ClassificationMetrics",
    "compute_metrics",
    "cross_validate",
    "stratified_k_fold",
    # Errors
    "LanguageGuesserError",
    "TrainingInputError",
    "InferenceError",
    "ModelPersistenceError",
    "CorpusError",
]
