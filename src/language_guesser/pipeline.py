"""Training and start-up workflows built from the corpus, classifier and codec."""

from __future__ import annotations

import logging
from pathlib import Path

from .classifier import NaiveBayesClassifier
from .corpus import DEFAULT_EXTENSION, load_corpus

logger = logging.getLogger(__name__)


def train_from_corpus(
    corpus_dir: str | Path,
    extension: str = DEFAULT_EXTENSION,
) -> NaiveBayesClassifier:
    """Train a new classifier on every file of a corpus directory.

    Raises:
        CorpusError: If the corpus cannot be loaded.
    """
    corpus = load_corpus(corpus_dir, extension=extension)
    classifier = NaiveBayesClassifier()
    classifier.train(corpus.examples, corpus.labels)
    logger.info(
        "Trained on %d examples: %d labels, %d words",
        len(corpus),
        len(classifier.labels),
        len(classifier.model.vocabulary),
    )
    return classifier


def load_or_train(
    model_path: str | Path,
    corpus_dir: str | Path,
    extension: str = DEFAULT_EXTENSION,
) -> NaiveBayesClassifier:
    """Load the model at ``model_path``, training and saving it first if absent.

    Raises:
        CorpusError: If training is needed and the corpus cannot be loaded.
        ModelPersistenceError: If the model cannot be saved or loaded.
    """
    model_path = Path(model_path)
    if not model_path.exists():
        logger.info("No model at %s, training from %s", model_path, corpus_dir)
        train_from_corpus(corpus_dir, extension=extension).save(model_path)
    return NaiveBayesClassifier.load(model_path)
