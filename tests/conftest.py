"""Shared test fixtures for language-guesser tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from language_guesser.classifier import NaiveBayesClassifier

# Each language has distinctive vocabulary to make classification feasible
ENGLISH = [
    "Hello, how are you today?",
    "The weather is very nice this morning.",
    "Where is the nearest train station?",
    "Thank you very much for your help.",
]

FRENCH = [
    "Bonjour, comment allez-vous aujourd'hui ?",
    "Le temps est beau ce matin.",
    "Où est la gare la plus proche ?",
    "Merci beaucoup pour votre aide.",
]

SPANISH = [
    "Hola, ¿cómo estás hoy?",
    "El tiempo es muy bueno esta mañana.",
    "¿Dónde está la estación de tren?",
    "Muchas gracias por tu ayuda.",
]


@pytest.fixture
def corpus() -> tuple[list[str], list[str]]:
    """Small three-language corpus as parallel example / label lists."""
    examples = ENGLISH + FRENCH + SPANISH
    labels = ["en"] * len(ENGLISH) + ["fr"] * len(FRENCH) + ["es"] * len(SPANISH)
    return examples, labels


@pytest.fixture
def hello_classifier() -> NaiveBayesClassifier:
    """Classifier trained on one English and one French example."""
    classifier = NaiveBayesClassifier()
    classifier.train(["hello world", "bonjour monde"], ["en", "fr"])
    return classifier


@pytest.fixture
def trained_classifier(corpus) -> NaiveBayesClassifier:
    """Classifier trained on the three-language corpus."""
    examples, labels = corpus
    classifier = NaiveBayesClassifier()
    classifier.train(examples, labels)
    return classifier


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Directory with one ``.dic`` file per language."""
    directory = tmp_path / "corpus"
    directory.mkdir()
    for label, lines in (("en", ENGLISH), ("fr", FRENCH), ("es", SPANISH)):
        (directory / f"{label}.dic").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return directory
