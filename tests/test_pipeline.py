"""Tests for corpus training and the load-or-train start-up workflow."""

from __future__ import annotations

from pathlib import Path

import pytest

from language_guesser.exceptions import CorpusError, ModelPersistenceError
from language_guesser.pipeline import load_or_train, train_from_corpus


class TestTrainFromCorpus:
    """Tests for training on a corpus directory."""

    def test_trains_every_label(self, corpus_dir: Path):
        classifier = train_from_corpus(corpus_dir)
        assert classifier.labels == ["en", "es", "fr"]
        assert classifier.model.num_examples == 12

    def test_matches_in_memory_training(self, corpus_dir: Path, corpus):
        from_dir = train_from_corpus(corpus_dir)
        assert from_dir.model == _train(*corpus).model

    def test_missing_corpus(self, tmp_path: Path):
        with pytest.raises(CorpusError):
            train_from_corpus(tmp_path / "missing")


class TestLoadOrTrain:
    """Tests for the application start-up behaviour."""

    def test_trains_and_saves_when_missing(self, corpus_dir: Path, tmp_path: Path):
        model_path = tmp_path / "out" / "model.json"
        classifier = load_or_train(model_path, corpus_dir)
        assert model_path.exists()
        assert classifier.predict("Merci beaucoup") == "fr"

    def test_loads_existing_model_without_corpus(self, hello_classifier, tmp_path: Path):
        model_path = tmp_path / "model.json"
        hello_classifier.save(model_path)
        classifier = load_or_train(model_path, tmp_path / "no-corpus-here")
        assert classifier.model == hello_classifier.model

    def test_corrupt_model_is_not_retrained(self, corpus_dir: Path, tmp_path: Path):
        model_path = tmp_path / "model.json"
        model_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ModelPersistenceError):
            load_or_train(model_path, corpus_dir)

    def test_missing_model_and_corpus(self, tmp_path: Path):
        with pytest.raises(CorpusError):
            load_or_train(tmp_path / "model.json", tmp_path / "missing")
        assert not (tmp_path / "model.json").exists()


def _train(examples, labels):
    from language_guesser.classifier import NaiveBayesClassifier

    classifier = NaiveBayesClassifier()
    classifier.train(examples, labels)
    return classifier
