"""Tests for the LanguageModel statistics store."""

from __future__ import annotations

import pytest

from language_guesser.model import LanguageModel


@pytest.fixture
def model() -> LanguageModel:
    m = LanguageModel()
    m.add_example(["hello", "world", "hello"], "en")
    m.add_example(["bonjour", "monde"], "fr")
    m.add_example(["hello"], "fr")
    return m


class TestAddExample:
    """Tests for recording training examples."""

    def test_starts_empty(self):
        m = LanguageModel()
        assert m.is_empty
        assert m.labels == []
        assert m.num_examples == 0
        assert m.vocabulary == set()

    def test_vocabulary(self, model):
        assert model.vocabulary == {"hello", "world", "bonjour", "monde"}

    def test_class_counts(self, model):
        assert model.class_counts == {"en": 1, "fr": 2}
        assert model.num_examples == 3

    def test_repeated_tokens_count_every_time(self, model):
        assert model.word_counts["hello"] == 3
        assert model.word_class_counts["hello"] == {"en": 2, "fr": 1}

    def test_word_counts_match_per_label_sums(self, model):
        for token, count in model.word_counts.items():
            assert sum(model.word_class_counts[token].values()) == count

    def test_example_without_tokens_still_counts(self):
        m = LanguageModel()
        m.add_example([], "en")
        assert m.class_counts == {"en": 1}
        assert m.vocabulary == set()
        assert m.word_counts == {}

    def test_labels_are_sorted(self):
        m = LanguageModel()
        for label in ("pt", "ca", "fr"):
            m.add_example(["x"], label)
        assert m.labels == ["ca", "fr", "pt"]

    def test_accepts_generator(self):
        m = LanguageModel()
        m.add_example((t for t in ["a", "b"]), "en")
        assert m.word_counts == {"a": 1, "b": 1}


class TestCopy:
    """Tests for deep copies."""

    def test_copy_is_equal(self, model):
        assert model.copy() == model

    def test_copy_is_independent(self, model):
        clone = model.copy()
        clone.add_example(["hello", "extra"], "en")
        assert "extra" not in model.vocabulary
        assert model.word_class_counts["hello"] == {"en": 2, "fr": 1}
        assert model.class_counts == {"en": 1, "fr": 2}


class TestValidate:
    """Tests for consistency checks."""

    def test_trained_model_is_valid(self, model):
        model.validate()

    def test_empty_model_is_valid(self):
        LanguageModel().validate()

    def test_token_missing_from_vocabulary(self, model):
        model.vocabulary.discard("world")
        with pytest.raises(ValueError, match="missing from vocabulary"):
            model.validate()

    def test_mismatched_totals(self, model):
        model.word_counts["hello"] = 10
        with pytest.raises(ValueError, match="sum to"):
            model.validate()

    def test_unknown_label(self, model):
        model.word_class_counts["world"] = {"de": 1}
        with pytest.raises(ValueError, match="unknown labels"):
            model.validate()

    def test_per_label_counts_without_total(self, model):
        model.word_class_counts["ghost"] = {"en": 1}
        model.vocabulary.add("ghost")
        with pytest.raises(ValueError, match="no total"):
            model.validate()

    def test_non_positive_class_count(self, model):
        model.class_counts["en"] = 0
        with pytest.raises(ValueError, match="non-positive"):
            model.validate()
