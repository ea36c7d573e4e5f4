"""Tests for label display names and result ranking."""

from __future__ import annotations

import pytest

from language_guesser.classifier import ClassificationResult
from language_guesser.languages import (
    UNKNOWN_LANGUAGE,
    Language,
    display_name,
    rank_probabilities,
)


class TestDisplayName:
    """Tests for the fixed code-to-name table."""

    @pytest.mark.parametrize("code,name", [
        ("ca", "Catalan"),
        ("da", "Danish"),
        ("de", "German"),
        ("en", "English"),
        ("es", "Spanish"),
        ("fr", "French"),
        ("hr", "Croatian"),
        ("hu", "Hungarian"),
        ("it", "Italian"),
        ("pt", "Portuguese"),
    ])
    def test_known_codes(self, code, name):
        assert display_name(code) == name

    @pytest.mark.parametrize("code", ["xx", "", "EN", "english", "nl"])
    def test_unknown_codes(self, code):
        assert display_name(code) == UNKNOWN_LANGUAGE == "Unknown"

    def test_enum_covers_table(self):
        assert len(Language) == 10
        assert Language.ENGLISH.value == "en"
        assert Language("pt").display_name == "Portuguese"


class TestRankProbabilities:
    """Tests for display rows."""

    def test_flags_argmax(self):
        result = ClassificationResult(["en", "fr", "xx"], [0.2, 0.7, 0.1])
        rows = rank_probabilities(result)
        assert [r.code for r in rows] == ["en", "fr", "xx"]
        assert [r.name for r in rows] == ["English", "French", "Unknown"]
        assert [r.is_top for r in rows] == [False, True, False]

    def test_tie_flags_first(self):
        rows = rank_probabilities(ClassificationResult(["de", "it"], [0.5, 0.5]))
        assert [r.is_top for r in rows] == [True, False]

    def test_empty_result(self):
        assert rank_probabilities(ClassificationResult([], [])) == []

    def test_to_dict(self):
        row = rank_probabilities(ClassificationResult(["hu"], [1.0]))[0]
        assert row.to_dict() == {
            "code": "hu",
            "name": "Hungarian",
            "probability": 1.0,
            "is_top": True,
        }

    def test_from_classifier(self, hello_classifier):
        rows = rank_probabilities(hello_classifier.classify("hello"))
        top = [r for r in rows if r.is_top]
        assert len(top) == 1
        assert top[0].name == "English"
