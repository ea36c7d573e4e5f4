"""Human-readable names for language labels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .classifier import ClassificationResult

UNKNOWN_LANGUAGE = "Unknown"


class Language(str, Enum):
    """Language codes with a known display name."""

    CATALAN = "ca"
    DANISH = "da"
    GERMAN = "de"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    ITALIAN = "it"
    PORTUGUESE = "pt"

    @property
    def display_name(self) -> str:
        return self.name.title()


def display_name(code: str) -> str:
    """Map a label code such as ``"fr"`` to ``"French"``.

    Codes outside the fixed table map to ``"Unknown"``.
    """
    try:
        return Language(code).display_name
    except ValueError:
        return UNKNOWN_LANGUAGE


@dataclass
class LanguageScore:
    """One row of a classification, ready for display."""

    code: str
    name: str
    probability: float
    is_top: bool = False

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "probability": round(self.probability, 4),
            "is_top": self.is_top,
        }


def rank_probabilities(result: ClassificationResult) -> list[LanguageScore]:
    """Turn a result into display rows, flagging the most probable label.

    Rows keep the result's label order. On ties the first maximal row is
    flagged.
    """
    rows = [
        LanguageScore(code=label, name=display_name(label), probability=prob)
        for label, prob in zip(result.labels, result.probabilities)
    ]
    if rows:
        best = max(range(len(rows)), key=lambda i: rows[i].probability)
        rows[best].is_top = True
    return rows
