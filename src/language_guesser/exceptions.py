"""Exception hierarchy for the language guesser.

Every error raised by the package derives from :class:`LanguageGuesserError`.
The concrete classes also inherit from the built-in exception a caller would
naturally expect (``ValueError`` for bad input, ``RuntimeError`` for using an
untrained model), so existing ``except ValueError`` handlers keep working.
"""

from __future__ import annotations


class LanguageGuesserError(Exception):
    """Base class for all language guesser errors."""


class TrainingInputError(LanguageGuesserError, ValueError):
    """Training examples and labels do not line up."""


class InferenceError(LanguageGuesserError, RuntimeError):
    """Classification was attempted against a model with no trained labels."""


class ModelPersistenceError(LanguageGuesserError):
    """A model could not be saved or loaded.

    Raised for missing or unreadable files as well as for data that does not
    decode to a well-formed model. The underlying exception, if any, is
    available as ``__cause__``.
    """


class CorpusError(LanguageGuesserError, ValueError):
    """A training corpus directory is missing, empty, or unreadable."""
