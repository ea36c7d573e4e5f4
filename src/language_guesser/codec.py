"""Versioned persistence for trained language models.

A model is stored as a UTF-8 JSON document::

    {
      "class_counts": {"en": 2, "fr": 1},
      "format": "language-guesser-model",
      "version": 1,
      "vocabulary": ["bonjour", "hello", "world"],
      "word_class_counts": {"hello": {"en": 1}, ...},
      "word_counts": {"hello": 1, ...}
    }

Keys are sorted and the vocabulary is written as a sorted list, so encoding
the same model twice yields identical bytes. Documents with another
``format`` or ``version`` are rejected instead of being guessed at.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .exceptions import ModelPersistenceError
from .model import LanguageModel

logger = logging.getLogger(__name__)

FORMAT_NAME = "language-guesser-model"
FORMAT_VERSION = 1


def to_dict(model: LanguageModel) -> dict:
    """Serialize a model into a JSON-compatible dictionary."""
    return {
        "format": FORMAT_NAME,
        "version": FORMAT_VERSION,
        "vocabulary": sorted(model.vocabulary),
        "class_counts": dict(model.class_counts),
        "word_counts": dict(model.word_counts),
        "word_class_counts": {
            token: dict(per_label)
            for token, per_label in model.word_class_counts.items()
        },
    }


def from_dict(data: dict) -> LanguageModel:
    """Rebuild a model from :func:`to_dict` output.

    Raises:
        ModelPersistenceError: If the dictionary is not a well-formed model
            in a supported format version.
    """
    if not isinstance(data, dict):
        raise ModelPersistenceError(
            f"Expected a JSON object at the top level, got {type(data).__name__}"
        )
    if data.get("format") != FORMAT_NAME:
        raise ModelPersistenceError(f"Not a language model file (format={data.get('format')!r})")
    version = data.get("version")
    if version != FORMAT_VERSION:
        raise ModelPersistenceError(
            f"Unsupported model format version {version!r} (expected {FORMAT_VERSION})"
        )

    try:
        model = LanguageModel(
            vocabulary=set(_str_list(data["vocabulary"], "vocabulary")),
            class_counts=_count_map(data["class_counts"], "class_counts"),
            word_counts=_count_map(data["word_counts"], "word_counts"),
            word_class_counts={
                token: _count_map(per_label, f"word_class_counts[{token!r}]")
                for token, per_label in _mapping(
                    data["word_class_counts"], "word_class_counts"
                ).items()
            },
        )
        model.validate()
    except KeyError as exc:
        raise ModelPersistenceError(f"Model data is missing field {exc.args[0]!r}") from exc
    except ValueError as exc:
        raise ModelPersistenceError(f"Inconsistent model data: {exc}") from exc

    return model


def save_to_bytes(model: LanguageModel) -> bytes:
    """Encode a model into bytes."""
    text = json.dumps(to_dict(model), sort_keys=True, separators=(",", ":"), ensure_ascii=True)
    return text.encode("utf-8")


def load_from_bytes(data: bytes) -> LanguageModel:
    """Decode a model from bytes produced by :func:`save_to_bytes`.

    Raises:
        ModelPersistenceError: If the bytes do not decode to a valid model.
    """
    try:
        payload = json.loads(data.decode("utf-8"))
    except (ValueError, RecursionError) as exc:
        raise ModelPersistenceError(f"Model data is not valid JSON: {exc}") from exc
    return from_dict(payload)


def save_to_file(model: LanguageModel, path: str | Path) -> None:
    """Write a model to ``path``, creating parent directories as needed.

    Raises:
        ModelPersistenceError: If the file cannot be written.
    """
    path = Path(path)
    data = save_to_bytes(model)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise ModelPersistenceError(f"Cannot write model to {path}: {exc}") from exc

    logger.info(
        "Saved model with %d labels and %d words to %s",
        len(model.class_counts),
        len(model.vocabulary),
        path,
    )


def load_from_file(path: str | Path) -> LanguageModel:
    """Read a model previously written by :func:`save_to_file`.

    Raises:
        ModelPersistenceError: If the file is missing, unreadable, or does
            not contain a valid model.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except FileNotFoundError as exc:
        raise ModelPersistenceError(f"Model file not found: {path}") from exc
    except OSError as exc:
        raise ModelPersistenceError(f"Cannot read model from {path}: {exc}") from exc

    model = load_from_bytes(data)
    logger.info("Loaded model with %d labels from %s", len(model.class_counts), path)
    return model


# ---------------------------------------------------------------------------
# Field validation
# ---------------------------------------------------------------------------

def _mapping(value: object, name: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be an object, got {type(value).__name__}")
    return value


def _str_list(value: object, name: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{name} must be a list of strings")
    return value


def _count_map(value: object, name: str) -> dict[str, int]:
    counts = _mapping(value, name)
    for key, count in counts.items():
        # bool is an int subclass; reject it explicitly
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"{name}[{key!r}] must be a non-negative integer, got {count!r}")
    return dict(counts)
