"""Naive Bayes language classifier over normalized word counts.

Training accumulates per-label word statistics into a
:class:`~language_guesser.model.LanguageModel`; classification scores a query
against every label with add-one smoothed log-likelihoods and turns the
scores into a probability distribution with a max-shifted softmax.

Two details of the scoring are kept exactly as the reference behaviour
defines them, even though they differ from the textbook formulation:

- The log prior of a label is ``log(count(label) / number_of_labels)``,
  not ``count(label) / number_of_examples``.
- The word likelihood is ``(count(word, label) + 1) /
  (count(word) + |vocabulary|)``, using the word's total count across all
  labels rather than a per-label total.

Example::

    classifier = NaiveBayesClassifier()
    classifier.train(["hello world", "bonjour monde"], ["en", "fr"])

    labels, probabilities = classifier.classify("hello")
    classifier.save("model.json")
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import codec
from .exceptions import InferenceError, TrainingInputError
from .model import LanguageModel
from .preprocessing import tokenize


def softmax(scores: Sequence[float]) -> list[float]:
    """Convert log scores into probabilities that sum to one.

    The maximum score is subtracted before exponentiating, so very negative
    scores do not underflow to an all-zero distribution.
    """
    if not scores:
        return []
    max_score = max(scores)
    exp_scores = [math.exp(s - max_score) for s in scores]
    total = sum(exp_scores)
    return [e / total for e in exp_scores]


# ---------------------------------------------------------------------------
# Classification Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassificationResult:
    """Probability of each known label for one query.

    ``labels`` and ``probabilities`` are parallel lists in the classifier's
    label order. The result unpacks as a ``(labels, probabilities)`` pair.
    """

    labels: list[str]
    probabilities: list[float]

    def __iter__(self) -> Iterator[list]:
        yield self.labels
        yield self.probabilities

    @property
    def predicted_label(self) -> str:
        """Label with the highest probability (first one on ties)."""
        best = max(range(len(self.probabilities)), key=self.probabilities.__getitem__)
        return self.labels[best]

    @property
    def confidence(self) -> float:
        return max(self.probabilities)

    def probability_of(self, label: str) -> float:
        """Probability assigned to ``label``, or 0.0 if it is unknown."""
        try:
            return self.probabilities[self.labels.index(label)]
        except ValueError:
            return 0.0

    def to_dict(self) -> dict:
        return {
            "predicted_label": self.predicted_label,
            "confidence": round(self.confidence, 4),
            "probabilities": {
                label: round(prob, 4)
                for label, prob in zip(self.labels, self.probabilities)
            },
        }


# ---------------------------------------------------------------------------
# Naive Bayes Classifier
# ---------------------------------------------------------------------------

class NaiveBayesClassifier:
    """Word-level multinomial Naive Bayes classifier for language guessing.

    Args:
        model: Existing statistics to wrap (e.g. loaded from disk). A new
            empty model is created when omitted.
    """

    def __init__(self, model: Optional[LanguageModel] = None) -> None:
        self._model = model if model is not None else LanguageModel()

    @property
    def model(self) -> LanguageModel:
        """The statistics this classifier owns."""
        return self._model

    @property
    def is_trained(self) -> bool:
        """Whether at least one label is known."""
        return not self._model.is_empty

    @property
    def labels(self) -> list[str]:
        """Known labels, in the order classification results use."""
        return self._model.labels

    def train(self, examples: Sequence[str], labels: Sequence[str]) -> None:
        """Accumulate statistics from labeled examples.

        Calling ``train`` again adds to the existing counts rather than
        replacing them.

        Args:
            examples: Raw training sentences.
            labels: Label of each sentence (same length as ``examples``).

        Raises:
            TrainingInputError: If ``examples`` and ``labels`` differ in
                length. The model is left untouched.
        """
        if len(examples) != len(labels):
            raise TrainingInputError(
                f"examples ({len(examples)}) and labels ({len(labels)}) must have same length"
            )

        for example, label in zip(examples, labels):
            self._model.add_example(tokenize(example), label)

    def scores(self, text: str) -> dict[str, float]:
        """Compute unnormalized log scores of ``text`` for each label.

        Raises:
            InferenceError: If the classifier has not been trained.
        """
        self._check_trained()
        model = self._model
        tokens = tokenize(text)
        num_classes = len(model.class_counts)

        result: dict[str, float] = {}
        for label in model.labels:
            score = math.log(model.class_counts[label] / num_classes)
            # With an empty vocabulary every token would score 1/0 for every
            # label alike; leave the priors alone instead.
            if model.vocabulary:
                for token in tokens:
                    score += self._word_log_prob(token, label)
            result[label] = score
        return result

    def classify(self, text: str) -> ClassificationResult:
        """Compute the probability of each label for ``text``.

        Args:
            text: Raw query text.

        Returns:
            ClassificationResult with labels in lexicographic order.

        Raises:
            InferenceError: If the classifier has not been trained.
        """
        log_scores = self.scores(text)
        labels = list(log_scores)
        return ClassificationResult(
            labels=labels,
            probabilities=softmax([log_scores[label] for label in labels]),
        )

    def classify_batch(self, texts: Sequence[str]) -> list[ClassificationResult]:
        """Classify several texts."""
        self._check_trained()
        return [self.classify(text) for text in texts]

    def predict(self, text: str) -> str:
        """Return the most probable label for ``text``."""
        return self.classify(text).predicted_label

    def most_informative_features(
        self,
        label: str,
        top_n: int = 20,
    ) -> list[tuple[str, float]]:
        """Return the words that most favour ``label`` over the others.

        Each word is scored by its smoothed log-likelihood under ``label``
        minus the mean log-likelihood under the remaining labels. With a
        single label, words are ranked by their log-likelihood alone.

        Args:
            label: Target label.
            top_n: Number of words to return.

        Returns:
            List of (word, score) tuples sorted by score, highest first.

        Raises:
            InferenceError: If the classifier has not been trained.
            ValueError: If ``label`` is not known.
        """
        self._check_trained()
        model = self._model
        if label not in model.class_counts:
            raise ValueError(f"Unknown label: {label}. Known: {model.labels}")

        others = [other for other in model.labels if other != label]
        ratios: list[tuple[str, float]] = []
        for word in model.vocabulary:
            target_lp = self._word_log_prob(word, label)
            if others:
                other_lp = sum(self._word_log_prob(word, o) for o in others) / len(others)
            else:
                other_lp = 0.0
            ratios.append((word, round(target_lp - other_lp, 4)))

        ratios.sort(key=lambda x: (-x[1], x[0]))
        return ratios[:top_n]

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> None:
        """Save the model to a file (see :mod:`language_guesser.codec`)."""
        codec.save_to_file(self._model, path)

    @classmethod
    def load(cls, path: str | Path) -> "NaiveBayesClassifier":
        """Load a classifier from a file written by :meth:`save`.

        Raises:
            ModelPersistenceError: If the file is missing or invalid.
        """
        return cls(codec.load_from_file(path))

    def to_bytes(self) -> bytes:
        return codec.save_to_bytes(self._model)

    @classmethod
    def from_bytes(cls, data: bytes) -> "NaiveBayesClassifier":
        return cls(codec.load_from_bytes(data))

    # ------------------------------------------------------------------

    def _word_log_prob(self, word: str, label: str) -> float:
        model = self._model
        word_count = model.word_counts.get(word, 0)
        word_class_count = model.word_class_counts.get(word, {}).get(label, 0)
        return math.log((word_class_count + 1) / (word_count + len(model.vocabulary)))

    def _check_trained(self) -> None:
        if self._model.is_empty:
            raise InferenceError("Classifier not trained. Call train() or load a model first.")
