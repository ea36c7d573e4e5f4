"""Accuracy measurement for language classifiers.

Provides per-label precision / recall / F1, a confusion matrix, and
stratified k-fold cross-validation that retrains a fresh
:class:`~language_guesser.classifier.NaiveBayesClassifier` on every fold.
"""

from __future__ import annotations

import random
from collections import Counter, defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

from .classifier import NaiveBayesClassifier
from .exceptions import TrainingInputError


@dataclass
class ClassificationMetrics:
    """Evaluation metrics for a set of predictions.

    Attributes:
        accuracy: Fraction of correct predictions.
        per_class: Precision, recall and F1 for each label.
        macro_precision: Unweighted mean precision across labels.
        macro_recall: Unweighted mean recall across labels.
        macro_f1: Unweighted mean F1 across labels.
        weighted_f1: F1 averaged with each label weighted by its support.
        confusion_matrix: ``confusion_matrix[true][predicted]`` counts.
        support: Number of true examples per label.
    """

    accuracy: float = 0.0
    per_class: dict[str, dict[str, float]] = field(default_factory=dict)
    macro_precision: float = 0.0
    macro_recall: float = 0.0
    macro_f1: float = 0.0
    weighted_f1: float = 0.0
    confusion_matrix: dict[str, dict[str, int]] = field(default_factory=dict)
    support: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "accuracy": round(self.accuracy, 4),
            "macro_precision": round(self.macro_precision, 4),
            "macro_recall": round(self.macro_recall, 4),
            "macro_f1": round(self.macro_f1, 4),
            "weighted_f1": round(self.weighted_f1, 4),
            "per_class": {
                label: {k: round(v, 4) for k, v in scores.items()}
                for label, scores in self.per_class.items()
            },
            "confusion_matrix": self.confusion_matrix,
            "support": self.support,
        }


def _safe_div(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


def compute_metrics(y_true: Sequence[str], y_pred: Sequence[str]) -> ClassificationMetrics:
    """Compare predicted labels with the true ones.

    Args:
        y_true: Ground truth labels.
        y_pred: Predicted labels, aligned with ``y_true``.

    Returns:
        ClassificationMetrics for the predictions.

    Raises:
        ValueError: If the sequences differ in length.
    """
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")

    labels = sorted(set(y_true) | set(y_pred))
    matrix = {t: {p: 0 for p in labels} for t in labels}
    for t, p in zip(y_true, y_pred):
        matrix[t][p] += 1

    support = Counter(y_true)
    per_class: dict[str, dict[str, float]] = {}
    for label in labels:
        tp = matrix[label][label]
        predicted = sum(matrix[other][label] for other in labels)
        actual = sum(matrix[label].values())
        precision = _safe_div(tp, predicted)
        recall = _safe_div(tp, actual)
        per_class[label] = {
            "precision": precision,
            "recall": recall,
            "f1": _safe_div(2 * precision * recall, precision + recall),
        }

    n_labels = len(labels)
    correct = sum(matrix[label][label] for label in labels)
    return ClassificationMetrics(
        accuracy=_safe_div(correct, len(y_true)),
        per_class=per_class,
        macro_precision=_safe_div(sum(m["precision"] for m in per_class.values()), n_labels),
        macro_recall=_safe_div(sum(m["recall"] for m in per_class.values()), n_labels),
        macro_f1=_safe_div(sum(m["f1"] for m in per_class.values()), n_labels),
        weighted_f1=_safe_div(
            sum(per_class[label]["f1"] * support[label] for label in labels),
            len(y_true),
        ),
        confusion_matrix=matrix,
        support=dict(support),
    )


def stratified_k_fold(
    labels: Sequence[str],
    k: int = 5,
    seed: int = 42,
) -> list[tuple[list[int], list[int]]]:
    """Split example indices into ``k`` folds with similar label mixes.

    Indices of each label are shuffled with a seeded RNG and dealt
    round-robin across the folds.

    Args:
        labels: Label of every example.
        k: Number of folds (at least 2).
        seed: Random seed for reproducibility.

    Returns:
        List of ``(train_indices, test_indices)`` tuples, one per fold.

    Raises:
        ValueError: If ``k`` is smaller than 2.
    """
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")

    rng = random.Random(seed)
    by_label: dict[str, list[int]] = defaultdict(list)
    for idx, label in enumerate(labels):
        by_label[label].append(idx)

    fold_of = [0] * len(labels)
    for label in sorted(by_label):
        indices = by_label[label]
        rng.shuffle(indices)
        for position, idx in enumerate(indices):
            fold_of[idx] = position % k

    folds: list[tuple[list[int], list[int]]] = []
    for fold in range(k):
        test = [i for i, f in enumerate(fold_of) if f == fold]
        train = [i for i, f in enumerate(fold_of) if f != fold]
        folds.append((train, test))
    return folds


def cross_validate(
    examples: Sequence[str],
    labels: Sequence[str],
    k: int = 5,
    seed: int = 42,
) -> list[ClassificationMetrics]:
    """Run stratified k-fold cross-validation.

    Args:
        examples: Raw training sentences.
        labels: Label of each sentence.
        k: Number of folds.
        seed: Random seed for the fold assignment.

    Returns:
        One ClassificationMetrics per fold. Folds with no test examples
        are skipped.

    Raises:
        TrainingInputError: If ``examples`` and ``labels`` differ in length.
    """
    if len(examples) != len(labels):
        raise TrainingInputError(
            f"examples ({len(examples)}) and labels ({len(labels)}) must have same length"
        )

    results: list[ClassificationMetrics] = []
    for train_idx, test_idx in stratified_k_fold(labels, k=k, seed=seed):
        if not test_idx or not train_idx:
            continue
        classifier = NaiveBayesClassifier()
        classifier.train([examples[i] for i in train_idx], [labels[i] for i in train_idx])
        predictions = [classifier.predict(examples[i]) for i in test_idx]
        results.append(compute_metrics([labels[i] for i in test_idx], predictions))
    return results
