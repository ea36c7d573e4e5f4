"""Word statistics learned from labeled training examples."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class LanguageModel:
    """The four counters a Naive Bayes language guesser is trained into.

    Attributes:
        vocabulary: Every distinct token seen during training.
        class_counts: Number of training examples per label.
        word_counts: Total occurrences of each token across all labels.
        word_class_counts: Occurrences of each token within each label.

    Training mutates an instance through :meth:`add_example`; inference
    only reads it. There is no internal locking, so callers must not train
    the same instance from several threads at once.
    """

    vocabulary: set[str] = field(default_factory=set)
    class_counts: dict[str, int] = field(default_factory=dict)
    word_counts: dict[str, int] = field(default_factory=dict)
    word_class_counts: dict[str, dict[str, int]] = field(default_factory=dict)

    @property
    def labels(self) -> list[str]:
        """Known labels in lexicographic order."""
        return sorted(self.class_counts)

    @property
    def num_examples(self) -> int:
        """Number of training examples processed so far."""
        return sum(self.class_counts.values())

    @property
    def is_empty(self) -> bool:
        return not self.class_counts

    def add_example(self, tokens: Iterable[str], label: str) -> None:
        """Record one tokenized training example.

        Repeated tokens are counted every time they occur.

        Args:
            tokens: Normalized tokens of the example.
            label: Label the example belongs to.
        """
        tokens = list(tokens)
        self.vocabulary.update(tokens)
        self.class_counts[label] = self.class_counts.get(label, 0) + 1

        for token in tokens:
            self.word_counts[token] = self.word_counts.get(token, 0) + 1
            per_label = self.word_class_counts.setdefault(token, {})
            per_label[label] = per_label.get(label, 0) + 1

    def copy(self) -> "LanguageModel":
        """Return an independent deep copy of the counters."""
        return LanguageModel(
            vocabulary=set(self.vocabulary),
            class_counts=dict(self.class_counts),
            word_counts=dict(self.word_counts),
            word_class_counts={
                token: dict(per_label)
                for token, per_label in self.word_class_counts.items()
            },
        )

    def validate(self) -> None:
        """Check the consistency rules between the four counters.

        Raises:
            ValueError: Describing the first violated rule.
        """
        for label, count in self.class_counts.items():
            if count < 1:
                raise ValueError(f"Label {label!r} has non-positive count {count}")

        for token, count in self.word_counts.items():
            if token not in self.vocabulary:
                raise ValueError(f"Counted token {token!r} missing from vocabulary")
            per_label = self.word_class_counts.get(token, {})
            if sum(per_label.values()) != count:
                raise ValueError(
                    f"Per-label counts for {token!r} sum to {sum(per_label.values())}, "
                    f"expected {count}"
                )

        for token, per_label in self.word_class_counts.items():
            if token not in self.word_counts:
                raise ValueError(f"Token {token!r} has per-label counts but no total")
            unknown = set(per_label) - set(self.class_counts)
            if unknown:
                raise ValueError(
                    f"Token {token!r} counted under unknown labels: {sorted(unknown)}"
                )
