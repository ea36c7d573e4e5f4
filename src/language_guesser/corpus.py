"""Training corpus loading.

A corpus is a directory holding one file per label. The file name without
its extension is the label and every line of the file is one training
example::

    data/
        en.dic      # one English sentence per line
        fr.dic
        ...

Files are visited in sorted name order so repeated loads produce identical
example sequences.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import CorpusError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".dic"


@dataclass
class Corpus:
    """Parallel lists of training examples and their labels."""

    examples: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.examples)

    def label_counts(self) -> dict[str, int]:
        """Number of examples per label, sorted by label."""
        counts = Counter(self.labels)
        return {label: counts[label] for label in sorted(counts)}


def load_corpus(directory: str | Path, extension: str = DEFAULT_EXTENSION) -> Corpus:
    """Read every ``*<extension>`` file in ``directory`` into a corpus.

    Every line is kept as an example, blank ones included: they count
    towards their label's example total but contribute no words.

    Args:
        directory: Directory containing one file per label.
        extension: File suffix identifying corpus files (e.g. ``".dic"``).

    Returns:
        Corpus with one entry per line across all files.

    Raises:
        CorpusError: If the directory does not exist, holds no matching
            files, or a file cannot be read.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise CorpusError(f"Corpus directory not found: {directory}")

    files = sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.name.endswith(extension) and len(p.name) > len(extension)
    )
    if not files:
        raise CorpusError(f"No '*{extension}' files found in {directory}")

    corpus = Corpus()
    for path in files:
        label = path.name[: -len(extension)] if extension else path.name
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise CorpusError(f"Cannot read corpus file {path}: {exc}") from exc

        # Only line feeds end a line; read_text already translated \r and \r\n.
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        corpus.examples.extend(lines)
        corpus.labels.extend([label] * len(lines))
        logger.debug("Read %d examples for label %r from %s", len(lines), label, path)

    logger.info("Loaded %d examples for %d labels from %s", len(corpus), len(files), directory)
    return corpus
