"""Command-line interface for the language guesser.

Provides ``train``, ``classify``, ``evaluate`` and ``info`` commands with
rich terminal output using the ``click`` and ``rich`` libraries.

Usage::

    language-guesser train data/ --model model.json
    language-guesser classify "Bonjour tout le monde"
    language-guesser evaluate data/ -k 5
    language-guesser info --model model.json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .classifier import ClassificationResult, NaiveBayesClassifier
from .config import Settings, configure_logging
from .corpus import load_corpus
from .evaluation import cross_validate
from .exceptions import LanguageGuesserError
from .languages import display_name, rank_probabilities
from .pipeline import load_or_train

console = Console()


def _fail(exc: Exception) -> None:
    console.print(f"[bold red]Error:[/] {exc}")
    sys.exit(1)


@click.group()
@click.version_option(package_name="language-guesser")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"],
              case_sensitive=False), default=None,
              help="Logging verbosity (overrides LANGUAGE_GUESSER_LOG_LEVEL).")
@click.pass_context
def main(ctx: click.Context, log_level: str | None) -> None:
    """🌐 Language Guesser: Naive Bayes language identification.

    Train a model from a directory of per-language files and guess the
    language of short texts.
    """
    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    if log_level:
        settings.log_level = log_level.upper()
    configure_logging(settings.log_level)
    ctx.obj = settings


@main.command()
@click.argument("corpus_dir", required=False, type=click.Path(path_type=Path))
@click.option("--model", "-m", "model_path", type=click.Path(path_type=Path), default=None,
              help="Where to save the trained model.")
@click.option("--extension", "-e", default=None,
              help="Suffix of corpus files (default: .dic).")
@click.pass_obj
def train(settings: Settings, corpus_dir: Path | None, model_path: Path | None,
          extension: str | None) -> None:
    """Train a model from a corpus directory and save it.

    Each ``<label>.dic`` file holds one training sentence per line.

    Example: language-guesser train data/ --model model.json
    """
    corpus_dir = corpus_dir or settings.corpus_dir
    model_path = model_path or settings.model_path
    extension = extension or settings.corpus_extension

    with console.status("[bold blue]Training model...", spinner="dots"):
        try:
            corpus = load_corpus(corpus_dir, extension=extension)
            classifier = NaiveBayesClassifier()
            classifier.train(corpus.examples, corpus.labels)
            classifier.save(model_path)
        except LanguageGuesserError as e:
            _fail(e)

    table = Table(title=f"Training corpus — {corpus_dir}")
    table.add_column("Code", style="cyan", width=8)
    table.add_column("Language", style="white")
    table.add_column("Examples", justify="right")
    for label, count in corpus.label_counts().items():
        table.add_row(label, display_name(label), str(count))
    console.print(table)
    console.print(
        f"Vocabulary: {len(classifier.model.vocabulary):,} words | "
        f"Examples: {len(corpus):,}"
    )
    console.print(f"[dim]Model saved to {model_path}[/]")


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--model", "-m", "model_path", type=click.Path(path_type=Path), default=None,
              help="Model file (trained from the corpus first if missing).")
@click.option("--corpus", "-c", "corpus_dir", type=click.Path(path_type=Path), default=None,
              help="Corpus directory used when the model must be trained.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def classify(settings: Settings, text: tuple[str, ...], model_path: Path | None,
             corpus_dir: Path | None, output: str) -> None:
    """Guess the language of TEXT.

    Example: language-guesser classify "Hello, how are you?"
    """
    query = " ".join(text)
    try:
        classifier = load_or_train(
            model_path or settings.model_path,
            corpus_dir or settings.corpus_dir,
            extension=settings.corpus_extension,
        )
        result = classifier.classify(query)
    except LanguageGuesserError as e:
        _fail(e)

    if output == "json":
        payload = result.to_dict()
        payload["text"] = query
        payload["language"] = display_name(result.predicted_label)
        click.echo(json.dumps(payload, indent=2))
    else:
        _render_result(query, result)


@main.command()
@click.argument("corpus_dir", required=False, type=click.Path(path_type=Path))
@click.option("--folds", "-k", default=5, show_default=True, type=click.IntRange(min=2),
              help="Number of cross-validation folds.")
@click.option("--seed", default=42, show_default=True, help="Random seed for fold assignment.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def evaluate(settings: Settings, corpus_dir: Path | None, folds: int, seed: int,
             output: str) -> None:
    """Estimate accuracy with stratified k-fold cross-validation.

    Example: language-guesser evaluate data/ -k 5
    """
    corpus_dir = corpus_dir or settings.corpus_dir

    with console.status("[bold blue]Cross-validating...", spinner="dots"):
        try:
            corpus = load_corpus(corpus_dir, extension=settings.corpus_extension)
            results = cross_validate(corpus.examples, corpus.labels, k=folds, seed=seed)
        except LanguageGuesserError as e:
            _fail(e)

    mean_accuracy = sum(r.accuracy for r in results) / len(results) if results else 0.0
    if output == "json":
        click.echo(json.dumps({
            "folds": [r.to_dict() for r in results],
            "mean_accuracy": round(mean_accuracy, 4),
        }, indent=2))
        return

    table = Table(title=f"Cross-validation — {corpus_dir}")
    table.add_column("Fold", justify="right", width=6)
    table.add_column("Accuracy", justify="right")
    table.add_column("Macro F1", justify="right")
    table.add_column("Weighted F1", justify="right")
    for i, metrics in enumerate(results, 1):
        table.add_row(
            str(i),
            f"{metrics.accuracy:.2%}",
            f"{metrics.macro_f1:.4f}",
            f"{metrics.weighted_f1:.4f}",
        )
    console.print(table)
    console.print(f"Mean accuracy: [bold]{mean_accuracy:.2%}[/]")


@main.command()
@click.option("--model", "-m", "model_path", type=click.Path(path_type=Path), default=None,
              help="Model file to inspect.")
@click.option("--top", "-n", default=5, show_default=True, type=click.IntRange(min=0),
              help="Most informative words to list per language.")
@click.pass_obj
def info(settings: Settings, model_path: Path | None, top: int) -> None:
    """Show statistics of a saved model.

    Example: language-guesser info --model model.json
    """
    model_path = model_path or settings.model_path
    try:
        classifier = NaiveBayesClassifier.load(model_path)
    except LanguageGuesserError as e:
        _fail(e)

    model = classifier.model
    console.print(Panel(
        f"[bold]{model_path}[/]\n"
        f"Languages: {len(model.class_counts)} | "
        f"Examples: {model.num_examples:,} | "
        f"Vocabulary: {len(model.vocabulary):,}",
        title="🌐 Language Model",
        border_style="blue",
    ))

    if not classifier.is_trained:
        return

    table = Table(show_lines=False)
    table.add_column("Code", style="cyan", width=8)
    table.add_column("Language", style="white")
    table.add_column("Examples", justify="right")
    table.add_column("Top words", style="dim")
    for label in classifier.labels:
        words = classifier.most_informative_features(label, top_n=top) if top else []
        table.add_row(
            label,
            display_name(label),
            str(model.class_counts[label]),
            ", ".join(word for word, _ in words),
        )
    console.print(table)


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_result(query: str, result: ClassificationResult) -> None:
    """Render a classification as a probability table."""
    rows = rank_probabilities(result)

    table = Table(title="Language Probability")
    table.add_column("Language", width=12)
    table.add_column("Code", style="cyan", width=6)
    table.add_column("Probability", justify="right")
    table.add_column("", width=30)

    for row in rows:
        style = "bold red" if row.is_top else ""
        bar = "█" * round(row.probability * 30)
        table.add_row(row.name, row.code, f"{row.probability:.2%}", bar, style=style)

    console.print()
    console.print(table)
    top = next(row for row in rows if row.is_top)
    console.print(
        f"Detected language: [bold red]{top.name}[/] ({top.code}) for "
        f"[italic]{query[:80]}[/]"
    )
    console.print()


if __name__ == "__main__":
    main()
