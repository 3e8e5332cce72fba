"""Command-line interface for keyword-bayes.

Provides ``classify``, ``inspect``, and ``evaluate`` commands with rich
terminal output using the ``click`` and ``rich`` libraries.

Usage::

    keyword-bayes classify vocab.txt corpus/ message.txt
    keyword-bayes inspect vocab.txt corpus/
    keyword-bayes evaluate vocab.txt corpus/ held_out/
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .classifier import NaiveBayesClassifier
from .config import Settings
from .corpus import load_corpus, read_document
from .errors import KeywordBayesError
from .logging_setup import setup_logging
from .models import CategoryScore
from .vocabulary import load_vocabulary

console = Console()

_HANDLED = (KeywordBayesError, OSError, ValueError, LookupError)


def _fail(exc: Exception) -> None:
    console.print(f"[bold red]Error:[/] {escape(str(exc))}")
    sys.exit(1)


def _fit(vocab: Path, corpus_dir: Path, settings: Settings) -> NaiveBayesClassifier:
    """Load vocabulary and corpus, and fit a classifier."""
    vocabulary = load_vocabulary(vocab, encoding=settings.encoding)
    corpus = load_corpus(corpus_dir, settings)
    return NaiveBayesClassifier(vocabulary).fit(corpus)


@click.group()
@click.version_option(package_name="keyword-bayes")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging verbosity (overrides KEYWORD_BAYES_LOG_LEVEL).")
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """Keyword Naive Bayes: score documents against word-count category models."""
    load_dotenv()
    try:
        settings = Settings.from_env()
        setup_logging(log_level or settings.log_level)
    except ValueError as e:
        _fail(e)
    ctx.obj = settings


@main.command()
@click.argument("vocab", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("corpus_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("documents", nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--category", "-c", "categories", multiple=True,
              help="Only score these categories (repeatable).")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def classify(
    settings: Settings,
    vocab: Path,
    corpus_dir: Path,
    documents: tuple[Path, ...],
    categories: tuple[str, ...],
    output: str,
) -> None:
    """Fit on CORPUS_DIR and rank categories for each DOCUMENT.

    Example: keyword-bayes classify vocab.txt corpus/ message.txt
    """
    try:
        nb = _fit(vocab, corpus_dir, settings)
        results = {
            doc: nb.classify(read_document(doc, settings), categories or None)
            for doc in documents
        }
    except _HANDLED as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps([
            {"document": str(doc), "scores": [s.to_dict() for s in scores]}
            for doc, scores in results.items()
        ], indent=2))
        return

    for doc, scores in results.items():
        _render_scores(doc.name, scores)


@main.command()
@click.argument("vocab", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("corpus_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def inspect(settings: Settings, vocab: Path, corpus_dir: Path, output: str) -> None:
    """Show per-category word counts and probabilities.

    Example: keyword-bayes inspect vocab.txt corpus/
    """
    try:
        nb = _fit(vocab, corpus_dir, settings)
    except _HANDLED as e:
        _fail(e)

    counts = nb.word_counts
    probs = nb.probabilities

    if output == "json":
        click.echo(json.dumps({
            category: {
                "total": counts[category].total,
                "counts": counts[category].to_dict(),
                "probabilities": {w: round(p, 6) for w, p in probs[category].items()},
            }
            for category in nb.categories
        }, indent=2))
        return

    for category in nb.categories:
        table = Table(title=f"Category: {category} (total {counts[category].total})")
        table.add_column("Word", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("P(word)", justify="right")

        for word in nb.vocabulary:
            n = counts[category][word]
            p = Text(f"{probs[category][word]:.4f}", style="dim" if n == 0 else "")
            if n == 0:
                p.append(" *", style="yellow")
            table.add_row(word, str(n), p)

        console.print(table)
    console.print("[dim]* zero count: fallback probability 1/total[/]")


@main.command()
@click.argument("vocab", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("train_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("test_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def evaluate(settings: Settings, vocab: Path, train_dir: Path, test_dir: Path, output: str) -> None:
    """Fit on TRAIN_DIR and report accuracy on the labeled TEST_DIR.

    Example: keyword-bayes evaluate vocab.txt corpus/ held_out/
    """
    try:
        nb = _fit(vocab, train_dir, settings)
        metrics = nb.evaluate(load_corpus(test_dir, settings))
    except (*_HANDLED, RuntimeError) as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps(metrics.to_dict(), indent=2))
        return

    table = Table(title="Per-category results")
    table.add_column("Category", style="cyan")
    table.add_column("Precision", justify="right")
    table.add_column("Recall", justify="right")
    table.add_column("F1", justify="right")
    table.add_column("Support", justify="right")
    for cls in sorted(metrics.per_class):
        m = metrics.per_class[cls]
        table.add_row(
            cls,
            f"{m['precision']:.4f}",
            f"{m['recall']:.4f}",
            f"{m['f1']:.4f}",
            str(metrics.support.get(cls, 0)),
        )

    console.print(Panel(
        f"Accuracy: [bold]{metrics.accuracy:.2%}[/] | Macro F1: {metrics.macro_f1:.4f}",
        title="Evaluation",
        border_style="blue",
    ))
    console.print(table)


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_scores(name: str, scores: list[CategoryScore]) -> None:
    """Render ranked category scores as a rich table."""
    table = Table(title=f"Scores: {name}")
    table.add_column("#", justify="right", width=4)
    table.add_column("Category", style="cyan")
    table.add_column("log10 likelihood", justify="right")

    for i, entry in enumerate(scores, 1):
        style = "bold green" if i == 1 else ""
        table.add_row(str(i), Text(entry.category, style=style), f"{entry.score:.4f}")

    console.print(table)
    console.print()


if __name__ == "__main__":
    main()
