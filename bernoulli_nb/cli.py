# coding=utf-8

"""Command-line interface for the Bernoulli Naive Bayes classifier.

Fits a model on a tab-separated training file and classifies documents
given on the command line.

Usage::

    bernoulli-nb classify --train train.tsv "just had my first cheeto ever"
    bernoulli-nb classify --train train.tsv --learning MAP --alpha 2 "..."
    bernoulli-nb stats --train train.tsv --stopwords stopwords.txt
"""

import functools
import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .const import (
        DEFAULT_STOPWORDS,
        LEARNING_MAP,
        LEARNING_MLE,
        TIE_PRIOR,
        TIE_RAISE,
        NBParam
)
from .errors import DegenerateModelError, NaiveBayesError
from .naive_bayes import MultivariateBernoulli

console = Console()


def read_train(file_path):
    """ 訓練データを読み込む。

    1行に1文書、``label<TAB>document`` の形式。空行と#で始まる行は読み飛ばす。

    Args:
        file_path (Path): 訓練データのパス

    Returns:
        list: (文書, ラベル) を要素として持つリスト
    """

    train = []
    with open(file_path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.rstrip("\n")
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            label, sep, document = line.partition("\t")
            if not sep:
                raise click.BadParameter(
                        "line {}: expected 'label<TAB>document'".format(lineno),
                        param_hint="--train")
            train.append((document, label.strip()))
    return train


def read_stopwords(file_path):
    """ 空白区切りのストップワードを読み込む。
    """

    if file_path is None:
        return DEFAULT_STOPWORDS
    return frozenset(Path(file_path).read_text(encoding="utf-8").split())


def model_options(func):
    """ fitに必要なオプションをまとめて付与するデコレータ
    """

    @click.option("--train", "train_path", required=True,
                  type=click.Path(exists=True, dir_okay=False, path_type=Path),
                  help="Training file, one 'label<TAB>document' per line.")
    @click.option("--stopwords", "stopwords_path", default=None,
                  type=click.Path(exists=True, dir_okay=False, path_type=Path),
                  help="Whitespace-separated stop words (default: built-in set).")
    @click.option("--learning", type=click.Choice([LEARNING_MLE, LEARNING_MAP]),
                  default=LEARNING_MLE, show_default=True,
                  help="Estimation method.")
    @click.option("--alpha", type=float, default=1, show_default=True,
                  help="Beta prior hyperparameter for MAP (2 = add-one).")
    @click.option("--tie-break", type=click.Choice([TIE_PRIOR, TIE_RAISE]),
                  default=TIE_PRIOR, show_default=True,
                  help="What to do when both classes score the same.")
    @functools.wraps(func)
    def wrapper(train_path, stopwords_path, learning, alpha, tie_break,
                **kwargs):
        try:
            nb = MultivariateBernoulli(NBParam(learning, alpha, tie_break))
        except ValueError as e:
            raise click.UsageError(str(e)) from e
        train = read_train(train_path)
        try:
            model = nb.fit(train, read_stopwords(stopwords_path))
        except NaiveBayesError as e:
            console.print(f"[bold red]Error:[/] {escape(str(e))}")
            sys.exit(1)
        return func(nb, model, **kwargs)

    return wrapper


@click.group()
@click.version_option(package_name="bernoulli-nb")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose):
    """Bernoulli Naive Bayes text classifier."""
    logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@main.command()
@model_options
@click.argument("documents", nargs=-1, required=True)
@click.option("--output", "-o", type=click.Choice(["rich", "json"]),
              default="rich", help="Output format.")
def classify(nb, model, documents, output):
    """Classify DOCUMENTS with a model fitted on the training file."""
    results = []
    failed = False
    for document in documents:
        try:
            scored = nb.classify(model, document)
            results.append({
                "document": document,
                "label": scored.label,
                "scores": scored.scores,
                "posterior": nb.posterior(model, document),
            })
        except DegenerateModelError as e:
            failed = True
            results.append({
                "document": document,
                "error": str(e),
                "zero_factors": {
                    label: list(words)
                    for label, words in e.zero_factors.items()
                },
            })
        except NaiveBayesError as e:
            failed = True
            results.append({"document": document, "error": str(e)})

    if output == "json":
        click.echo(json.dumps(results, indent=2))
    else:
        _render_results(results)

    if failed:
        sys.exit(1)


@main.command()
@model_options
def stats(nb, model):
    """Show priors and per-word statistics of the fitted model."""
    console.print(
            f"P(positive) = {model.pc.positive:.4f}  "
            f"P(negative) = {model.pc.negative:.4f}")

    table = Table(title=f"Vocabulary ({len(model.vocab)} words)")
    table.add_column("Word", style="cyan")
    table.add_column("n_pos", justify="right")
    table.add_column("n_neg", justify="right")
    table.add_column("P(w|pos)", justify="right")
    table.add_column("P(w|neg)", justify="right")
    for ws in nb.word_stats(model):
        table.add_row(
                escape(ws.word), str(ws.n_pos), str(ws.n_neg),
                f"{ws.p_pos:.4f}", f"{ws.p_neg:.4f}")
    console.print(table)


def _render_results(results):
    table = Table(title="Classification", show_lines=True)
    table.add_column("Document", style="white", max_width=50)
    table.add_column("Label", style="cyan")
    table.add_column("Score (pos / neg)", justify="right")
    table.add_column("Posterior (pos)", justify="right")

    for r in results:
        if "error" in r:
            table.add_row(
                    escape(r["document"]), "[bold red]error[/]",
                    escape(r["error"]), "-")
            continue
        table.add_row(
                escape(r["document"]),
                r["label"],
                "{:.3e} / {:.3e}".format(
                    r["scores"]["positive"], r["scores"]["negative"]),
                "{:.4f}".format(r["posterior"]["positive"]))

    console.print(table)


if __name__ == "__main__":
    main()
