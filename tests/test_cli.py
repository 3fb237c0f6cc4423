"""Tests for the bernoulli-nb command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from bernoulli_nb.cli import main, read_stopwords, read_train

CHEETO = "just had my first cheeto ever it was awesome"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestReadTrain:

    def test_skips_comments_and_blank_lines(self, train_file: Path, train):
        assert read_train(train_file) == train

    def test_malformed_line(self, tmp_path: Path):
        file = tmp_path / "bad.tsv"
        file.write_text("positive\tgood\nno tab here\n", encoding="utf-8")
        with pytest.raises(click.BadParameter, match="line 2"):
            read_train(file)


class TestReadStopwords:

    def test_default(self, stopwords):
        assert read_stopwords(None) == stopwords

    def test_from_file(self, stopwords_file: Path, stopwords):
        assert read_stopwords(stopwords_file) == stopwords


class TestClassifyCommand:

    def test_json_output(self, runner, train_file, stopwords_file):
        result = runner.invoke(main, [
            "classify", "--train", str(train_file), "--stopwords", str(stopwords_file),
            "-o", "json", "hello world",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data[0]["label"] == "negative"
        assert set(data[0]["scores"]) == {"positive", "negative"}
        assert sum(data[0]["posterior"].values()) == pytest.approx(1.0)

    def test_degenerate_document_fails(self, runner, train_file):
        result = runner.invoke(main, [
            "classify", "--train", str(train_file), "-o", "json", CHEETO,
        ])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data[0]["zero_factors"] == {
            "positive": ["cheeto"],
            "negative": ["awesome"],
        }

    def test_smoothing_avoids_collapse(self, runner, train_file):
        result = runner.invoke(main, [
            "classify", "--train", str(train_file), "--learning", "MAP", "--alpha", "2",
            "-o", "json", CHEETO,
        ])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)[0]["label"] == "negative"

    def test_rich_output(self, runner, train_file):
        result = runner.invoke(main, [
            "classify", "--train", str(train_file), "--learning", "MAP", "--alpha", "2",
            "supreme rock",
        ])
        assert result.exit_code == 0, result.output
        assert "positive" in result.output

    def test_tie_raise(self, runner, tmp_path):
        file = tmp_path / "tie.tsv"
        file.write_text("positive\tgood\nnegative\tbad\n", encoding="utf-8")
        result = runner.invoke(main, [
            "classify", "--train", str(file), "--learning", "MAP", "--alpha", "2",
            "--tie-break", "raise", "-o", "json", "good bad",
        ])
        assert result.exit_code == 1
        assert "tie" in json.loads(result.stdout)[0]["error"]

    def test_invalid_alpha(self, runner, train_file):
        result = runner.invoke(main, [
            "classify", "--train", str(train_file), "--learning", "MAP", "--alpha", "0.5",
            "book",
        ])
        assert result.exit_code == 2

    @pytest.mark.parametrize("alpha", ["inf", "nan"])
    def test_non_finite_alpha(self, runner, train_file, alpha):
        result = runner.invoke(main, [
            "classify", "--train", str(train_file), "--learning", "MAP", "--alpha", alpha,
            "book",
        ])
        assert result.exit_code == 2
        assert "finite" in result.output

    def test_markup_in_document(self, runner, train_file):
        result = runner.invoke(main, [
            "classify", "--train", str(train_file), "--learning", "MAP", "--alpha", "2",
            "[/] rock [bold]",
        ])
        assert result.exit_code == 0, result.output
        assert "[/] rock [bold]" in result.output

    def test_markup_in_error_row(self, runner, tmp_path):
        file = tmp_path / "markup.tsv"
        file.write_text("positive\t[/]\nnegative\tbad\n", encoding="utf-8")
        result = runner.invoke(main, ["classify", "--train", str(file), "[/]"])
        assert result.exit_code == 1
        assert "[/]" in result.output
        assert "error" in result.output

    def test_markup_in_stats(self, runner, tmp_path):
        file = tmp_path / "markup.tsv"
        file.write_text("positive\t[/]\nnegative\tbad\n", encoding="utf-8")
        result = runner.invoke(main, ["stats", "--train", str(file)])
        assert result.exit_code == 0, result.output
        assert "[/]" in result.output

    def test_malformed_training_file(self, runner, tmp_path):
        file = tmp_path / "bad.tsv"
        file.write_text("positive good\n", encoding="utf-8")
        result = runner.invoke(main, ["classify", "--train", str(file), "book"])
        assert result.exit_code == 2

    def test_unknown_label_in_training_file(self, runner, tmp_path):
        file = tmp_path / "neutral.tsv"
        file.write_text("positive\tgood\nnegative\tbad\nneutral\tmeh\n", encoding="utf-8")
        result = runner.invoke(main, ["classify", "--train", str(file), "good"])
        assert result.exit_code == 1
        assert "neutral" in result.output


class TestStatsCommand:

    def test_table(self, runner, train_file, stopwords_file):
        result = runner.invoke(main, [
            "stats", "--train", str(train_file), "--stopwords", str(stopwords_file),
        ])
        assert result.exit_code == 0, result.output
        assert "P(positive) = 0.3333" in result.output
        assert "P(negative) = 0.6667" in result.output
        assert "harry" in result.output
        assert "0.2500" in result.output
