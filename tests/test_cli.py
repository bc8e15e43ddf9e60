"""Tests for the CLI module."""

import json

import pytest

from pubparse.cli import main


@pytest.fixture
def input_dir(write_xml, pubmed_xml, book_xml, tmp_path):
    """Input directory holding two valid PubMed documents."""
    write_xml("pubmed.xml", pubmed_xml)
    write_xml("books/book.xml", book_xml)
    return tmp_path / "input"


class TestCLI:
    """Tests for the top-level parser."""

    def test_no_command_prints_help(self, capsys):
        result = main([])

        assert result == 0
        assert "pubmed" in capsys.readouterr().out

    def test_input_is_required(self):
        with pytest.raises(SystemExit):
            main(["pubmed"])


class TestCLIPubmed:
    """Tests for the pubmed command."""

    def test_converts_directory(self, input_dir, tmp_path):
        output_dir = tmp_path / "out"

        result = main([
            "pubmed",
            "-i", str(input_dir),
            "-o", str(output_dir),
            "--workers", "2",
            "--no-progress",
        ])

        assert result == 0
        assert json.loads((output_dir / "pubmed.json").read_text())["PubmedArticles"]
        assert json.loads((output_dir / "books" / "book.json").read_text())[
            "PubmedBookArticles"
        ]

    def test_writes_report(self, input_dir, tmp_path):
        output_dir = tmp_path / "out"

        main(["pubmed", "-i", str(input_dir), "-o", str(output_dir), "--no-progress"])

        report = (output_dir / "report.tsv").read_text()
        assert ">>> Number of Inputs: 2" in report
        assert ">>> Mode: pubmed" in report
        assert report.count(">>> Input file:") == 2

    def test_default_output_directory(self, input_dir, tmp_path):
        result = main(["pubmed", "-i", str(input_dir), "--no-progress"])

        assert result == 0
        assert (tmp_path / "processed_input" / "pubmed.json").exists()

    def test_single_file(self, input_dir, tmp_path):
        output_dir = tmp_path / "out"

        result = main([
            "pubmed",
            "-i", str(input_dir / "pubmed.xml"),
            "-o", str(output_dir),
            "--no-progress",
        ])

        assert result == 0
        assert (output_dir / "pubmed.json").exists()

    def test_failures_give_nonzero_exit(self, input_dir, write_xml, foreign_xml, tmp_path):
        """Every item is attempted, but any failure makes the run fail."""
        write_xml("catalog.xml", foreign_xml)
        output_dir = tmp_path / "out"

        result = main(["pubmed", "-i", str(input_dir), "-o", str(output_dir), "--no-progress"])

        assert result == 1
        assert (output_dir / "pubmed.json").read_text()
        assert (output_dir / "report.tsv").read_text().count(">>> Input file:") == 2

    def test_pmc_document_in_pubmed_mode(self, write_xml, pmc_xml, tmp_path, caplog):
        source = write_xml("article.xml", pmc_xml)

        result = main(["pubmed", "-i", str(source), "-o", str(tmp_path / "out"), "--no-progress"])

        assert result == 1
        assert "unrecognized document structure" in caplog.text

    def test_missing_input(self, tmp_path, caplog):
        result = main(["pubmed", "-i", str(tmp_path / "nope")])

        assert result == 1
        assert "Input path does not exist" in caplog.text

    def test_invalid_workers(self, input_dir, tmp_path, caplog):
        result = main([
            "pubmed",
            "-i", str(input_dir),
            "-o", str(tmp_path / "out"),
            "--workers", "0",
        ])

        assert result == 1
        assert "invalid number of workers" in caplog.text
        assert not (tmp_path / "out").exists()

    def test_missing_schema_dir(self, input_dir, tmp_path, caplog):
        result = main([
            "pubmed",
            "-i", str(input_dir),
            "-o", str(tmp_path / "out"),
            "--schema-dir", str(tmp_path / "schemas"),
        ])

        assert result == 1
        assert "schema document not found" in caplog.text
        assert not (tmp_path / "out").exists()


class TestCLIPMC:
    """Tests for the pmc command."""

    def test_converts_article(self, write_xml, pmc_without_back_xml, tmp_path):
        source = write_xml("article.xml", pmc_without_back_xml)
        output_dir = tmp_path / "out"

        result = main(["pmc", "-i", str(source), "-o", str(output_dir), "--no-progress"])

        assert result == 0
        document = json.loads((output_dir / "article.json").read_text())
        assert document["ArticleType"] == "brief-report"
        assert document["Back"]["References"]["References"] == []

    def test_pubmed_document_in_pmc_mode(self, write_xml, pubmed_xml, tmp_path):
        source = write_xml("pubmed.xml", pubmed_xml)

        result = main(["pmc", "-i", str(source), "-o", str(tmp_path / "out"), "--no-progress"])

        assert result == 1
