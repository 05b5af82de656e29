from typer.testing import CliRunner

from docread.ui.main import app

from conftest import build_docx, replace_member

runner = CliRunner()


def test_searches_directory_and_archives(corpus):
    result = runner.invoke(app, ["--regex", "[Hh]ello", str(corpus)])

    assert result.exit_code == 0
    assert f"Searched file--> {corpus / 'greeting.docx'}" in result.output
    assert f"member inner/letter.docx in {corpus / 'bundle.zip'}" in result.output
    assert "1-1-> Hello, world!" in result.output
    assert "Searched 4 files" in result.output
    assert "Searched 1 archives" in result.output


def test_quiet_reports_counts_only(corpus):
    result = runner.invoke(app, ["-r", "Hello", "-q", str(corpus)])

    assert result.exit_code == 0
    assert "Matched 1 runs" in result.output
    assert "No matches found" in result.output
    assert "1-1->" not in result.output


def test_context_option_trims_windows(corpus):
    result = runner.invoke(app, ["-r", "world", "-c", "2", str(corpus / "greeting.docx")])

    assert result.exit_code == 0
    assert "1-1-> , world!" in result.output


def test_failed_sources_do_not_fail_the_run(corpus):
    result = runner.invoke(app, ["-r", "Hello", str(corpus)])

    assert result.exit_code == 0
    assert f"Searched file--> {corpus / 'broken.docx'}" in result.output
    assert "DecodeError" in result.output


def test_glob_option(corpus):
    result = runner.invoke(app, ["-r", "greetings", "-g", f"{corpus}/nested/*.docx"])

    assert result.exit_code == 0
    assert "Searched 1 files" in result.output
    assert "1-1-> No greetings at all" in result.output


def test_invalid_regex_aborts_before_searching(corpus):
    result = runner.invoke(app, ["-r", "[unclosed", str(corpus)])

    assert result.exit_code == 2
    assert "Invalid regex" in result.output
    assert "Searched file-->" not in result.output


def test_glob_must_end_with_docx(tmp_path):
    result = runner.invoke(app, ["-r", "x", "-g", f"{tmp_path}/*.txt"])

    assert result.exit_code == 2
    assert "does not end with .docx" in result.output


def test_unreadable_document_part_is_reported_and_run_completes(tmp_path):
    build_docx(tmp_path / "good.docx", paragraphs=["Hello, world!"])
    odd = replace_member(build_docx(tmp_path / "odd.docx", paragraphs=["Hello"]),
                         "word/document.xml", b"<foo/>")

    result = runner.invoke(app, ["-r", "Hello", str(tmp_path)])

    assert result.exit_code == 0
    assert f"Searched file--> {odd}" in result.output
    assert "DecodeError" in result.output
    assert "1-1-> Hello, world!" in result.output
    assert "Searched 2 files" in result.output
