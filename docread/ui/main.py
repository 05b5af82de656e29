import logging
import sys
from typing import Optional

import structlog
import typer

from docread.core import coordinator, discovery, segmenter
from docread.core.errors import PatternError
from docread.core.pattern import compile_pattern
from docread.ui.console import ConsoleReporter

app = typer.Typer(
    name="docread",
    help="Search Word documents, loose or inside zip archives, for a regular expression.",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.command()
def search(
    regex: str = typer.Option(..., "--regex", "-r", help="Regular expression to search for, e.g. 'Hi|[Hh]ello'"),
    path: Optional[str] = typer.Argument(None, help="Directory, .docx file or .zip archive to search (overrides --glob)"),
    glob_pattern: str = typer.Option(discovery.DEFAULT_GLOB, "--glob", "-g", envvar="DOCREAD_GLOB",
                                     help="Glob for documents, must end with .docx; quote it to stop shell expansion"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Show file names & match status only"),
    ignore_case: bool = typer.Option(False, "--ignore-case", "-i", help="Match case-insensitively"),
    context: int = typer.Option(segmenter.DEFAULT_CONTEXT_LENGTH, "--context", "-c", min=0,
                                envvar="DOCREAD_CONTEXT", help="Characters of context shown around each match"),
    workers: Optional[int] = typer.Option(None, "--workers", "-j", min=1, envvar="DOCREAD_WORKERS",
                                          help="Worker threads (default: executor default)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
):
    """
    Search every matching .docx file, and every .docx inside matching .zip
    archives, for REGEX.

    Examples:
        docread --regex "Hi|[Hh]ello"
        docread -r "invoice \\d+" -q ./letters
    """
    configure_logging(verbose)
    logger = structlog.get_logger()

    docx_glob = discovery.make_glob(path) if path else glob_pattern
    reporter = ConsoleReporter(quiet=quiet)

    if not discovery.is_valid_glob(docx_glob):
        reporter.error_console.print(f"Glob pattern {docx_glob} does not end with .docx", markup=False)
        raise typer.Exit(code=2)

    try:
        compiled_re = compile_pattern(regex, ignore_case=ignore_case)
    except PatternError as e:
        reporter.error_console.print(f"Invalid regex: {e}", markup=False)
        raise typer.Exit(code=2)

    found = discovery.collect_sources(docx_glob)
    logger.info("search_started", glob=docx_glob, sources=len(found.sources))

    for failure in found.listing_failures:
        reporter(failure)

    summary = coordinator.search_sources(found.sources, compiled_re,
                                         context_length=context, quiet=quiet,
                                         report=reporter, max_workers=workers)

    reporter.print_summary(summary=summary, archive_count=found.archive_count,
                           pattern=regex, docx_glob=docx_glob)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
