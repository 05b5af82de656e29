import re
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable

import structlog

from docread.core import decoder, extractor, segmenter
from docread.core.errors import DocreadError
from docread.core.models import RunMatch, SearchResult, SearchSummary
from docread.core.sources import FileSource

Reporter = Callable[[SearchResult], None]

logger = structlog.get_logger()


def search_source(source: FileSource, compiled_re: re.Pattern, *,
                  context_length: int, quiet: bool,
                  decode: extractor.Decoder = decoder.decode_docx) -> SearchResult:
    """
    Read, decode and match one source, staging everything needed to report it.

    Taxonomy errors are captured in the result; anything else propagates.
    """
    result = SearchResult(identifier=source.identifier)

    try:
        raw = source.read_into_buffer()
        result.runs = extractor.extract_runs(raw, compiled_re, decode=decode)
    except DocreadError as e:
        logger.debug("source_failed", source=result.identifier, error=str(e))
        result.error = e
        return result

    if not quiet:
        result.matches = [RunMatch(run=run, triples=segmenter.segment(run, compiled_re, context_length))
                          for run in result.runs]

    logger.debug("source_searched", source=result.identifier, runs=len(result.runs))
    return result


def search_sources(
    sources: Iterable[FileSource],
    compiled_re: re.Pattern,
    *,
    context_length: int = segmenter.DEFAULT_CONTEXT_LENGTH,
    quiet: bool = False,
    report: Reporter,
    max_workers: int | None = None,
    decode: extractor.Decoder = decoder.decode_docx
) -> SearchSummary:
    """
    Search every source on a thread pool and hand each result to `report`.

    `report` runs under a single lock, so one source's output block is never
    interleaved with another's. Reports arrive in completion order.
    """
    summary = SearchSummary()
    output_lock = threading.Lock()

    def work(source: FileSource) -> None:
        result = search_source(source, compiled_re, context_length=context_length,
                               quiet=quiet, decode=decode)
        with output_lock:
            summary.searched += 1
            if not result.ok:
                summary.failed += 1
            elif result.runs:
                summary.matched += 1
                summary.runs += len(result.runs)
            report(result)

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="docread") as executor:
        futures = [executor.submit(work, source) for source in sources]

    # re-raise the first unexpected failure now that every source has finished
    for future in futures:
        future.result()

    logger.debug("search_finished", searched=summary.searched, matched=summary.matched,
                 failed=summary.failed)
    return summary
