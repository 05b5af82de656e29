from dataclasses import dataclass, field
from glob import glob

import structlog

from docread.core import archives
from docread.core.archives import ARCHIVE_SUFFIX, DOCX_SUFFIX
from docread.core.errors import ArchiveError
from docread.core.models import SearchResult
from docread.core.sources import ArchiveMember, FileSource, PlainFile

DEFAULT_GLOB = f"**/*{DOCX_SUFFIX}"

logger = structlog.get_logger()


@dataclass
class Discovery:
    # Everything found for one glob, ready for dispatch
    sources: list[FileSource] = field(default_factory=list)
    file_count: int = 0
    archive_count: int = 0
    listing_failures: list[SearchResult] = field(default_factory=list)


# Turn a command line path into a glob matching every document below it
def make_glob(cli_path: str) -> str:
    path = cli_path.rstrip("/")
    path = path.removesuffix(ARCHIVE_SUFFIX)

    if path.endswith(DOCX_SUFFIX):
        return path

    return f"{path}/**/*{DOCX_SUFFIX}"

def archive_glob(docx_glob: str) -> str:
    return docx_glob.removesuffix(DOCX_SUFFIX) + ARCHIVE_SUFFIX

def is_valid_glob(docx_glob: str) -> bool:
    return docx_glob.endswith(DOCX_SUFFIX)


def collect_sources(docx_glob: str) -> Discovery:
    """
    Expand `docx_glob` into plain file sources and, through the sibling
    archive glob, into one source per document inside each archive.

    An archive that cannot be listed is recorded as a failure and skipped.
    """
    discovery = Discovery()

    for path in sorted(glob(docx_glob, recursive=True)):
        discovery.sources.append(PlainFile(path=path))
        discovery.file_count += 1

    for archive_path in sorted(glob(archive_glob(docx_glob), recursive=True)):
        discovery.archive_count += 1
        try:
            members = archives.list_members(archive_path, DOCX_SUFFIX)
        except ArchiveError as e:
            logger.warning("archive_listing_failed", archive=archive_path, error=str(e))
            discovery.listing_failures.append(SearchResult(identifier=archive_path, error=e))
            continue

        discovery.sources.extend(ArchiveMember(archive_path=archive_path, member_name=name)
                                 for name in members)

    logger.debug("sources_collected", glob=docx_glob, files=discovery.file_count,
                 archives=discovery.archive_count, sources=len(discovery.sources))
    return discovery
