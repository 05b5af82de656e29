import zipfile

import structlog

from docread.core.errors import ArchiveError

DOCX_SUFFIX = ".docx"
ARCHIVE_SUFFIX = ".zip"

# macOS resource-fork metadata folder added by Finder's "Compress"
JUNK_DIR_MARKER = "__MACOSX"

logger = structlog.get_logger()


def _open_archive(archive_path: str) -> zipfile.ZipFile:
    try:
        return zipfile.ZipFile(archive_path)
    except zipfile.BadZipFile as e:
        raise ArchiveError(f"Corrupt archive {archive_path}: {e}") from e
    except OSError as e:
        raise ArchiveError(f"Cannot open archive {archive_path}: {e}") from e


def list_members(archive_path: str, suffix: str = DOCX_SUFFIX) -> list[str]:
    """
    Return the names of every member of `archive_path` ending with `suffix`,
    in archive order. Members under a junk metadata directory are skipped.

    Raises ArchiveError if the archive cannot be opened or read.
    """
    with _open_archive(archive_path) as archive:
        names = [info.filename for info in archive.infolist()
                 if info.filename.endswith(suffix) and JUNK_DIR_MARKER not in info.filename]

    logger.debug("archive_listed", archive=archive_path, members=len(names))
    return names


def read_member(archive_path: str, member_name: str) -> bytes:
    with _open_archive(archive_path) as archive:
        try:
            return archive.read(member_name)
        except KeyError as e:
            raise ArchiveError(f"No member {member_name} in {archive_path}") from e
        except (zipfile.BadZipFile, zipfile.LargeZipFile, NotImplementedError, OSError) as e:
            raise ArchiveError(f"Cannot extract {member_name} from {archive_path}: {e}") from e
