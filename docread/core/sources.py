from __future__ import annotations

from dataclasses import dataclass

from docread.core import archives
from docread.core.errors import SourceIOError


@dataclass(frozen=True)
class PlainFile:
    # A document stored directly on disk
    path: str

    @property
    def identifier(self) -> str:
        return self.path

    def read_into_buffer(self) -> bytes:
        try:
            with open(self.path, "rb") as file:
                return file.read()
        except OSError as e:
            raise SourceIOError(f"Cannot read {self.path}: {e.strerror or e}") from e


@dataclass(frozen=True)
class ArchiveMember:
    # A document stored as a named entry inside a zip archive
    archive_path: str
    member_name: str

    @property
    def identifier(self) -> str:
        return f"member {self.member_name} in {self.archive_path}"

    # The member may have disappeared since listing; that surfaces as ArchiveError.
    def read_into_buffer(self) -> bytes:
        return archives.read_member(self.archive_path, self.member_name)


FileSource = PlainFile | ArchiveMember
