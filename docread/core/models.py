from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from docread.core.errors import DocreadError

# A leaf text string from the document tree that satisfies the search pattern
Run = str

TEXT_KIND = "text"


@dataclass(frozen=True)
class DocumentNode:
    # Generic tree node produced by a decoder.
    # Leaves carry text, interior nodes carry ordered children.
    kind: str
    text: str | None = None
    children: tuple[DocumentNode, ...] = ()

    @property
    def is_text(self) -> bool:
        return self.kind == TEXT_KIND


class MatchTriple(NamedTuple):
    # Context window around one pattern occurrence inside a run
    preamble: str
    matched: str
    postamble: str

    @classmethod
    def from_segments(cls, segments: list[str]) -> MatchTriple:
        """Build a triple from up to three consecutive segments.

        Missing trailing segments default to the empty string.
        """
        padded = list(segments[:3]) + [""] * (3 - len(segments[:3]))
        return cls(*padded)


class RunMatch(NamedTuple):
    # A matching run together with its context windows
    run: Run
    triples: list[MatchTriple]


@dataclass
class SearchResult:
    # Outcome of searching one file source
    identifier: str
    runs: list[Run] = field(default_factory=list)
    matches: list[RunMatch] = field(default_factory=list)
    error: DocreadError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SearchSummary:
    # Aggregate counts for one coordinator run
    searched: int = 0
    matched: int = 0
    failed: int = 0
    runs: int = 0
