class DocreadError(Exception):
    """Base class for every error reported against a search."""


class SourceIOError(DocreadError):
    """A plain file could not be opened or read."""


class ArchiveError(DocreadError):
    """An archive is corrupt, unreadable, or lacks the requested member."""


class DecodeError(DocreadError):
    """Raw bytes do not form a readable document."""


class PatternError(DocreadError):
    """The search pattern is not a valid regular expression."""
