import re

from docread.core.models import MatchTriple

DEFAULT_CONTEXT_LENGTH = 40


# Python strings index code points, so slicing never splits a character.
def _head(text: str, length: int) -> str:
    return text[:length]

def _tail(text: str, length: int) -> str:
    return text[max(len(text) - length, 0):]


def segment(run: str, compiled_re: re.Pattern,
            context_length: int = DEFAULT_CONTEXT_LENGTH) -> list[MatchTriple]:
    """
    Split `run` into (preamble, matched, postamble) windows, one per
    non-overlapping occurrence of the pattern.

    The text between two occurrences feeds both the postamble of the first
    (its head) and the preamble of the second (its tail). When that gap is no
    longer than `context_length` both windows show the same characters.
    """
    if context_length < 0:
        raise ValueError(f"context_length must be >= 0, got {context_length}")

    segments: list[str] = []
    start = 0
    prev_match_end: int | None = None

    for match in compiled_re.finditer(run):
        if match.start() == match.end():
            continue

        gap = run[start:match.start()]
        if prev_match_end is not None:
            segments.append(_head(gap, context_length))
        segments.append(_tail(gap, context_length))
        segments.append(match.group())

        prev_match_end = start = match.end()

    if prev_match_end is None:
        return []

    if start < len(run):
        segments.append(_head(run[start:], context_length))

    return [MatchTriple.from_segments(segments[i:i + 3]) for i in range(0, len(segments), 3)]
