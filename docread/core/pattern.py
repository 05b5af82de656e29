import re

from docread.core.errors import PatternError


# Compile the user pattern once, before any source is searched
def compile_pattern(pattern: str, *, ignore_case: bool = False) -> re.Pattern:
    if not pattern or not pattern.strip():
        raise PatternError("Pattern must not be empty")

    flags = re.IGNORECASE if ignore_case else 0

    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise PatternError(str(e)) from e
