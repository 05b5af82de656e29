import re
from collections import deque
from typing import Callable

from docread.core import decoder
from docread.core.models import DocumentNode, Run

Decoder = Callable[[bytes], DocumentNode]


def collect_matching_runs(root: DocumentNode, compiled_re: re.Pattern) -> list[Run]:
    """
    Walk the tree below `root` first-in-first-out and return the text of every
    leaf that the pattern matches.

    All children of a node are queued before any grandchild is visited, so
    runs come out level by level rather than in reading order.
    """
    matching_runs: list[Run] = []
    queue: deque[DocumentNode] = deque(root.children)

    while queue:
        node = queue.popleft()
        if node.is_text:
            if node.text is not None and compiled_re.search(node.text):
                matching_runs.append(node.text)
        else:
            queue.extend(node.children)

    return matching_runs


def extract_runs(raw: bytes, compiled_re: re.Pattern, *,
                 decode: Decoder = decoder.decode_docx) -> list[Run]:
    root = decode(raw)
    return collect_matching_runs(root, compiled_re)
