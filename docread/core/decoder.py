import io
import json

import docx
from docx.table import Table
from docx.text.hyperlink import Hyperlink
from docx.text.paragraph import Paragraph

from docread.core.errors import DecodeError
from docread.core.models import DocumentNode, TEXT_KIND

# Node kinds emitted for Word documents
DOCUMENT_KIND = "document"
PARAGRAPH_KIND = "paragraph"
RUN_KIND = "run"
HYPERLINK_KIND = "hyperlink"
TABLE_KIND = "table"
TABLE_ROW_KIND = "tableRow"
TABLE_CELL_KIND = "tableCell"


def _text_leaf(text: str) -> tuple[DocumentNode, ...]:
    if not text:
        return ()
    return (DocumentNode(kind=TEXT_KIND, text=text),)

def _run_node(run) -> DocumentNode:
    return DocumentNode(kind=RUN_KIND, children=_text_leaf(run.text))

def _paragraph_node(paragraph: Paragraph) -> DocumentNode:
    children: list[DocumentNode] = []

    for item in paragraph.iter_inner_content():
        if isinstance(item, Hyperlink):
            children.append(DocumentNode(kind=HYPERLINK_KIND,
                                         children=tuple(_run_node(run) for run in item.runs)))
        else:
            children.append(_run_node(item))

    return DocumentNode(kind=PARAGRAPH_KIND, children=tuple(children))

def _table_node(table: Table) -> DocumentNode:
    rows: list[DocumentNode] = []
    # a merged cell spans grid columns and rows; emit it once per table
    seen_cells: set = set()

    for row in table.rows:
        cells: list[DocumentNode] = []
        for cell in row.cells:
            if cell._tc in seen_cells:
                continue
            seen_cells.add(cell._tc)
            cells.append(DocumentNode(kind=TABLE_CELL_KIND, children=_block_nodes(cell)))
        rows.append(DocumentNode(kind=TABLE_ROW_KIND, children=tuple(cells)))

    return DocumentNode(kind=TABLE_KIND, children=tuple(rows))

# Paragraphs and tables of a document or cell, in document order
def _block_nodes(container) -> tuple[DocumentNode, ...]:
    blocks: list[DocumentNode] = []

    for item in container.iter_inner_content():
        if isinstance(item, Table):
            blocks.append(_table_node(item))
        else:
            blocks.append(_paragraph_node(item))

    return tuple(blocks)


def decode_docx(raw: bytes) -> DocumentNode:
    """
    Decode the bytes of a Word document into a generic node tree.

    Raises DecodeError when the bytes are not a readable Word package,
    including packages whose parts python-docx cannot make sense of.
    """
    try:
        document = docx.Document(io.BytesIO(raw))
        return DocumentNode(kind=DOCUMENT_KIND, children=_block_nodes(document))
    except Exception as e:
        raise DecodeError(f"Not a readable Word document: {type(e).__name__}: {e}") from e


def node_from_mapping(mapping: object) -> DocumentNode:
    if not isinstance(mapping, dict):
        raise DecodeError(f"Expected a node object, got {type(mapping).__name__}")

    kind = str(mapping.get("type", ""))
    data = mapping.get("data") or {}
    if not isinstance(data, dict):
        raise DecodeError(f"Node data for {kind!r} must be an object")

    if kind == TEXT_KIND:
        text = data.get("text")
        if not isinstance(text, str):
            raise DecodeError("Text node without a text string")
        return DocumentNode(kind=kind, text=text)

    children = data.get("children") or []
    if not isinstance(children, list):
        raise DecodeError(f"Children of {kind!r} must be a list")

    return DocumentNode(kind=kind, children=tuple(node_from_mapping(child) for child in children))

def decode_tree_json(raw: bytes) -> DocumentNode:
    """
    Decode a JSON serialised document tree of the form
    {"document": {"children": [{"type": ..., "data": {...}}, ...]}}.
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON document tree: {e}") from e

    document = payload.get("document") if isinstance(payload, dict) else None
    if not isinstance(document, dict):
        raise DecodeError("JSON document tree has no 'document' object")

    children = document.get("children") or []
    if not isinstance(children, list):
        raise DecodeError("Document children must be a list")

    return DocumentNode(kind=DOCUMENT_KIND,
                        children=tuple(node_from_mapping(child) for child in children))
