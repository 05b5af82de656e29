import json
import zipfile
from pathlib import Path

import docx
import pytest
import structlog


def build_docx(path: Path, *, paragraphs: list[str] = (), table: list[list[str]] | None = None,
               trailing: list[str] = ()) -> Path:
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)

    if table:
        grid = document.add_table(rows=len(table), cols=len(table[0]))
        for row_index, row in enumerate(table):
            for col_index, text in enumerate(row):
                grid.cell(row_index, col_index).text = text

    for text in trailing:
        document.add_paragraph(text)

    document.save(str(path))
    return path

def docx_bytes(tmp_path: Path, **kwargs) -> bytes:
    return build_docx(tmp_path / "scratch.docx", **kwargs).read_bytes()

def build_zip(path: Path, members: dict[str, bytes]) -> Path:
    with zipfile.ZipFile(path, "w") as archive:
        for name, payload in members.items():
            archive.writestr(name, payload)
    return path

def replace_member(path: Path, name: str, payload: bytes) -> Path:
    with zipfile.ZipFile(path) as archive:
        members = {info.filename: archive.read(info) for info in archive.infolist()}
    members[name] = payload
    return build_zip(path, members)

def tree_json(children: list[dict]) -> bytes:
    return json.dumps({"document": {"children": children}}).encode("utf-8")

def text_node(text: str) -> dict:
    return {"type": "text", "data": {"text": text}}

def branch_node(kind: str, *children: dict) -> dict:
    return {"type": kind, "data": {"children": list(children)}}


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    # the CLI points structlog at the stderr of its test runner
    structlog.reset_defaults()


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """A directory with two loose documents, one archive and one broken file."""
    root = tmp_path / "corpus"
    (root / "nested").mkdir(parents=True)

    build_docx(root / "greeting.docx", paragraphs=["Hello, world!", "Nothing here"])
    build_docx(root / "nested" / "plain.docx", paragraphs=["No greetings at all"])
    (root / "broken.docx").write_bytes(b"this is not a zip package")

    member = docx_bytes(tmp_path, paragraphs=["hello from the archive"])
    build_zip(root / "bundle.zip", {
        "inner/letter.docx": member,
        "__MACOSX/inner/._letter.docx": b"resource fork",
        "notes.txt": b"hello",
    })
    return root
