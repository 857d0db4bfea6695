from __future__ import annotations

import logging
from pathlib import Path

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from editor.document import TestDocument

log = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".docx", ".txt"}


def _iter_paragraph_texts(doc) -> list[str]:
    texts: list[str] = []
    body = doc.element.body
    # body children in order: w:p, w:tbl, w:sectPr
    for block in body.iterchildren():
        tag = block.tag
        if tag.endswith("}p"):
            texts.append(Paragraph(block, doc).text)
        elif tag.endswith("}tbl"):
            table = Table(block, doc)
            for row in table.rows:
                for cell in row.cells:
                    texts.extend(p.text for p in cell.paragraphs)
    return texts


def load_docx_document(path: Path) -> TestDocument:
    """One document paragraph per Word paragraph, tables read row by row."""
    path = Path(path)
    doc = Document(str(path))
    texts = _iter_paragraph_texts(doc)
    log.info("Loaded %d paragraph(s) from %s", len(texts), path.name)
    return TestDocument(texts)


def load_text_document(path: Path) -> TestDocument:
    path = Path(path)
    return TestDocument.from_text(path.read_text(encoding="utf-8"))


def load_document(path: Path) -> TestDocument:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file type: {suffix or path.name} (use .docx or .txt)")
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if suffix == ".docx":
        return load_docx_document(path)
    return load_text_document(path)
