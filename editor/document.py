"""
Paragraph document edited by the test authoring tools.

Positions follow the ProseMirror convention: every paragraph is a node of
size len(text) + 2 (an opening token, its characters, a closing token), so
paragraph i opens at node_start(i) and its text starts one position later.
All mutation goes through insert_text, insert_paragraphs, replace_range,
split_paragraph and set_selection.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

log = logging.getLogger(__name__)


@dataclass
class Paragraph:
    text: str = ""

    @property
    def node_size(self) -> int:
        return len(self.text) + 2


@dataclass(frozen=True)
class Cursor:
    paragraph: int
    offset: int


class TestDocument:
    __test__ = False  # not a pytest test class

    def __init__(self, paragraphs: Iterable[str] = ()):
        self._paragraphs: list[Paragraph] = [Paragraph(text) for text in paragraphs]
        self.version = 0
        if self._paragraphs:
            last = len(self._paragraphs) - 1
            self._cursor = Cursor(last, len(self._paragraphs[last].text))
        else:
            self._cursor = Cursor(0, 0)

    @classmethod
    def from_text(cls, text: str) -> "TestDocument":
        if not text:
            return cls()
        return cls(text.splitlines())

    def __len__(self) -> int:
        return len(self._paragraphs)

    def __repr__(self) -> str:
        return f"<TestDocument(paragraphs={len(self._paragraphs)}, cursor={self._cursor})>"

    # ---- read access ----
    @property
    def selection(self) -> Cursor:
        return self._cursor

    @property
    def content_size(self) -> int:
        return sum(p.node_size for p in self._paragraphs)

    def paragraph_texts(self) -> list[str]:
        return [p.text for p in self._paragraphs]

    def text(self) -> str:
        return "\n".join(self.paragraph_texts())

    def node_start(self, index: int) -> int:
        if index < 0 or index > len(self._paragraphs):
            raise ValueError(f"Paragraph index out of range: {index}")
        return sum(p.node_size for p in self._paragraphs[:index])

    def node_end(self, index: int) -> int:
        return self.node_start(index) + self._paragraphs[index].node_size

    def cursor_position(self) -> int:
        if not self._paragraphs:
            return 0
        return self.node_start(self._cursor.paragraph) + 1 + self._cursor.offset

    def text_before_cursor(self) -> str:
        if not self._paragraphs:
            return ""
        paragraph = self._paragraphs[self._cursor.paragraph]
        return paragraph.text[: self._cursor.offset]

    def resolve(self, pos: int) -> Cursor:
        """Map an absolute text position to (paragraph, offset)."""
        start = 0
        for index, paragraph in enumerate(self._paragraphs):
            text_start = start + 1
            if text_start <= pos <= text_start + len(paragraph.text):
                return Cursor(index, pos - text_start)
            start += paragraph.node_size
        raise ValueError(f"Position {pos} is not inside a paragraph")

    def _boundary_index(self, pos: int) -> int:
        start = 0
        for index, paragraph in enumerate(self._paragraphs):
            if pos == start:
                return index
            start += paragraph.node_size
        if pos == start:
            return len(self._paragraphs)
        raise ValueError(f"Position {pos} is not a paragraph boundary")

    # ---- mutation ----
    def _touch(self) -> None:
        self.version += 1

    def _ensure_paragraph(self) -> None:
        if not self._paragraphs:
            self._paragraphs.append(Paragraph())
            self._cursor = Cursor(0, 0)

    def set_selection(self, pos: int) -> Cursor:
        self._cursor = self.resolve(pos)
        return self._cursor

    def insert_text(self, text: str) -> None:
        """Insert inline text at the cursor and move the cursor after it."""
        if "\n" in text:
            raise ValueError("Inline text cannot contain line breaks")
        self._ensure_paragraph()
        cursor = self._cursor
        paragraph = self._paragraphs[cursor.paragraph]
        paragraph.text = paragraph.text[: cursor.offset] + text + paragraph.text[cursor.offset:]
        self._cursor = Cursor(cursor.paragraph, cursor.offset + len(text))
        self._touch()

    def insert_paragraphs(self, texts: Sequence[str]) -> None:
        """
        Insert whole paragraphs at the cursor.

        The current paragraph is split at the cursor: the head stays in place,
        the new paragraphs follow it, and any tail text moves after them. The
        cursor ends at the end of the last inserted paragraph.
        """
        if not texts:
            return
        self._ensure_paragraph()
        cursor = self._cursor
        current = self._paragraphs[cursor.paragraph]
        head, tail = current.text[: cursor.offset], current.text[cursor.offset:]
        current.text = head

        new_paragraphs = [Paragraph(text) for text in texts]
        if tail:
            new_paragraphs.append(Paragraph(tail))
        insert_at = cursor.paragraph + 1
        self._paragraphs[insert_at:insert_at] = new_paragraphs

        last = cursor.paragraph + len(texts)
        self._cursor = Cursor(last, len(self._paragraphs[last].text))
        self._touch()

    def split_paragraph(self) -> None:
        """Default line break: split the current paragraph at the cursor."""
        self._ensure_paragraph()
        cursor = self._cursor
        current = self._paragraphs[cursor.paragraph]
        head, tail = current.text[: cursor.offset], current.text[cursor.offset:]
        current.text = head
        self._paragraphs.insert(cursor.paragraph + 1, Paragraph(tail))
        self._cursor = Cursor(cursor.paragraph + 1, 0)
        self._touch()

    def replace_range(self, start: int, end: int, texts: Sequence[str]) -> None:
        """Replace the paragraphs between two node boundaries with new ones."""
        first = self._boundary_index(start)
        stop = self._boundary_index(end)
        if stop < first:
            raise ValueError(f"Invalid range: {start}..{end}")

        self._paragraphs[first:stop] = [Paragraph(text) for text in texts]
        self._cursor = self._map_cursor(first, stop, len(texts))
        self._touch()
        log.debug("Replaced paragraphs %d..%d with %d paragraph(s)", first, stop, len(texts))

    def _map_cursor(self, first: int, stop: int, inserted: int) -> Cursor:
        cursor = self._cursor
        if not self._paragraphs:
            return Cursor(0, 0)
        if cursor.paragraph < first:
            return cursor
        if cursor.paragraph >= stop:
            index = cursor.paragraph + inserted - (stop - first)
            if index >= len(self._paragraphs):
                index = len(self._paragraphs) - 1
                return Cursor(index, len(self._paragraphs[index].text))
            return Cursor(index, cursor.offset)
        # cursor was inside the replaced range
        if inserted == 0:
            index = min(first, len(self._paragraphs) - 1)
            return Cursor(index, len(self._paragraphs[index].text))
        index = min(cursor.paragraph, first + inserted - 1)
        return Cursor(index, min(cursor.offset, len(self._paragraphs[index].text)))
