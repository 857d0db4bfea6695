"""Line classification, extraction and question block segmentation."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Union

if TYPE_CHECKING:
    from editor.document import TestDocument

CORRECT_MARKER = "*"

HEADING_RE = re.compile(r"^Question\s+(\d+):\s*(.*)$", re.IGNORECASE | re.DOTALL)
HEADING_PREFIX_RE = re.compile(r"^Question\s+\d+:", re.IGNORECASE)
CHOICE_RE = re.compile(r"^([A-Z])([.)])\s*(.*)$", re.IGNORECASE | re.DOTALL)


@dataclass(frozen=True)
class Heading:
    raw: str
    number: int
    text: str


@dataclass(frozen=True)
class Choice:
    raw: str
    label: str  # uppercase letter
    letter: str  # letter as typed
    punctuation: str  # "." or ")"
    text: str
    starred: bool = False


@dataclass(frozen=True)
class Unrecognized:
    raw: str
    text: str
    starred: bool = False


LineToken = Union[Heading, Choice, Unrecognized]


def strip_marker(text: str) -> tuple[str, bool]:
    """Remove a leading correctness marker and the whitespace after it."""
    if text.startswith(CORRECT_MARKER):
        return text[len(CORRECT_MARKER):].lstrip(), True
    return text, False


def is_heading(line: str) -> bool:
    return HEADING_PREFIX_RE.match(line.strip()) is not None


def classify_line(line: str) -> LineToken:
    """
    Classify a single line of the test document.

    Never raises: anything that is neither a heading nor a labelled choice
    comes back as Unrecognized.
    """
    stripped = line.strip()

    heading = HEADING_RE.match(stripped)
    if heading:
        return Heading(raw=line, number=int(heading.group(1)), text=heading.group(2).strip())

    body, starred = strip_marker(stripped)
    choice = CHOICE_RE.match(body)
    if choice:
        letter, punctuation, text = choice.groups()
        return Choice(
            raw=line,
            label=letter.upper(),
            letter=letter,
            punctuation=punctuation,
            text=text.strip(),
            starred=starred,
        )
    return Unrecognized(raw=line, text=body, starred=starred)


def extract_lines(document: "TestDocument") -> list[str]:
    """Flatten the document into one plain-text line per paragraph."""
    return document.paragraph_texts()


@dataclass
class QuestionBlock:
    lines: list[str] = field(default_factory=list)

    @property
    def heading(self) -> Heading | None:
        # Lines before the first heading form a block without one.
        if not self.lines:
            return None
        token = classify_line(self.lines[0])
        return token if isinstance(token, Heading) else None

    @property
    def body(self) -> list[str]:
        return self.lines[1:]

    def is_blank(self) -> bool:
        return all(not line.strip() for line in self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def segment_blocks(lines: Iterable[str]) -> list[QuestionBlock]:
    """
    Partition lines into question blocks.

    Each heading starts a new block. Lines before the first heading are kept
    in an implicit leading block, so every line lands in exactly one block.
    """
    blocks: list[QuestionBlock] = []
    current: list[str] = []
    for line in lines:
        if is_heading(line):
            if current:
                blocks.append(QuestionBlock(current))
            current = [line]
        else:
            current.append(line)
    if current:
        blocks.append(QuestionBlock(current))
    return blocks


def block_start_index(blocks: list[QuestionBlock], block_index: int) -> int:
    """Index of the first line of blocks[block_index] in the flat line list."""
    return sum(len(block) for block in blocks[:block_index])


def max_question_number(lines: Iterable[str]) -> int:
    numbers = [
        token.number
        for token in map(classify_line, lines)
        if isinstance(token, Heading)
    ]
    return max(numbers, default=0)
