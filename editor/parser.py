"""Choice line parsing and preview cards for question blocks."""
from __future__ import annotations

from typing import Iterable

from editor.lines import (
    HEADING_PREFIX_RE,
    Choice,
    Heading,
    classify_line,
    segment_blocks,
)
from models import ParsedChoice, PreviewChoice, QuestionCard

UNKNOWN_LABEL = "?"


def parse_choice(line: str) -> ParsedChoice:
    """
    Parse a choice line such as "*B) Paris".

    Lines without a recognisable label degrade to label "?" with the
    marker-stripped text; this never raises.
    """
    token = classify_line(line)
    if isinstance(token, Choice):
        return ParsedChoice(raw=line, label=token.label, text=token.text, starred=token.starred)
    if isinstance(token, Heading):
        return ParsedChoice(raw=line, label=UNKNOWN_LABEL, text=line.strip())
    return ParsedChoice(raw=line, label=UNKNOWN_LABEL, text=token.text, starred=token.starred)


def parse_heading_text(line: str) -> str:
    return HEADING_PREFIX_RE.sub("", line.strip(), count=1).strip()


def build_preview(lines: Iterable[str]) -> list[QuestionCard]:
    cards: list[QuestionCard] = []
    for block_index, block in enumerate(segment_blocks(lines)):
        if block.heading is None and block.is_blank():
            continue
        choices = [
            PreviewChoice(index=index, choice=parse_choice(line))
            for index, line in enumerate(block.body)
            if line.strip()
        ]
        cards.append(
            QuestionCard(
                question_index=block_index,
                text=parse_heading_text(block.lines[0]),
                choices=choices,
                has_heading=block.heading is not None,
            )
        )
    return cards
