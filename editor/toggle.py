"""Correct-answer marker toggling on the live document."""
from __future__ import annotations

import logging

from editor.document import TestDocument
from editor.lines import (
    CORRECT_MARKER,
    block_start_index,
    extract_lines,
    segment_blocks,
    strip_marker,
)

log = logging.getLogger(__name__)


def toggled_text(text: str, starred: bool) -> str:
    """Set or clear the marker after any leading indentation, as classify_line reads it."""
    rest = text.lstrip()
    indent = text[: len(text) - len(rest)]
    bare, _ = strip_marker(rest)
    return f"{indent}{CORRECT_MARKER}{bare}" if starred else f"{indent}{bare}"


def toggle_choice(
    document: TestDocument,
    question_index: int,
    choice_index: int,
    will_be_starred: bool,
) -> bool:
    """
    Star or un-star one choice line of a question.

    The target paragraph is located from a fresh segmentation of the document
    on every call. Indexes that no longer point at a paragraph are ignored.
    Returns True when the document changed.
    """
    blocks = segment_blocks(extract_lines(document))
    if question_index < 0 or choice_index < 0 or question_index >= len(blocks):
        log.debug("Toggle skipped: no question %d (%d blocks)", question_index, len(blocks))
        return False

    line_in_block = choice_index + 1
    block = blocks[question_index]
    if line_in_block >= len(block):
        log.debug(
            "Toggle skipped: question %d has no choice %d", question_index, choice_index
        )
        return False

    target = block_start_index(blocks, question_index) + line_in_block
    original = block.lines[line_in_block]
    updated = toggled_text(original, will_be_starred)
    if updated == original:
        return False

    document.replace_range(document.node_start(target), document.node_end(target), [updated])
    return True
