"""Line-break handling that continues the question/choice structure."""
from __future__ import annotations

import logging
import re

from editor.document import TestDocument
from editor.lines import is_heading, max_question_number, strip_marker

log = logging.getLogger(__name__)

FIRST_CHOICE = "A."
LAST_CHOICE_RE = re.compile(r"^D[.)]", re.IGNORECASE)
NEXT_CHOICE_RE = re.compile(r"^([A-C])([.)])", re.IGNORECASE)


def next_choice_label(line: str) -> str:
    """'A.' -> 'B.', 'b)' -> 'c)'; anything unlabelled starts at 'A.'."""
    match = re.match(r"^([A-Z])([.)])", line, re.IGNORECASE)
    if not match:
        return FIRST_CHOICE
    letter, punctuation = match.groups()
    return f"{chr(ord(letter) + 1)}{punctuation}"


class AutoContinuation:
    """
    Decides what a line break does after a heading or choice line.

    handle_line_break runs before the default paragraph split and returns
    True when it inserted the next structural line itself.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def completed_line(self, document: TestDocument) -> str:
        return document.text_before_cursor().strip()

    def handle_line_break(self, document: TestDocument) -> bool:
        if not self.enabled:
            return False

        line = self.completed_line(document)
        if is_heading(line):
            document.insert_paragraphs([f"{FIRST_CHOICE} "])
            return True

        body, _ = strip_marker(line)
        if LAST_CHOICE_RE.match(body):
            next_number = max_question_number(document.paragraph_texts()) + 1
            log.debug("Last choice completed, opening question %d", next_number)
            document.insert_paragraphs(["", f"Question {next_number}: "])
            return True

        if NEXT_CHOICE_RE.match(body):
            document.insert_paragraphs([f"{next_choice_label(body)} "])
            return True

        return False
