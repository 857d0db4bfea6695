"""Test document editing: line model, parsing, toggling and auto-continuation."""
from editor.continuation import AutoContinuation, next_choice_label
from editor.document import Cursor, Paragraph, TestDocument
from editor.lines import (
    Choice,
    Heading,
    QuestionBlock,
    Unrecognized,
    classify_line,
    extract_lines,
    segment_blocks,
)
from editor.parser import build_preview, parse_choice, parse_heading_text
from editor.toggle import toggle_choice

__all__ = [
    "AutoContinuation",
    "Choice",
    "Cursor",
    "Heading",
    "Paragraph",
    "QuestionBlock",
    "TestDocument",
    "Unrecognized",
    "build_preview",
    "classify_line",
    "extract_lines",
    "next_choice_label",
    "parse_choice",
    "parse_heading_text",
    "segment_blocks",
    "toggle_choice",
]
