from __future__ import annotations

import string
from typing import Any, Iterable, Mapping

from editor.document import TestDocument
from editor.lines import CORRECT_MARKER, Choice, Heading, classify_line
from models import ChoiceData, QuestionData

CHOICE_LETTERS = string.ascii_uppercase


def document_to_questions(source: TestDocument | Iterable[str]) -> list[QuestionData]:
    """
    Build the question payload from the editor lines.

    Choice lines attach to the most recent heading; lines that are neither,
    and choices seen before any heading, are dropped. An empty result means
    the document holds no questions.
    """
    lines = source.paragraph_texts() if isinstance(source, TestDocument) else source
    questions: list[QuestionData] = []
    current: QuestionData | None = None
    for line in lines:
        token = classify_line(line)
        if isinstance(token, Heading):
            current = QuestionData(text=token.text)
            questions.append(current)
        elif isinstance(token, Choice) and current is not None:
            current.choices.append(ChoiceData(text=token.text, is_correct=token.starred))
    return questions


def serialize_questions(questions: Iterable[QuestionData]) -> list[dict[str, Any]]:
    return [question.to_payload() for question in questions]


def questions_from_record(record: Mapping[str, Any]) -> list[QuestionData]:
    questions = []
    for question in record.get("questions") or []:
        choices = [
            ChoiceData(text=str(choice.get("text", "")), is_correct=bool(choice.get("isCorrect")))
            for choice in question.get("choices") or []
        ]
        questions.append(QuestionData(text=str(question.get("text", "")), choices=choices))
    return questions


def questions_to_lines(questions: Iterable[QuestionData]) -> list[str]:
    lines: list[str] = []
    for number, question in enumerate(questions, start=1):
        if len(question.choices) > len(CHOICE_LETTERS):
            raise ValueError(
                f"Question {number} has {len(question.choices)} choices; "
                f"at most {len(CHOICE_LETTERS)} can be lettered"
            )
        lines.append(f"Question {number}: {question.text}")
        for letter, choice in zip(CHOICE_LETTERS, question.choices):
            marker = CORRECT_MARKER if choice.is_correct else ""
            lines.append(f"{marker}{letter}. {choice.text}")
    return lines


def record_to_lines(record: Mapping[str, Any]) -> list[str]:
    """Rehydrate editor lines from a stored test; letters are renumbered A, B, C..."""
    return questions_to_lines(questions_from_record(record))


def record_to_document(record: Mapping[str, Any]) -> TestDocument:
    return TestDocument(record_to_lines(record))
