from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class ParsedChoice:
    raw: str
    label: str  # "A".."Z", or "?" when the line has no label
    text: str
    starred: bool = False


@dataclass
class PreviewChoice:
    index: int  # choice index as understood by toggle_choice
    choice: ParsedChoice


@dataclass
class QuestionCard:
    question_index: int
    text: str
    choices: List[PreviewChoice] = field(default_factory=list)
    has_heading: bool = True


@dataclass
class ChoiceData:
    text: str
    is_correct: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {"text": self.text, "isCorrect": self.is_correct}


@dataclass
class QuestionData:
    text: str
    choices: List[ChoiceData] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "choices": [choice.to_payload() for choice in self.choices],
        }
