"""Editing session tying the document to the Test Bank API."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from client import TestBankAPIError, TestBankClient
from editor.continuation import AutoContinuation
from editor.document import TestDocument
from editor.lines import QuestionBlock, extract_lines, segment_blocks
from editor.parser import build_preview
from editor.toggle import toggle_choice
from models import QuestionCard
from serialization import document_to_questions, record_to_document, serialize_questions

log = logging.getLogger(__name__)

NO_QUESTIONS_MESSAGE = "No questions found"


class EditorSession:
    """
    Owns one test document while it is being authored.

    Edits and saves are refused while a save or load is in flight; failures end up
    in `error` rather than being raised.
    """

    def __init__(
        self,
        client: TestBankClient,
        user_id: str,
        title: str = "",
        test_id: str | None = None,
        document: TestDocument | None = None,
        continuation: AutoContinuation | None = None,
    ):
        self.client = client
        self.user_id = user_id
        self.title = title
        self.test_id = test_id
        self.status = "draft"
        self.document = document if document is not None else TestDocument()
        self.continuation = continuation or AutoContinuation()
        self.is_saving = False
        self.is_loading = False
        self.error: str | None = None

    @property
    def is_busy(self) -> bool:
        return self.is_saving or self.is_loading

    # ---- editing ----
    def type_text(self, text: str) -> bool:
        if self.is_busy:
            return False
        self.document.insert_text(text)
        return True

    def press_enter(self) -> bool:
        if self.is_busy:
            return False
        if not self.continuation.handle_line_break(self.document):
            self.document.split_paragraph()
        return True

    def toggle_choice(self, question_index: int, choice_index: int, will_be_starred: bool) -> bool:
        if self.is_busy:
            return False
        return toggle_choice(self.document, question_index, choice_index, will_be_starred)

    # ---- derived views ----
    def lines(self) -> list[str]:
        return extract_lines(self.document)

    def blocks(self) -> list[QuestionBlock]:
        return segment_blocks(self.lines())

    def preview(self) -> list[QuestionCard]:
        return build_preview(self.lines())

    # ---- persistence ----
    def load(self, test_id: str) -> bool:
        self.is_loading = True
        self.error = None
        try:
            record = self.client.get_test(test_id)
            if not isinstance(record, Mapping):
                raise ValueError("Invalid server response")
            self.document = record_to_document(record)
        except (TestBankAPIError, ValueError) as exc:
            log.error("Failed to load test %s: %s", test_id, exc)
            self.error = str(exc)
            return False
        finally:
            self.is_loading = False

        self.test_id = test_id
        self.title = record.get("title") or self.title
        self.status = record.get("status") or self.status
        return True

    def save(self, status: str | None = None) -> dict[str, Any] | None:
        """Create or update the test; returns the stored record or None."""
        if self.is_busy:
            log.debug("Save ignored: a save or load is in progress")
            return None

        self.error = None
        questions = document_to_questions(self.document)
        if not questions:
            self.error = NO_QUESTIONS_MESSAGE
            return None
        if not self.test_id and not self.title.strip():
            self.error = "Title is required"
            return None

        status = status or self.status
        payload = serialize_questions(questions)
        self.is_saving = True
        try:
            if self.test_id:
                record = self.client.update_test(self.test_id, payload, status=status)
            else:
                record = self.client.create_test(self.title.strip(), payload, self.user_id, status)
        except TestBankAPIError as exc:
            log.error("Failed to save test: %s", exc)
            self.error = exc.message
            return None
        finally:
            self.is_saving = False

        self.test_id = record.get("id", self.test_id)
        self.status = status
        log.info("Saved test %s with %d question(s)", self.test_id, len(questions))
        return record
