from editor.continuation import AutoContinuation, next_choice_label
from editor.document import Cursor, TestDocument


def test_next_choice_label() -> None:
    assert next_choice_label("A.") == "B."
    assert next_choice_label("b) text") == "c)"
    assert next_choice_label("plain") == "A."


def test_heading_starts_first_choice() -> None:
    document = TestDocument(["Question 1: What?"])

    assert AutoContinuation().handle_line_break(document) is True
    assert document.paragraph_texts() == ["Question 1: What?", "A. "]
    assert document.selection == Cursor(1, 3)


def test_choice_continues_with_next_letter() -> None:
    document = TestDocument(["Question 1: Q", "A. one"])

    assert AutoContinuation().handle_line_break(document) is True
    assert document.paragraph_texts()[-1] == "B. "


def test_starred_choice_keeps_punctuation() -> None:
    document = TestDocument(["Question 1: Q", "*C) three"])

    assert AutoContinuation().handle_line_break(document) is True
    assert document.paragraph_texts()[-1] == "D) "


def test_last_choice_opens_next_question() -> None:
    document = TestDocument(["Question 1: Q", "A. a", "B. b", "C. c", "D. d"])

    assert AutoContinuation().handle_line_break(document) is True
    assert document.paragraph_texts()[-2:] == ["", "Question 2: "]
    assert document.selection == Cursor(6, len("Question 2: "))


def test_next_question_number_follows_highest_heading() -> None:
    document = TestDocument(["Question 5: Q", "A. a", "Question 2: R", "D. d"])

    AutoContinuation().handle_line_break(document)

    assert document.paragraph_texts()[-1] == "Question 6: "


def test_next_question_without_any_heading() -> None:
    document = TestDocument(["D. d"])

    AutoContinuation().handle_line_break(document)

    assert document.paragraph_texts()[-1] == "Question 1: "


def test_letters_after_d_are_not_continued() -> None:
    document = TestDocument(["Question 1: Q", "E. e"])

    assert AutoContinuation().handle_line_break(document) is False
    assert document.paragraph_texts() == ["Question 1: Q", "E. e"]


def test_plain_text_is_not_continued() -> None:
    document = TestDocument(["some note"])

    assert AutoContinuation().handle_line_break(document) is False
    assert document.version == 0


def test_disabled_controller_does_nothing() -> None:
    document = TestDocument(["Question 1: Q"])

    assert AutoContinuation(enabled=False).handle_line_break(document) is False
    assert len(document) == 1
