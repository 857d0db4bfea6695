import pytest

from editor.document import Cursor, TestDocument


def test_positions_follow_node_sizes() -> None:
    document = TestDocument(["ab", "c"])

    assert document.content_size == 7
    assert document.node_start(0) == 0
    assert document.node_end(0) == 4
    assert document.node_start(1) == 4
    assert document.node_end(1) == 7


def test_new_document_cursor_at_end() -> None:
    document = TestDocument(["ab", "c"])

    assert document.selection == Cursor(1, 1)
    assert document.cursor_position() == 6
    assert document.text_before_cursor() == "c"


def test_resolve_positions() -> None:
    document = TestDocument(["ab", "c"])

    assert document.resolve(1) == Cursor(0, 0)
    assert document.resolve(3) == Cursor(0, 2)
    assert document.resolve(5) == Cursor(1, 0)
    with pytest.raises(ValueError):
        document.resolve(4)
    with pytest.raises(ValueError):
        document.resolve(0)


def test_set_selection_and_insert_text() -> None:
    document = TestDocument(["Question 1: "])
    document.set_selection(1)
    document.insert_text(">")

    assert document.paragraph_texts() == [">Question 1: "]
    assert document.selection == Cursor(0, 1)


def test_insert_text_rejects_line_breaks() -> None:
    document = TestDocument(["a"])
    with pytest.raises(ValueError):
        document.insert_text("x\ny")


def test_insert_text_into_empty_document() -> None:
    document = TestDocument()
    document.insert_text("Question 1: Q")

    assert document.paragraph_texts() == ["Question 1: Q"]
    assert document.text_before_cursor() == "Question 1: Q"


def test_insert_paragraphs_splits_at_cursor() -> None:
    document = TestDocument(["hello world"])
    document.set_selection(1 + len("hello"))
    document.insert_paragraphs(["X"])

    assert document.paragraph_texts() == ["hello", "X", " world"]
    assert document.selection == Cursor(1, 1)


def test_insert_paragraphs_at_end() -> None:
    document = TestDocument(["Question 1: Q"])
    document.insert_paragraphs(["", "Question 2: "])

    assert document.paragraph_texts() == ["Question 1: Q", "", "Question 2: "]
    assert document.selection == Cursor(2, len("Question 2: "))


def test_split_paragraph() -> None:
    document = TestDocument(["ab"])
    document.set_selection(2)
    document.split_paragraph()

    assert document.paragraph_texts() == ["a", "b"]
    assert document.selection == Cursor(1, 0)


def test_replace_range_requires_node_boundaries() -> None:
    document = TestDocument(["ab", "c"])
    with pytest.raises(ValueError):
        document.replace_range(1, 4, ["x"])
    with pytest.raises(ValueError):
        document.replace_range(4, 0, ["x"])


def test_replace_range_keeps_cursor_after_range() -> None:
    document = TestDocument(["a", "b", "c"])
    before = document.selection

    document.replace_range(document.node_start(0), document.node_end(0), ["*a"])

    assert document.paragraph_texts() == ["*a", "b", "c"]
    assert document.selection == before


def test_replace_range_shifts_cursor_when_paragraph_count_changes() -> None:
    document = TestDocument(["a", "b", "c"])
    document.replace_range(document.node_start(0), document.node_end(1), ["ab"])

    assert document.paragraph_texts() == ["ab", "c"]
    assert document.selection == Cursor(1, 1)


def test_version_counts_mutations() -> None:
    document = TestDocument(["a"])
    assert document.version == 0

    document.insert_text("b")
    document.split_paragraph()
    document.insert_paragraphs(["c"])

    assert document.version == 3


def test_from_text() -> None:
    assert TestDocument.from_text("x\ny").paragraph_texts() == ["x", "y"]
    assert len(TestDocument.from_text("")) == 0
    assert TestDocument.from_text("x\ny").text() == "x\ny"
