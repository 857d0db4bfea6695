import json
from pathlib import Path

import pytest

import cli


def test_cli_writes_question_payload(tmp_path: Path) -> None:
    source = tmp_path / "quiz.txt"
    source.write_text("Question 1: Q?\nA. wrong\n*B. right\n", encoding="utf-8")
    output = tmp_path / "out" / "questions.json"

    assert cli.main([str(source), "--output", str(output)]) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload == [
        {
            "text": "Q?",
            "choices": [
                {"text": "wrong", "isCorrect": False},
                {"text": "right", "isCorrect": True},
            ],
        }
    ]


def test_cli_reports_missing_questions(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("nothing to see\n", encoding="utf-8")

    assert cli.main([str(source)]) == 1
    assert "No questions found" in capsys.readouterr().err


def test_cli_rejects_unsupported_file(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    source = tmp_path / "quiz.pdf"
    source.write_bytes(b"%PDF")

    assert cli.main([str(source)]) == 1
    assert "Unsupported file type" in capsys.readouterr().err


def test_cli_posts_to_server(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    source = tmp_path / "Geography.txt"
    source.write_text("Question 1: Q?\n*A. yes\n", encoding="utf-8")
    calls = []

    class FakeClient:
        def __init__(self, base_url):
            self.base_url = base_url

        def create_test(self, title, questions, user_id):
            calls.append((self.base_url, title, questions, user_id))
            return {"id": "t1"}

    monkeypatch.setattr(cli, "TestBankClient", FakeClient)

    code = cli.main([str(source), "--post", "http://testbank.local", "--user-id", "u1"])

    assert code == 0
    assert calls == [
        (
            "http://testbank.local",
            "Geography",
            [{"text": "Q?", "choices": [{"text": "yes", "isCorrect": True}]}],
            "u1",
        )
    ]


def test_cli_post_requires_user_id(tmp_path: Path) -> None:
    source = tmp_path / "quiz.txt"
    source.write_text("Question 1: Q?\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        cli.main([str(source), "--post", "http://testbank.local"])
