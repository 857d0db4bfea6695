import argparse
import json
import logging
import sys
from pathlib import Path

from client import TestBankAPIError, TestBankClient
from core.logging_setup import setup_console_logging
from docx_import import load_document
from serialization import document_to_questions, serialize_questions

log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse a marked-up test (.docx or .txt) into questions"
    )
    parser.add_argument("file", type=Path, help="Path to .docx or .txt file")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the question payload here instead of stdout",
    )
    parser.add_argument(
        "--post",
        metavar="URL",
        default=None,
        help="Create the test on a Test Bank server",
    )
    parser.add_argument("--user-id", default=None, help="Owner of the posted test")
    parser.add_argument(
        "--title",
        default=None,
        help="Title of the posted test (defaults to the file name)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    args = parser.parse_args(argv)
    if args.post and not args.user_id:
        parser.error("--user-id is required with --post")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_console_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        document = load_document(args.file)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    questions = serialize_questions(document_to_questions(document))
    if not questions:
        print("No questions found", file=sys.stderr)
        return 1

    payload = json_dump(questions)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload, encoding="utf-8")
        print(f"Saved {len(questions)} question(s) to {args.output}")
    else:
        print(payload)

    if args.post:
        client = TestBankClient(args.post)
        title = args.title or args.file.stem
        try:
            test = client.create_test(title, questions, args.user_id)
        except TestBankAPIError as exc:
            print(f"Error: {exc.message}", file=sys.stderr)
            return 1
        log.info("Created test %s on %s", test.get("id"), args.post)
        print(f"Created test {test.get('id')}")
    return 0


def json_dump(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


if __name__ == "__main__":
    sys.exit(main())
