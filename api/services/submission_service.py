"""Service layer for submissions and test statistics."""
import logging
import math
from typing import Any

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session as DbSession

from api.models.db.submission import Submission
from api.models.db.test import Test
from api.models.db.user import User
from api.models.tests import AnswerIn
from api.services.test_service import get_test_or_404
from api.utils import isoformat

log = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def percent(correct: int, total: int) -> int:
    """Rounded percentage; an empty test scores 0."""
    if total <= 0:
        return 0
    return round_half_up(correct * 100 / total)


def grade_answers(test: Test, answers: list[AnswerIn]) -> tuple[int, list[dict[str, Any]]]:
    """
    Compare chosen choices with the correct ones.

    Returns the number of correct answers and a per-question breakdown in
    question order. Unanswered questions count as wrong.
    """
    chosen = {answer.questionId: answer.chosenChoiceId for answer in answers}
    correct_count = 0
    detailed: list[dict[str, Any]] = []

    for question in test.questions:
        chosen_id = chosen.get(question.id)
        correct_choice = question.correct_choice
        is_correct = correct_choice is not None and chosen_id == correct_choice.id
        if is_correct:
            correct_count += 1
        detailed.append(
            {
                "questionId": question.id,
                "chosenChoiceId": chosen_id,
                "isCorrect": is_correct,
                "correctChoiceId": correct_choice.id if correct_choice else None,
            }
        )
    return correct_count, detailed


def submit_answers(
    db: DbSession, test_id: str, user_id: str, answers: list[AnswerIn]
) -> dict[str, Any]:
    """Score the answers and store a submission."""
    test = get_test_or_404(db, test_id)
    if db.get(User, user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")

    correct_count, detailed = grade_answers(test, answers)
    total = len(test.questions)
    score = percent(correct_count, total)

    submission = Submission(user_id=user_id, test_id=test_id, score=score)
    submission.answers = detailed
    db.add(submission)
    db.commit()
    db.refresh(submission)
    log.info("Submission %s for test %s scored %d%%", submission.id, test_id, score)

    return {
        "submissionId": submission.id,
        "correctCount": correct_count,
        "totalQuestions": total,
        "score": score,
        "detailedAnswers": detailed,
    }


def serialize_submission(submission: Submission) -> dict[str, Any]:
    return {
        "id": submission.id,
        "userId": submission.user_id,
        "testId": submission.test_id,
        "score": submission.score,
        "answers": submission.answers,
        "createdAt": isoformat(submission.created_at),
    }


def get_statistics(db: DbSession, test_id: str) -> dict[str, Any]:
    """Submission count, rounded average score and submissions newest first."""
    if db.get(Test, test_id) is None:
        raise HTTPException(status_code=404, detail="Test not found")

    submissions = list(
        db.execute(
            select(Submission)
            .where(Submission.test_id == test_id)
            .order_by(Submission.created_at.desc())
        ).scalars().all()
    )
    count = len(submissions)
    average = sum(s.score for s in submissions) / count if count else 0
    return {
        "submissionCount": count,
        "averageScore": round_half_up(average),
        "submissions": [serialize_submission(s) for s in submissions],
    }
