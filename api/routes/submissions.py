"""Test taking and statistics endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session as DbSession

from api.database import get_db
from api.models import SubmitRequest
from api.services import submission_service

router = APIRouter(prefix="/api/tests/{test_id}", tags=["submissions"])


@router.post("/submit")
def submit_test(
    test_id: str,
    payload: SubmitRequest,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Score submitted answers and record the submission."""
    result = submission_service.submit_answers(
        db, test_id, payload.userId, payload.answers
    )
    return {"success": True, "data": result}


@router.get("/statistics")
def test_statistics(
    test_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Submission statistics for a test."""
    return {"success": True, "data": submission_service.get_statistics(db, test_id)}
