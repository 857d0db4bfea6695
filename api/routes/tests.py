"""Test management endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session as DbSession

from api.database import get_db
from api.dependencies.auth import get_optional_user
from api.models import BulkDeleteRequest, TestConfiguration, TestCreate, TestUpdate
from api.models.db.user import User
from api.services import test_service

router = APIRouter(prefix="/api/tests", tags=["tests"])


@router.get("")
def list_tests(
    current_user: Annotated[User | None, Depends(get_optional_user)],
    db: Annotated[DbSession, Depends(get_db)],
    user_id: Annotated[str | None, Query(alias="userId")] = None,
) -> dict[str, object]:
    """List the tests of a user (query parameter, or the token's user)."""
    user_id = user_id or (current_user.id if current_user else None)
    if not user_id:
        raise HTTPException(
            status_code=400, detail="userId query parameter is required"
        )
    return {"success": True, "data": test_service.list_tests(db, user_id)}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_test(
    payload: TestCreate,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Create a test (draft unless a status is given)."""
    test = test_service.create_test(
        db, payload.title, payload.questions, payload.userId, payload.status
    )
    return {"success": True, "data": test_service.serialize_test(test)}


@router.post("/bulk-delete")
def bulk_delete_tests(
    payload: BulkDeleteRequest,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Delete several tests."""
    count = test_service.bulk_delete_tests(db, payload.testIds)
    return {"success": True, "count": count}


@router.get("/{test_id}")
def get_test(
    test_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Get a test with its questions and choices."""
    test = test_service.get_test_or_404(db, test_id)
    return {"success": True, "data": test_service.serialize_test(test)}


@router.put("/{test_id}")
def update_test(
    test_id: str,
    payload: TestUpdate,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Replace the questions of a test."""
    test = test_service.update_test(
        db, test_id, payload.questions, title=payload.title, status=payload.status
    )
    return {"success": True, "data": test_service.serialize_test(test)}


@router.put("/{test_id}/publish")
def publish_test(
    test_id: str,
    config: TestConfiguration,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Apply publish settings and mark the test published."""
    test = test_service.publish_test(db, test_id, config)
    return {
        "success": True,
        "data": test_service.serialize_test(test, include_questions=False),
    }


@router.delete("/{test_id}")
def delete_test(
    test_id: str,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Delete a test."""
    test_service.delete_test(db, test_id)
    return {"success": True, "message": "Test deleted successfully"}
