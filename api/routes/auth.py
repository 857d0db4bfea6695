"""Authentication routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session as DbSession

from api.config import ACCESS_TOKEN_EXPIRE_MINUTES
from api.database import get_db
from api.dependencies.auth import get_current_user
from api.models import UserLogin, UserResponse, UserSignup
from api.models.db.user import User
from api.services.auth_service import (
    authenticate,
    create_access_token,
    create_user,
    get_user_by_email,
    get_user_by_id,
)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _user_payload(user: User) -> dict[str, object]:
    return UserResponse.model_validate(user).model_dump()


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(
    data: UserSignup,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Register a new user."""
    if get_user_by_email(db, data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already exists",
        )
    create_user(db, data.name, data.email, data.password)
    return {"success": True}


@router.post("/login")
def login(
    data: UserLogin,
    db: Annotated[DbSession, Depends(get_db)],
) -> dict[str, object]:
    """Check credentials and return the user with a bearer token."""
    user = authenticate(db, data.email, data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    payload = _user_payload(user)
    payload.update(
        {
            "accessToken": create_access_token(user.id),
            "tokenType": "bearer",
            "expiresIn": ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        }
    )
    return {"success": True, "data": payload}


@router.get("/user")
def get_user(
    db: Annotated[DbSession, Depends(get_db)],
    user_id: Annotated[str | None, Query(alias="id")] = None,
) -> dict[str, object]:
    """Get public user info by ID."""
    if not user_id:
        raise HTTPException(status_code=400, detail="User ID is required")
    user = get_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {"success": True, "data": _user_payload(user)}


@router.get("/me")
def me(
    current_user: Annotated[User, Depends(get_current_user)],
) -> dict[str, object]:
    """Get the user behind the bearer token."""
    return {"success": True, "data": _user_payload(current_user)}
