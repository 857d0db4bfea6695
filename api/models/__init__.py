"""Pydantic models."""
from api.models.auth import UserLogin, UserResponse, UserSignup
from api.models.tests import (
    AnswerIn,
    BulkDeleteRequest,
    ChoiceIn,
    QuestionIn,
    SubmitRequest,
    TestConfiguration,
    TestCreate,
    TestUpdate,
)

__all__ = [
    "AnswerIn",
    "BulkDeleteRequest",
    "ChoiceIn",
    "QuestionIn",
    "SubmitRequest",
    "TestConfiguration",
    "TestCreate",
    "TestUpdate",
    "UserLogin",
    "UserResponse",
    "UserSignup",
]
