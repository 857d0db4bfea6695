"""Database models."""
from api.models.db.user import User
from api.models.db.test import Choice, Question, Test, TestStatus
from api.models.db.submission import Submission

__all__ = [
    "User",
    "Test",
    "TestStatus",
    "Question",
    "Choice",
    "Submission",
]
