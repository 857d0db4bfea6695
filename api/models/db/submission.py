"""
Submission database model for scored test attempts.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import TYPE_CHECKING, Any

import sqlalchemy as sa
from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.database import Base
from api.models.db.user import new_id
from api.utils import utc_now

if TYPE_CHECKING:
    from api.models.db.test import Test
    from api.models.db.user import User


class Submission(Base):
    """
    One submitted set of answers for a test.
    Stores the percentage score and a per-question breakdown.
    """

    __tablename__ = "submissions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    test_id: Mapped[str] = mapped_column(
        ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    score: Mapped[int] = mapped_column(default=0, nullable=False)
    answers_json: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="submissions")
    test: Mapped["Test"] = relationship("Test", back_populates="submissions")

    @property
    def answers(self) -> list[dict[str, Any]]:
        """Parse detailed answers from JSON."""
        if not self.answers_json:
            return []
        try:
            return json.loads(self.answers_json)
        except (json.JSONDecodeError, TypeError):
            return []

    @answers.setter
    def answers(self, value: list[dict[str, Any]] | None) -> None:
        """Serialize detailed answers to JSON."""
        self.answers_json = json.dumps(value) if value else None
