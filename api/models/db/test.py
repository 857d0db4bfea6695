"""
Test, Question and Choice database models.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from api.database import Base
from api.models.db.user import new_id
from api.utils import utc_now

if TYPE_CHECKING:
    from api.models.db.submission import Submission
    from api.models.db.user import User


class TestStatus(str, enum.Enum):
    """Lifecycle status of a test."""

    __test__ = False

    DRAFT = "draft"
    PUBLISHED = "published"


class Test(Base):
    """
    A multiple-choice test with its publish configuration.
    Questions and choices are owned by the test and deleted with it.
    """

    __test__ = False
    __tablename__ = "tests"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), default=TestStatus.DRAFT.value, nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Publish configuration
    grade: Mapped[str | None] = mapped_column(String(100), nullable=True)
    subject: Mapped[str | None] = mapped_column(String(255), nullable=True)
    purpose: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    config_type: Mapped[str | None] = mapped_column(String(20), nullable=True)
    test_duration: Mapped[int | None] = mapped_column(nullable=True)  # minutes
    access_time_from: Mapped[datetime | None] = mapped_column(
        sa.DateTime(timezone=True), nullable=True
    )
    access_time_to: Mapped[datetime | None] = mapped_column(
        sa.DateTime(timezone=True), nullable=True
    )
    allowed_takers: Mapped[str | None] = mapped_column(String(20), nullable=True)
    allowed_students: Mapped[str | None] = mapped_column(Text, nullable=True)
    submitted_times: Mapped[int | None] = mapped_column(nullable=True)
    exam_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    question_answer_mixed: Mapped[bool] = mapped_column(default=False, nullable=False)
    shuffle_question_answers: Mapped[bool] = mapped_column(default=False, nullable=False)
    show_point: Mapped[bool] = mapped_column(default=False, nullable=False)
    show_correct_answer_option: Mapped[str | None] = mapped_column(String(20), nullable=True)
    point_to_show_answer: Mapped[int | None] = mapped_column(nullable=True)
    add_header_info: Mapped[bool] = mapped_column(default=False, nullable=False)
    header_info: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="tests")
    questions: Mapped[list["Question"]] = relationship(
        "Question",
        back_populates="test",
        cascade="all, delete-orphan",
        order_by="Question.position",
    )
    submissions: Mapped[list["Submission"]] = relationship(
        "Submission", back_populates="test", cascade="all, delete-orphan"
    )


class Question(Base):
    """Question belonging to a test, ordered by position."""

    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    test_id: Mapped[str] = mapped_column(
        ForeignKey("tests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    position: Mapped[int] = mapped_column(default=0, nullable=False)

    test: Mapped["Test"] = relationship("Test", back_populates="questions")
    choices: Mapped[list["Choice"]] = relationship(
        "Choice",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="Choice.position",
    )

    @property
    def correct_choice(self) -> "Choice | None":
        """First choice marked correct, if any."""
        return next((choice for choice in self.choices if choice.is_correct), None)


class Choice(Base):
    """Answer option of a question."""

    __tablename__ = "choices"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    question_id: Mapped[str] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_correct: Mapped[bool] = mapped_column(default=False, nullable=False)
    position: Mapped[int] = mapped_column(default=0, nullable=False)

    question: Mapped["Question"] = relationship("Question", back_populates="choices")
