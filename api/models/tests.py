"""Test-related Pydantic models."""
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator

from api.config import MAX_TEST_DURATION_MINUTES, TEST_STATUSES
from api.utils.time_utils import parse_iso_timestamp


def _validate_status(value: str | None) -> str | None:
    if value is not None and value not in TEST_STATUSES:
        raise ValueError(f"Status must be one of: {', '.join(TEST_STATUSES)}")
    return value


Status = Annotated[str | None, AfterValidator(_validate_status)]


class ChoiceIn(BaseModel):
    """Answer option as sent by the editor."""

    text: str = ""
    isCorrect: bool = False


class QuestionIn(BaseModel):
    """Question with its ordered choices."""

    text: str = ""
    choices: list[ChoiceIn] = Field(default_factory=list)


class TestCreate(BaseModel):
    """Model for creating a new test."""

    __test__ = False

    title: str = Field(..., min_length=1)
    status: Status = None
    questions: list[QuestionIn]
    userId: str = Field(..., min_length=1)


class TestUpdate(BaseModel):
    """Model for replacing the questions of a test."""

    __test__ = False

    title: str | None = None
    status: Status = None
    questions: list[QuestionIn]


class BulkDeleteRequest(BaseModel):
    """Model for deleting several tests at once."""

    testIds: list[str] = Field(..., min_length=1)


class AnswerIn(BaseModel):
    """Chosen choice for one question."""

    questionId: str
    chosenChoiceId: str | None = None


class SubmitRequest(BaseModel):
    """Model for submitting answers to a test."""

    userId: str = Field(..., min_length=1)
    answers: list[AnswerIn]


class TestConfiguration(BaseModel):
    """
    Publish settings for a test.

    Every use* toggle makes its companion field mandatory; disabled options
    are cleared when the configuration is stored.
    """

    __test__ = False

    title: str

    useGrade: bool = False
    grade: str | None = None
    useSubject: bool = False
    subject: str | None = None
    usePurpose: bool = False
    purpose: str | None = None
    useDescription: bool = False
    description: str | None = None

    configType: Literal["test", "practice"] = "test"
    useDuration: bool = False
    testDuration: int | None = None

    useAccessTime: bool = False
    accessTimeFrom: str | None = None
    accessTimeTo: str | None = None
    useAllowedTakers: bool = False
    allowedTakers: Literal["everyone", "byClass", "byStudent"] = "everyone"
    allowedStudents: str | None = None
    useAttempts: bool = False
    submittedTimes: int | None = None

    usePassword: bool = False
    examPassword: str | None = None
    questionAnswerMixed: bool = False
    shuffleQuestionAnswers: bool = False

    showPoint: bool = False
    showCorrectAnswerOption: Literal["off", "on", "reach"] = "off"
    pointToShowAnswer: int | None = None
    addHeaderInfo: bool = False
    headerInfo: str | None = None

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Test name is required.")
        return value

    @field_validator("testDuration", "submittedTimes", "pointToShowAnswer", mode="before")
    @classmethod
    def _blank_number(cls, value: object) -> object:
        # numeric inputs arrive as "" when left empty
        if value == "":
            return None
        return value

    @model_validator(mode="after")
    def _check_rules(self) -> "TestConfiguration":
        errors: list[str] = []

        if self.testDuration is not None and not 1 <= self.testDuration <= MAX_TEST_DURATION_MINUTES:
            errors.append(
                f"Duration must be between 1 and {MAX_TEST_DURATION_MINUTES} minutes."
            )
        if self.submittedTimes is not None and self.submittedTimes < 1:
            errors.append("Minimum 1 attempt.")
        if self.pointToShowAnswer is not None and not 0 <= self.pointToShowAnswer <= 100:
            errors.append("Score threshold must be between 0 and 100.")

        required = [
            (self.useGrade, self.grade, "Grade level is required when enabled."),
            (self.useSubject, self.subject, "Subject is required when enabled."),
            (self.usePurpose, self.purpose, "Purpose is required when enabled."),
            (self.useDescription, self.description, "Description is required when enabled."),
            (self.usePassword, self.examPassword, "Exam password is required when enabled."),
            (self.addHeaderInfo, self.headerInfo, "Header content is required when enabled."),
        ]
        for enabled, value, message in required:
            if enabled and not value:
                errors.append(message)

        if self.useDuration and self.testDuration is None:
            errors.append("Test duration is required when enabled.")
        if self.useAttempts and self.submittedTimes is None:
            errors.append("Max attempts is required when enabled.")

        if self.useAccessTime:
            start = parse_iso_timestamp(self.accessTimeFrom)
            end = parse_iso_timestamp(self.accessTimeTo)
            if start is None or end is None:
                errors.append("Both start and end times are required when enabled.")
            elif start >= end:
                errors.append("Start time must be before end time.")

        if self.useAllowedTakers and self.allowedTakers == "byStudent" and not self.allowedStudents:
            errors.append("Student emails are required when 'By Student' is selected.")
        if self.showCorrectAnswerOption == "reach" and self.pointToShowAnswer is None:
            errors.append("Score threshold is required when 'reach' is selected.")

        if errors:
            raise ValueError(" ".join(errors))
        return self
