"""Answer entity."""

from datetime import datetime

from pydantic import Field, field_validator

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer entity.

    A response to a question. Answers point back at their question; the
    question holds the only authoritative accepted-answer pointer, so
    ``is_accepted`` mirrors it for display and ordering.
    """

    id: AnswerId
    content: str = Field(min_length=10)
    author_id: UserId
    question_id: QuestionId
    votes: int = 0
    is_accepted: bool = False
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v):
        """Trim surrounding whitespace before length checks."""
        return v.strip() if isinstance(v, str) else v
