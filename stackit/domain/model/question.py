"""Question aggregate root.

Questions are the primary content type: a titled problem description,
tagged by topic, that collects answers and votes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from stackit.domain.model.common import DomainModel
from stackit.domain.value import (
    MAX_TAGS_PER_QUESTION,
    AnswerId,
    QuestionId,
    TagName,
    UserId,
)


class Question(DomainModel):
    """Question aggregate root.

    Business rules:
    - Title 10-200 characters, description at least 20 (both trimmed)
    - 0-5 distinct tags, order preserved
    - Author is fixed at creation
    - Views never decrease; votes may go negative
    - The question owns its answer references and the accepted-answer pointer
    - Soft-deleted by clearing is_active
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20)
    tags: list[TagName] = Field(default_factory=list, max_length=MAX_TAGS_PER_QUESTION)
    author_id: UserId
    votes: int = 0
    views: int = Field(default=0, ge=0)
    answer_ids: list[AnswerId] = Field(default_factory=list)
    accepted_answer_id: Optional[AnswerId] = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v):
        """Trim surrounding whitespace before length checks."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags")
    @classmethod
    def validate_distinct_tags(cls, v: list[TagName]) -> list[TagName]:
        """Reject repeated tags (after normalization)."""
        seen: set[str] = set()
        for tag in v:
            if tag.root in seen:
                raise ValueError(f"Duplicate tag: {tag.root}")
            seen.add(tag.root)
        return v
