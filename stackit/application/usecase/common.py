"""Response items and pagination helpers shared by use cases."""

import math
from datetime import datetime

from pydantic import BaseModel

from stackit.config import PaginationSettings
from stackit.domain.error import ValidationError
from stackit.domain.model import Answer, Question


class QuestionItem(BaseModel):
    """Question as returned to clients."""

    question_id: str
    title: str
    description: str
    tags: list[str]
    author_id: str
    votes: int
    views: int
    answer_ids: list[str]
    answer_count: int
    accepted_answer_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_question(cls, question: Question) -> "QuestionItem":
        return cls(
            question_id=str(question.id),
            title=question.title,
            description=question.description,
            tags=[tag.root for tag in question.tags],
            author_id=str(question.author_id),
            votes=question.votes,
            views=question.views,
            answer_ids=[str(a) for a in question.answer_ids],
            answer_count=len(question.answer_ids),
            accepted_answer_id=(
                str(question.accepted_answer_id)
                if question.accepted_answer_id
                else None
            ),
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class AnswerItem(BaseModel):
    """Answer as returned to clients."""

    answer_id: str
    question_id: str
    content: str
    author_id: str
    votes: int
    is_accepted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerItem":
        return cls(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            author_id=str(answer.author_id),
            votes=answer.votes,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class PageInfo(BaseModel):
    """Pagination metadata of a listing response."""

    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def of(cls, total: int, page: int, limit: int) -> "PageInfo":
        return cls(
            total=total, page=page, limit=limit, total_pages=math.ceil(total / limit)
        )


def resolve_page_size(
    limit: int | None, default: int, pagination: PaginationSettings
) -> int:
    """Apply the default page size and enforce the configured maximum.

    Raises:
        ValidationError: If ``limit`` is above ``pagination.max_page_size``
    """
    if limit is None:
        return default
    if limit > pagination.max_page_size:
        raise ValidationError(
            f"limit must be at most {pagination.max_page_size}, got {limit}"
        )
    return limit
