"""Paginated result containers."""

import math
from typing import Generic, TypeVar

from pydantic import Field

from stackit.domain.model.answer import Answer
from stackit.domain.model.common import DomainModel
from stackit.domain.model.question import Question

T = TypeVar("T")

# Keeps (page - 1) * page_size well inside a PostgreSQL bigint OFFSET
MAX_PAGE = 1_000_000


class Page(DomainModel, Generic[T]):
    """One page of an offset-paginated listing.

    ``total`` counts the whole filtered set, not just this page.
    """

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1, le=MAX_PAGE)
    page_size: int = Field(ge=1)

    @property
    def total_pages(self) -> int:
        """Number of pages needed to cover ``total``."""
        return math.ceil(self.total / self.page_size)


class FeedItem(DomainModel):
    """A question with its merged, ordered answers.

    ``answers_available`` is False when the answer fetch for this question
    failed or timed out; ``answers`` is then empty.
    """

    question: Question
    answers: list[Answer] = Field(default_factory=list)
    answers_available: bool = True


class Feed(Page[FeedItem]):
    """A page of questions with their answers attached."""

    failed_answer_fetches: int = Field(default=0, ge=0)
