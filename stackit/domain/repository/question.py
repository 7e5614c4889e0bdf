"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from stackit.domain.model.page import MAX_PAGE
from stackit.domain.model.question import Question
from stackit.domain.value import AnswerId, QuestionId, TagName, UserId
from stackit.domain.value.common import ValueObject


class QuestionSortOrder(str, Enum):
    """Sort order for question listings.

    Every order ends with id ascending so that pages never overlap.
    """

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    VOTES = "votes"  # votes DESC, created_at DESC
    VIEWS = "views"  # views DESC, created_at DESC


class QuestionFilter(ValueObject):
    """Validated question query: filters, sort key and page window.

    Only active questions are ever eligible.
    """

    search: Optional[str] = None  # Case-insensitive match on title OR description
    tags: list[TagName] = Field(default_factory=list)  # Match ANY of these
    author_id: Optional[UserId] = None
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    page_size: int = Field(default=10, ge=1)

    @field_validator("search", mode="before")
    @classmethod
    def blank_search_is_none(cls, v):
        """Treat an empty or whitespace-only search as no search."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @property
    def offset(self) -> int:
        """Number of matching questions to skip."""
        return (self.page - 1) * self.page_size


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, active or not.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, query: QuestionFilter) -> List[Question]:
        """Find active questions matching a filter, one page at a time.

        Args:
            query: Filters, sort order and page window

        Returns:
            The requested page of questions
        """
        pass

    @abstractmethod
    async def count(self, query: QuestionFilter) -> int:
        """Count active questions matching a filter (page window ignored).

        Args:
            query: Filters to apply

        Returns:
            Total number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment views of an active question by 1.

        Args:
            question_id: The question ID

        Returns:
            The updated question, or None if missing or inactive
        """
        pass

    @abstractmethod
    async def add_to_votes(
        self, question_id: QuestionId, delta: int
    ) -> Optional[Question]:
        """Atomically add ``delta`` to the vote count of an active question.

        Uses a store-level increment so concurrent votes are never lost.

        Args:
            question_id: The question ID
            delta: Amount to add (may be negative)

        Returns:
            The updated question, or None if missing or inactive
        """
        pass

    @abstractmethod
    async def append_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Atomically append an answer reference to a question.

        Args:
            question_id: The question ID
            answer_id: The new answer's ID

        Returns:
            The updated question, or None if missing or inactive
        """
        pass

    @abstractmethod
    async def remove_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Atomically drop an answer reference from a question.

        Args:
            question_id: The question ID
            answer_id: The removed answer's ID

        Returns:
            The updated question, or None if missing
        """
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> Optional[Question]:
        """Point the question at its accepted answer (None clears it).

        Args:
            question_id: The question ID
            answer_id: Accepted answer ID, or None

        Returns:
            The updated question, or None if missing
        """
        pass

    @abstractmethod
    async def deactivate(self, question_id: QuestionId) -> bool:
        """Soft delete a question by clearing its active flag.

        Args:
            question_id: The question ID

        Returns:
            True if an active question was deactivated
        """
        pass
