"""Answer repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from enum import Enum
from typing import List, Optional

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId, UserId


class AnswerSortOrder(str, Enum):
    """Sort order for answer listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    VOTES = "votes"  # is_accepted DESC, votes DESC, created_at DESC


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, active or not.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Answer]:
        """Find active answers to a question.

        Args:
            question_id: The question's ID
            sort: Sort order
            limit: Maximum number of answers (None for all)
            offset: Number of answers to skip

        Returns:
            Active answers to the question
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count active answers to a question.

        Args:
            question_id: The question's ID

        Returns:
            Number of active answers
        """
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Answer]:
        """Find active answers by an author, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of answers to return
            offset: Number of answers to skip

        Returns:
            Answers by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count active answers by an author.

        Args:
            author_id: The author's user ID

        Returns:
            Number of active answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def add_to_votes(self, answer_id: AnswerId, delta: int) -> Optional[Answer]:
        """Atomically add ``delta`` to the vote count of an active answer.

        Uses a store-level increment so concurrent votes are never lost.

        Args:
            answer_id: The answer ID
            delta: Amount to add (may be negative)

        Returns:
            The updated answer, or None if missing or inactive
        """
        pass

    @abstractmethod
    async def sync_accepted(
        self, question_id: QuestionId, accepted_answer_id: Optional[AnswerId]
    ) -> int:
        """Flag exactly one answer of a question as accepted, in one update.

        Every answer of the question gets ``is_accepted`` set to whether it
        is ``accepted_answer_id``, so at most one flag is ever set. None
        clears all flags.

        Args:
            question_id: The question whose answers to update
            accepted_answer_id: The accepted answer, or None

        Returns:
            Number of answers whose flag changed
        """
        pass

    @abstractmethod
    async def deactivate(self, answer_id: AnswerId) -> bool:
        """Soft delete an answer by clearing its active flag.

        Args:
            answer_id: The answer ID

        Returns:
            True if an active answer was deactivated
        """
        pass


class AnswerRepositoryFactory(ABC):
    """Opens answer repositories with their own store session.

    The feed fans out one answer query per question concurrently, and a
    single database session cannot run statements concurrently, so each
    fetch opens its own repository.
    """

    @abstractmethod
    def open(self) -> AbstractAsyncContextManager[AnswerRepository]:
        """Open a repository scoped to one unit of work.

        Usage:
            async with factory.open() as answers:
                await answers.find_by_question(question_id)
        """
        pass
