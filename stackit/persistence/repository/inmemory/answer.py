"""In-memory answer repository for testing."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Optional

from stackit.domain.model.answer import Answer
from stackit.domain.repository.answer import (
    AnswerRepository,
    AnswerRepositoryFactory,
    AnswerSortOrder,
)
from stackit.domain.value import AnswerId, QuestionId, UserId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Answer]:
        """Find active answers to a question."""
        answers = sorted(
            (
                a
                for a in self._answers.values()
                if a.question_id == question_id and a.is_active
            ),
            key=lambda a: a.id,
        )

        if sort == AnswerSortOrder.OLDEST:
            answers.sort(key=lambda a: a.created_at)
        else:
            answers.sort(key=lambda a: a.created_at, reverse=True)

        if sort == AnswerSortOrder.VOTES:
            answers.sort(key=lambda a: (a.is_accepted, a.votes), reverse=True)

        end = None if limit is None else offset + limit
        return answers[offset:end]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count active answers to a question."""
        return sum(
            1
            for a in self._answers.values()
            if a.question_id == question_id and a.is_active
        )

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Answer]:
        """Find active answers by an author, newest first."""
        answers = sorted(
            (a for a in self._answers.values() if a.author_id == author_id and a.is_active),
            key=lambda a: a.id,
        )
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count active answers by an author."""
        return sum(
            1 for a in self._answers.values() if a.author_id == author_id and a.is_active
        )

    async def save(self, answer: Answer) -> Answer:
        """Save or update an answer."""
        self._answers[answer.id] = answer
        return answer

    async def add_to_votes(self, answer_id: AnswerId, delta: int) -> Optional[Answer]:
        """Add delta to votes."""
        answer = self._answers.get(answer_id)
        if answer is None or not answer.is_active:
            return None
        updated = answer.model_copy(update={"votes": answer.votes + delta})
        self._answers[answer_id] = updated
        return updated

    async def sync_accepted(
        self, question_id: QuestionId, accepted_answer_id: Optional[AnswerId]
    ) -> int:
        """Flag only accepted_answer_id among the question's answers."""
        changed = 0
        now = datetime.now()
        for answer in list(self._answers.values()):
            if answer.question_id != question_id:
                continue
            flag = answer.id == accepted_answer_id
            if answer.is_accepted != flag:
                self._answers[answer.id] = answer.model_copy(
                    update={"is_accepted": flag, "updated_at": now}
                )
                changed += 1
        return changed

    async def deactivate(self, answer_id: AnswerId) -> bool:
        """Soft delete an answer."""
        answer = self._answers.get(answer_id)
        if answer is None or not answer.is_active:
            return False
        self._answers[answer_id] = answer.model_copy(
            update={"is_active": False, "updated_at": datetime.now()}
        )
        return True


class InMemoryAnswerRepositoryFactory(AnswerRepositoryFactory):
    """Hands out the one shared in-memory answer repository."""

    def __init__(self, repository: AnswerRepository) -> None:
        self.repository = repository

    @asynccontextmanager
    async def open(self) -> AsyncIterator[AnswerRepository]:
        """Yield the shared repository."""
        yield self.repository
