"""In-memory question repository for testing."""

from datetime import datetime
from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.repository.question import (
    QuestionFilter,
    QuestionRepository,
    QuestionSortOrder,
)
from stackit.domain.value import AnswerId, QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Updates read and replace a question without awaiting in between, so
    they are atomic under asyncio just like the SQL increments.
    """

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    def _matching(self, query: QuestionFilter) -> list[Question]:
        questions = [q for q in self._questions.values() if q.is_active]

        if query.search:
            term = query.search.casefold()
            questions = [
                q
                for q in questions
                if term in q.title.casefold() or term in q.description.casefold()
            ]

        if query.tags:
            wanted = {tag.root for tag in query.tags}
            questions = [
                q for q in questions if wanted.intersection(t.root for t in q.tags)
            ]

        if query.author_id:
            questions = [q for q in questions if q.author_id == query.author_id]

        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(self, query: QuestionFilter) -> list[Question]:
        """Find active questions matching a filter."""
        # Stable sorts, least significant key first; id is the final tie-break
        questions = sorted(self._matching(query), key=lambda q: q.id)

        if query.sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        else:
            questions.sort(key=lambda q: q.created_at, reverse=True)

        if query.sort == QuestionSortOrder.VOTES:
            questions.sort(key=lambda q: q.votes, reverse=True)
        elif query.sort == QuestionSortOrder.VIEWS:
            questions.sort(key=lambda q: q.views, reverse=True)

        return questions[query.offset : query.offset + query.page_size]

    async def count(self, query: QuestionFilter) -> int:
        """Count active questions matching a filter."""
        return len(self._matching(query))

    async def save(self, question: Question) -> Question:
        """Save or update a question."""
        self._questions[question.id] = question
        return question

    def _update_active(self, question_id: QuestionId, **changes) -> Optional[Question]:
        question = self._questions.get(question_id)
        if question is None or not question.is_active:
            return None
        updated = question.model_copy(update=changes)
        self._questions[question_id] = updated
        return updated

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Increment views by 1."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        return self._update_active(question_id, views=question.views + 1)

    async def add_to_votes(
        self, question_id: QuestionId, delta: int
    ) -> Optional[Question]:
        """Add delta to votes."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        return self._update_active(question_id, votes=question.votes + delta)

    async def append_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Append an answer reference."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        return self._update_active(
            question_id,
            answer_ids=[*question.answer_ids, answer_id],
            updated_at=datetime.now(),
        )

    async def remove_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Drop an answer reference."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(
            update={
                "answer_ids": [a for a in question.answer_ids if a != answer_id],
                "updated_at": datetime.now(),
            }
        )
        self._questions[question_id] = updated
        return updated

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> Optional[Question]:
        """Set or clear the accepted-answer pointer."""
        question = self._questions.get(question_id)
        if question is None:
            return None
        updated = question.model_copy(
            update={"accepted_answer_id": answer_id, "updated_at": datetime.now()}
        )
        self._questions[question_id] = updated
        return updated

    async def deactivate(self, question_id: QuestionId) -> bool:
        """Soft delete a question."""
        updated = self._update_active(
            question_id, is_active=False, updated_at=datetime.now()
        )
        return updated is not None
