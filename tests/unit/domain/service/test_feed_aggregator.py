"""Unit tests for FeedAggregator and answer merge order."""

import asyncio
from uuid import UUID

import pytest

from stackit.config import FeedSettings
from stackit.domain.repository import AnswerSortOrder
from stackit.domain.service import FeedAggregator, merge_answers
from stackit.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryAnswerRepositoryFactory,
)
from tests.factories import make_answer, make_question


class FlakyAnswerRepository(InMemoryAnswerRepository):
    """Answer store whose fetches can be slowed down or made to fail."""

    def __init__(self) -> None:
        super().__init__()
        self.failing: set[UUID] = set()
        self.delays: dict[UUID, float] = {}
        self.in_flight = 0
        self.max_in_flight = 0

    async def find_by_question(
        self, question_id, sort=AnswerSortOrder.VOTES, limit=None, offset=0
    ):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(question_id, 0))
            if question_id in self.failing:
                raise ConnectionError("answer store unreachable")
            return await super().find_by_question(question_id, sort, limit, offset)
        finally:
            self.in_flight -= 1


def _aggregator(repo, timeout=5.0, max_concurrent=8) -> FeedAggregator:
    return FeedAggregator(
        answer_repository_factory=InMemoryAnswerRepositoryFactory(repo),
        feed_settings=FeedSettings(
            answer_fetch_timeout=timeout, max_concurrent_fetches=max_concurrent
        ),
    )


class TestMergeAnswers:
    """Tests for merge_answers ordering."""

    def test_accepted_then_votes_then_newest_then_id(self):
        """Merge order is accepted, votes, recency, id."""
        # Arrange
        question = make_question()
        accepted = make_answer(question.id, votes=-2, is_accepted=True, minutes=0)
        top = make_answer(question.id, votes=10, minutes=0)
        tied_new = make_answer(question.id, votes=4, minutes=9)
        tied_a = make_answer(
            question.id,
            votes=4,
            minutes=1,
            answer_id=UUID("00000000-0000-0000-0000-000000000001"),
        )
        tied_b = make_answer(
            question.id,
            votes=4,
            minutes=1,
            answer_id=UUID("00000000-0000-0000-0000-000000000002"),
        )

        # Act
        merged = merge_answers(question, [tied_b, top, tied_a, accepted, tied_new])

        # Assert
        assert [a.id for a in merged] == [
            accepted.id,
            top.id,
            tied_new.id,
            tied_a.id,
            tied_b.id,
        ]

    def test_question_pointer_counts_as_accepted(self):
        """An answer the question points at leads even without its flag set."""
        # Arrange
        low = make_answer(make_question().id, votes=0)
        question = make_question(question_id=low.question_id, accepted_answer_id=low.id)
        high = make_answer(question.id, votes=5)

        # Act
        merged = merge_answers(question, [high, low])

        # Assert
        assert [a.id for a in merged] == [low.id, high.id]

    def test_pointer_overrides_stale_flag(self):
        """A flagged answer the question does not point at is not accepted."""
        # Arrange
        pointed = make_answer(make_question().id, votes=0)
        question = make_question(
            question_id=pointed.question_id, accepted_answer_id=pointed.id
        )
        stale = make_answer(question.id, votes=5, is_accepted=True)

        # Act
        merged = merge_answers(question, [stale, pointed])

        # Assert
        assert [a.id for a in merged] == [pointed.id, stale.id]


class TestAttachAnswers:
    """Tests for concurrent answer aggregation."""

    @pytest.mark.asyncio
    async def test_order_is_independent_of_completion_order(self):
        """Slow and fast fetches still yield question order and merge order."""
        # Arrange
        repo = FlakyAnswerRepository()
        slow_q = make_question(minutes=2)
        fast_q = make_question(minutes=1)
        popular = await repo.save(make_answer(slow_q.id, votes=7))
        accepted = await repo.save(make_answer(slow_q.id, votes=3, is_accepted=True))
        await repo.save(make_answer(fast_q.id))
        repo.delays[slow_q.id] = 0.05

        # Act
        result = await _aggregator(repo).attach_answers([slow_q, fast_q])

        # Assert
        assert [item.question.id for item in result.items] == [slow_q.id, fast_q.id]
        assert [a.id for a in result.items[0].answers] == [accepted.id, popular.id]
        assert len(result.items[1].answers) == 1
        assert result.failed == 0

    @pytest.mark.asyncio
    async def test_one_failed_fetch_does_not_fail_the_page(self):
        """Only the failing question loses its answers."""
        # Arrange
        repo = FlakyAnswerRepository()
        questions = [make_question(minutes=i) for i in range(3)]
        for question in questions:
            await repo.save(make_answer(question.id))
            await repo.save(make_answer(question.id))
        repo.failing.add(questions[1].id)

        # Act
        result = await _aggregator(repo).attach_answers(questions)

        # Assert
        first, second, third = result.items
        assert len(first.answers) == 2 and first.answers_available
        assert second.answers == [] and not second.answers_available
        assert len(third.answers) == 2 and third.answers_available
        assert result.failed == 1

    @pytest.mark.asyncio
    async def test_timed_out_fetch_counts_as_failed(self):
        """A fetch slower than the timeout yields an empty answer list."""
        # Arrange
        repo = FlakyAnswerRepository()
        slow = make_question()
        quick = make_question()
        await repo.save(make_answer(slow.id))
        await repo.save(make_answer(quick.id))
        repo.delays[slow.id] = 1.0

        # Act
        result = await _aggregator(repo, timeout=0.05).attach_answers([slow, quick])

        # Assert
        assert result.items[0].answers == []
        assert not result.items[0].answers_available
        assert len(result.items[1].answers) == 1
        assert result.failed == 1

    @pytest.mark.asyncio
    async def test_fan_out_is_bounded(self):
        """No more than max_concurrent_fetches run at once."""
        # Arrange
        repo = FlakyAnswerRepository()
        questions = [make_question() for _ in range(10)]
        for question in questions:
            repo.delays[question.id] = 0.01

        # Act
        result = await _aggregator(repo, max_concurrent=3).attach_answers(questions)

        # Assert
        assert len(result.items) == 10
        assert 1 < repo.max_in_flight <= 3

    @pytest.mark.asyncio
    async def test_empty_page(self):
        """No questions means no fetches."""
        repo = FlakyAnswerRepository()

        result = await _aggregator(repo).attach_answers([])

        assert result.items == []
        assert result.failed == 0
        assert repo.max_in_flight == 0
