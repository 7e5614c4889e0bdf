"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.service import VoteService
from stackit.domain.value import VotableType
from tests.factories import make_answer, make_question
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestApplyVote:
    """Tests for apply_vote on questions and answers."""

    @pytest.mark.asyncio
    async def test_downvote_then_upvote_returns_to_zero(self, unit_env, user_id):
        """A new question voted -1 then +1 reads -1 then 0."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        # Act
        after_down = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, -1, user_id
        )
        after_up = await vote_service.apply_vote(
            VotableType.QUESTION, question.id, 1, user_id
        )

        # Assert
        assert after_down.votes == -1
        assert after_up.votes == 0
        assert (await question_repo.find_by_id(question.id)).votes == 0

    @pytest.mark.asyncio
    async def test_concurrent_votes_are_never_lost(self, unit_env):
        """N concurrent upvotes move the count by exactly N."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(votes=4))
        n = 50

        # Act
        results = await asyncio.gather(
            *(
                vote_service.apply_vote("question", question.id, 1)
                for _ in range(n)
            )
        )

        # Assert
        assert (await question_repo.find_by_id(question.id)).votes == 4 + n
        # Each caller observed its own increment
        assert sorted(r.votes for r in results) == list(range(5, 5 + n))

    @pytest.mark.asyncio
    async def test_vote_on_answer(self, unit_env):
        """Answers accept votes the same way as questions."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        question = await question_repo.save(make_question())
        answer = await answer_repo.save(make_answer(question.id, votes=2))

        # Act
        updated = await vote_service.apply_vote(VotableType.ANSWER, answer.id, -1)

        # Assert
        assert updated.id == answer.id
        assert updated.votes == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("direction", [0, 2, -2, True, False, "1", 1.0, None])
    async def test_invalid_direction_rejected(self, unit_env, direction):
        """Only the integers 1 and -1 are votes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question())

        # Act & Assert
        with pytest.raises(ValidationError, match="Invalid vote value"):
            await vote_service.apply_vote("question", question.id, direction)
        assert (await question_repo.find_by_id(question.id)).votes == 0

    @pytest.mark.asyncio
    async def test_invalid_target_type_rejected(self, unit_env):
        """Only questions and answers can be voted on."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(ValidationError):
            await vote_service.apply_vote("comment", uuid4(), 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("target_type", ["question", "answer"])
    async def test_missing_target_raises_not_found(self, unit_env, target_type):
        """Votes on unknown ids are NotFound."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError, match=f"{target_type.capitalize()} not found"):
            await vote_service.apply_vote(target_type, uuid4(), 1)

    @pytest.mark.asyncio
    async def test_inactive_target_raises_not_found(self, unit_env):
        """Soft-deleted content cannot be voted on."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.save(make_question(is_active=False, votes=3))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.apply_vote("question", question.id, 1)
        assert (await question_repo.find_by_id(question.id)).votes == 3
