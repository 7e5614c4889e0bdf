"""Vote ledger domain service."""

from typing import Any, Optional, Union
from uuid import UUID

import logfire

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model.answer import Answer
from stackit.domain.model.question import Question
from stackit.domain.model.vote import Vote
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import (
    AnswerId,
    QuestionId,
    UserId,
    VotableType,
    VoteDirection,
)

from .base import Service


class VoteService(Service):
    """Applies +1/-1 votes to questions and answers.

    The vote count is changed with a single store-level increment, never a
    read-then-write, so N concurrent votes always move the count by exactly
    their sum. Voter identity is not de-duplicated.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    @staticmethod
    def _parse_direction(direction: Any) -> VoteDirection:
        # bool is an int subclass; True must not count as an upvote
        if isinstance(direction, bool) or not isinstance(direction, int):
            raise ValidationError("Invalid vote value")
        try:
            return VoteDirection(direction)
        except ValueError:
            raise ValidationError("Invalid vote value")

    @staticmethod
    def _parse_target_type(target_type: Any) -> VotableType:
        try:
            return VotableType(target_type)
        except ValueError:
            raise ValidationError(f"Cannot vote on {target_type!r}")

    async def apply_vote(
        self,
        target_type: Union[VotableType, str],
        target_id: UUID,
        direction: Any,
        user_id: Optional[UserId] = None,
    ) -> Union[Question, Answer]:
        """Apply one vote to a question or an answer.

        Args:
            target_type: ``question`` or ``answer``
            target_id: ID of the question or answer
            direction: Exactly 1 (up) or -1 (down)
            user_id: Voter, if known (telemetry only)

        Returns:
            The target with its updated vote count

        Raises:
            ValidationError: If the direction or target type is invalid
            NotFoundError: If the target is missing or inactive
        """
        vote = Vote(
            target_type=self._parse_target_type(target_type),
            target_id=target_id,
            direction=self._parse_direction(direction),
            user_id=user_id,
        )

        with logfire.span(
            "vote_service.apply_vote",
            target_type=vote.target_type.value,
            target_id=str(vote.target_id),
            direction=int(vote.direction),
            user_id=str(user_id) if user_id else None,
        ):
            updated: Union[Question, Answer, None]
            if vote.target_type == VotableType.QUESTION:
                updated = await self.question_repository.add_to_votes(
                    QuestionId(vote.target_id), int(vote.direction)
                )
                resource = "Question"
            else:
                updated = await self.answer_repository.add_to_votes(
                    AnswerId(vote.target_id), int(vote.direction)
                )
                resource = "Answer"

            if not updated:
                logfire.warn(
                    "Vote on missing target",
                    target_type=vote.target_type.value,
                    target_id=str(vote.target_id),
                )
                raise NotFoundError(resource, str(vote.target_id))

            logfire.info(
                "Vote applied",
                target_type=vote.target_type.value,
                target_id=str(vote.target_id),
                votes=updated.votes,
            )
            return updated
