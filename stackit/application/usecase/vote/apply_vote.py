"""Apply vote use case."""

from uuid import UUID

from pydantic import BaseModel, StrictInt

from stackit.application.usecase.common import AnswerItem, QuestionItem
from stackit.domain.model import Answer, Question
from stackit.domain.service import VoteService
from stackit.domain.value import UserId, VotableType


class ApplyVoteRequest(BaseModel):
    """Apply vote request."""

    target_type: VotableType
    target_id: UUID
    direction: StrictInt  # 1 or -1; booleans and strings are rejected
    user_id: UUID | None = None  # Voter, if the caller identified itself


class ApplyVoteResponse(BaseModel):
    """Apply vote response with the updated target."""

    target_type: VotableType
    target_id: str
    votes: int
    question: QuestionItem | None = None
    answer: AnswerItem | None = None


class ApplyVoteUseCase:
    """Use case for up- or down-voting a question or answer."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize apply vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ApplyVoteRequest) -> ApplyVoteResponse:
        """Execute apply vote flow.

        Raises:
            ValidationError: If the direction is not 1 or -1
            NotFoundError: If the target is missing or inactive
        """
        updated = await self.vote_service.apply_vote(
            request.target_type,
            request.target_id,
            request.direction,
            user_id=UserId(request.user_id) if request.user_id else None,
        )

        response = ApplyVoteResponse(
            target_type=request.target_type,
            target_id=str(updated.id),
            votes=updated.votes,
        )
        if isinstance(updated, Question):
            response.question = QuestionItem.from_question(updated)
        elif isinstance(updated, Answer):
            response.answer = AnswerItem.from_answer(updated)
        return response
