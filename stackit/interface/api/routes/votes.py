"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, StrictInt

from stackit.application.usecase.vote import (
    ApplyVoteRequest,
    ApplyVoteResponse,
    ApplyVoteUseCase,
)
from stackit.domain.value import VotableType
from stackit.interface.api.identity import optional_user_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    direction: StrictInt  # 1 or -1


@router.post("/questions/{question_id}/vote", response_model=ApplyVoteResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    user_id: UUID | None = Depends(optional_user_id),
) -> ApplyVoteResponse:
    """Up- or down-vote a question."""
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            target_type=VotableType.QUESTION,
            target_id=question_id,
            direction=request.direction,
            user_id=user_id,
        )
    )


@router.post("/answers/{answer_id}/vote", response_model=ApplyVoteResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    apply_vote_use_case: FromDishka[ApplyVoteUseCase],
    user_id: UUID | None = Depends(optional_user_id),
) -> ApplyVoteResponse:
    """Up- or down-vote an answer."""
    return await apply_vote_use_case.execute(
        ApplyVoteRequest(
            target_type=VotableType.ANSWER,
            target_id=answer_id,
            direction=request.direction,
            user_id=user_id,
        )
    )
