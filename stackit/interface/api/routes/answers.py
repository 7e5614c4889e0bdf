"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response, status

from stackit.application.usecase.answer import (
    DeleteAnswerRequest,
    DeleteAnswerUseCase,
    ListAnswersByAuthorRequest,
    ListAnswersByAuthorResponse,
    ListAnswersByAuthorUseCase,
)
from stackit.domain.model import MAX_PAGE
from stackit.interface.api.identity import current_user_id

router = APIRouter(prefix="/answers", tags=["answers"], route_class=DishkaRoute)


@router.get("", response_model=ListAnswersByAuthorResponse)
async def list_answers_by_author(
    list_answers_by_author_use_case: FromDishka[ListAnswersByAuthorUseCase],
    author: UUID = Query(description="Author whose answers to list"),
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    limit: int | None = Query(default=None, ge=1),
) -> ListAnswersByAuthorResponse:
    """List an author's answers, newest first."""
    return await list_answers_by_author_use_case.execute(
        ListAnswersByAuthorRequest(author_id=author, page=page, limit=limit)
    )


@router.delete("/{answer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    user_id: UUID = Depends(current_user_id),
) -> Response:
    """Soft delete an answer. Only its author may do so."""
    await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=answer_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
