"""Feed routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from stackit.application.usecase.feed import (
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
)
from stackit.domain.model import MAX_PAGE
from stackit.domain.repository import QuestionSortOrder

router = APIRouter(prefix="/feed", tags=["feed"], route_class=DishkaRoute)


@router.get("", response_model=GetFeedResponse)
async def get_feed(
    get_feed_use_case: FromDishka[GetFeedUseCase],
    search: str | None = Query(default=None),
    tags: str | None = Query(default=None, description="Comma-separated tag names"),
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.NEWEST),
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    limit: int | None = Query(default=None, ge=1),
    author: UUID | None = Query(default=None),
) -> GetFeedResponse:
    """Questions with their answers attached, best answer first.

    If answers for some question could not be loaded, that question is
    still listed with ``answers_available`` false.
    """
    return await get_feed_use_case.execute(
        GetFeedRequest(
            search=search,
            tags=tags,
            sort=sort,
            page=page,
            limit=limit,
            author_id=author,
        )
    )
