"""List answers by author use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from stackit.application.usecase.common import AnswerItem, PageInfo, resolve_page_size
from stackit.config import PaginationSettings
from stackit.domain.model import MAX_PAGE
from stackit.domain.service import AnswerService
from stackit.domain.value import UserId


class ListAnswersByAuthorRequest(BaseModel):
    """List answers by author request."""

    author_id: UUID
    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int | None = Field(default=None, ge=1)


class ListAnswersByAuthorResponse(PageInfo):
    """List answers by author response."""

    items: list[AnswerItem]


class ListAnswersByAuthorUseCase:
    """Use case for an author's answer history, newest first."""

    def __init__(
        self, answer_service: AnswerService, pagination: PaginationSettings
    ) -> None:
        self.answer_service = answer_service
        self.pagination = pagination

    async def execute(
        self, request: ListAnswersByAuthorRequest
    ) -> ListAnswersByAuthorResponse:
        """Execute list answers by author flow."""
        page_size = resolve_page_size(
            request.limit, self.pagination.default_answer_page_size, self.pagination
        )
        page = await self.answer_service.list_answers_by_author(
            UserId(request.author_id), page=request.page, page_size=page_size
        )
        return ListAnswersByAuthorResponse(
            items=[AnswerItem.from_answer(a) for a in page.items],
            **PageInfo.of(page.total, page.page, page.page_size).model_dump(),
        )
