"""List answers use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from stackit.application.usecase.common import AnswerItem, PageInfo, resolve_page_size
from stackit.config import PaginationSettings
from stackit.domain.model import MAX_PAGE
from stackit.domain.repository import AnswerSortOrder
from stackit.domain.service import AnswerService
from stackit.domain.value import QuestionId


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: UUID
    sort: AnswerSortOrder = AnswerSortOrder.VOTES
    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int | None = Field(default=None, ge=1)


class ListAnswersResponse(PageInfo):
    """List answers response."""

    items: list[AnswerItem]


class ListAnswersUseCase:
    """Use case for listing the answers to a question."""

    def __init__(
        self, answer_service: AnswerService, pagination: PaginationSettings
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            pagination: Page size defaults and limits
        """
        self.answer_service = answer_service
        self.pagination = pagination

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Raises:
            NotFoundError: If the question is missing or inactive
            ValidationError: If the limit is too large
        """
        with logfire.span(
            "list_answers.execute",
            question_id=str(request.question_id),
            sort=request.sort.value,
            page=request.page,
        ):
            page_size = resolve_page_size(
                request.limit, self.pagination.default_answer_page_size, self.pagination
            )
            page = await self.answer_service.list_answers(
                QuestionId(request.question_id),
                sort=request.sort,
                page=request.page,
                page_size=page_size,
            )
            return ListAnswersResponse(
                items=[AnswerItem.from_answer(a) for a in page.items],
                **PageInfo.of(page.total, page.page, page.page_size).model_dump(),
            )
