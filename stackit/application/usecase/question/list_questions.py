"""List questions use case."""

from uuid import UUID

import logfire
import pydantic
from pydantic import BaseModel, Field

from stackit.application.usecase.common import PageInfo, QuestionItem, resolve_page_size
from stackit.config import PaginationSettings
from stackit.domain.error import ValidationError, describe_validation_errors
from stackit.domain.model import MAX_PAGE
from stackit.domain.repository import QuestionFilter, QuestionSortOrder
from stackit.domain.service import QuestionService
from stackit.domain.value import UserId, parse_tag_filter


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    search: str | None = None  # Matches title or description
    tags: str | None = None  # Comma-separated, any may match
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    page: int = Field(default=1, ge=1, le=MAX_PAGE)
    limit: int | None = Field(default=None, ge=1)  # Settings default when omitted
    author_id: UUID | None = None


class ListQuestionsResponse(PageInfo):
    """List questions response."""

    items: list[QuestionItem]


def build_question_filter(
    request: ListQuestionsRequest, pagination: PaginationSettings
) -> QuestionFilter:
    """Turn raw listing parameters into a validated question filter.

    Raises:
        ValidationError: If a tag is malformed or the limit is too large
    """
    page_size = resolve_page_size(
        request.limit, pagination.default_page_size, pagination
    )
    try:
        tags = parse_tag_filter(request.tags)
        return QuestionFilter(
            search=request.search,
            tags=tags,
            author_id=UserId(request.author_id) if request.author_id else None,
            sort=request.sort,
            page=request.page,
            page_size=page_size,
        )
    except pydantic.ValidationError as e:
        raise ValidationError(describe_validation_errors(e)) from e


class ListQuestionsUseCase:
    """Use case for searching, filtering and paging questions."""

    def __init__(
        self, question_service: QuestionService, pagination: PaginationSettings
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            pagination: Page size defaults and limits
        """
        self.question_service = question_service
        self.pagination = pagination

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters and pagination

        Returns:
            One page of questions with pagination metadata

        Raises:
            ValidationError: If the filter is invalid
        """
        with logfire.span(
            "list_questions.execute",
            search=request.search,
            tags=request.tags,
            sort=request.sort.value,
            page=request.page,
        ):
            query = build_question_filter(request, self.pagination)
            page = await self.question_service.list_questions(query)

            return ListQuestionsResponse(
                items=[QuestionItem.from_question(q) for q in page.items],
                **PageInfo.of(page.total, page.page, page.page_size).model_dump(),
            )
