"""Get feed use case."""

import logfire
from pydantic import BaseModel

from stackit.application.usecase.common import AnswerItem, PageInfo, QuestionItem
from stackit.application.usecase.question.list_questions import (
    ListQuestionsRequest,
    build_question_filter,
)
from stackit.config import PaginationSettings
from stackit.domain.service import FeedService


class GetFeedRequest(ListQuestionsRequest):
    """Get feed request (same filters as a question listing)."""


class FeedEntry(BaseModel):
    """A question with its ordered answers."""

    question: QuestionItem
    answers: list[AnswerItem]
    answers_available: bool  # False when the answer fetch failed


class GetFeedResponse(PageInfo):
    """Get feed response."""

    items: list[FeedEntry]
    failed_answer_fetches: int


class GetFeedUseCase:
    """Use case for the question feed with answers attached."""

    def __init__(
        self, feed_service: FeedService, pagination: PaginationSettings
    ) -> None:
        """Initialize get feed use case.

        Args:
            feed_service: Feed domain service
            pagination: Page size defaults and limits
        """
        self.feed_service = feed_service
        self.pagination = pagination

    async def execute(self, request: GetFeedRequest) -> GetFeedResponse:
        """Execute get feed flow.

        A question whose answers could not be fetched is still returned,
        with no answers and ``answers_available`` set to False.

        Raises:
            ValidationError: If the filter is invalid
        """
        with logfire.span(
            "get_feed.execute",
            search=request.search,
            tags=request.tags,
            sort=request.sort.value,
            page=request.page,
        ):
            query = build_question_filter(request, self.pagination)
            feed = await self.feed_service.get_feed(query)

            return GetFeedResponse(
                items=[
                    FeedEntry(
                        question=QuestionItem.from_question(item.question),
                        answers=[AnswerItem.from_answer(a) for a in item.answers],
                        answers_available=item.answers_available,
                    )
                    for item in feed.items
                ],
                failed_answer_fetches=feed.failed_answer_fetches,
                **PageInfo.of(feed.total, feed.page, feed.page_size).model_dump(),
            )
