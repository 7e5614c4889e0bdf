"""Feed service: a page of questions with their answers."""

import logfire

from stackit.domain.model.page import Feed
from stackit.domain.repository import QuestionFilter

from .base import Service
from .feed_aggregator import FeedAggregator
from .question_service import QuestionService


class FeedService(Service):
    """Combines the question query with answer aggregation.

    Nothing is cached; every call reads the store.
    """

    def __init__(
        self, question_service: QuestionService, feed_aggregator: FeedAggregator
    ) -> None:
        """Initialize feed service.

        Args:
            question_service: Question query engine
            feed_aggregator: Attaches answers to questions
        """
        self.question_service = question_service
        self.feed_aggregator = feed_aggregator

    async def get_feed(self, query: QuestionFilter) -> Feed:
        """Build one feed page.

        Args:
            query: Same filter as a question listing

        Returns:
            Feed items in question order with pagination metadata

        Raises:
            UpstreamFailure: If the question query itself fails
        """
        with logfire.span(
            "feed_service.get_feed",
            page=query.page,
            page_size=query.page_size,
            sort=query.sort.value,
        ):
            page = await self.question_service.list_questions(query)
            aggregated = await self.feed_aggregator.attach_answers(page.items)

            if aggregated.failed:
                logfire.warn(
                    "Feed served with missing answers",
                    failed=aggregated.failed,
                    question_count=len(page.items),
                )

            return Feed(
                items=aggregated.items,
                total=page.total,
                page=page.page,
                page_size=page.page_size,
                failed_answer_fetches=aggregated.failed,
            )
