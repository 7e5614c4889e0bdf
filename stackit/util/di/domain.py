"""Domain layer DI providers."""

from dishka import Scope, provide

from stackit.config import FeedSettings
from stackit.domain.repository import (
    AnswerRepository,
    AnswerRepositoryFactory,
    QuestionRepository,
)
from stackit.domain.service import (
    AnswerService,
    FeedAggregator,
    FeedService,
    QuestionService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
        )

    @provide
    def get_vote_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            question_repository=question_repository,
            answer_repository=answer_repository,
        )

    @provide
    def get_feed_aggregator(
        self,
        answer_repository_factory: AnswerRepositoryFactory,
        feed_settings: FeedSettings,
    ) -> FeedAggregator:
        """Provide feed aggregator."""
        return FeedAggregator(
            answer_repository_factory=answer_repository_factory,
            feed_settings=feed_settings,
        )

    @provide
    def get_feed_service(
        self, question_service: QuestionService, feed_aggregator: FeedAggregator
    ) -> FeedService:
        """Provide feed domain service."""
        return FeedService(
            question_service=question_service, feed_aggregator=feed_aggregator
        )
