"""Application layer DI providers."""

from dishka import Scope, provide

from stackit.application.usecase.answer import (
    AcceptAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersByAuthorUseCase,
    ListAnswersUseCase,
)
from stackit.application.usecase.feed import GetFeedUseCase
from stackit.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from stackit.application.usecase.vote import ApplyVoteUseCase
from stackit.config import PaginationSettings
from stackit.domain.service import (
    AnswerService,
    FeedService,
    QuestionService,
    VoteService,
)
from stackit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Question use cases
    @provide
    def get_list_questions_use_case(
        self, question_service: QuestionService, pagination: PaginationSettings
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, pagination=pagination
        )

    @provide
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    @provide
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    # Answer use cases
    @provide
    def get_create_answer_use_case(
        self, answer_service: AnswerService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(answer_service=answer_service)

    @provide
    def get_list_answers_use_case(
        self, answer_service: AnswerService, pagination: PaginationSettings
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(answer_service=answer_service, pagination=pagination)

    @provide
    def get_list_answers_by_author_use_case(
        self, answer_service: AnswerService, pagination: PaginationSettings
    ) -> ListAnswersByAuthorUseCase:
        """Provide list answers by author use case."""
        return ListAnswersByAuthorUseCase(
            answer_service=answer_service, pagination=pagination
        )

    @provide
    def get_accept_answer_use_case(
        self, answer_service: AnswerService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(answer_service=answer_service)

    @provide
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    # Vote use cases
    @provide
    def get_apply_vote_use_case(self, vote_service: VoteService) -> ApplyVoteUseCase:
        """Provide apply vote use case."""
        return ApplyVoteUseCase(vote_service=vote_service)

    # Feed use cases
    @provide
    def get_feed_use_case(
        self, feed_service: FeedService, pagination: PaginationSettings
    ) -> GetFeedUseCase:
        """Provide get feed use case."""
        return GetFeedUseCase(feed_service=feed_service, pagination=pagination)
