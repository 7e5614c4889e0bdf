"""Mock persistence providers for testing."""

from dishka import Scope, provide

from stackit.domain.repository import (
    AnswerRepository,
    AnswerRepositoryFactory,
    QuestionRepository,
)
from stackit.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryAnswerRepositoryFactory,
    InMemoryQuestionRepository,
)
from stackit.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that every request served by one
    container (e.g. several calls through a TestClient) sees the same data.
    Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_question_repository(self) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository()

    @provide(scope=Scope.APP)
    def get_answer_repository(self) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository()

    @provide(scope=Scope.APP)
    def get_answer_repository_factory(
        self, answer_repository: AnswerRepository
    ) -> AnswerRepositoryFactory:
        """Provide a factory handing out the shared answer repository."""
        return InMemoryAnswerRepositoryFactory(answer_repository)
