"""PostgreSQL repository implementations."""

from stackit.persistence.repository.answer import (
    PostgresAnswerRepository,
    PostgresAnswerRepositoryFactory,
)
from stackit.persistence.repository.question import PostgresQuestionRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresAnswerRepositoryFactory",
]
