"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository, InMemoryAnswerRepositoryFactory
from .question import InMemoryQuestionRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryAnswerRepositoryFactory",
    "InMemoryQuestionRepository",
]
