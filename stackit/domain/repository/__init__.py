"""Repository interfaces for StackIt domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from stackit.domain.repository.answer import (
    AnswerRepository,
    AnswerRepositoryFactory,
    AnswerSortOrder,
)
from stackit.domain.repository.question import (
    QuestionFilter,
    QuestionRepository,
    QuestionSortOrder,
)

__all__ = [
    "QuestionRepository",
    "QuestionFilter",
    "QuestionSortOrder",
    "AnswerRepository",
    "AnswerRepositoryFactory",
    "AnswerSortOrder",
]
