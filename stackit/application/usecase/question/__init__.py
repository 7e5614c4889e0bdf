"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionResponse, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    build_question_filter,
)

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "build_question_filter",
]
