"""Answer use cases."""

from .accept_answer import AcceptAnswerRequest, AcceptAnswerResponse, AcceptAnswerUseCase
from .create_answer import CreateAnswerRequest, CreateAnswerResponse, CreateAnswerUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase
from .list_answers_by_author import (
    ListAnswersByAuthorRequest,
    ListAnswersByAuthorResponse,
    ListAnswersByAuthorUseCase,
)

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerResponse",
    "AcceptAnswerUseCase",
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "ListAnswersByAuthorRequest",
    "ListAnswersByAuthorResponse",
    "ListAnswersByAuthorUseCase",
]
