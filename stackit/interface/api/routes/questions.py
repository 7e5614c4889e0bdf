"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from stackit.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from stackit.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from stackit.domain.model import MAX_PAGE
from stackit.domain.repository import AnswerSortOrder, QuestionSortOrder
from stackit.interface.api.identity import current_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str


class AcceptAnswerAPIRequest(BaseModel):
    """API request for accepting an answer."""

    answer_id: UUID


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    search: str | None = Query(default=None, description="Match title or description"),
    tags: str | None = Query(default=None, description="Comma-separated tag names"),
    sort: QuestionSortOrder = Query(default=QuestionSortOrder.NEWEST),
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    limit: int | None = Query(default=None, ge=1),
    author: UUID | None = Query(default=None, description="Only this author's questions"),
) -> ListQuestionsResponse:
    """Search, filter and page through active questions."""
    return await list_questions_use_case.execute(
        ListQuestionsRequest(
            search=search,
            tags=tags,
            sort=sort,
            page=page,
            limit=limit,
            author_id=author,
        )
    )


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    user_id: UUID = Depends(current_user_id),
) -> CreateQuestionResponse:
    """Ask a question. Requires ``X-User-Id``."""
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            title=request.title,
            description=request.description,
            tags=request.tags,
            user_id=user_id,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
) -> GetQuestionResponse:
    """Open a question. Each call counts one view."""
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=question_id)
    )


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    user_id: UUID = Depends(current_user_id),
) -> Response:
    """Soft delete a question. Only its author may do so."""
    await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=question_id, user_id=user_id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    sort: AnswerSortOrder = Query(default=AnswerSortOrder.VOTES),
    page: int = Query(default=1, ge=1, le=MAX_PAGE),
    limit: int | None = Query(default=None, ge=1),
) -> ListAnswersResponse:
    """List the active answers to a question."""
    return await list_answers_use_case.execute(
        ListAnswersRequest(
            question_id=question_id, sort=sort, page=page, limit=limit
        )
    )


@router.post(
    "/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    user_id: UUID = Depends(current_user_id),
) -> CreateAnswerResponse:
    """Answer a question. Requires ``X-User-Id``."""
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=question_id, content=request.content, user_id=user_id
        )
    )


@router.post("/{question_id}/accept", response_model=AcceptAnswerResponse)
async def accept_answer(
    question_id: UUID,
    request: AcceptAnswerAPIRequest,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    user_id: UUID = Depends(current_user_id),
) -> AcceptAnswerResponse:
    """Accept an answer. Only the question's author may do so."""
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(
            question_id=question_id, answer_id=request.answer_id, user_id=user_id
        )
    )
