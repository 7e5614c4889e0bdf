"""Create answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import AnswerItem
from stackit.domain.service import AnswerService
from stackit.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: UUID
    content: str
    user_id: UUID  # Author, from the caller identity


class CreateAnswerResponse(AnswerItem):
    """Create answer response."""


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            NotFoundError: If the question is missing or inactive
            ValidationError: If the content is too short
        """
        answer = await self.answer_service.create_answer(
            question_id=QuestionId(request.question_id),
            content=request.content,
            author_id=UserId(request.user_id),
        )
        return CreateAnswerResponse(**AnswerItem.from_answer(answer).model_dump())
