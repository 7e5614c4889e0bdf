"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import QuestionItem
from stackit.domain.service import QuestionService
from stackit.domain.value import QuestionId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: UUID


class GetQuestionResponse(QuestionItem):
    """Get question response (view already counted)."""


class GetQuestionUseCase:
    """Use case for opening a question, which counts one view."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        question = await self.question_service.get_question(
            QuestionId(request.question_id)
        )
        return GetQuestionResponse(**QuestionItem.from_question(question).model_dump())
