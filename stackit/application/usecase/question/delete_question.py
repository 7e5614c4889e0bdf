"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import QuestionService
from stackit.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: UUID
    user_id: UUID


class DeleteQuestionUseCase:
    """Use case for soft deleting a question."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> None:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question is missing or inactive
            ForbiddenError: If the caller is not the author
        """
        await self.question_service.delete_question(
            QuestionId(request.question_id), UserId(request.user_id)
        )
