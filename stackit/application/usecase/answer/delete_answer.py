"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService
from stackit.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: UUID
    user_id: UUID


class DeleteAnswerUseCase:
    """Use case for soft deleting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        self.answer_service = answer_service

    async def execute(self, request: DeleteAnswerRequest) -> None:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer is missing or inactive
            ForbiddenError: If the caller is not the author
        """
        await self.answer_service.delete_answer(
            AnswerId(request.answer_id), UserId(request.user_id)
        )
