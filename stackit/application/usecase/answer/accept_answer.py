"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.common import QuestionItem
from stackit.domain.service import AnswerService
from stackit.domain.value import AnswerId, QuestionId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: UUID
    answer_id: UUID
    user_id: UUID  # Must be the question's author


class AcceptAnswerResponse(QuestionItem):
    """Accept answer response (the updated question)."""


class AcceptAnswerUseCase:
    """Use case for accepting an answer."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize accept answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the question or answer is missing or inactive
            ForbiddenError: If the caller did not ask the question
            ValidationError: If the answer belongs to another question
        """
        question = await self.answer_service.accept_answer(
            QuestionId(request.question_id),
            AnswerId(request.answer_id),
            UserId(request.user_id),
        )
        return AcceptAnswerResponse(**QuestionItem.from_question(question).model_dump())
