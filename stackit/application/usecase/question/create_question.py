"""Create question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from stackit.application.usecase.common import QuestionItem
from stackit.domain.service import QuestionService
from stackit.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request.

    Length and tag rules are enforced by the domain model, so they surface
    as domain validation errors rather than request schema errors.
    """

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    user_id: UUID  # Author, from the caller identity


class CreateQuestionResponse(QuestionItem):
    """Create question response."""


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Raises:
            ValidationError: If title, description or tags are invalid
        """
        with logfire.span("create_question.execute", user_id=str(request.user_id)):
            question = await self.question_service.create_question(
                title=request.title,
                description=request.description,
                tags=request.tags,
                author_id=UserId(request.user_id),
            )
            return CreateQuestionResponse(
                **QuestionItem.from_question(question).model_dump()
            )
