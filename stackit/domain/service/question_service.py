"""Question domain service (query engine)."""

from datetime import datetime
from uuid import uuid4

import logfire
import pydantic

from stackit.domain.error import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
    describe_validation_errors,
)
from stackit.domain.model.page import Page
from stackit.domain.model.question import Question
from stackit.domain.repository import QuestionFilter, QuestionRepository
from stackit.domain.value import QuestionId, TagName, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question queries and lifecycle."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def list_questions(self, query: QuestionFilter) -> Page[Question]:
        """List active questions matching a filter.

        Args:
            query: Search, tags, author, sort order and page window

        Returns:
            The requested page plus the total size of the filtered set
        """
        with logfire.span(
            "question_service.list_questions",
            search=query.search,
            tags=[tag.root for tag in query.tags],
            sort=query.sort.value,
            page=query.page,
            page_size=query.page_size,
        ):
            questions = await self.question_repository.find_all(query)
            total = await self.question_repository.count(query)
            logfire.info(
                "Questions listed", returned=len(questions), total=total
            )
            return Page[Question](
                items=questions,
                total=total,
                page=query.page,
                page_size=query.page_size,
            )

    async def get_question(self, question_id: QuestionId) -> Question:
        """Resolve an active question and count one view.

        The view increment happens in the store in the same statement that
        reads the question back, so concurrent readers never lose a view.

        Args:
            question_id: Question ID

        Returns:
            The question with its post-increment view count

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        with logfire.span("question_service.get_question", question_id=str(question_id)):
            question = await self.question_repository.increment_views(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Question viewed", question_id=str(question_id), views=question.views
            )
            return question

    async def get_active_question(self, question_id: QuestionId) -> Question:
        """Resolve an active question without counting a view.

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        question = await self.question_repository.find_by_id(question_id)
        if not question or not question.is_active:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def create_question(
        self,
        title: str,
        description: str,
        tags: list[str],
        author_id: UserId,
    ) -> Question:
        """Create a question.

        Args:
            title: Question title (10-200 characters after trimming)
            description: Problem description (20+ characters after trimming)
            tags: Up to 5 tag names, normalized to lowercase
            author_id: Author user ID

        Returns:
            The created question with zero votes and views

        Raises:
            ValidationError: If any field breaks the question rules
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            tag_count=len(tags),
        ):
            now = datetime.now()
            try:
                question = Question(
                    id=QuestionId(uuid4()),
                    title=title,
                    description=description,
                    tags=[TagName(tag) for tag in tags],
                    author_id=author_id,
                    created_at=now,
                    updated_at=now,
                )
            except pydantic.ValidationError as e:
                message = describe_validation_errors(e)
                logfire.warn("Invalid question", author_id=str(author_id), error=message)
                raise ValidationError(message) from e

            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def delete_question(self, question_id: QuestionId, user_id: UserId) -> None:
        """Soft delete a question. Only its author may do so.

        Args:
            question_id: Question ID
            user_id: Caller's user ID

        Raises:
            NotFoundError: If the question is missing or inactive
            ForbiddenError: If the caller is not the author
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.get_active_question(question_id)
            if question.author_id != user_id:
                logfire.warn(
                    "Question delete by non-author",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
                raise ForbiddenError("question", str(question_id), str(user_id))

            await self.question_repository.deactivate(question_id)
            logfire.info("Question deleted", question_id=str(question_id))
