"""Answer domain service."""

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
from stackit.domain.model.answer import Answer
from stackit.domain.model.page import Page
from stackit.domain.model.question import Question
from stackit.domain.repository import (
    AnswerRepository,
    AnswerSortOrder,
    QuestionRepository,
)
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service


class AnswerService(Service):
    """Domain service for answers and answer acceptance."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def _get_active_question(self, question_id: QuestionId) -> Question:
        question = await self.question_repository.find_by_id(question_id)
        if not question or not question.is_active:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def _get_active_answer(self, answer_id: AnswerId) -> Answer:
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer or not answer.is_active:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def create_answer(
        self, question_id: QuestionId, content: str, author_id: UserId
    ) -> Answer:
        """Answer a question.

        The new answer's ID is appended to the question's answer references
        in the store, so concurrent answers never overwrite each other.

        Args:
            question_id: Question being answered
            content: Answer body (10+ characters after trimming)
            author_id: Author user ID

        Returns:
            Created answer

        Raises:
            NotFoundError: If the question is missing or inactive
            ValidationError: If the content is too short
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            await self._get_active_question(question_id)

            now = datetime.now()
            try:
                answer = Answer(
                    id=AnswerId(uuid4()),
                    content=content,
                    author_id=author_id,
                    question_id=question_id,
                    created_at=now,
                    updated_at=now,
                )
            except pydantic.ValidationError as e:
                message = describe_validation_errors(e)
                logfire.warn("Invalid answer", question_id=str(question_id), error=message)
                raise ValidationError(message) from e

            saved = await self.answer_repository.save(answer)

            question = await self.question_repository.append_answer(
                question_id, saved.id
            )
            if not question:
                # Question was deleted between the check and the append
                logfire.error(
                    "Question disappeared while answering",
                    question_id=str(question_id),
                    answer_id=str(saved.id),
                )
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question_id),
                answer_count=len(question.answer_ids),
            )
            return saved

    async def list_answers(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        page: int = 1,
        page_size: int = 20,
    ) -> Page[Answer]:
        """List active answers to an active question.

        With the ``votes`` order the accepted answer comes first regardless
        of its vote count; ``newest`` and ``oldest`` are purely chronological.

        Args:
            question_id: Question ID
            sort: Sort order
            page: Page number (1-indexed)
            page_size: Answers per page

        Returns:
            One page of answers

        Raises:
            NotFoundError: If the question is missing or inactive
        """
        with logfire.span(
            "answer_service.list_answers",
            question_id=str(question_id),
            sort=sort.value,
            page=page,
            page_size=page_size,
        ):
            await self._get_active_question(question_id)

            answers = await self.answer_repository.find_by_question(
                question_id,
                sort=sort,
                limit=page_size,
                offset=(page - 1) * page_size,
            )
            total = await self.answer_repository.count_by_question(question_id)
            return Page[Answer](
                items=answers, total=total, page=page, page_size=page_size
            )

    async def list_answers_by_author(
        self, author_id: UserId, page: int = 1, page_size: int = 20
    ) -> Page[Answer]:
        """List an author's active answers, newest first.

        Args:
            author_id: Author user ID
            page: Page number (1-indexed)
            page_size: Answers per page

        Returns:
            One page of answers
        """
        with logfire.span(
            "answer_service.list_answers_by_author",
            author_id=str(author_id),
            page=page,
            page_size=page_size,
        ):
            answers = await self.answer_repository.find_by_author(
                author_id, limit=page_size, offset=(page - 1) * page_size
            )
            total = await self.answer_repository.count_by_author(author_id)
            return Page[Answer](
                items=answers, total=total, page=page, page_size=page_size
            )

    async def accept_answer(
        self, question_id: QuestionId, answer_id: AnswerId, user_id: UserId
    ) -> Question:
        """Mark an answer as the accepted answer of its question.

        Only the question's author may accept. The question's pointer is
        moved first and the answers' flags are then rewritten from it in a
        single update, so overlapping accepts never leave two answers
        flagged. In PostgreSQL the pointer update also locks the question row
        until the request commits. Accepting the current accepted answer
        again is a no-op.

        Args:
            question_id: Question ID
            answer_id: Answer to accept
            user_id: Caller's user ID

        Returns:
            The question with its accepted-answer pointer set

        Raises:
            NotFoundError: If the question or the answer is missing or inactive
            ForbiddenError: If the caller did not ask the question
            ValidationError: If the answer belongs to another question
        """
        with logfire.span(
            "answer_service.accept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            question = await self._get_active_question(question_id)
            if question.author_id != user_id:
                logfire.warn(
                    "Accept by non-author",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
                raise ForbiddenError("question", str(question_id), str(user_id))

            answer = await self._get_active_answer(answer_id)
            if answer.question_id != question_id:
                logfire.warn(
                    "Accepted answer belongs to another question",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                    answer_question_id=str(answer.question_id),
                )
                raise ValidationError("Answer does not belong to this question")

            if question.accepted_answer_id == answer_id and answer.is_accepted:
                logfire.info("Answer already accepted", answer_id=str(answer_id))
                return question

            previous_id = question.accepted_answer_id
            updated = await self.question_repository.set_accepted_answer(
                question_id, answer_id
            )
            if not updated:
                raise NotFoundError("Question", str(question_id))

            # Flags follow the pointer; one update clears every other answer
            await self.answer_repository.sync_accepted(
                question_id, updated.accepted_answer_id
            )

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
                previous_answer_id=str(previous_id) if previous_id else None,
            )
            return updated

    async def delete_answer(self, answer_id: AnswerId, user_id: UserId) -> None:
        """Soft delete an answer. Only its author may do so.

        The answer's id is dropped from the question's references, and
        deleting the accepted answer clears the question's pointer.

        Args:
            answer_id: Answer ID
            user_id: Caller's user ID

        Raises:
            NotFoundError: If the answer is missing or inactive
            ForbiddenError: If the caller is not the author
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            answer = await self._get_active_answer(answer_id)
            if answer.author_id != user_id:
                logfire.warn(
                    "Answer delete by non-author",
                    answer_id=str(answer_id),
                    user_id=str(user_id),
                )
                raise ForbiddenError("answer", str(answer_id), str(user_id))

            await self.answer_repository.deactivate(answer_id)

            question = await self.question_repository.remove_answer(
                answer.question_id, answer_id
            )
            if question and question.accepted_answer_id == answer_id:
                await self.question_repository.set_accepted_answer(
                    answer.question_id, None
                )
                await self.answer_repository.sync_accepted(answer.question_id, None)
                logfire.info(
                    "Accepted answer cleared",
                    question_id=str(answer.question_id),
                    answer_id=str(answer_id),
                )

            logfire.info("Answer deleted", answer_id=str(answer_id))
