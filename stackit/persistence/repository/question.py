"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, asc, desc, func, literal, or_, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Question
from stackit.domain.repository.question import (
    QuestionFilter,
    QuestionRepository,
    QuestionSortOrder,
)
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import questions_table


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _apply_filter(stmt: Select, query: QuestionFilter) -> Select:
        stmt = stmt.where(questions_table.c.is_active.is_(True))

        if query.search:
            pattern = f"%{escape_like(query.search)}%"
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern, escape="\\"),
                    questions_table.c.description.ilike(pattern, escape="\\"),
                )
            )

        if query.tags:
            # Array overlap (&&): any requested tag matches
            stmt = stmt.where(
                questions_table.c.tags.overlap([tag.root for tag in query.tags])
            )

        if query.author_id:
            stmt = stmt.where(questions_table.c.author_id == query.author_id)

        return stmt

    @staticmethod
    def _apply_sort(stmt: Select, sort: QuestionSortOrder) -> Select:
        if sort == QuestionSortOrder.NEWEST:
            stmt = stmt.order_by(desc(questions_table.c.created_at))
        elif sort == QuestionSortOrder.OLDEST:
            stmt = stmt.order_by(asc(questions_table.c.created_at))
        elif sort == QuestionSortOrder.VOTES:
            stmt = stmt.order_by(
                desc(questions_table.c.votes), desc(questions_table.c.created_at)
            )
        elif sort == QuestionSortOrder.VIEWS:
            stmt = stmt.order_by(
                desc(questions_table.c.views), desc(questions_table.c.created_at)
            )

        # Unique tie-break keeps pages disjoint
        return stmt.order_by(asc(questions_table.c.id))

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span("question_repository.find_by_id", question_id=str(question_id)):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_question(row._asdict())

    async def find_all(self, query: QuestionFilter) -> List[Question]:
        """Find active questions matching a filter."""
        with logfire.span(
            "question_repository.find_all",
            search=query.search,
            tags=[tag.root for tag in query.tags],
            sort=query.sort.value,
            limit=query.page_size,
            offset=query.offset,
        ):
            stmt = self._apply_filter(select(questions_table), query)
            stmt = self._apply_sort(stmt, query.sort)
            stmt = stmt.limit(query.page_size).offset(query.offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]

            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, query: QuestionFilter) -> int:
        """Count active questions matching a filter."""
        with logfire.span("question_repository.count"):
            stmt = self._apply_filter(
                select(func.count()).select_from(questions_table), query
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update)."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            existing = await self.find_by_id(question.id)
            question_dict = question_to_dict(question)

            if existing:
                stmt = (
                    questions_table.update()
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
            else:
                logfire.info("Inserting new question", question_id=str(question.id))
                stmt = questions_table.insert().values(**question_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return question

    async def _update_active(self, question_id: QuestionId, **values) -> Optional[Question]:
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .where(questions_table.c.is_active.is_(True))
            .values(**values)
            .returning(questions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_question(row._asdict()) if row else None

    async def increment_views(self, question_id: QuestionId) -> Optional[Question]:
        """Atomically increment views by 1."""
        with logfire.span(
            "question_repository.increment_views", question_id=str(question_id)
        ):
            return await self._update_active(
                question_id, views=questions_table.c.views + 1
            )

    async def add_to_votes(
        self, question_id: QuestionId, delta: int
    ) -> Optional[Question]:
        """Atomically add delta to votes."""
        with logfire.span(
            "question_repository.add_to_votes",
            question_id=str(question_id),
            delta=delta,
        ):
            return await self._update_active(
                question_id, votes=questions_table.c.votes + delta
            )

    async def append_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Atomically append an answer reference."""
        with logfire.span(
            "question_repository.append_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            return await self._update_active(
                question_id,
                answer_ids=func.array_append(
                    questions_table.c.answer_ids,
                    literal(answer_id, type_=UUID(as_uuid=True)),
                    type_=questions_table.c.answer_ids.type,
                ),
                updated_at=func.now(),
            )

    async def remove_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Atomically drop an answer reference."""
        with logfire.span(
            "question_repository.remove_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question_id)
                .values(
                    answer_ids=func.array_remove(
                        questions_table.c.answer_ids,
                        literal(answer_id, type_=UUID(as_uuid=True)),
                        type_=questions_table.c.answer_ids.type,
                    ),
                    updated_at=func.now(),
                )
                .returning(questions_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_question(row._asdict()) if row else None

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: Optional[AnswerId]
    ) -> Optional[Question]:
        """Set or clear the accepted-answer pointer."""
        with logfire.span(
            "question_repository.set_accepted_answer",
            question_id=str(question_id),
            answer_id=str(answer_id) if answer_id else None,
        ):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question_id)
                .values(accepted_answer_id=answer_id, updated_at=func.now())
                .returning(questions_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_question(row._asdict()) if row else None

    async def deactivate(self, question_id: QuestionId) -> bool:
        """Soft delete a question."""
        with logfire.span("question_repository.deactivate", question_id=str(question_id)):
            updated = await self._update_active(
                question_id, is_active=False, updated_at=func.now()
            )
            return updated is not None
