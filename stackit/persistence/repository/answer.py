"""PostgreSQL implementation of Answer repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

import logfire
from sqlalchemy import asc, desc, false, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stackit.domain.model import Answer
from stackit.domain.repository.answer import (
    AnswerRepository,
    AnswerRepositoryFactory,
    AnswerSortOrder,
)
from stackit.domain.value import AnswerId, QuestionId, UserId
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        with logfire.span("answer_repository.find_by_id", answer_id=str(answer_id)):
            stmt = select(answers_table).where(answers_table.c.id == answer_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_answer(row._asdict()) if row else None

    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: AnswerSortOrder = AnswerSortOrder.VOTES,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Answer]:
        """Find active answers to a question."""
        with logfire.span(
            "answer_repository.find_by_question",
            question_id=str(question_id),
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = select(answers_table).where(
                answers_table.c.question_id == question_id,
                answers_table.c.is_active.is_(True),
            )

            if sort == AnswerSortOrder.NEWEST:
                stmt = stmt.order_by(desc(answers_table.c.created_at))
            elif sort == AnswerSortOrder.OLDEST:
                stmt = stmt.order_by(asc(answers_table.c.created_at))
            elif sort == AnswerSortOrder.VOTES:
                stmt = stmt.order_by(
                    desc(answers_table.c.is_accepted),
                    desc(answers_table.c.votes),
                    desc(answers_table.c.created_at),
                )
            stmt = stmt.order_by(asc(answers_table.c.id))

            if limit is not None:
                stmt = stmt.limit(limit)
            stmt = stmt.offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count active answers to a question."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(
                answers_table.c.question_id == question_id,
                answers_table.c.is_active.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self,
        author_id: UserId,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Answer]:
        """Find active answers by an author."""
        with logfire.span(
            "answer_repository.find_by_author",
            author_id=str(author_id),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(answers_table)
                .where(
                    answers_table.c.author_id == author_id,
                    answers_table.c.is_active.is_(True),
                )
                .order_by(desc(answers_table.c.created_at), asc(answers_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count active answers by an author."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(
                answers_table.c.author_id == author_id,
                answers_table.c.is_active.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            existing = await self.find_by_id(answer.id)
            answer_dict = answer_to_dict(answer)

            if existing:
                stmt = (
                    answers_table.update()
                    .where(answers_table.c.id == answer.id)
                    .values(**answer_dict)
                )
            else:
                logfire.info(
                    "Inserting new answer",
                    answer_id=str(answer.id),
                    question_id=str(answer.question_id),
                )
                stmt = answers_table.insert().values(**answer_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return answer

    async def add_to_votes(self, answer_id: AnswerId, delta: int) -> Optional[Answer]:
        """Atomically add delta to votes."""
        with logfire.span(
            "answer_repository.add_to_votes", answer_id=str(answer_id), delta=delta
        ):
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer_id)
                .where(answers_table.c.is_active.is_(True))
                .values(votes=answers_table.c.votes + delta)
                .returning(answers_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_answer(row._asdict()) if row else None

    async def sync_accepted(
        self, question_id: QuestionId, accepted_answer_id: Optional[AnswerId]
    ) -> int:
        """Set is_accepted on every answer of a question in one UPDATE."""
        with logfire.span(
            "answer_repository.sync_accepted",
            question_id=str(question_id),
            accepted_answer_id=str(accepted_answer_id) if accepted_answer_id else None,
        ):
            if accepted_answer_id is None:
                flag = false()
            else:
                flag = answers_table.c.id == accepted_answer_id

            stmt = (
                update(answers_table)
                .where(answers_table.c.question_id == question_id)
                .where(answers_table.c.is_accepted.is_distinct_from(flag))
                .values(is_accepted=flag, updated_at=func.now())
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount

    async def deactivate(self, answer_id: AnswerId) -> bool:
        """Soft delete an answer."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .where(answers_table.c.is_active.is_(True))
            .values(is_active=False, updated_at=func.now())
            .returning(answers_table.c.id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row is not None


class PostgresAnswerRepositoryFactory(AnswerRepositoryFactory):
    """Opens a read-only answer repository on a fresh session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize factory.

        Args:
            session_factory: Session factory bound to the application engine
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def open(self) -> AsyncIterator[AnswerRepository]:
        """Open a repository on its own session, closed on exit."""
        async with self.session_factory() as session:
            yield PostgresAnswerRepository(session)
