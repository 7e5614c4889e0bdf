#!/usr/bin/env python3
"""Seed the database with sample questions and answers.

Existing questions and answers are removed first.
"""

import asyncio
import sys
from datetime import datetime, timedelta
from uuid import NAMESPACE_URL, uuid4, uuid5

import logfire
from sqlalchemy import delete

from stackit.config import Settings
from stackit.domain.model import Answer, Question
from stackit.domain.value import AnswerId, QuestionId, TagName, UserId
from stackit.persistence.database import create_engine, create_session_factory
from stackit.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
)
from stackit.persistence.tables import answers_table, questions_table
from stackit.util.observability import configure_logfire


def demo_user(name: str) -> UserId:
    """Stable user ID for a demo account."""
    return UserId(uuid5(NAMESPACE_URL, f"https://stackit.dev/users/{name}"))


DEMO_USERS = [
    demo_user(name)
    for name in ("demo_user", "demo_admin", "developer1", "developer2", "developer3")
]

SAMPLE_QUESTIONS = [
    {
        "title": "How to use React hooks with TypeScript?",
        "description": (
            "I'm having trouble understanding how to properly type React hooks in "
            "TypeScript: useState with complex objects, useEffect dependencies and "
            "custom hooks. Can someone provide examples and best practices?"
        ),
        "tags": ["react", "typescript", "hooks", "javascript"],
        "votes": 15,
        "views": 234,
    },
    {
        "title": "MongoDB aggregation pipeline performance optimization",
        "description": (
            "I have an aggregation pipeline with $match, $lookup and $group that runs "
            "very slowly on a collection with over 1 million documents. What are the "
            "best practices for optimizing it?"
        ),
        "tags": ["mongodb", "aggregation", "performance", "database"],
        "votes": 8,
        "views": 156,
    },
    {
        "title": "JWT token authentication best practices in Node.js",
        "description": (
            "I store the JWT in localStorage, have no refresh mechanism and tokens "
            "expire after 24 hours. What security vulnerabilities should I be aware "
            "of? Should I implement refresh tokens?"
        ),
        "tags": ["nodejs", "jwt", "authentication", "security", "express"],
        "votes": 23,
        "views": 445,
    },
    {
        "title": "Docker containerization for MERN stack application",
        "description": (
            "The frontend container can't reach the backend in my docker-compose "
            "setup. How should container networking, environment variables and "
            "database volumes be handled?"
        ),
        "tags": ["docker", "mern", "containerization", "devops"],
        "votes": 12,
        "views": 98,
    },
    {
        "title": "Optimizing React component re-renders with useMemo and useCallback",
        "description": (
            "My React application re-renders far too often. When should I use "
            "useMemo versus useCallback, and how do I find the components that "
            "re-render unnecessarily?"
        ),
        "tags": ["react", "performance", "optimization", "hooks"],
        "votes": 19,
        "views": 287,
    },
    {
        "title": "CSS Grid vs Flexbox: When to use which?",
        "description": (
            "Both seem to solve similar layout problems. What are the key "
            "differences, when should I choose one over the other, and can they be "
            "used together effectively?"
        ),
        "tags": ["css", "grid", "flexbox", "layout", "frontend"],
        "votes": 14,
        "views": 203,
    },
]

# (question index, author index, content, votes, accepted)
SAMPLE_ANSWERS = [
    (
        0,
        1,
        "Type the state explicitly: useState<User | null>(null) keeps type safety "
        "while allowing a null initial state.",
        12,
        True,
    ),
    (
        0,
        2,
        "For custom hooks, return a tuple typed with 'as const' so callers get "
        "precise element types.",
        3,
        False,
    ),
    (
        1,
        0,
        "Index the fields used in $match, put $match as early as possible and "
        "$project only the fields you need before the $lookup.",
        8,
        True,
    ),
]


async def seed(settings: Settings) -> tuple[int, int]:
    """Replace all content with the sample data.

    Returns:
        Number of questions and answers created
    """
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    try:
        async with session_factory() as session:
            await session.execute(delete(answers_table))
            await session.execute(delete(questions_table))

            questions_repo = PostgresQuestionRepository(session)
            answers_repo = PostgresAnswerRepository(session)

            start = datetime.now() - timedelta(days=len(SAMPLE_QUESTIONS))
            created: list[Question] = []
            for i, data in enumerate(SAMPLE_QUESTIONS):
                created_at = start + timedelta(days=i)
                question = Question(
                    id=QuestionId(uuid4()),
                    title=data["title"],
                    description=data["description"],
                    tags=[TagName(tag) for tag in data["tags"]],
                    author_id=DEMO_USERS[i % len(DEMO_USERS)],
                    votes=data["votes"],
                    views=data["views"],
                    created_at=created_at,
                    updated_at=created_at,
                )
                created.append(await questions_repo.save(question))

            for question_index, author_index, content, votes, accepted in SAMPLE_ANSWERS:
                question = created[question_index]
                answer = await answers_repo.save(
                    Answer(
                        id=AnswerId(uuid4()),
                        content=content,
                        author_id=DEMO_USERS[author_index],
                        question_id=question.id,
                        votes=votes,
                        is_accepted=accepted,
                    )
                )
                await questions_repo.append_answer(question.id, answer.id)
                if accepted:
                    await questions_repo.set_accepted_answer(question.id, answer.id)

            await session.commit()
    finally:
        await engine.dispose()

    return len(SAMPLE_QUESTIONS), len(SAMPLE_ANSWERS)


def main() -> int:
    """Seed the database and log any errors to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Starting database seeding")
        questions, answers = asyncio.run(seed(settings))
        logfire.info(
            "Database seeding completed", questions=questions, answers=answers
        )
        return 0

    except Exception as e:
        logfire.error(
            "Database seeding failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
