"""Mappers for converting between database rows and domain models.

The domain models are immutable pydantic models, so rows are mapped by
hand instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from stackit.domain.model import Answer, Question
from stackit.domain.value import AnswerId, QuestionId, TagName, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    accepted = row.get("accepted_answer_id")
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        tags=[TagName(tag) for tag in row.get("tags") or []],
        author_id=UserId(_uuid(row["author_id"])),
        votes=row["votes"],
        views=row["views"],
        answer_ids=[AnswerId(_uuid(a)) for a in row.get("answer_ids") or []],
        accepted_answer_id=AnswerId(_uuid(accepted)) if accepted else None,
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion/update
    """
    # TagName is a RootModel, so model_dump yields plain strings
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        votes=row["votes"],
        is_accepted=row["is_accepted"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict.

    Args:
        answer: Answer domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return answer.model_dump()
