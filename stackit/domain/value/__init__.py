"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import AnswerId, QuestionId, UserId
from stackit.domain.value.types import (
    MAX_TAGS_PER_QUESTION,
    TagName,
    VotableType,
    VoteDirection,
    parse_tag_filter,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    # Types
    "MAX_TAGS_PER_QUESTION",
    "TagName",
    "VotableType",
    "VoteDirection",
    "parse_tag_filter",
]
