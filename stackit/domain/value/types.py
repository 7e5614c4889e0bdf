"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum

from pydantic import field_validator

from stackit.domain.value.common import RootValueObject

MAX_TAGS_PER_QUESTION = 5


class VoteDirection(IntEnum):
    """Direction of a vote, applied as a delta to the vote count."""

    UP = 1
    DOWN = -1


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class TagName(RootValueObject[str]):
    """Topic tag attached to a question.

    Tags are trimmed and lowercased on the way in, so ``" React "`` and
    ``"react"`` are the same tag. 1-50 characters, no whitespace or commas
    (commas separate tags in query strings).
    Examples: 'react', 'typescript', 'c++', 'node.js'
    """

    @field_validator("root")
    @classmethod
    def normalize_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name format."""
        v = v.strip().lower()
        if not re.match(r"^[^\s,]{1,50}$", v):
            raise ValueError(
                "Tag name must be 1-50 characters without whitespace or commas"
            )
        return v


def parse_tag_filter(raw: str | None) -> list[TagName]:
    """Parse a comma-separated tag filter into distinct tag names.

    Blank entries are skipped and duplicates collapse, keeping first-seen
    order. ``None`` or an all-blank string yields an empty list.

    Raises:
        ValueError: If an entry is not a valid tag name
    """
    if not raw:
        return []

    tags: list[TagName] = []
    for part in raw.split(","):
        if not part.strip():
            continue
        tag = TagName(part)
        if tag not in tags:
            tags.append(tag)
    return tags
