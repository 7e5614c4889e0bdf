"""Domain model entities for StackIt."""

from stackit.domain.model.answer import Answer
from stackit.domain.model.page import MAX_PAGE, Feed, FeedItem, Page
from stackit.domain.model.question import Question
from stackit.domain.model.vote import Vote

__all__ = [
    "Question",
    "Answer",
    "Vote",
    "Page",
    "Feed",
    "FeedItem",
    "MAX_PAGE",
]
