"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .feed_aggregator import AggregatedAnswers, FeedAggregator, merge_answers
from .feed_service import FeedService
from .question_service import QuestionService
from .vote_service import VoteService

__all__ = [
    "AggregatedAnswers",
    "AnswerService",
    "FeedAggregator",
    "FeedService",
    "QuestionService",
    "Service",
    "VoteService",
    "merge_answers",
]
