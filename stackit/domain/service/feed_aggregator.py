"""Feed aggregator: attaches answers to a page of questions."""

import asyncio
from dataclasses import dataclass, field

import logfire

from stackit.config import FeedSettings
from stackit.domain.model.answer import Answer
from stackit.domain.model.page import FeedItem
from stackit.domain.model.question import Question
from stackit.domain.repository import AnswerRepositoryFactory, AnswerSortOrder

from .base import Service


@dataclass
class AggregatedAnswers:
    """Feed items in question order plus the number of failed fetches."""

    items: list[FeedItem] = field(default_factory=list)
    failed: int = 0


def merge_answers(question: Question, answers: list[Answer]) -> list[Answer]:
    """Order a question's answers for display.

    Accepted first, then votes descending, then newest first, then id
    ascending. The question's pointer decides which answer is accepted; the
    per-answer flag is only consulted when the question has no pointer.
    """

    def is_accepted(answer: Answer) -> bool:
        if question.accepted_answer_id is not None:
            return answer.id == question.accepted_answer_id
        return answer.is_accepted

    ordered = sorted(answers, key=lambda a: a.id)
    ordered.sort(key=lambda a: a.created_at, reverse=True)
    ordered.sort(key=lambda a: (is_accepted(a), a.votes), reverse=True)
    return ordered


class FeedAggregator(Service):
    """Fetches answers for many questions concurrently.

    Fetches run under a semaphore of ``max_concurrent_fetches`` and each
    one is cut off after ``answer_fetch_timeout`` seconds. A failed or
    timed-out fetch only empties that question's answers; the rest of the
    page is unaffected.
    """

    def __init__(
        self,
        answer_repository_factory: AnswerRepositoryFactory,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize feed aggregator.

        Args:
            answer_repository_factory: Opens one answer repository per fetch
            feed_settings: Fan-out bound and per-fetch timeout
        """
        self.answer_repository_factory = answer_repository_factory
        self.feed_settings = feed_settings

    async def _fetch_answers(self, question: Question) -> list[Answer]:
        async with self.answer_repository_factory.open() as answers:
            return await answers.find_by_question(
                question.id, sort=AnswerSortOrder.VOTES
            )

    async def _build_item(
        self, question: Question, semaphore: asyncio.Semaphore
    ) -> FeedItem | None:
        async with semaphore:
            try:
                answers = await asyncio.wait_for(
                    self._fetch_answers(question),
                    timeout=self.feed_settings.answer_fetch_timeout,
                )
            except asyncio.TimeoutError:
                logfire.warn(
                    "Answer fetch timed out",
                    question_id=str(question.id),
                    timeout=self.feed_settings.answer_fetch_timeout,
                )
                return None
            except Exception as e:
                logfire.warn(
                    "Answer fetch failed",
                    question_id=str(question.id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return None

        return FeedItem(question=question, answers=merge_answers(question, answers))

    async def attach_answers(self, questions: list[Question]) -> AggregatedAnswers:
        """Attach ordered answers to each question.

        Args:
            questions: Questions in display order

        Returns:
            One feed item per question, in the same order, and the count of
            questions whose answers could not be fetched
        """
        with logfire.span(
            "feed_aggregator.attach_answers",
            question_count=len(questions),
            max_concurrent=self.feed_settings.max_concurrent_fetches,
        ):
            if not questions:
                return AggregatedAnswers()

            semaphore = asyncio.Semaphore(self.feed_settings.max_concurrent_fetches)
            results = await asyncio.gather(
                *(self._build_item(question, semaphore) for question in questions)
            )

            aggregated = AggregatedAnswers()
            for question, item in zip(questions, results):
                if item is None:
                    aggregated.failed += 1
                    item = FeedItem(
                        question=question, answers=[], answers_available=False
                    )
                aggregated.items.append(item)

            logfire.info(
                "Answers attached",
                question_count=len(questions),
                failed=aggregated.failed,
            )
            return aggregated
