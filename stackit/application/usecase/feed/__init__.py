"""Feed use cases."""

from .get_feed import FeedEntry, GetFeedRequest, GetFeedResponse, GetFeedUseCase

__all__ = [
    "FeedEntry",
    "GetFeedRequest",
    "GetFeedResponse",
    "GetFeedUseCase",
]
