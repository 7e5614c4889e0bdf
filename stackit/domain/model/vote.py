"""Vote entity.

A vote is a +1/-1 delta applied to a question or an answer. Votes are not
stored: the ledger applies the delta to the target's counter and the
voter, when known, is only recorded in telemetry. Nothing stops the same
user from voting twice.
"""

from typing import Optional
from uuid import UUID

from stackit.domain.model.common import DomainModel
from stackit.domain.value import UserId, VotableType, VoteDirection


class Vote(DomainModel):
    """Vote command on a question or answer."""

    target_type: VotableType
    target_id: UUID  # QuestionId or AnswerId (both are UUIDs)
    direction: VoteDirection
    user_id: Optional[UserId] = None
