"""Shared base for StackIt domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable base for questions, answers and result pages.

    Changes are made with ``model_copy(update=...)`` and persisted through
    a repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # TagName and other value objects
    )
