"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from stackit.domain.value import UserId

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def user_id() -> UserId:
    """A fresh caller identity."""
    return UserId(uuid4())
