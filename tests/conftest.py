"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from kiiaren.domain.value import UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def new_user_id() -> UserId:
    """Random user ID for a test actor."""
    return UserId(uuid4())
