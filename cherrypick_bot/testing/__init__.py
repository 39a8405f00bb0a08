"""Cherry-pick bot testing utilities.

Provides in-memory ports and fixtures for testing the branch pipeline
without GitHub or a git checkout.
"""

from cherrypick_bot.testing.fakes import (
    FakeGitRunner,
    FakeRemoteRepository,
    MockCall,
    MockResponse,
)
from cherrypick_bot.testing.fixtures import (
    MERGE_COMMIT_SHA,
    create_config,
    create_mock_pull_request,
)

__all__ = [
    # Fakes
    "FakeRemoteRepository",
    "FakeGitRunner",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_pull_request",
    "create_config",
    "MERGE_COMMIT_SHA",
]
