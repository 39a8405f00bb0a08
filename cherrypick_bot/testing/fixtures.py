"""
Pytest fixtures for cherry-pick bot testing.

Provides common fixtures for tests that drive the branch pipeline.
"""

from collections.abc import Generator

import pytest

from cherrypick_bot.testing.fakes import FakeGitRunner, FakeRemoteRepository
from cherrypick_bot.types.pulls import PullRequest
from cherrypick_bot.types.results import Config

MERGE_COMMIT_SHA = "3f786850e387550fdab836ed7e6dc881de23001b"


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_pull_request(
    number: int = 42,
    merged: bool | None = True,
    state: str = "closed",
    merge_commit_sha: str | None = MERGE_COMMIT_SHA,
    head_ref: str = "feature",
    base_ref: str = "main",
    owner: str = "octo",
    repo: str = "widgets",
) -> PullRequest:
    """Create a PullRequest with sensible defaults."""
    return PullRequest(
        number=number,
        html_url=f"https://github.com/{owner}/{repo}/pull/{number}",
        state=state,
        title=f"Mock pull request #{number}",
        head_ref=head_ref,
        base_ref=base_ref,
        merged=merged,
        merge_commit_sha=merge_commit_sha,
    )


def create_config(
    branches: tuple[str, ...] | list[str] = ("release-1.0",),
    pr_number: int = 42,
    repo_owner: str = "octo",
    repo_name: str = "widgets",
) -> Config:
    """Create a Config for the mock repository."""
    return Config(
        pr_number=pr_number,
        branches=tuple(branches),
        repo_owner=repo_owner,
        repo_name=repo_name,
        git_user_name="Test Bot",
        git_user_email="bot@example.com",
    )


# ============================================================================
# Port Fixtures
# ============================================================================


@pytest.fixture
def fake_remote() -> Generator[FakeRemoteRepository, None, None]:
    """Provide a FakeRemoteRepository whose source PR is merged."""
    remote = FakeRemoteRepository()
    remote.configure_get_pr(create_mock_pull_request())
    yield remote
    remote.reset()


@pytest.fixture
def fake_git() -> Generator[FakeGitRunner, None, None]:
    """Provide a FakeGitRunner where every command succeeds."""
    git = FakeGitRunner()
    yield git
    git.reset()


@pytest.fixture
def sample_config() -> Config:
    """Provide a request for one target branch."""
    return create_config()
