"""
Tests for posting outcomes to the pull request conversation.

Feature: cherrypick-bot
"""

import json

import httpx
import pytest

from cherrypick_bot.client import GitHubClient
from cherrypick_bot.exceptions import NotMergedError
from cherrypick_bot.reporter import CommentPoster
from cherrypick_bot.testing import create_mock_pull_request
from cherrypick_bot.types import Result


class RecordingGitHub:
    """Answers comment and reaction requests and records what was sent."""

    def __init__(self, fail_on_body: str | None = None) -> None:
        self.requests: list[tuple[str, dict]] = []
        self.fail_on_body = fail_on_body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append((request.url.path, payload))
        if self.fail_on_body and self.fail_on_body in payload.get("body", ""):
            return httpx.Response(500, json={"message": "Server Error"})
        return httpx.Response(201, json={"id": len(self.requests), **payload})

    @property
    def comments(self) -> list[str]:
        return [p["body"] for path, p in self.requests if path.endswith("/comments")]


def make_poster(recorder: RecordingGitHub, issue_number: int = 42) -> CommentPoster:
    github = GitHubClient(token="ghp_test", transport=httpx.MockTransport(recorder))
    return CommentPoster(github.issues, github.reactions, "octo", "widgets", issue_number)


def test_existing_pr_message() -> None:
    existing = create_mock_pull_request(number=77, merged=False, state="open")
    body = CommentPoster.format_result(Result(branch="release-1.0", success=True, existing_pr=existing))

    assert body.startswith("ℹ️ **Cherry-pick to `release-1.0` already exists!**")
    assert "#77" in body
    assert existing.html_url in body


def test_success_message() -> None:
    created = create_mock_pull_request(number=101, merged=False, state="open")
    body = CommentPoster.format_result(Result(branch="release-1.0", success=True, new_pr=created))

    assert body.startswith("✅ **Cherry-pick to `release-1.0` successful!**")
    assert created.html_url in body
    assert "Please review and merge the cherry-pick PR." in body


def test_failure_message_includes_error_and_next_steps() -> None:
    error = NotMergedError(42, "open")
    body = CommentPoster.format_result(
        Result(branch="release-1.0", error=error, error_message=error.message)
    )

    assert body.startswith("❌ **Cherry-pick to `release-1.0` failed!**")
    assert f"```\n{error.message}\n```" in body
    assert "If the PR is not merged, merge it first and try again" in body
    assert "If there are conflicts, you'll need to manually cherry-pick this PR" in body


@pytest.mark.asyncio
async def test_one_comment_per_branch_in_order() -> None:
    recorder = RecordingGitHub()
    poster = make_poster(recorder)
    results = [
        Result(branch="a", success=True, new_pr=create_mock_pull_request(number=1)),
        Result(branch="b", error_message="boom"),
    ]

    await poster.post_results(results)

    assert [path for path, _ in recorder.requests] == [
        "/repos/octo/widgets/issues/42/comments",
        "/repos/octo/widgets/issues/42/comments",
    ]
    assert "`a` successful" in recorder.comments[0]
    assert "`b` failed" in recorder.comments[1]


@pytest.mark.asyncio
async def test_failed_post_does_not_stop_other_comments(caplog) -> None:
    recorder = RecordingGitHub(fail_on_body="`a`")
    poster = make_poster(recorder)
    results = [Result(branch="a", error_message="x"), Result(branch="b", error_message="y")]

    await poster.post_results(results)

    assert len(recorder.requests) == 2
    assert "Error posting result comment for a" in caplog.text


@pytest.mark.asyncio
async def test_no_issue_number_means_no_comments() -> None:
    recorder = RecordingGitHub()
    poster = make_poster(recorder, issue_number=0)

    await poster.post_error("PR number is required")
    await poster.post_results([Result(branch="a", error_message="x")])

    assert recorder.requests == []


@pytest.mark.asyncio
async def test_post_error_includes_usage() -> None:
    recorder = RecordingGitHub()
    poster = make_poster(recorder)

    await poster.post_error("at least one target branch is required")

    [body] = recorder.comments
    assert body.startswith("❌ **Cherry-pick failed**: at least one target branch is required")
    assert "/cherry-pick <target-branch>" in body


@pytest.mark.asyncio
async def test_reaction_targets_trigger_comment() -> None:
    recorder = RecordingGitHub()
    poster = make_poster(recorder)

    await poster.add_reaction(555, "+1")
    await poster.add_reaction(0, "+1")

    assert recorder.requests == [
        ("/repos/octo/widgets/issues/comments/555/reactions", {"content": "+1"})
    ]
