"""Pull request-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequest:
    """Pull request information as returned by GitHub."""

    number: int
    html_url: str
    state: str  # "open", "closed"
    title: str
    head_ref: str
    base_ref: str
    merged: bool | None  # None when GitHub did not report it
    merge_commit_sha: str | None = None


@dataclass(frozen=True)
class MergeInfo:
    """Merge status of a source pull request."""

    merged: bool | None
    state: str
    merge_commit_sha: str | None = None

    @classmethod
    def from_pull_request(cls, pr: PullRequest) -> "MergeInfo":
        return cls(
            merged=pr.merged,
            state=pr.state,
            merge_commit_sha=pr.merge_commit_sha,
        )

    @property
    def is_merged(self) -> bool:
        return self.merged is True


@dataclass(frozen=True)
class IssueComment:
    """A comment posted to a pull request conversation."""

    comment_id: int
    html_url: str
    body: str


@dataclass(frozen=True)
class Reaction:
    """A reaction added to an issue comment."""

    reaction_id: int
    content: str
