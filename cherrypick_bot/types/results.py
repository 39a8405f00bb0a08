"""Cherry-pick request and outcome models."""

from dataclasses import dataclass, field

from cherrypick_bot.types.pulls import PullRequest


@dataclass(frozen=True)
class Config:
    """A validated cherry-pick request, shared read-only by every branch worker."""

    pr_number: int
    branches: tuple[str, ...]
    repo_owner: str
    repo_name: str
    git_user_name: str = "Cherry-pick bot"
    git_user_email: str = "cherry-pick-bot@users.noreply.github.com"

    def __post_init__(self) -> None:
        # Accept any iterable of branch names but keep an immutable copy
        if isinstance(self.branches, str):
            raise TypeError("branches must be a sequence of branch names, not a string")
        object.__setattr__(self, "branches", tuple(self.branches))


@dataclass(frozen=True)
class Result:
    """Outcome of cherry-picking the source pull request onto one branch."""

    branch: str
    success: bool = False
    existing_pr: PullRequest | None = None
    new_pr: PullRequest | None = None
    error: Exception | None = field(default=None, compare=False)
    error_message: str = ""

    @property
    def already_handled(self) -> bool:
        """True when a follow-up pull request existed before this run."""
        return self.existing_pr is not None

    @property
    def failed(self) -> bool:
        """True for genuine failures, not for already handled branches."""
        return not self.success and self.existing_pr is None


def cherry_pick_branch_name(pr_number: int, target_branch: str) -> str:
    """Deterministic working branch for a (source PR, target branch) pair."""
    return f"cherry-pick-{pr_number}-to-{target_branch}"
