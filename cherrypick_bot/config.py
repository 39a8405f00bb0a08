"""Request parsing and pre-flight validation."""

from cherrypick_bot.exceptions import ConfigurationError, InvalidConfigError
from cherrypick_bot.types.results import Config


def validate_config(config: Config) -> None:
    """
    Reject structurally invalid requests.

    Runs before any GitHub or git call and has no side effects.

    Raises:
        InvalidConfigError: If the PR number, branches or repository are missing
    """
    if not config.pr_number:
        raise InvalidConfigError("PR number is required")

    if not config.branches:
        raise InvalidConfigError("at least one target branch is required")

    if not config.repo_owner or not config.repo_name:
        raise InvalidConfigError("repository owner and name are required")


def parse_branches(text: str | None) -> list[str]:
    """Split a comma separated branch list, dropping blanks."""
    if not text:
        return []
    return [branch.strip() for branch in text.split(",") if branch.strip()]


def parse_repo(text: str) -> tuple[str, str]:
    """
    Split an "owner/name" repository reference.

    Raises:
        ConfigurationError: If the value is not in owner/name form
    """
    owner, sep, name = text.partition("/")
    if not sep or not owner or not name:
        raise ConfigurationError("--repo must be in owner/name format")
    return owner, name
