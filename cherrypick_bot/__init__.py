"""Cherry-pick bot - replays merged pull requests onto release branches."""

__version__ = "0.1.0"

from cherrypick_bot.client import GitHubClient  # noqa: E402
from cherrypick_bot.config import validate_config  # noqa: E402
from cherrypick_bot.exceptions import (  # noqa: E402
    AuthenticationError,
    AuthorizationError,
    CherryPickError,
    ConfigurationError,
    GitCommandError,
    GitHubError,
    InvalidConfigError,
    NotFoundError,
    NotMergedError,
    OperationCancelledError,
    RateLimitedError,
    ServerError,
    ValidationError,
    VersionControlError,
)
from cherrypick_bot.git import CommandGitRunner, GitRunner  # noqa: E402
from cherrypick_bot.logging import configure_logging, get_logger  # noqa: E402
from cherrypick_bot.remote import GitHubRemote, RemoteRepository  # noqa: E402
from cherrypick_bot.reporter import CommentPoster  # noqa: E402
from cherrypick_bot.service import CherryPickService  # noqa: E402
from cherrypick_bot.types import (  # noqa: E402
    Config,
    MergeInfo,
    PullRequest,
    Result,
    cherry_pick_branch_name,
)

__all__ = [
    "__version__",
    # Orchestration
    "CherryPickService",
    "validate_config",
    "cherry_pick_branch_name",
    # Ports
    "RemoteRepository",
    "GitHubRemote",
    "GitRunner",
    "CommandGitRunner",
    # GitHub
    "GitHubClient",
    "CommentPoster",
    # Types
    "Config",
    "MergeInfo",
    "PullRequest",
    "Result",
    # Exceptions
    "CherryPickError",
    "ConfigurationError",
    "InvalidConfigError",
    "GitHubError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitedError",
    "ServerError",
    "NotMergedError",
    "GitCommandError",
    "VersionControlError",
    "OperationCancelledError",
    # Logging
    "configure_logging",
    "get_logger",
]
