"""Cherry-pick bot exception classes."""


class CherryPickError(Exception):
    """Base exception for all cherry-pick bot errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class ConfigurationError(CherryPickError):
    """Raised when tool configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class InvalidConfigError(ConfigurationError):
    """Raised when a cherry-pick request fails pre-flight validation."""

    pass


class GitHubError(CherryPickError):
    """Base exception for GitHub API failures."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message)
        self.status_code = status_code
        self.request_id = request_id


class AuthenticationError(GitHubError):
    """Raised when the token is missing, expired or invalid."""

    pass


class AuthorizationError(GitHubError):
    """Raised when access is denied."""

    pass


class NotFoundError(GitHubError):
    """Raised when a repository or pull request is not found."""

    pass


class ValidationError(GitHubError):
    """Raised on validation errors (422 and other client errors)."""

    pass


class RateLimitedError(GitHubError):
    """Raised when the API rate limit is exhausted."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status_code: int | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, status_code, request_id)
        self.retry_after = retry_after


class ServerError(GitHubError):
    """Raised on server errors (5xx) and connection failures."""

    pass


class NotMergedError(CherryPickError):
    """Raised when the source pull request has not been merged."""

    def __init__(self, pr_number: int, state: str) -> None:
        super().__init__(
            "NOT_MERGED",
            f"PR #{pr_number} is not merged yet (state: {state}). "
            "Cherry-pick requires merged PRs.",
        )
        self.pr_number = pr_number
        self.state = state


class GitCommandError(CherryPickError):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, args: tuple[str, ...], returncode: int, output: str) -> None:
        super().__init__(
            "GIT_COMMAND_FAILED",
            f"git {' '.join(args)} exited with status {returncode}: {output.strip()}",
        )
        self.command = args
        self.returncode = returncode
        self.output = output


class VersionControlError(CherryPickError):
    """Raised when a step of the cherry-pick git sequence fails."""

    def __init__(self, message: str) -> None:
        super().__init__("VERSION_CONTROL_ERROR", message)


class OperationCancelledError(CherryPickError):
    """Raised when a branch is abandoned because the deadline expired."""

    def __init__(self, message: str = "operation cancelled: deadline exceeded") -> None:
        super().__init__("CANCELLED", message)
