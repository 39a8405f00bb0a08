"""
GitHub API client.

Provides the resource clients the cherry-pick bot needs behind one
authenticated async transport.
"""

import os
from typing import Any

import httpx

from cherrypick_bot.clients import IssuesClient, PullsClient, ReactionsClient
from cherrypick_bot.exceptions import ConfigurationError
from cherrypick_bot.transport import AsyncHTTPTransport


class GitHubClient:
    """
    Async client for the parts of the GitHub API used by the bot.

    Example:
        ```python
        from cherrypick_bot.client import GitHubClient

        async with GitHubClient.from_env() as github:
            pr = await github.pulls.get("octo", "widgets", 42)
            print(pr.merged, pr.merge_commit_sha)
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: GitHub access token
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            transport: Optional httpx transport override
        """
        if not token:
            raise ConfigurationError("GitHub token is required")

        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            transport=transport,
        )

        self.pulls = PullsClient(self._transport)
        self.issues = IssuesClient(self._transport)
        self.reactions = ReactionsClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: Access token (required)
            GITHUB_API_URL: Base URL for the API (optional, default: https://api.github.com)

        Raises:
            ConfigurationError: If GITHUB_TOKEN is not set
        """
        token = os.environ.get("GITHUB_TOKEN")
        base_url = os.environ.get("GITHUB_API_URL") or cls.DEFAULT_BASE_URL

        if not token:
            raise ConfigurationError("GITHUB_TOKEN environment variable is required")

        return cls(token=token, base_url=base_url, timeout=timeout)

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
