"""Async pull requests resource client."""

from typing import TYPE_CHECKING, Any

from cherrypick_bot.types.pulls import PullRequest

if TYPE_CHECKING:
    from cherrypick_bot.transport import AsyncHTTPTransport


class PullsClient:
    """Async client for pull request operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the pulls client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def get(self, owner: str, repo: str, number: int) -> PullRequest:
        """
        Get pull request information.

        Args:
            owner: Repository owner
            repo: Repository name
            number: Pull request number

        Returns:
            PullRequest with merge status and merge commit

        Raises:
            NotFoundError: If the pull request does not exist
        """
        data = await self.transport.request(
            method="GET",
            path=f"/repos/{owner}/{repo}/pulls/{number}",
        )
        return self._parse_pull_request(data)

    async def list(
        self,
        owner: str,
        repo: str,
        head: str | None = None,
        base: str | None = None,
        state: str = "all",
        per_page: int = 30,
    ) -> list[PullRequest]:
        """
        List pull requests.

        Args:
            owner: Repository owner
            repo: Repository name
            head: Optional filter in "user:ref-name" form
            base: Optional base branch filter
            state: "open", "closed" or "all" (default: "all")
            per_page: Page size

        Returns:
            List of PullRequest objects from the first page
        """
        params: dict[str, Any] = {"state": state, "per_page": per_page}
        if head:
            params["head"] = head
        if base:
            params["base"] = base

        data = await self.transport.request(
            method="GET",
            path=f"/repos/{owner}/{repo}/pulls",
            params=params,
        )
        return [self._parse_pull_request(pr) for pr in data or []]

    async def create(
        self,
        owner: str,
        repo: str,
        head: str,
        base: str,
        title: str,
        body: str | None = None,
    ) -> PullRequest:
        """
        Create a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            head: Branch containing changes
            base: Branch to merge into
            title: Pull request title
            body: Optional pull request description

        Returns:
            The created PullRequest

        Raises:
            ValidationError: If the branch is missing or a PR already exists
        """
        payload: dict[str, str] = {"title": title, "head": head, "base": base}
        if body:
            payload["body"] = body

        data = await self.transport.request(
            method="POST",
            path=f"/repos/{owner}/{repo}/pulls",
            body=payload,
        )
        return self._parse_pull_request(data)

    def _parse_pull_request(self, data: dict) -> PullRequest:
        """Parse pull request data from API response."""
        merged = data.get("merged")
        return PullRequest(
            number=data["number"],
            html_url=data.get("html_url", ""),
            state=data.get("state", ""),
            title=data.get("title", ""),
            head_ref=data.get("head", {}).get("ref", ""),
            base_ref=data.get("base", {}).get("ref", ""),
            merged=merged if isinstance(merged, bool) else None,
            merge_commit_sha=data.get("merge_commit_sha"),
        )
