"""Async issue comments and reactions resource clients."""

from typing import TYPE_CHECKING

from cherrypick_bot.types.pulls import IssueComment, Reaction

if TYPE_CHECKING:
    from cherrypick_bot.transport import AsyncHTTPTransport


class IssuesClient:
    """Async client for issue (and pull request) conversation comments."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def create_comment(
        self, owner: str, repo: str, issue_number: int, body: str
    ) -> IssueComment:
        """
        Post a comment to an issue or pull request conversation.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue or pull request number
            body: Markdown comment body

        Returns:
            The created IssueComment
        """
        data = await self.transport.request(
            method="POST",
            path=f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
            body={"body": body},
        )
        return IssueComment(
            comment_id=data["id"],
            html_url=data.get("html_url", ""),
            body=data.get("body", body),
        )


class ReactionsClient:
    """Async client for reactions on issue comments."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def create_for_issue_comment(
        self, owner: str, repo: str, comment_id: int, content: str
    ) -> Reaction:
        """Add a reaction ("+1", "eyes", ...) to an issue comment."""
        data = await self.transport.request(
            method="POST",
            path=f"/repos/{owner}/{repo}/issues/comments/{comment_id}/reactions",
            body={"content": content},
        )
        return Reaction(reaction_id=data["id"], content=data.get("content", content))
