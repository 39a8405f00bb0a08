"""Posting cherry-pick outcomes back to the pull request conversation."""

import logging
from typing import TYPE_CHECKING

from cherrypick_bot.logging import get_logger
from cherrypick_bot.types.results import Result

if TYPE_CHECKING:
    from cherrypick_bot.clients.issues import IssuesClient, ReactionsClient

USAGE = (
    "**Usage**: `/cherry-pick <target-branch> [<target-branch2> ...]`\n"
    "**Examples**:\n"
    "- `/cherry-pick release-v1.0`\n"
    "- `/cherry-pick release-v1.0 release-v1.1 release-v2.0`\n"
)


class CommentPoster:
    """
    Reports results as comments on the triggering pull request.

    Every posting method is a no-op when ``issue_number`` is 0, so the bot
    can run outside of a conversation (e.g. from a manual workflow).
    """

    def __init__(
        self,
        issues: "IssuesClient",
        reactions: "ReactionsClient",
        repo_owner: str,
        repo_name: str,
        issue_number: int,
        logger: logging.Logger | None = None,
    ) -> None:
        self.issues = issues
        self.reactions = reactions
        self.repo_owner = repo_owner
        self.repo_name = repo_name
        self.issue_number = issue_number
        self.logger = logger or get_logger("reporter")

    async def add_reaction(self, comment_id: int, reaction: str = "+1") -> None:
        """Acknowledge the trigger comment. Does nothing without a comment id."""
        if not comment_id:
            return
        await self.reactions.create_for_issue_comment(
            self.repo_owner, self.repo_name, comment_id, reaction
        )

    async def post_error(self, message: str) -> None:
        """Post a request-level error together with usage help."""
        if not self.issue_number:
            return
        body = f"❌ **Cherry-pick failed**: {message}\n\n{USAGE}"
        await self._post_comment(body)

    async def post_results(self, results: list[Result]) -> None:
        """Post one comment per branch; a failed post does not stop the others."""
        if not self.issue_number:
            return

        for result in results:
            try:
                await self._post_comment(self.format_result(result))
            except Exception as e:
                self.logger.error("Error posting result comment for %s: %s", result.branch, e)

    @staticmethod
    def format_result(result: Result) -> str:
        if result.existing_pr is not None:
            return (
                f"ℹ️ **Cherry-pick to `{result.branch}` already exists!**\n\n"
                f"A pull request for this cherry-pick already exists: #{result.existing_pr.number}\n\n"
                f"**PR**: {result.existing_pr.html_url}\n"
            )

        if result.success and result.new_pr is not None:
            return (
                f"✅ **Cherry-pick to `{result.branch}` successful!**\n\n"
                f"A new pull request has been created to cherry-pick this change to `{result.branch}`.\n\n"
                f"**PR**: {result.new_pr.html_url}\n\n"
                "Please review and merge the cherry-pick PR.\n"
            )

        return (
            f"❌ **Cherry-pick to `{result.branch}` failed!**\n\n"
            f"The automatic cherry-pick to `{result.branch}` failed.\n\n"
            "**Error:**\n"
            f"```\n{result.error_message}\n```\n\n"
            "**Next steps:**\n"
            "- If the PR is not merged, merge it first and try again\n"
            "- If there are conflicts, you'll need to manually cherry-pick this PR\n"
        )

    async def _post_comment(self, body: str) -> None:
        await self.issues.create_comment(self.repo_owner, self.repo_name, self.issue_number, body)
