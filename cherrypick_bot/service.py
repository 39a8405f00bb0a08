"""
Cherry-pick orchestration.

``CherryPickService.process_branch`` runs the per-branch pipeline:

1. fetch the source pull request and check that it is merged,
2. look for a follow-up pull request from an earlier run,
3. replay the merge commit onto a fresh working branch and push it,
4. open the follow-up pull request.

``process_branches`` runs that pipeline for every target branch at once.
Each run turns its own failures into a ``Result``; nothing is raised to the
caller except cancellation of the whole operation.
"""

import asyncio
import logging

from cherrypick_bot.exceptions import (
    NotMergedError,
    OperationCancelledError,
    VersionControlError,
)
from cherrypick_bot.git import GitRunner
from cherrypick_bot.logging import get_logger
from cherrypick_bot.remote import RemoteRepository
from cherrypick_bot.types.pulls import MergeInfo
from cherrypick_bot.types.results import Config, Result, cherry_pick_branch_name


class CherryPickService:
    """
    Cherry-picks a merged pull request onto release branches.

    Example:
        ```python
        from cherrypick_bot.client import GitHubClient
        from cherrypick_bot.git import CommandGitRunner
        from cherrypick_bot.remote import GitHubRemote
        from cherrypick_bot.service import CherryPickService

        async with GitHubClient.from_env() as github:
            service = CherryPickService(GitHubRemote(github.pulls), CommandGitRunner())
            results = await service.process_branches(config, timeout=600)
        ```
    """

    def __init__(
        self,
        remote: RemoteRepository,
        git: GitRunner,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            remote: Pull request operations on the hosting service
            git: Runner for git commands
            logger: Where pipeline events go (default: the "pipeline" logger)
        """
        self.remote = remote
        self.git = git
        self.logger = logger or get_logger("pipeline")
        # Checkout and push of different branches must not interleave in one worktree
        self._git_lock = asyncio.Lock()

    async def process_branches(
        self, config: Config, *, timeout: float | None = None
    ) -> list[Result]:
        """
        Cherry-pick onto every branch in ``config.branches`` concurrently.

        Args:
            config: Validated request, shared read-only by all branches
            timeout: Optional overall deadline in seconds for the whole batch

        Returns:
            One Result per branch, in the same order as ``config.branches``
        """
        deadline = None
        if timeout is not None:
            deadline = asyncio.get_running_loop().time() + timeout

        results = await asyncio.gather(
            *(self._process_with_deadline(config, branch, deadline) for branch in config.branches)
        )
        return list(results)

    async def _process_with_deadline(
        self, config: Config, target_branch: str, deadline: float | None
    ) -> Result:
        try:
            async with asyncio.timeout_at(deadline):
                return await self.process_branch(config, target_branch)
        except TimeoutError:
            error = OperationCancelledError()
            self.logger.warning("Cherry-pick to %s abandoned: %s", target_branch, error)
            return Result(branch=target_branch, error=error, error_message=str(error))
        except Exception as e:
            self.logger.exception("Cherry-pick to %s failed unexpectedly", target_branch)
            return Result(branch=target_branch, error=e, error_message=str(e))

    async def process_branch(self, config: Config, target_branch: str) -> Result:
        """Run the cherry-pick pipeline for a single target branch."""
        owner, repo, number = config.repo_owner, config.repo_name, config.pr_number

        self.logger.info("Starting cherry-pick of #%d to %s...", number, target_branch)

        try:
            pr = await self.remote.get_pr(owner, repo, number)
        except Exception as e:
            return Result(
                branch=target_branch,
                error=e,
                error_message=f"Failed to fetch PR #{number}: {e}",
            )

        merge_info = MergeInfo.from_pull_request(pr)
        if not merge_info.is_merged:
            error = NotMergedError(number, merge_info.state)
            return Result(branch=target_branch, error=error, error_message=error.message)

        if not merge_info.merge_commit_sha:
            error = VersionControlError(f"PR #{number} is merged but has no merge commit")
            return Result(branch=target_branch, error=error, error_message=error.message)

        self.logger.info("Found merge commit: %s", merge_info.merge_commit_sha)

        cherry_pick_branch = cherry_pick_branch_name(number, target_branch)
        try:
            existing_pr = await self.remote.find_existing_pr(
                owner, repo, cherry_pick_branch, target_branch
            )
        except Exception as e:
            self.logger.warning("Error checking for existing PR: %s", e)
            existing_pr = None

        if existing_pr is not None:
            self.logger.info("Cherry-pick PR already exists: #%d", existing_pr.number)
            return Result(branch=target_branch, success=True, existing_pr=existing_pr)

        try:
            if getattr(self.git, "shares_worktree", True):
                async with self._git_lock:
                    await self._replay(
                        config, target_branch, cherry_pick_branch, merge_info.merge_commit_sha
                    )
            else:
                await self._replay(
                    config, target_branch, cherry_pick_branch, merge_info.merge_commit_sha
                )
        except VersionControlError as e:
            return Result(branch=target_branch, error=e, error_message=e.message)

        title = f"Cherry-pick #{number} to {target_branch}"
        body = f"Automatic cherry-pick of #{number} to `{target_branch}`"

        try:
            new_pr = await self.remote.create_pr(
                owner,
                repo,
                title=title,
                body=body,
                head=cherry_pick_branch,
                base=target_branch,
            )
        except Exception as e:
            return Result(
                branch=target_branch,
                error=e,
                error_message=f"Failed to create pull request: {e}",
            )

        self.logger.info(
            "Cherry-pick completed successfully! PR #%d created", new_pr.number
        )
        return Result(branch=target_branch, success=True, new_pr=new_pr)

    async def _replay(
        self,
        config: Config,
        target_branch: str,
        cherry_pick_branch: str,
        merge_commit: str,
    ) -> None:
        """
        Put the merge commit on a new branch cut from the target and push it.

        Raises:
            VersionControlError: On the first failing step
        """
        await self._step(
            "failed to configure git user name",
            "config", "user.name", config.git_user_name,
        )
        await self._step(
            "failed to configure git user email",
            "config", "user.email", config.git_user_email,
        )

        self.logger.info("Fetching target branch: %s...", target_branch)
        await self._step(
            f"target branch '{target_branch}' does not exist or cannot be fetched",
            "fetch", "origin", target_branch,
        )

        self.logger.info("Creating cherry-pick branch: %s...", cherry_pick_branch)
        await self._step(
            "failed to create cherry-pick branch",
            "checkout", "-b", cherry_pick_branch, f"origin/{target_branch}",
        )

        self.logger.info("Cherry-picking commit %s...", merge_commit)
        try:
            await self._step(
                "cherry-pick failed due to conflicts or other errors",
                "cherry-pick", "-m", "1", merge_commit,
            )
        except (VersionControlError, asyncio.CancelledError):
            await self._abort_cherry_pick()
            raise

        self.logger.info("Pushing cherry-pick branch...")
        await self._step(
            "failed to push cherry-pick branch",
            "push", "origin", cherry_pick_branch,
        )

    async def _step(self, failure: str, *args: str) -> None:
        try:
            await self.git.run(*args)
        except Exception as e:
            raise VersionControlError(f"{failure}: {e}") from e

    async def _abort_cherry_pick(self) -> None:
        try:
            await self.git.run("cherry-pick", "--abort")
        except Exception as e:
            self.logger.debug("cherry-pick --abort failed: %s", e)
