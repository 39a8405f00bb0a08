"""Command line entry point for the cherry-pick bot."""

import asyncio
import logging
from typing import TYPE_CHECKING

import click

from cherrypick_bot import __version__
from cherrypick_bot.client import GitHubClient
from cherrypick_bot.config import parse_branches, parse_repo, validate_config
from cherrypick_bot.exceptions import ConfigurationError, GitHubError, InvalidConfigError
from cherrypick_bot.git import CommandGitRunner, GitRunner
from cherrypick_bot.logging import configure_logging, get_logger
from cherrypick_bot.remote import GitHubRemote
from cherrypick_bot.reporter import CommentPoster
from cherrypick_bot.service import CherryPickService
from cherrypick_bot.types.results import Config, Result

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger("cli")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def exit_code(results: "Sequence[Result]") -> int:
    """1 if any branch genuinely failed, 0 otherwise (already handled counts as done)."""
    return 1 if any(result.failed for result in results) else 0


async def run(
    config: Config,
    github: GitHubClient,
    git: GitRunner,
    *,
    comment_id: int = 0,
    issue_number: int = 0,
    timeout: float | None = None,
) -> int:
    """
    React to the trigger, cherry-pick every branch and report back.

    Returns:
        Process exit status
    """
    poster = CommentPoster(
        github.issues, github.reactions, config.repo_owner, config.repo_name, issue_number
    )

    try:
        await poster.add_reaction(comment_id, "+1")
    except Exception as e:
        logger.warning("Warning: failed to add reaction: %s", e)

    try:
        validate_config(config)
    except InvalidConfigError as e:
        logger.error("Invalid request: %s", e.message)
        try:
            await poster.post_error(e.message)
        except GitHubError as post_err:
            logger.error("Failed to post error comment: %s", post_err)
        return 1

    service = CherryPickService(GitHubRemote(github.pulls), git)
    results = await service.process_branches(config, timeout=timeout)

    await poster.post_results(results)

    for result in results:
        if result.failed:
            logger.error("cherry-pick to %s failed: %s", result.branch, result.error_message)

    return exit_code(results)


async def _main(config: Config, github: GitHubClient, **kwargs) -> int:
    async with github:
        return await run(config, github, CommandGitRunner(), **kwargs)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="cherrypick-bot")
@click.option("--pr-number", type=int, default=0, help="PR number to cherry-pick")
@click.option("--branches", default="", help="Comma-separated list of target branches")
@click.option("--repo", required=True, metavar="OWNER/NAME", help="Repository in owner/name format")
@click.option("--comment-id", type=int, default=0, help="Comment ID to add reaction to")
@click.option("--issue-number", type=int, default=0, help="Issue/PR number to comment on")
@click.option("--git-user-name", default="Cherry-pick bot", show_default=True, help="Git user name")
@click.option(
    "--git-user-email",
    default="cherry-pick-bot@users.noreply.github.com",
    show_default=True,
    help="Git user email",
)
@click.option("--timeout", type=float, default=None, help="Overall deadline in seconds")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
)
@click.pass_context
def main(
    ctx: click.Context,
    pr_number: int,
    branches: str,
    repo: str,
    comment_id: int,
    issue_number: int,
    git_user_name: str,
    git_user_email: str,
    timeout: float | None,
    log_level: str,
) -> None:
    """Cherry-pick a merged pull request onto one or more branches.

    GITHUB_TOKEN must be set in the environment.
    """
    configure_logging(level=getattr(logging, log_level.upper()))

    try:
        repo_owner, repo_name = parse_repo(repo)
        github = GitHubClient.from_env()
    except ConfigurationError as e:
        raise click.UsageError(e.message) from e

    config = Config(
        pr_number=pr_number,
        branches=parse_branches(branches),
        repo_owner=repo_owner,
        repo_name=repo_name,
        git_user_name=git_user_name,
        git_user_email=git_user_email,
    )

    code = asyncio.run(
        _main(config, github, comment_id=comment_id, issue_number=issue_number, timeout=timeout)
    )
    ctx.exit(code)


if __name__ == "__main__":
    main()
