#!/usr/bin/env python3
"""
Cherry-pick bot - dry run example

Runs the full pipeline for three release branches against in-memory
GitHub and git stand-ins and prints the comments the bot would post:

1. release-1.0 gets a new follow-up pull request
2. release-1.1 already has one from an earlier run
3. release-2.0 does not exist on the remote

Run with: python examples/dry_run.py
"""

import asyncio

from cherrypick_bot import CherryPickService, CommentPoster, configure_logging
from cherrypick_bot.testing import (
    FakeGitRunner,
    FakeRemoteRepository,
    create_config,
    create_mock_pull_request,
)


async def main() -> None:
    configure_logging()

    remote = FakeRemoteRepository()
    remote.configure_get_pr(create_mock_pull_request(number=42))
    remote.add_pull_request(
        create_mock_pull_request(
            number=77,
            merged=False,
            state="open",
            head_ref="cherry-pick-42-to-release-1.1",
            base_ref="release-1.1",
        )
    )

    git = FakeGitRunner()
    git.fail_on("fetch", "origin", "release-2.0", output="fatal: couldn't find remote ref release-2.0")

    service = CherryPickService(remote, git)
    results = await service.process_branches(
        create_config(["release-1.0", "release-1.1", "release-2.0"])
    )

    print("\n=== git commands ===")
    for command in git.commands:
        print("git", " ".join(command))

    print("\n=== comments ===")
    for result in results:
        print(CommentPoster.format_result(result))


if __name__ == "__main__":
    asyncio.run(main())
