"""
Version-control port for the cherry-pick bot.

The pipeline only needs one operation from git: run a command against the
working tree and report failure with the combined output.
"""

import asyncio
from pathlib import Path
from typing import Protocol

from cherrypick_bot.exceptions import GitCommandError
from cherrypick_bot.logging import log_git_command


class GitRunner(Protocol):
    """Executes a single git command."""

    # True when concurrent branches would share one working tree
    shares_worktree: bool

    async def run(self, *args: str) -> str:
        """
        Run ``git <args>``.

        Returns:
            Combined stdout/stderr output

        Raises:
            GitCommandError: If the command exits with a non-zero status
        """
        ...


class CommandGitRunner:
    """
    Runs real git commands as subprocesses.

    Example:
        ```python
        from cherrypick_bot.git import CommandGitRunner

        git = CommandGitRunner("./checkout")
        await git.run("fetch", "origin", "release-1.0")
        ```
    """

    shares_worktree = True

    def __init__(self, cwd: str | Path | None = None, executable: str = "git") -> None:
        """
        Initialize the runner.

        Args:
            cwd: Working tree to run in (default: current directory)
            executable: git binary to invoke
        """
        self.cwd = Path(cwd) if cwd is not None else None
        self.executable = executable

    async def run(self, *args: str) -> str:
        proc = await asyncio.create_subprocess_exec(
            self.executable,
            *args,
            cwd=self.cwd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )

        try:
            stdout, _ = await proc.communicate()
        except asyncio.CancelledError:
            # Do not leave git running once the branch has been abandoned
            if proc.returncode is None:
                proc.kill()
                await proc.wait()
            raise

        output = stdout.decode("utf-8", errors="replace")
        log_git_command(args, proc.returncode, output)

        if proc.returncode != 0:
            raise GitCommandError(args, proc.returncode, output)
        return output
