"""Remote repository port used by the branch pipeline."""

from typing import TYPE_CHECKING, Protocol

from cherrypick_bot.types.pulls import PullRequest

if TYPE_CHECKING:
    from cherrypick_bot.clients.pulls import PullsClient


class RemoteRepository(Protocol):
    """The three pull request operations the pipeline depends on."""

    async def get_pr(self, owner: str, repo: str, number: int) -> PullRequest:
        ...

    async def find_existing_pr(
        self, owner: str, repo: str, head: str, base: str
    ) -> PullRequest | None:
        ...

    async def create_pr(
        self,
        owner: str,
        repo: str,
        *,
        title: str,
        body: str,
        head: str,
        base: str,
    ) -> PullRequest:
        ...


class GitHubRemote:
    """RemoteRepository backed by the GitHub pulls API."""

    def __init__(self, pulls: "PullsClient") -> None:
        self.pulls = pulls

    async def get_pr(self, owner: str, repo: str, number: int) -> PullRequest:
        return await self.pulls.get(owner, repo, number)

    async def find_existing_pr(
        self, owner: str, repo: str, head: str, base: str
    ) -> PullRequest | None:
        # GitHub matches head only in "user:ref-name" form
        prs = await self.pulls.list(
            owner,
            repo,
            head=f"{owner}:{head}",
            base=base,
            state="all",
            per_page=1,
        )
        if prs:
            return prs[0]
        return None

    async def create_pr(
        self,
        owner: str,
        repo: str,
        *,
        title: str,
        body: str,
        head: str,
        base: str,
    ) -> PullRequest:
        return await self.pulls.create(owner, repo, head=head, base=base, title=title, body=body)
