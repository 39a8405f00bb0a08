"""GitHub resource clients."""

from cherrypick_bot.clients.issues import IssuesClient, ReactionsClient
from cherrypick_bot.clients.pulls import PullsClient

__all__ = [
    "PullsClient",
    "IssuesClient",
    "ReactionsClient",
]
