"""Cherry-pick bot type definitions.

This module exports all data model types used by the tool.
"""

from cherrypick_bot.types.pulls import IssueComment, MergeInfo, PullRequest, Reaction
from cherrypick_bot.types.results import Config, Result, cherry_pick_branch_name

__all__ = [
    # GitHub types
    "PullRequest",
    "MergeInfo",
    "IssueComment",
    "Reaction",
    # Request and outcome types
    "Config",
    "Result",
    "cherry_pick_branch_name",
]
