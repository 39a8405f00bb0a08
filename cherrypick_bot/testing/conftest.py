"""
Pytest plugin for cherry-pick bot testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["cherrypick_bot.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from cherrypick_bot.testing.fixtures import fake_git, fake_remote, sample_config

__all__ = [
    "fake_git",
    "fake_remote",
    "sample_config",
]
