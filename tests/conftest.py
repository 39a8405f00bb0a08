from cherrypick_bot.testing.fixtures import fake_git, fake_remote, sample_config  # noqa: F401
