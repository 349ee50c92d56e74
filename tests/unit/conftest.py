"""
Test configuration and fixtures for unit tests.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def reset_action_context():
    """Ensure no action context leaks between tests."""
    from delayaction.core.context import set_current_context

    set_current_context(None)

    yield

    set_current_context(None)


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    """Remove runner variables so tests never see the real environment."""
    for name in list(os.environ):
        if name.startswith(("GITHUB_", "INPUT_", "RUNNER_")) or name == "DELAYACTION_LOG_LEVEL":
            monkeypatch.delenv(name, raising=False)

    yield
