"""
Host runtimes the action can run inside.

- ActionHost: abstract interface used by the entry routine
- GitHubActionsHost: GitHub Actions runner (environment + workflow commands)
"""

from delayaction.host.base import ActionHost
from delayaction.host.github import GitHubActionsHost

__all__ = [
    "ActionHost",
    "GitHubActionsHost",
]
