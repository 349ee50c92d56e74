"""
Command-line entry point.

    python -m delayaction

Runs the action against the GitHub Actions runner environment and exits with
status 1 if the run failed.
"""

import asyncio
import sys

from delayaction.host.github import GitHubActionsHost
from delayaction.main import run
from delayaction.observability.logging import configure_logging


def main() -> int:
    configure_logging(show_context=False)

    host = GitHubActionsHost()
    asyncio.run(run(host))
    return host.exit_code


if __name__ == "__main__":
    sys.exit(main())
