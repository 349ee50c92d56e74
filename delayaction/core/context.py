"""
Action execution context.

The context describes the runner environment the action was invoked in:
- Event name and payload that triggered the workflow
- Commit sha and ref
- Workflow, job, action and actor names
- Run identifiers and API endpoints

It is populated from the GITHUB_* environment variables set by the runner.
"""

import json
import os
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger

from delayaction.core.exceptions import ContextError


# Context variable for the action currently executing
_current_context: ContextVar[Optional["ActionContext"]] = ContextVar(
    "action_context", default=None
)


def _int_env(env: Mapping[str, str], name: str) -> int:
    value = env.get(name, "")
    try:
        return int(value, 10)
    except ValueError:
        return 0


def load_event_payload(event_path: Optional[str]) -> Dict[str, Any]:
    """
    Load the webhook event payload from the file the runner wrote.

    Args:
        event_path: Path from GITHUB_EVENT_PATH

    Returns:
        Parsed payload, or an empty dict if no event file exists
    """
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.exists():
        logger.warning(f"GITHUB_EVENT_PATH {event_path} does not exist")
        return {}

    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


@dataclass
class ActionContext:
    """
    Runner context for one action invocation.

    All fields are read-only from the action's point of view. Missing
    environment variables become empty strings (or 0 for numeric fields).
    """

    event_name: str = ""
    sha: str = ""
    ref: str = ""
    workflow: str = ""
    action: str = ""
    actor: str = ""
    job: str = ""
    run_number: int = 0
    run_id: int = 0
    api_url: str = "https://api.github.com"
    server_url: str = "https://github.com"
    graphql_url: str = "https://api.github.com/graphql"
    repository: str = ""
    runner_debug: bool = False

    payload: Dict[str, Any] = field(default_factory=dict)

    # Tokens for nested `with ctx:` blocks
    _tokens: List[Token] = field(default_factory=list, init=False, repr=False, compare=False)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ActionContext":
        """
        Build a context from runner environment variables.

        Args:
            env: Environment mapping (defaults to os.environ)

        Returns:
            Populated ActionContext
        """
        if env is None:
            env = os.environ

        return cls(
            event_name=env.get("GITHUB_EVENT_NAME", ""),
            sha=env.get("GITHUB_SHA", ""),
            ref=env.get("GITHUB_REF", ""),
            workflow=env.get("GITHUB_WORKFLOW", ""),
            action=env.get("GITHUB_ACTION", ""),
            actor=env.get("GITHUB_ACTOR", ""),
            job=env.get("GITHUB_JOB", ""),
            run_number=_int_env(env, "GITHUB_RUN_NUMBER"),
            run_id=_int_env(env, "GITHUB_RUN_ID"),
            api_url=env.get("GITHUB_API_URL") or "https://api.github.com",
            server_url=env.get("GITHUB_SERVER_URL") or "https://github.com",
            graphql_url=env.get("GITHUB_GRAPHQL_URL") or "https://api.github.com/graphql",
            repository=env.get("GITHUB_REPOSITORY", ""),
            runner_debug=env.get("RUNNER_DEBUG") == "1",
            payload=load_event_payload(env.get("GITHUB_EVENT_PATH")),
        )

    @property
    def repo(self) -> Dict[str, str]:
        """
        Owner and name of the repository the workflow runs in.

        Raises:
            ContextError: If GITHUB_REPOSITORY is not set and the payload has no repository
        """
        if self.repository:
            owner, _, name = self.repository.partition("/")
            return {"owner": owner, "repo": name}

        repository = self.payload.get("repository")
        if repository:
            return {"owner": repository["owner"]["login"], "repo": repository["name"]}

        raise ContextError(
            "context.repo requires a GITHUB_REPOSITORY environment variable like 'owner/repo'"
        )

    def __enter__(self) -> "ActionContext":
        """Context manager entry - set as current context."""
        self._tokens.append(_current_context.set(self))
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - restore the enclosing context."""
        _current_context.reset(self._tokens.pop())


def get_current_context() -> ActionContext:
    """
    Get the context of the action currently executing.

    Returns:
        Current ActionContext

    Raises:
        ContextError: If called outside an action run
    """
    ctx = _current_context.get()
    if ctx is None:
        raise ContextError(
            "No action context available. This function must be called "
            "within an action run."
        )
    return ctx


def set_current_context(context: Optional[ActionContext]) -> None:
    """
    Set the current action context.

    This is called by the entry routine, not user code.
    """
    _current_context.set(context)


def has_current_context() -> bool:
    """Check if an action context is currently available."""
    return _current_context.get() is not None
