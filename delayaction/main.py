"""
Entry routine for the wait action.

Reads the ``milliseconds`` input, logs a timestamp, waits, logs a second
timestamp and publishes the final time as the ``time`` output. Any failure is
reported to the host, which marks the run as failed.
"""

import json
import uuid
from typing import Optional

from delayaction.core.schemas import ActionRun
from delayaction.host.base import ActionHost
from delayaction.observability.logging import bind_run_context
from delayaction.primitives.wait import wait
from delayaction.utils.clock import time_string
from delayaction.utils.duration import parse_milliseconds

ACTION_NAME = "wait"


def _run_id(host: ActionHost) -> str:
    if host.context.run_id:
        return str(host.context.run_id)
    return f"run_{uuid.uuid4().hex[:16]}"


async def run(host: Optional[ActionHost] = None) -> ActionRun:
    """
    Run the action once against a host.

    Args:
        host: Host runtime (defaults to GitHubActionsHost reading os.environ)

    Returns:
        ActionRun describing the outcome; failures are reported to the host
        and recorded on the run rather than raised

    Example:
        host = GitHubActionsHost()
        action_run = await run(host)
        sys.exit(host.exit_code)
    """
    if host is None:
        from delayaction.host.github import GitHubActionsHost

        host = GitHubActionsHost()

    action_run = ActionRun(run_id=_run_id(host), action_name=ACTION_NAME)
    log = bind_run_context(action_run.run_id, ACTION_NAME)

    with host.context:
        action_run.mark_running()
        log.info(f"Executing action: {ACTION_NAME}")

        try:
            ms = parse_milliseconds(host.get_input("milliseconds"))
            action_run.milliseconds = ms

            # Debug lines are only shown when step debug logging is enabled
            host.debug(
                f"The event payload: {json.dumps(host.context.payload, indent=2)}"
            )

            host.info(time_string())
            await wait(ms)
            host.info(time_string())

            finished_at = time_string()
            host.set_output("time", finished_at)
            action_run.outputs["time"] = finished_at

        except Exception as e:
            host.set_failed(str(e))
            action_run.mark_failed(str(e))
            log.opt(exception=e).error(
                f"Action failed: {ACTION_NAME}",
                error=str(e),
                error_type=type(e).__name__,
            )
            return action_run

        action_run.mark_completed()
        log.info(
            f"Action completed: {ACTION_NAME}",
            duration_seconds=action_run.duration_seconds,
        )

    return action_run
