"""
Unit tests for the action entry routine.
"""

import asyncio
import io
import json
import time

import pytest
from loguru import logger

from delayaction.__main__ import main
from delayaction.core.context import ActionContext, has_current_context
from delayaction.core.exceptions import InvalidDurationError
from delayaction.core.schemas import RunStatus
from delayaction.host.github import GitHubActionsHost
from delayaction.main import run
from delayaction.testing import InMemoryHost, run_local


class TestRunSuccess:
    """Test a successful run."""

    @pytest.mark.asyncio
    async def test_publishes_time_output(self):
        """Test that a run waits, logs two timestamps and sets one output."""
        host = InMemoryHost(inputs={"milliseconds": "100"})

        start = time.monotonic()
        action_run = await run(host)
        elapsed = time.monotonic() - start

        assert elapsed >= 0.095
        assert action_run.status == RunStatus.COMPLETED
        assert action_run.milliseconds == 100
        assert action_run.error is None
        assert list(host.outputs) == ["time"]
        assert action_run.outputs == host.outputs
        assert " GMT" in host.outputs["time"]
        assert len(host.messages("info")) == 2
        assert host.exit_code == 0
        assert host.failure is None

    @pytest.mark.asyncio
    async def test_logs_payload_as_debug(self):
        """Test that the event payload is debug-logged as indented JSON."""
        payload = {"action": "opened", "number": 1}
        action_run, host = await run_local("0", payload=payload)

        assert action_run.status == RunStatus.COMPLETED
        debug = host.messages("debug")
        assert debug == [f"The event payload: {json.dumps(payload, indent=2)}"]

    @pytest.mark.asyncio
    async def test_zero_delay(self):
        action_run, host = await run_local(0)

        assert action_run.status == RunStatus.COMPLETED
        assert action_run.milliseconds == 0
        assert action_run.duration_seconds is not None

    @pytest.mark.asyncio
    async def test_run_id_from_context(self):
        host = InMemoryHost(
            inputs={"milliseconds": "0"}, context=ActionContext(run_id=987)
        )
        action_run = await run(host)

        assert action_run.run_id == "987"

    @pytest.mark.asyncio
    async def test_context_cleared_after_run(self):
        await run_local("0")
        assert not has_current_context()


class TestRunFailure:
    """Test failure reporting."""

    @pytest.mark.asyncio
    async def test_non_numeric_input_fails(self):
        """Test that non-numeric input fails the run instead of hanging or resolving."""
        action_run, host = await asyncio.wait_for(run_local("abc"), timeout=2)

        assert action_run.status == RunStatus.FAILED
        assert action_run.error == "milliseconds not a number"
        assert host.failure == "milliseconds not a number"
        assert host.exit_code == 1
        assert host.outputs == {}
        assert host.messages("info") == []

    @pytest.mark.asyncio
    async def test_failure_logged_with_exception(self):
        """Test that the top-level catch logs the error with its traceback."""
        records = []
        handler_id = logger.add(lambda message: records.append(message.record), level="ERROR")
        try:
            action_run, _ = await run_local("abc")
        finally:
            logger.remove(handler_id)

        assert action_run.status == RunStatus.FAILED
        assert len(records) == 1
        record = records[0]
        assert record["message"] == "Action failed: wait"
        assert record["exception"] is not None
        assert record["exception"].type is InvalidDurationError
        assert record["extra"]["run_id"] == action_run.run_id

    @pytest.mark.asyncio
    async def test_missing_input_fails(self):
        host = InMemoryHost()
        action_run = await run(host)

        assert action_run.status == RunStatus.FAILED
        assert host.failure == "milliseconds not a number"

    @pytest.mark.asyncio
    async def test_negative_input_fails(self):
        action_run, host = await run_local("-10")

        assert action_run.status == RunStatus.FAILED
        assert "non-negative" in host.failure
        assert host.outputs == {}

    @pytest.mark.asyncio
    async def test_error_from_host_is_reported(self):
        """Test that failures publishing the output are reported too."""

        class BrokenOutputHost(InMemoryHost):
            def set_output(self, name, value):
                raise RuntimeError("output sink unavailable")

        host = BrokenOutputHost(inputs={"milliseconds": "0"})
        action_run = await run(host)

        assert action_run.status == RunStatus.FAILED
        assert host.failure == "output sink unavailable"
        assert host.messages("error") == ["output sink unavailable"]


class TestGitHubRun:
    """Test the entry routine against the GitHub Actions host."""

    @pytest.mark.asyncio
    async def test_run_with_github_host(self, tmp_path):
        output_file = tmp_path / "output"
        output_file.write_text("")
        stream = io.StringIO()
        host = GitHubActionsHost(
            env={"INPUT_MILLISECONDS": "10", "GITHUB_OUTPUT": str(output_file)},
            stream=stream,
        )

        action_run = await run(host)

        assert action_run.status == RunStatus.COMPLETED
        lines = stream.getvalue().splitlines()
        assert lines[0].startswith("::debug::The event payload: {}")
        assert len(lines) == 3
        assert output_file.read_text().startswith("time<<ghadelimiter_")

    @pytest.mark.asyncio
    async def test_output_path_with_braces(self, tmp_path):
        """Test that braces in the GITHUB_OUTPUT path do not break logging."""
        output_dir = tmp_path / "{runner}"
        output_dir.mkdir()
        output_file = output_dir / "output"
        output_file.write_text("")
        host = GitHubActionsHost(
            env={"INPUT_MILLISECONDS": "0", "GITHUB_OUTPUT": str(output_file)},
            stream=io.StringIO(),
        )

        action_run = await run(host)

        assert action_run.status == RunStatus.COMPLETED
        assert action_run.error is None
        assert host.exit_code == 0
        assert output_file.read_text().startswith("time<<ghadelimiter_")

    @pytest.mark.asyncio
    async def test_malformed_event_file_raises(self, tmp_path):
        """Test that an unreadable event payload raises out of run()."""
        event_file = tmp_path / "event.json"
        event_file.write_text("{not json")
        host = GitHubActionsHost(
            env={"INPUT_MILLISECONDS": "0", "GITHUB_EVENT_PATH": str(event_file)},
            stream=io.StringIO(),
        )

        with pytest.raises(json.JSONDecodeError):
            await run(host)

        assert not has_current_context()

    def test_main_exit_code(self, monkeypatch, capsys):
        monkeypatch.setattr("delayaction.__main__.configure_logging", lambda **kwargs: None)
        monkeypatch.setenv("INPUT_MILLISECONDS", "nope")

        assert main() == 1
        assert "::error::milliseconds not a number" in capsys.readouterr().out

    def test_main_success(self, monkeypatch, capsys):
        monkeypatch.setattr("delayaction.__main__.configure_logging", lambda **kwargs: None)
        monkeypatch.setenv("INPUT_MILLISECONDS", "1")

        assert main() == 0
        assert "::set-output name=time::" in capsys.readouterr().out
