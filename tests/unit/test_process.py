#
# tests/unit/test_process.py
#
"""
Tests for the asyncio subprocess runner.
"""

import os
import signal
import sys
from pathlib import Path

import pytest

from mvnexec.executor.process import SubprocessRunner, classify_exit
from mvnexec.executor.protocols import ProcessOutcome, ProcessRunner


@pytest.fixture
def runner() -> SubprocessRunner:
    return SubprocessRunner()


def test_satisfies_protocol(runner: SubprocessRunner) -> None:
    assert isinstance(runner, ProcessRunner)


@pytest.mark.parametrize(
    ("exit_code", "outcome", "error"),
    [
        (0, ProcessOutcome.SUCCESS, None),
        (1, ProcessOutcome.TESTS_FAILED, "exit status 1"),
        (2, ProcessOutcome.EXECUTION_FAILED, "exit status 2"),
        (127, ProcessOutcome.EXECUTION_FAILED, "exit status 127"),
        (-signal.SIGKILL, ProcessOutcome.EXECUTION_FAILED, "signal: SIGKILL"),
    ],
)
def test_classify_exit(exit_code: int, outcome: ProcessOutcome, error: str | None) -> None:
    assert classify_exit(exit_code) == (outcome, error)


@pytest.mark.asyncio
class TestSubprocessRunner:
    async def test_captures_combined_output(self, runner: SubprocessRunner, tmp_path: Path) -> None:
        script = "import sys; print('out'); sys.stdout.flush(); print('err', file=sys.stderr)"

        result = await runner.run(sys.executable, ["-c", script], tmp_path, dict(os.environ))

        assert result.outcome is ProcessOutcome.SUCCESS
        assert result.exit_code == 0
        assert b"out" in result.output
        assert b"err" in result.output

    async def test_uses_cwd_and_env(self, runner: SubprocessRunner, tmp_path: Path) -> None:
        script = "import os; print(os.getcwd()); print(os.environ['MVNEXEC_MARKER'])"
        env = {**os.environ, "MVNEXEC_MARKER": "marker-value"}

        result = await runner.run(sys.executable, ["-c", script], tmp_path, env)

        output = result.output.decode()
        assert str(tmp_path.resolve()) in output
        assert "marker-value" in output

    async def test_exit_one_is_tests_failed(self, runner: SubprocessRunner, tmp_path: Path) -> None:
        result = await runner.run(sys.executable, ["-c", "raise SystemExit(1)"], tmp_path, dict(os.environ))

        assert result.outcome is ProcessOutcome.TESTS_FAILED
        assert result.exit_code == 1

    async def test_other_exit_is_execution_failure(
        self, runner: SubprocessRunner, tmp_path: Path
    ) -> None:
        result = await runner.run(sys.executable, ["-c", "raise SystemExit(3)"], tmp_path, dict(os.environ))

        assert result.outcome is ProcessOutcome.EXECUTION_FAILED
        assert result.error == "exit status 3"

    async def test_missing_executable(self, runner: SubprocessRunner, tmp_path: Path) -> None:
        result = await runner.run("mvnexec-no-such-tool", ["test"], tmp_path, dict(os.environ))

        assert result.outcome is ProcessOutcome.EXECUTION_FAILED
        assert result.exit_code is None
        assert "mvnexec-no-such-tool" in result.error
        assert result.output == b""
