#
# src/mvnexec/executor/process.py
#
"""
Runs the build tool with asyncio.subprocess and classifies its exit.
"""
import asyncio
import signal
from collections.abc import Mapping, Sequence
from pathlib import Path

import structlog

from mvnexec.executor.protocols import ProcessOutcome, ProcessResult, ProcessRunner
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("executor.process")

# Maven exits with 1 when the build failed, including on test failures.
TESTS_FAILED_EXIT_CODE = 1


def classify_exit(exit_code: int) -> tuple[ProcessOutcome, str | None]:
    """Maps a process return code to an outcome and an error description."""
    if exit_code == 0:
        return ProcessOutcome.SUCCESS, None
    if exit_code == TESTS_FAILED_EXIT_CODE:
        return ProcessOutcome.TESTS_FAILED, f"exit status {exit_code}"
    if exit_code < 0:
        try:
            name = signal.Signals(-exit_code).name
        except ValueError:
            name = str(-exit_code)
        return ProcessOutcome.EXECUTION_FAILED, f"signal: {name}"
    return ProcessOutcome.EXECUTION_FAILED, f"exit status {exit_code}"


class SubprocessRunner(ProcessRunner):
    """
    Implements the ProcessRunner protocol with asyncio.create_subprocess_exec.

    No timeout is applied; cancellation is left to whoever owns the process group.
    """
    async def run(
        self,
        command: str,
        args: Sequence[str],
        cwd: Path,
        env: Mapping[str, str],
    ) -> ProcessResult:
        runner_log = log.bind(
            command=" ".join([command, *args]),
            working_dir=str(cwd),
        )
        runner_log.info("Executing build command", emoji_key="execute")

        try:
            process = await asyncio.create_subprocess_exec(
                command,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                cwd=cwd,
                env=dict(env),
            )
        except OSError as e:
            # Missing executable, missing cwd, or permission problems.
            runner_log.error("Build command could not be started", error=str(e), emoji_key="fail")
            return ProcessResult(
                outcome=ProcessOutcome.EXECUTION_FAILED,
                output=b"",
                error=str(e),
            )

        output, _ = await process.communicate()
        exit_code = process.returncode if process.returncode is not None else -1
        outcome, error = classify_exit(exit_code)

        runner_log.info(
            "Build command finished",
            exit_code=exit_code,
            outcome=outcome.name,
        )
        runner_log.debug("Build command output", output_len=len(output))

        return ProcessResult(
            outcome=outcome,
            output=output,
            exit_code=exit_code,
            error=error,
        )

# 🔼⚙️
