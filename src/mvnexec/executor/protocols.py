#
# src/mvnexec/executor/protocols.py
#
"""
Defines protocols and data structures for build-tool execution.
"""
from collections.abc import Mapping, Sequence
from enum import Enum, auto
from pathlib import Path
from typing import Protocol, runtime_checkable

from attrs import define


class ProcessOutcome(Enum):
    """Classification of a finished build-tool process."""

    SUCCESS = auto()  # Exit code 0.
    TESTS_FAILED = auto()  # Tool ran to completion but reported failures.
    EXECUTION_FAILED = auto()  # Tool missing, crashed or killed.


@define(frozen=True, slots=True)
class ProcessResult:
    """
    Structured result of a build-tool execution.

    `output` holds stdout and stderr interleaved as one byte stream.
    """
    outcome: ProcessOutcome
    output: bytes
    exit_code: int | None = None
    error: str | None = None


@runtime_checkable
class ProcessRunner(Protocol):
    """
    Protocol for something that can run the build tool to completion.
    """
    async def run(
        self,
        command: str,
        args: Sequence[str],
        cwd: Path,
        env: Mapping[str, str],
    ) -> ProcessResult:
        """
        Runs `command args...` and waits for it to exit.

        Args:
            command: Executable to start.
            args: Arguments passed to the executable.
            cwd: Working directory of the process.
            env: Complete environment of the process.

        Returns:
            A ProcessResult classifying the exit.
        """
        ...

# 🔼⚙️
