# src/mvnexec/models.py

"""
Attrs-based data models for jobs and run outcomes.
"""

from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any, TypeAlias

from attrs import asdict, define, evolve, field


def _validate_unique_names(inst: Any, attr: Any, value: tuple["Variable", ...]) -> None:
    """Validator ensures variable names are unique within a job."""
    seen: set[str] = set()
    for variable in value:
        if variable.name in seen:
            raise ValueError(f"Duplicate variable name '{variable.name}' in {attr.name}")
        seen.add(variable.name)


def _to_tuple(value: Iterable[Any]) -> tuple[Any, ...]:
    return tuple(value)


@define(frozen=True, slots=True)
class Variable:
    """A resolved name/value pair supplied with a job."""
    name: str = field()
    value: str = field()
    is_sensitive: bool = field(default=False)


# --- Job content variants ---
@define(frozen=True, slots=True)
class FileContent:
    """A single test file. Never executable by the Maven runner."""
    data: str = field(default="")


@define(frozen=True, slots=True)
class GitDirectoryContent:
    """A checked-out source tree below '<data_dir>/repo'."""
    repository_path: str = field(default="")
    working_dir: str | None = field(default=None)


Content: TypeAlias = FileContent | GitDirectoryContent


@define(frozen=True, slots=True)
class Job:
    """One unit of work: what to build and test, and how."""
    content: Content = field()
    test_type: str = field()
    args: tuple[str, ...] = field(default=(), converter=_to_tuple)
    variables: tuple[Variable, ...] = field(
        default=(), converter=_to_tuple, validator=_validate_unique_names
    )
    variables_file: str = field(default="")


class ExecutionStatus(str, Enum):
    """Binary status reported for runs and individual steps."""

    PASSED = "passed"
    FAILED = "failed"


@define(frozen=True, slots=True)
class StepResult:
    """Outcome of a single test case discovered in a report."""
    name: str = field()
    duration: str = field()
    status: ExecutionStatus = field()


@define(frozen=True, slots=True)
class ReportWarning:
    """A report file that could not be parsed."""
    path: Path = field()
    error: str = field()


@define(frozen=True, slots=True)
class RunOutcome:
    """
    Final result of running a job.

    Frozen; later stages replace it with `attrs.evolve` rather than mutating it.
    """
    status: ExecutionStatus = field()
    output: str = field(default="")
    output_type: str = field(default="text/plain")
    error_message: str | None = field(default=None)
    steps: tuple[StepResult, ...] = field(default=(), converter=_to_tuple)
    warnings: tuple[ReportWarning, ...] = field(default=(), converter=_to_tuple)

    @classmethod
    def failed(cls, message: str) -> "RunOutcome":
        return cls(status=ExecutionStatus.FAILED, error_message=message)

    @property
    def passed(self) -> bool:
        return self.status is ExecutionStatus.PASSED

    def with_error(self, message: str) -> "RunOutcome":
        return evolve(self, error_message=message)

    def to_dict(self) -> dict[str, Any]:
        """Returns a JSON-ready mapping of the outcome."""
        def _serialize(inst: Any, attr: Any, value: Any) -> Any:
            if isinstance(value, Enum):
                return value.value
            if isinstance(value, Path):
                return str(value)
            return value

        return asdict(self, value_serializer=_serialize)


# 🔼⚙️
