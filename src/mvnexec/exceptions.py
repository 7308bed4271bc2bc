# src/mvnexec/exceptions.py

"""
Exception hierarchy for the mvnexec build-and-test adapter.
"""

from pathlib import Path
from typing import Any


class MvnexecError(Exception):
    """Base class for all mvnexec errors."""

    pass


class ConfigurationError(MvnexecError):
    """Raised for missing or invalid runner configuration or job files."""

    pass


class WorkspaceError(MvnexecError):
    """Base class for problems with the job workspace."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        details: Exception | None = None,
    ):
        self.message = message
        self.path = str(path) if path is not None else None
        self.details = details
        full_message = message
        if self.path:
            full_message += f" (Path: '{self.path}')"
        super().__init__(full_message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class WorkspaceMissingError(WorkspaceError):
    """The base data directory does not exist."""

    pass


class UnsupportedContentError(WorkspaceError):
    """The job content kind cannot be executed (e.g. a single file)."""

    pass


class ProjectFileMissingError(WorkspaceError):
    """The build descriptor is absent from the workspace."""

    pass


class SettingsWriteError(WorkspaceError):
    """The settings payload could not be written to the workspace."""

    pass


class InvalidTestTypeError(MvnexecError):
    """The test-type selector is not of the form '<group>/<subtype>'."""

    def __init__(self, test_type: str):
        self.test_type = test_type
        super().__init__(
            f"Invalid test type '{test_type}': expected '<group>/<subtype>'"
        )


class ReportCollectionError(MvnexecError):
    """Walking the report directory failed."""

    def __init__(
        self,
        message: str,
        report_dir: Path | str,
        details: Exception | None = None,
        partial: Any = None,
    ):
        self.report_dir = str(report_dir)
        self.details = details
        # ReportCollection gathered before the walk failed, if any.
        self.partial = partial
        super().__init__(message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Report directory: {self.report_dir}")


# 🔼⚙️
