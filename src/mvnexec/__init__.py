#
# src/mvnexec/__init__.py
#
"""
mvnexec: runs Maven test jobs in a prepared workspace and converts the
Surefire reports into a uniform run outcome.
"""
from mvnexec.models import (
    ExecutionStatus,
    FileContent,
    GitDirectoryContent,
    Job,
    RunOutcome,
    StepResult,
    Variable,
)

__all__ = [
    "ExecutionStatus",
    "FileContent",
    "GitDirectoryContent",
    "Job",
    "RunOutcome",
    "StepResult",
    "Variable",
]

# 🔼⚙️
