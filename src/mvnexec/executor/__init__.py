#
# src/mvnexec/executor/__init__.py
#
"""
Build-tool execution and report conversion sub-package for mvnexec.
"""
from .factory import get_runner
from .maven import BUILD_FAILED_MESSAGE, MavenRunner
from .process import SubprocessRunner
from .protocols import ProcessOutcome, ProcessResult, ProcessRunner
from .reports import ReportCollection, collect_reports

__all__ = [
    "BUILD_FAILED_MESSAGE",
    "MavenRunner",
    "ProcessOutcome",
    "ProcessResult",
    "ProcessRunner",
    "ReportCollection",
    "SubprocessRunner",
    "collect_reports",
    "get_runner",
]

# 🔼⚙️
