#
# src/mvnexec/executor/workspace.py
#
"""
Resolves the project directory and run path of a job inside the data directory.
"""
from pathlib import Path

import structlog
from attrs import define

from mvnexec.config.models import MAVEN, BuildTool
from mvnexec.exceptions import (
    ProjectFileMissingError,
    UnsupportedContentError,
    WorkspaceMissingError,
)
from mvnexec.models import FileContent, GitDirectoryContent, Job
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("executor.workspace")

UNSUPPORTED_CONTENT_MESSAGE = "executor only support git-dir based tests"


def _under(root: Path, relative: str) -> Path:
    """Joins `relative` below `root`, dropping any leading anchor so it cannot escape."""
    path = Path(relative)
    if path.anchor:
        path = path.relative_to(path.anchor)
    return root / path


@define(frozen=True, slots=True)
class Workspace:
    """Where the project lives and where the build tool is started."""
    directory: Path
    run_path: Path


def resolve_workspace(job: Job, data_dir: Path, tool: BuildTool = MAVEN) -> Workspace:
    """
    Validates the workspace of a job and computes its paths.

    Raises:
        WorkspaceMissingError: The data directory does not exist.
        UnsupportedContentError: The job carries a single file, not a source tree.
        ProjectFileMissingError: The build descriptor is missing from the project.
    """
    if not data_dir.exists():
        log.error("Data directory does not exist", data_dir=str(data_dir), emoji_key="fail")
        raise WorkspaceMissingError("Data directory does not exist", path=data_dir)

    content = job.content
    if isinstance(content, FileContent):
        log.error("Executor only supports git-dir based tests", emoji_key="fail")
        raise UnsupportedContentError(UNSUPPORTED_CONTENT_MESSAGE)
    if not isinstance(content, GitDirectoryContent):
        raise UnsupportedContentError(UNSUPPORTED_CONTENT_MESSAGE)

    repo_root = data_dir / "repo"
    directory = _under(repo_root, content.repository_path)
    descriptor = directory / tool.descriptor
    if not descriptor.exists():
        log.error(f"No {tool.descriptor} found", directory=str(directory), emoji_key="fail")
        raise ProjectFileMissingError(f"no {tool.descriptor} found", path=directory)

    run_path = _under(repo_root, content.working_dir) if content.working_dir else directory
    log.debug(
        "Workspace resolved",
        directory=str(directory),
        run_path=str(run_path),
        emoji_key="workspace",
    )
    return Workspace(directory=directory, run_path=run_path)


# 🔼⚙️
