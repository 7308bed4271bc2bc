#
# tests/unit/test_workspace.py
#
"""
Tests for workspace validation and path resolution.
"""

from pathlib import Path

import pytest

from mvnexec.exceptions import (
    ProjectFileMissingError,
    UnsupportedContentError,
    WorkspaceMissingError,
)
from mvnexec.executor.workspace import UNSUPPORTED_CONTENT_MESSAGE, resolve_workspace
from mvnexec.models import FileContent, GitDirectoryContent, Job


class TestResolveWorkspace:
    def test_missing_data_dir(self, tmp_path: Path, job: Job) -> None:
        with pytest.raises(WorkspaceMissingError):
            resolve_workspace(job, tmp_path / "does-not-exist")

    def test_file_content_is_unsupported(self, data_dir: Path) -> None:
        file_job = Job(content=FileContent(data="test"), test_type="maven/test")

        with pytest.raises(UnsupportedContentError) as exc_info:
            resolve_workspace(file_job, data_dir)

        assert exc_info.value.message == UNSUPPORTED_CONTENT_MESSAGE

    def test_missing_pom(self, data_dir: Path, job: Job) -> None:
        (data_dir / "repo" / "project").mkdir()

        with pytest.raises(ProjectFileMissingError) as exc_info:
            resolve_workspace(job, data_dir)

        assert exc_info.value.message == "no pom.xml found"

    def test_run_path_defaults_to_project_dir(
        self, data_dir: Path, project_dir: Path, job: Job
    ) -> None:
        workspace = resolve_workspace(job, data_dir)

        assert workspace.directory == project_dir
        assert workspace.run_path == project_dir

    def test_working_dir_overrides_run_path(self, data_dir: Path, project_dir: Path) -> None:
        job = Job(
            content=GitDirectoryContent(repository_path="project", working_dir="project/module"),
            test_type="maven/test",
        )

        workspace = resolve_workspace(job, data_dir)

        assert workspace.directory == project_dir
        assert workspace.run_path == data_dir / "repo" / "project" / "module"

    def test_absolute_paths_stay_under_repo(self, data_dir: Path, project_dir: Path) -> None:
        job = Job(
            content=GitDirectoryContent(repository_path="/project", working_dir="/project/module"),
            test_type="maven/test",
        )

        workspace = resolve_workspace(job, data_dir)

        assert workspace.directory == project_dir
        assert workspace.run_path == data_dir / "repo" / "project" / "module"

    def test_absolute_repository_path_checks_pom_under_repo(self, data_dir: Path) -> None:
        # '/etc' exists on the host but not below the repo tree.
        job = Job(content=GitDirectoryContent(repository_path="/etc"), test_type="maven/test")

        with pytest.raises(ProjectFileMissingError) as exc_info:
            resolve_workspace(job, data_dir)

        assert exc_info.value.path == str(data_dir / "repo" / "etc")
