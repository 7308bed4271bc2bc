from pathlib import Path

import pytest

from mvnexec.config.models import RunnerConfig
from mvnexec.models import GitDirectoryContent, Job

CALC_REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<testsuite name="Calc" tests="2" failures="1" errors="0" skipped="0">
  <testcase name="add" classname="Calc" time="0.012"/>
  <testcase name="sub" classname="Calc" time="1.5">
    <failure message="expected 1 but was 2" type="java.lang.AssertionError">trace</failure>
  </testcase>
</testsuite>
"""


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Base data directory with an empty 'repo' tree."""
    path = tmp_path / "data"
    (path / "repo").mkdir(parents=True)
    return path


@pytest.fixture
def project_dir(data_dir: Path) -> Path:
    """A Maven project checked out at '<data_dir>/repo/project'."""
    directory = data_dir / "repo" / "project"
    directory.mkdir()
    (directory / "pom.xml").write_text("<project/>")
    return directory


@pytest.fixture
def report_dir(project_dir: Path) -> Path:
    directory = project_dir / "target" / "surefire-reports"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def runner_config(data_dir: Path) -> RunnerConfig:
    return RunnerConfig(data_dir=data_dir)


@pytest.fixture
def job() -> Job:
    return Job(
        content=GitDirectoryContent(repository_path="project"),
        test_type="maven/test",
    )


@pytest.fixture
def calc_report() -> str:
    """Surefire report for suite 'Calc' with a passing 'add' and a failing 'sub'."""
    return CALC_REPORT
