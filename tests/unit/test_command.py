#
# tests/unit/test_command.py
#
"""
Tests for command resolution and argument construction.
"""

from pathlib import Path
from types import SimpleNamespace

import pytest

from mvnexec.exceptions import InvalidTestTypeError
from mvnexec.executor.command import build_arguments, current_user_name, parse_goal, resolve_command
from mvnexec.models import GitDirectoryContent, Job


def make_job(test_type: str, args: tuple[str, ...] = ()) -> Job:
    return Job(
        content=GitDirectoryContent(repository_path="project"),
        test_type=test_type,
        args=args,
    )


class TestResolveCommand:
    def test_prefers_wrapper(self, project_dir: Path) -> None:
        (project_dir / "mvnw").write_text("#!/bin/sh\n")
        assert resolve_command(project_dir) == "./mvnw"

    def test_falls_back_to_system_maven(self, project_dir: Path) -> None:
        assert resolve_command(project_dir) == "mvn"


class TestBuildArguments:
    def test_goal_appended_last(self) -> None:
        args = build_arguments(make_job("maven/verify", ("-DskipITs", "-B")))
        assert args == ["-DskipITs", "-B", "verify"]

    @pytest.mark.parametrize("test_type", ["maven/project", "maven/PROJECT", "maven/Project"])
    def test_project_appends_no_goal(self, test_type: str) -> None:
        args = build_arguments(make_job(test_type, ("clean", "install")))
        assert args == ["clean", "install"]

    def test_settings_flag_before_goal(self, tmp_path: Path) -> None:
        settings = tmp_path / "settings.xml"

        args = build_arguments(make_job("maven/test", ("-B",)), settings_path=settings)

        assert args == ["-B", "--settings", str(settings), "test"]

    def test_container_user_pins_home(self) -> None:
        args = build_arguments(make_job("maven/test"), user_name="maven")
        assert args == ["test", "-Duser.home=/home/maven"]

    def test_other_user_leaves_home(self) -> None:
        args = build_arguments(make_job("maven/test"), user_name="alice")
        assert args == ["test"]

    @pytest.mark.parametrize("test_type", ["maven", "", "maven/"])
    def test_malformed_selector_is_rejected(self, test_type: str) -> None:
        with pytest.raises(InvalidTestTypeError):
            build_arguments(make_job(test_type))


def test_parse_goal_takes_second_segment() -> None:
    assert parse_goal("maven/integration-test/extra") == "integration-test"


class TestCurrentUserName:
    def test_ignores_user_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USER", "maven")
        monkeypatch.setenv("LOGNAME", "maven")
        monkeypatch.setenv("USERNAME", "maven")
        monkeypatch.setattr(
            "mvnexec.executor.command.pwd.getpwuid", lambda uid: SimpleNamespace(pw_name="builder")
        )

        assert current_user_name() == "builder"

    def test_passwd_entry_named_maven(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("USER", "alice")
        monkeypatch.setattr(
            "mvnexec.executor.command.pwd.getpwuid", lambda uid: SimpleNamespace(pw_name="maven")
        )

        assert current_user_name() == "maven"

    def test_uid_without_passwd_entry(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def missing(uid: int):
            raise KeyError(f"getpwuid(): uid not found: {uid}")

        monkeypatch.setattr("mvnexec.executor.command.pwd.getpwuid", missing)

        assert current_user_name() is None
