#
# config/models.py
#
"""
Attrs-based data models for mvnexec configuration.
"""

import logging
from pathlib import Path
from typing import Any

from attrs import define, field


def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


@define(frozen=True, slots=True)
class BuildTool:
    """
    Filesystem and command-line conventions of a build tool.

    Paths are relative to the project directory.
    """
    name: str = field()
    descriptor: str = field()
    wrapper: str = field()
    command: str = field()
    settings_flag: str = field()
    report_dir: tuple[str, ...] = field()
    settings_file: str = field(default="settings.xml")
    container_user: str | None = field(default=None)
    container_home: str | None = field(default=None)

    @property
    def wrapper_command(self) -> str:
        return f"./{self.wrapper}"


MAVEN = BuildTool(
    name="maven",
    descriptor="pom.xml",
    wrapper="mvnw",
    command="mvn",
    settings_flag="--settings",
    report_dir=("target", "surefire-reports"),
    container_user="maven",
    container_home="/home/maven",
)


@define(frozen=True, slots=True)
class RunnerConfig:
    """Root configuration for a runner instance."""
    data_dir: Path = field(converter=Path)
    log_level: str = field(default="INFO", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


# 🔼⚙️
