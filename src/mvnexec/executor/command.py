#
# src/mvnexec/executor/command.py
#
"""
Chooses the build-tool executable and assembles its argument vector.
"""
import os
import pwd
from pathlib import Path

import structlog

from mvnexec.config.models import MAVEN, BuildTool
from mvnexec.exceptions import InvalidTestTypeError
from mvnexec.models import Job
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("executor.command")

# Selector subtype meaning "the job args already describe the whole invocation".
PROJECT_GOAL = "project"


def resolve_command(directory: Path, tool: BuildTool = MAVEN) -> str:
    """Prefers the project-local wrapper over the system-installed tool."""
    if (directory / tool.wrapper).exists():
        log.debug("Using project wrapper", wrapper=tool.wrapper_command)
        return tool.wrapper_command
    log.debug("Using system build tool", command=tool.command)
    return tool.command


def parse_goal(test_type: str) -> str:
    """Returns the subtype of a '<group>/<subtype>' selector."""
    parts = test_type.split("/")
    if len(parts) < 2 or not parts[1]:
        raise InvalidTestTypeError(test_type)
    return parts[1]


def current_user_name() -> str | None:
    """Name of the passwd entry for the current uid; environment variables are not consulted."""
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError:
        return None


def build_arguments(
    job: Job,
    settings_path: Path | None = None,
    tool: BuildTool = MAVEN,
    user_name: str | None = None,
) -> list[str]:
    """
    Builds the argument vector passed to the build tool.

    Args:
        job: The job whose args and test type drive the invocation.
        settings_path: Settings file written for the job, if any.
        tool: Build-tool conventions (settings flag, container user).
        user_name: Name of the user running the build; when it matches the
            tool's container user, the user home is pinned explicitly.

    Raises:
        InvalidTestTypeError: The test type has no '/<subtype>' part.
    """
    goal = parse_goal(job.test_type)

    args = list(job.args)
    if settings_path is not None:
        args.extend([tool.settings_flag, str(settings_path)])

    if goal.lower() != PROJECT_GOAL:
        args.append(goal)

    if tool.container_user and user_name == tool.container_user:
        args.append(f"-Duser.home={tool.container_home}")

    log.debug("Arguments built", args=args, goal=goal)
    return args


# 🔼⚙️
