# src/mvnexec/cli/utils.py

"""
Logging flags shared by the mvnexec group and its subcommands.

Values resolve in three layers: a subcommand's own flags win over the
group's, and the group's win over the defaults below. Console logs go to
stderr at WARNING unless asked otherwise, so stdout carries only the JSON
outcome.
"""

import logging

import click
import structlog
from attrs import define, evolve

from mvnexec.telemetry import StructLogger
from mvnexec.telemetry.logger import setup_logging

log: StructLogger = structlog.get_logger("cli.utils")

# ctx.obj key holding the group's resolved LoggingSettings.
LOGGING_KEY = "logging"

DEFAULT_LEVEL = "WARNING"
LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# (declarations, click.option keywords) for every logging flag, in help order.
_FLAGS: tuple[tuple[tuple[str, ...], dict], ...] = (
    (
        ("-l", "--log-level"),
        {
            "type": click.Choice(LEVEL_NAMES, case_sensitive=False),
            "envvar": "MVNEXEC_LOG_LEVEL",
            "help": f"Minimum level of log records to emit [default: {DEFAULT_LEVEL}].",
        },
    ),
    (
        ("--log-file",),
        {
            "type": click.Path(dir_okay=False, writable=True, resolve_path=True),
            "envvar": "MVNEXEC_LOG_FILE",
            "help": "Also append log records to this file, one JSON object per line.",
        },
    ),
    (
        ("--json-logs",),
        {
            "is_flag": True,
            "envvar": "MVNEXEC_JSON_LOGS",
            "help": "Render stderr log records as JSON instead of console text.",
        },
    ),
)


@define(frozen=True, slots=True)
class LoggingSettings:
    """Resolved logging flags for one command invocation."""
    level: str = DEFAULT_LEVEL
    log_file: str | None = None
    json_logs: bool = False

    def overridden_by(
        self,
        log_level: str | None = None,
        log_file: str | None = None,
        json_logs: bool | None = None,
    ) -> "LoggingSettings":
        """Returns a copy in which every flag that was actually given replaces ours."""
        given = {
            "level": log_level.upper() if log_level else None,
            "log_file": log_file,
            "json_logs": json_logs,
        }
        return evolve(self, **{name: value for name, value in given.items() if value is not None})

    @property
    def numeric_level(self) -> int:
        value = logging.getLevelName(self.level)
        return value if isinstance(value, int) else logging.INFO


def logging_options(command):
    """Adds --log-level, --log-file and --json-logs to a click command."""
    # click lists options in reverse decoration order.
    for declarations, keywords in reversed(_FLAGS):
        command = click.option(*declarations, default=None, **keywords)(command)
    return command


def apply_logging(
    ctx: click.Context,
    log_level: str | None = None,
    log_file: str | None = None,
    json_logs: bool | None = None,
) -> LoggingSettings:
    """
    Configures logging for the running command.

    Starts from the settings an enclosing command stored on the context,
    applies this command's flags on top, configures structlog and stores the
    result back for any command nested below.
    """
    ctx.ensure_object(dict)
    inherited: LoggingSettings = ctx.obj.get(LOGGING_KEY) or LoggingSettings()
    settings = inherited.overridden_by(log_level=log_level, log_file=log_file, json_logs=json_logs)
    ctx.obj[LOGGING_KEY] = settings

    setup_logging(
        level=settings.numeric_level,
        json_logs=settings.json_logs,
        log_file=settings.log_file,
    )
    log.debug(
        "Logging configured",
        command=ctx.info_name,
        level=settings.level,
        file=settings.log_file or "stderr",
        json=settings.json_logs,
    )
    return settings

# ⚙️🛠️
