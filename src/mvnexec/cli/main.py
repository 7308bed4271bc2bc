# src/mvnexec/cli/main.py

"""
Main CLI entry point for mvnexec using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from mvnexec.cli.config_cmds import config_cli
from mvnexec.cli.run_cmds import run_job
from mvnexec.cli.utils import apply_logging, logging_options
from mvnexec.telemetry import StructLogger

try:
    __version__ = version("mvnexec")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="mvnexec")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    mvnexec: Maven build-and-test execution adapter.

    Runs a test job with Maven inside a prepared workspace and reports
    the Surefire results as JSON.
    """
    settings = apply_logging(ctx, log_level=log_level, log_file=log_file, json_logs=json_logs)
    log.debug("Main CLI group initialized", log_level=settings.level)


cli.add_command(config_cli)
cli.add_command(run_job)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
