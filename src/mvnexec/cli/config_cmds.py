# src/mvnexec/cli/config_cmds.py

from pathlib import Path

import click
import structlog
from rich.pretty import pretty_repr

from mvnexec.cli.utils import apply_logging, logging_options
from mvnexec.config import load_config
from mvnexec.exceptions import ConfigurationError
from mvnexec.executor.factory import TOOL_MAP
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.config")


@click.group(name="config")
def config_cli():
    """Commands for inspecting configuration."""
    pass


@config_cli.command(name="show")
@click.option(
    "-d",
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="RUNNER_DATADIR",
    show_envvar=True,
    help="Base data directory holding the checked-out 'repo' tree.",
)
@logging_options
@click.pass_context
def show_config(ctx: click.Context, data_dir: Path | None, **kwargs):
    """Resolve and display the runner configuration."""
    apply_logging(ctx, **kwargs)
    log.info("Executing 'config show' command")

    try:
        config = load_config(data_dir=data_dir)
    except ConfigurationError as e:
        log.error("Failed to resolve configuration", error=str(e))
        click.echo(f"Error: Configuration problem:\n{e}", err=True)
        ctx.exit(1)

    click.echo(pretty_repr(config, expand_all=True))
    click.echo(pretty_repr(sorted(TOOL_MAP), expand_all=True))

    if not config.data_dir.exists():
        log.warning("Data directory does not exist", data_dir=str(config.data_dir))

# 🔼⚙️
