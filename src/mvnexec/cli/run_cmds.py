# src/mvnexec/cli/run_cmds.py

import asyncio
import json
from pathlib import Path

import click
import structlog

from mvnexec.cli.utils import apply_logging, logging_options
from mvnexec.config import load_config, load_job
from mvnexec.exceptions import ConfigurationError, InvalidTestTypeError, WorkspaceMissingError
from mvnexec.executor import get_runner
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


@click.command(name="run")
@click.argument(
    "job_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
)
@click.option(
    "-d",
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="RUNNER_DATADIR",
    show_envvar=True,
    help="Base data directory holding the checked-out 'repo' tree.",
)
@click.option(
    "-t",
    "--tool",
    default="maven",
    show_default=True,
    help="Build tool used to run the job.",
)
@logging_options
@click.pass_context
def run_job(ctx: click.Context, job_file: Path, data_dir: Path | None, tool: str, **kwargs):
    """Run a JSON job file and print the outcome as JSON."""
    apply_logging(ctx, **kwargs)
    log.info("Executing 'run' command", job_file=str(job_file), tool=tool)

    try:
        config = load_config(data_dir=data_dir)
        job = load_job(job_file)
        runner = get_runner(tool, config)
        outcome = asyncio.run(runner.run(job))
    except (ConfigurationError, InvalidTestTypeError, WorkspaceMissingError) as e:
        log.error("Job could not be run", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_USAGE)

    click.echo(json.dumps(outcome.to_dict(), indent=2))
    ctx.exit(EXIT_PASSED if outcome.passed else EXIT_FAILED)

# 🔼⚙️
