#
# config/loader.py
#
"""
Loads runner configuration from the environment and jobs from JSON files.
"""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from mvnexec.config.models import RunnerConfig
from mvnexec.exceptions import ConfigurationError
from mvnexec.models import Content, FileContent, GitDirectoryContent, Job, Variable
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("config.loader")

DATA_DIR_ENV_VAR = "RUNNER_DATADIR"
LOG_LEVEL_ENV_VAR = "MVNEXEC_LOG_LEVEL"


def load_config(
    env: Mapping[str, str] | None = None,
    data_dir: Path | str | None = None,
) -> RunnerConfig:
    """
    Builds a RunnerConfig from environment variables.

    An explicit `data_dir` takes precedence over RUNNER_DATADIR.
    """
    env = os.environ if env is None else env
    data_dir = data_dir or env.get(DATA_DIR_ENV_VAR)
    if not data_dir:
        raise ConfigurationError(f"{DATA_DIR_ENV_VAR} is not set")

    try:
        config = RunnerConfig(
            data_dir=data_dir,
            log_level=env.get(LOG_LEVEL_ENV_VAR, "INFO"),
        )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    log.debug("Runner configuration loaded", data_dir=str(config.data_dir))
    return config


def _structure_content(raw: Mapping[str, Any]) -> Content:
    kind = raw.get("type", "git-dir")
    if kind == "file":
        return FileContent(data=raw.get("data", ""))
    if kind in ("git-dir", "git-directory", "git"):
        repository = raw.get("repository") or {}
        return GitDirectoryContent(
            repository_path=repository.get("path", ""),
            working_dir=repository.get("workingDir") or None,
        )
    raise ConfigurationError(f"Unsupported content type '{kind}'")


def structure_job(raw: Mapping[str, Any]) -> Job:
    """
    Converts a decoded job mapping into a Job.

    Expected shape::

        {"testType": "maven/test", "args": [...], "variablesFile": "...",
         "content": {"type": "git-dir", "repository": {"path": "...", "workingDir": "..."}},
         "variables": {"NAME": {"value": "...", "sensitive": false}}}
    """
    if "testType" not in raw:
        raise ConfigurationError("Job is missing required field 'testType'")

    variables = [
        Variable(
            name=name,
            value=str(entry.get("value", "")),
            is_sensitive=bool(entry.get("sensitive", False)),
        )
        for name, entry in (raw.get("variables") or {}).items()
    ]

    try:
        return Job(
            content=_structure_content(raw.get("content") or {}),
            test_type=raw["testType"],
            args=[str(arg) for arg in raw.get("args") or []],
            variables=variables,
            variables_file=raw.get("variablesFile") or "",
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid job definition: {e}") from e


def load_job(path: Path) -> Job:
    """Reads and validates a JSON job file."""
    log.debug("Loading job file", path=str(path))
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Could not read job file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Job file '{path}' is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Job file '{path}' must contain a JSON object")
    return structure_job(raw)


# 🔼⚙️
