#
# src/mvnexec/executor/settings.py
#
"""
Writes the job-supplied settings payload into the project directory.
"""
from pathlib import Path

import structlog

from mvnexec.config.models import MAVEN, BuildTool
from mvnexec.exceptions import SettingsWriteError
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("executor.settings")

SETTINGS_FILE_MODE = 0o644


def write_settings(directory: Path, payload: str, tool: BuildTool = MAVEN) -> Path:
    """
    Saves the payload verbatim and returns the absolute path of the file.

    Raises:
        SettingsWriteError: The file could not be written.
    """
    settings_path = (directory / tool.settings_file).absolute()
    log.info(f"Creating {tool.settings_file} file", path=str(settings_path), emoji_key="settings")
    try:
        settings_path.write_bytes(payload.encode("utf-8"))
        settings_path.chmod(SETTINGS_FILE_MODE)
    except OSError as e:
        log.error(f"Could not create {tool.settings_file}", error=str(e), emoji_key="fail")
        raise SettingsWriteError(
            f"could not create {tool.settings_file}", path=settings_path, details=e
        ) from e

    log.info(f"Successfully created {tool.settings_file}", emoji_key="success")
    return settings_path


# 🔼⚙️
