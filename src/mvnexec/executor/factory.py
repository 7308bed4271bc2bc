#
# src/mvnexec/executor/factory.py
#
"""
Factory for creating runner instances by build-tool name.
"""
import structlog

from mvnexec.config.models import MAVEN, BuildTool, RunnerConfig
from mvnexec.exceptions import ConfigurationError
from mvnexec.executor.maven import MavenRunner
from mvnexec.executor.protocols import ProcessRunner

log = structlog.get_logger("executor.factory")

TOOL_MAP: dict[str, BuildTool] = {
    "maven": MAVEN,
    "mvn": MAVEN,  # Command-name alias
}


def get_runner(
    tool_name: str,
    config: RunnerConfig,
    process_runner: ProcessRunner | None = None,
) -> MavenRunner:
    """
    Factory function to get a runner for the named build tool.
    """
    tool = TOOL_MAP.get(tool_name.lower())

    if not tool:
        log.error("Unsupported build tool specified", tool=tool_name)
        raise ConfigurationError(
            f"Unsupported build tool: '{tool_name}'. "
            f"Available tools: {list(TOOL_MAP.keys())}"
        )

    log.debug("Instantiating runner", tool=tool.name)
    return MavenRunner(config, process_runner=process_runner, tool=tool)

# 🔼⚙️
