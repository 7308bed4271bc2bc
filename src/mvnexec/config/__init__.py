#
# config/__init__.py
#
"""
Configuration handling sub-package for mvnexec.

Exports the loading functions and core configuration models.
"""

from .loader import load_config, load_job, structure_job
from .models import MAVEN, BuildTool, RunnerConfig

__all__ = [
    "MAVEN",
    "BuildTool",
    "RunnerConfig",
    "load_config",
    "load_job",
    "structure_job",
]

# 🔼⚙️
