# src/mvnexec/telemetry/__init__.py

"""
Logging and telemetry helpers for mvnexec.
"""

from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔼⚙️
