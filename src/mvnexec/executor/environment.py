#
# src/mvnexec/executor/environment.py
#
"""
Environment overlay for the build subprocess and redaction of sensitive values.
"""
import os
from collections.abc import Iterable, Mapping

from mvnexec.models import Variable

REDACTED_PLACEHOLDER = "*****"

# Workaround for https://github.com/eclipse/che/issues/13926: an inherited
# MAVEN_CONFIG breaks the mvnw wrapper script inside containers.
CLEARED_VARIABLES = ("MAVEN_CONFIG",)


def build_environment(
    variables: Iterable[Variable],
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Returns the environment for the build subprocess.

    The result is a copy of `base` (the current process environment by
    default) with every job variable set, sensitive or not. The process
    environment itself is never modified.
    """
    env = dict(os.environ if base is None else base)
    for variable in variables:
        env[variable.name] = variable.value
    for name in CLEARED_VARIABLES:
        env.pop(name, None)
    return env


def redact(output: bytes, variables: Iterable[Variable]) -> bytes:
    """Replaces every occurrence of a sensitive variable value in the output."""
    placeholder = REDACTED_PLACEHOLDER.encode()
    for variable in variables:
        if variable.is_sensitive and variable.value:
            output = output.replace(variable.value.encode(), placeholder)
    return output


# 🔼⚙️
