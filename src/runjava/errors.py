"""Exceptions raised before the JVM is started.

Every error here is fatal: the CLI logs it and exits non-zero without
launching java. Absent limits or unset ratios are not errors.
"""

from __future__ import annotations


class RunJavaError(Exception):
    """Base class for launcher errors."""


class ConfigurationError(RunJavaError):
    """Environment or config file holds an invalid value (e.g. a non-numeric ratio)."""


class LimitProbeError(RunJavaError):
    """A readable cgroup or meminfo file has unparseable content."""


class ArtifactError(RunJavaError):
    """The application jar could not be resolved."""


class ClasspathError(RunJavaError):
    """The classpath file could not be read."""
