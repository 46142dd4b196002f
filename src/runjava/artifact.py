"""Application jar resolution."""

from __future__ import annotations

from pathlib import Path

from runjava.errors import ArtifactError
from runjava.logger import logger

# Leftovers from the maven shade plugin, never the runnable jar.
_SHADE_ORIGINAL_PREFIX = "original-"


def auto_detect_jar(app_dir: Path) -> str:
    """Return the name of the single jar in *app_dir*.

    Raises:
        ArtifactError: If *app_dir* is missing or does not hold exactly one jar.
    """
    if not app_dir.is_dir():
        raise ArtifactError(f"No directory {app_dir} found for auto detection")
    jars = sorted(
        p.name
        for p in app_dir.iterdir()
        if p.name.endswith(".jar") and not p.name.startswith(_SHADE_ORIGINAL_PREFIX)
    )
    if len(jars) != 1:
        raise ArtifactError(
            f"Neither JAVA_MAIN_CLASS nor JAVA_APP_JAR is set and {len(jars)} "
            f"jars found in {app_dir} (1 expected)"
        )
    logger.debug("Auto-detected application jar", jar=jars[0], app_dir=str(app_dir))
    return jars[0]


def find_jar(jar: str, *dirs: Path) -> Path:
    """Locate *jar*: absolute paths must exist, relative ones are searched in *dirs*."""
    path = Path(jar)
    if path.is_absolute():
        if path.is_file():
            return path
        raise ArtifactError(f"No such file {jar}")
    for d in dirs:
        candidate = d / jar
        if candidate.is_file():
            return candidate
    raise ArtifactError(f"No {jar} found in {' '.join(str(d) for d in dirs)}")


def resolve_app_jar(
    jar: str | None,
    app_dir: Path,
    lib_dir: Path,
    *,
    main_class: str | None = None,
) -> Path | None:
    """Resolve the jar to run, auto-detecting it when not given.

    With a main class and no jar there is nothing to resolve: the
    application is started from the classpath.
    """
    if jar is None:
        if main_class is not None:
            return None
        jar = auto_detect_jar(app_dir)
    return find_jar(jar, app_dir, lib_dir)
