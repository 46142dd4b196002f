"""Classpath assembly for main-class launches."""

from __future__ import annotations

from pathlib import Path

from runjava.errors import ClasspathError

CLASSPATH_FILE = "classpath"


def format_classpath(cp_file: Path, lib_dir: Path, app_jar: Path | None = None) -> str:
    """Read a classpath file.

    Two layouts are supported: a single colon separated line, used as is,
    or one entry per line relative to *lib_dir*. In the second layout the
    application jar is dropped since it is added separately.
    """
    try:
        text = cp_file.read_text()
    except OSError as exc:
        raise ClasspathError(f"Cannot read lines in {cp_file}: {exc}") from exc

    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) <= 1:
        return lines[0] if lines else ""

    entries = [str(lib_dir / line) for line in lines]
    if app_jar is not None:
        entries = [e for e in entries if e != str(app_jar)]
    return ":".join(entries)


def build_classpath(
    app_dir: Path,
    lib_dir: Path,
    *,
    app_jar: Path | None = None,
    main_class: str | None = None,
    explicit: str | None = None,
) -> str:
    """Return the ``-cp`` value.

    An explicit classpath replaces everything. Otherwise it starts with
    ``.`` (plus the lib dir if separate) and, for main-class launches, adds
    the app jar and either the ``classpath`` file or ``<app_dir>/*``.
    """
    if explicit:
        return explicit

    parts = ["."]
    if lib_dir != app_dir:
        parts.append(str(lib_dir))
    if main_class:
        if app_jar is not None:
            parts.append(str(app_jar))
        cp_file = lib_dir / CLASSPATH_FILE
        if cp_file.is_file():
            formatted = format_classpath(cp_file, lib_dir, app_jar)
            if formatted:
                parts.append(formatted)
        else:
            # No order implied
            parts.append(f"{app_dir}/*")
    return ":".join(parts)
