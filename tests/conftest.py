"""Shared test fixtures for runjava."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Shared helpers (plain functions, not fixtures — importable by test files)
# ---------------------------------------------------------------------------

MIB = 1024 * 1024
GIB = 1024 * MIB

_LAUNCHER_ENV_PREFIXES = ("JAVA_", "HEAP__")


def make_settings(**overrides):
    """Create a Settings object from defaults, without env or file sources.

    Usage::

        s = make_settings(java_options="-Xmx1g")
        s = make_settings(heap=HeapConfig(small_ratio=30))
    """
    from runjava.config import Settings

    return Settings.model_construct(**overrides)


def write_cgroup(
    root: Path,
    *,
    limit: str | int | None,
    mem_total_kb: int | None = 8 * 1024 * 1024,
) -> tuple[Path, Path]:
    """Write a fake cgroup limit file and /proc/meminfo under *root*.

    ``None`` leaves the corresponding file out. Returns (limit_file, meminfo).
    """
    limit_file = root / "memory.limit_in_bytes"
    meminfo = root / "meminfo"
    if limit is not None:
        limit_file.write_text(f"{limit}\n")
    if mem_total_kb is not None:
        meminfo.write_text(
            f"MemTotal:       {mem_total_kb} kB\n"
            "MemFree:         1234567 kB\n"
            "MemAvailable:    2345678 kB\n"
        )
    return limit_file, meminfo


# ---------------------------------------------------------------------------
# Autouse fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_launcher_env(monkeypatch):
    """Strip JAVA_* / HEAP__* variables a CI image may set."""
    for var in list(os.environ):
        if var.startswith(_LAUNCHER_ENV_PREFIXES):
            monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Ensure each test starts with a clean Settings singleton built from defaults."""
    monkeypatch.setattr("runjava.config._settings", make_settings())


# ---------------------------------------------------------------------------
# Reusable fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app_dir(tmp_path):
    """An application directory holding a single runnable jar."""
    d = tmp_path / "app"
    d.mkdir()
    (d / "service.jar").touch()
    return d
