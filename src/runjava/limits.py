"""Container memory limit detection.

Reads the cgroup memory limit and compares it with the host's total
memory. A limit only counts when it is strictly below host memory: an
unlimited cgroup reports either a sentinel or a huge number, and in both
cases the JVM's own view of physical memory is already right.
"""

from __future__ import annotations

from pathlib import Path

from runjava.errors import LimitProbeError
from runjava.logger import logger

CGROUP_V1_LIMIT = Path("/sys/fs/cgroup/memory/memory.limit_in_bytes")
CGROUP_V2_LIMIT = Path("/sys/fs/cgroup/memory.max")
MEMINFO = Path("/proc/meminfo")

DEFAULT_LIMIT_FILES = (CGROUP_V1_LIMIT, CGROUP_V2_LIMIT)

# "-1" on cgroup v1 when the limit was lifted explicitly, "max" on v2.
UNBOUNDED_SENTINELS = frozenset({"-1", "max"})


def _read(path: Path) -> str | None:
    try:
        return path.read_text().strip()
    except OSError:
        return None


def read_limit(limit_files: tuple[Path, ...] = DEFAULT_LIMIT_FILES) -> int | None:
    """Return the first readable cgroup memory limit in bytes.

    Returns None when no file is readable or the limit is a sentinel.

    Raises:
        LimitProbeError: If a readable file does not hold an integer.
    """
    for path in limit_files:
        value = _read(path)
        if value is None:
            continue
        if value in UNBOUNDED_SENTINELS:
            logger.debug("Cgroup memory limit is unbounded", path=str(path))
            return None
        try:
            return int(value)
        except ValueError:
            raise LimitProbeError(f"Unexpected content in {path}: {value!r}") from None
    return None


def read_host_memory(meminfo_file: Path = MEMINFO) -> int | None:
    """Return total host memory in bytes from the ``MemTotal:`` line (kB)."""
    text = _read(meminfo_file)
    if text is None:
        return None
    for line in text.splitlines():
        tokens = line.split()
        if not tokens or tokens[0] != "MemTotal:":
            continue
        try:
            return int(tokens[1]) * 1024
        except (IndexError, ValueError):
            raise LimitProbeError(f"Malformed MemTotal line in {meminfo_file}: {line!r}") from None
    return None


def detect_ceiling(
    limit_files: tuple[Path, ...] = DEFAULT_LIMIT_FILES,
    meminfo_file: Path = MEMINFO,
) -> int | None:
    """Return the container memory ceiling in bytes, or None if unconstrained.

    Unreadable files are not an error, they just mean "no constraint".
    """
    limit = read_limit(limit_files)
    if limit is None:
        return None

    host_memory = read_host_memory(meminfo_file)
    if host_memory is None:
        logger.warning("Host memory unknown, ignoring cgroup limit", limit=limit)
        return None

    if not 0 < limit < host_memory:
        logger.debug("Cgroup limit not below host memory", limit=limit, host_memory=host_memory)
        return None

    logger.info("Container memory limit detected", ceiling=limit, host_memory=host_memory)
    return limit
