"""Garbage collector tuning for containers.

Parallel GC with a low free-heap band makes the heap shrink aggressively
and grow conservatively, so memory the application no longer needs goes
back to the container. GCTimeRatio and AdaptiveSizePolicyWeight are needed
for the parallel collector to honour the free ratios.
"""

from __future__ import annotations

from runjava.types import LaunchContext

PARALLEL_GC_OPTIONS = (
    "-XX:+UseParallelGC",
    "-XX:GCTimeRatio=4",
    "-XX:AdaptiveSizePolicyWeight=90",
    "-XX:MinHeapFreeRatio=20",
    "-XX:MaxHeapFreeRatio=40",
)
EXIT_ON_OOM_OPTION = "-XX:+ExitOnOutOfMemoryError"

# Java 7 has no ExitOnOutOfMemoryError.
LEGACY_JAVA_VERSION = "7"


def gc_options(ctx: LaunchContext) -> str:
    """Return the GC flag bundle, or ``""`` if the user already picked a collector."""
    if ctx.user_options.selects_gc:
        return ""
    opts = list(PARALLEL_GC_OPTIONS)
    if ctx.java_major_version != LEGACY_JAVA_VERSION:
        opts.append(EXIT_ON_OOM_OPTION)
    return " ".join(opts)
