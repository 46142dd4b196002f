"""Heap size flags derived from the container memory ceiling.

An explicit ``-Xmx``/``-Xms`` in the user's options always wins. Max heap
has an implicit size-based default so a container behaves sensibly with no
configuration at all; initial heap is opt-in only, since the JVM already
derives a reasonable one from the max.
"""

from __future__ import annotations

from runjava.types import LaunchContext

BYTES_PER_MIB = 1024 * 1024


def compute_option(ceiling_bytes: int, ratio_percent: int, kind: str) -> str:
    """Return ``-X<kind><n>m`` with n = ratio percent of the ceiling, in MiB.

    Rounds half up. No clamping: a silly ratio yields a silly flag.

    >>> compute_option(1073741824, 50, "mx")
    '-Xmx512m'
    """
    value = int(ceiling_bytes * ratio_percent / 100 / BYTES_PER_MIB + 0.5)
    return f"-X{kind}{value}m"


def max_heap_option(ctx: LaunchContext) -> str | None:
    if ctx.user_options.sets_max_heap:
        return None
    if ctx.ceiling is None:
        return None

    if ctx.max_ratio is not None:
        if ctx.max_ratio == 0:
            # Explicitly switched off
            return None
        return compute_option(ctx.ceiling, ctx.max_ratio, "mx")

    if ctx.ceiling <= ctx.heap.small_ceiling_bytes:
        ratio = ctx.heap.small_ratio
    else:
        ratio = ctx.heap.large_ratio
    return compute_option(ctx.ceiling, ratio, "mx")


def init_heap_option(ctx: LaunchContext) -> str | None:
    if ctx.user_options.sets_init_heap:
        return None
    if not ctx.init_ratio or ctx.ceiling is None:
        return None
    return compute_option(ctx.ceiling, ctx.init_ratio, "ms")


def memory_options(ctx: LaunchContext) -> list[str]:
    """Initial heap flag then max heap flag, skipping the ones not derived."""
    return [opt for opt in (init_heap_option(ctx), max_heap_option(ctx)) if opt]
