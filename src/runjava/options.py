"""Final JVM option string: user options first, derived ones after."""

from __future__ import annotations

from collections.abc import Iterable

from runjava.gc import gc_options
from runjava.memory import memory_options
from runjava.types import LaunchContext


def normalize(text: str) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    return " ".join(text.split())


def assemble(user_options: str, derived: Iterable[str]) -> str:
    """Join user options and derived options into one normalized string.

    Flags are not validated; malformed user flags pass through unchanged.
    """
    return normalize(" ".join([user_options, *derived]))


def java_options(ctx: LaunchContext) -> str:
    return assemble(ctx.user_options.raw, [*memory_options(ctx), gc_options(ctx)])
