"""Data models for runjava."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from runjava.config import HeapConfig

# Any -XX:+UseFooGC style selector. Loose on purpose, matches the
# historical grep pattern.
_GC_SELECTOR_RE = re.compile(r"-XX:.*Use.*GC")


@dataclass(frozen=True)
class UserOptions:
    """User-supplied JVM flags and the flag kinds we recognize in them.

    Detection is plain substring/pattern matching, not flag parsing. A flag
    written in another form (``-XX:MaxHeapSize=1g`` instead of ``-Xmx1g``)
    is not recognized and the derived flag is added anyway.
    """

    raw: str = ""
    sets_max_heap: bool = False
    sets_init_heap: bool = False
    selects_gc: bool = False

    @classmethod
    def parse(cls, raw: str | None) -> UserOptions:
        raw = raw or ""
        return cls(
            raw=raw,
            sets_max_heap="-Xmx" in raw,
            sets_init_heap="-Xms" in raw,
            selects_gc=_GC_SELECTOR_RE.search(raw) is not None,
        )


@dataclass(frozen=True)
class LaunchContext:
    """Everything the option policies look at, fixed before any of them run."""

    ceiling: int | None = None  # container memory limit in bytes; None → unbounded
    user_options: UserOptions = field(default_factory=UserOptions)
    max_ratio: int | None = None
    init_ratio: int | None = None
    java_major_version: str | None = None
    heap: HeapConfig = field(default_factory=HeapConfig)
