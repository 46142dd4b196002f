"""Start the JVM with container-aware options.

The ceiling is probed once, frozen into a LaunchContext and handed to the
option policies. The launcher then replaces the current process with java
so signals reach the JVM directly.
"""

from __future__ import annotations

import os
import shlex
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from runjava.artifact import resolve_app_jar
from runjava.classpath import build_classpath
from runjava.config import Settings, get_settings
from runjava.limits import detect_ceiling
from runjava.logger import logger
from runjava.options import java_options
from runjava.types import LaunchContext, UserOptions

JAVA_EXECUTABLE = "java"


@dataclass(frozen=True)
class LaunchPlan:
    """Resolved command line plus the directory to run it in."""

    argv: list[str]
    app_dir: Path

    @property
    def command_line(self) -> str:
        return shlex.join(self.argv)


def build_context(settings: Settings, ceiling: int | None) -> LaunchContext:
    return LaunchContext(
        ceiling=ceiling,
        user_options=UserOptions.parse(settings.java_options),
        max_ratio=settings.java_max_mem_ratio,
        init_ratio=settings.java_init_mem_ratio,
        java_major_version=settings.java_major_version,
        heap=settings.heap,
    )


def build_command(
    options: str,
    classpath: str,
    *,
    app_jar: Path | None = None,
    main_class: str | None = None,
    args: Sequence[str] = (),
    process_name: str | None = None,
) -> list[str]:
    """Assemble the java argv; argv[0] doubles as the process name.

    A main class takes precedence over ``-jar`` since java ignores ``-cp``
    for jar launches.
    """
    argv = [process_name or JAVA_EXECUTABLE, *options.split(), "-cp", classpath]
    if main_class:
        argv.append(main_class)
    elif app_jar is not None:
        argv.extend(["-jar", str(app_jar)])
    argv.extend(args)
    return argv


def plan(args: Sequence[str] = (), settings: Settings | None = None) -> LaunchPlan:
    """Probe limits, resolve the artifact and build the command. No side effects besides reads."""
    s = settings or get_settings()
    ceiling = detect_ceiling()

    app_dir = (s.java_app_dir or Path.cwd()).resolve()
    lib_dir = (s.java_lib_dir or app_dir).resolve()
    app_jar = resolve_app_jar(s.java_app_jar, app_dir, lib_dir, main_class=s.java_main_class)

    ctx = build_context(s, ceiling)
    classpath = build_classpath(
        app_dir,
        lib_dir,
        app_jar=app_jar,
        main_class=s.java_main_class,
        explicit=s.java_classpath,
    )
    argv = build_command(
        java_options(ctx),
        classpath,
        app_jar=app_jar,
        main_class=s.java_main_class,
        args=args,
        process_name=s.java_app_name,
    )
    return LaunchPlan(argv=argv, app_dir=app_dir)


def run(args: Sequence[str] = (), settings: Settings | None = None) -> None:
    """Replace the current process with the JVM. Does not return on success."""
    launch = plan(args, settings)
    os.chdir(launch.app_dir)
    logger.info("Starting JVM", command=launch.command_line, cwd=str(launch.app_dir))
    os.execvp(JAVA_EXECUTABLE, launch.argv)
