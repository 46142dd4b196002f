"""Entry point for `python -m runjava` / `runjava`.

Subcommands:
    runjava [args...]          Start the JVM, passing args to the application (default)
    runjava -- options ...     Same, for an application whose first arg is a launcher word
    runjava --dry-run [...]    Print the java command instead of running it
    runjava options            Print the derived JVM options
    runjava ceiling            Print the detected container memory limit in bytes
"""

from __future__ import annotations

import argparse
import sys

from runjava.errors import RunJavaError
from runjava.logger import logger

_SUBCOMMANDS = ("options", "ceiling")
_LAUNCHER_FLAGS = ("--dry-run", "-h", "--help")


def _split_args(raw: list[str]) -> tuple[list[str], list[str]]:
    """Split argv into launcher tokens and application args.

    Only leading flags and a leading subcommand belong to the launcher;
    everything after is handed to the application untouched, dashes
    included. A leading ``--`` ends launcher parsing explicitly.
    """
    i = 0
    while i < len(raw) and raw[i] in _LAUNCHER_FLAGS:
        i += 1
    if i < len(raw) and raw[i] in _SUBCOMMANDS:
        i += 1
    elif i < len(raw) and raw[i] == "--":
        return raw[:i], raw[i + 1 :]
    return raw[:i], raw[i:]


def _options() -> None:
    from runjava.config import get_settings
    from runjava.launcher import build_context
    from runjava.limits import detect_ceiling
    from runjava.options import java_options

    print(java_options(build_context(get_settings(), detect_ceiling())))


def _ceiling() -> None:
    from runjava.limits import detect_ceiling

    ceiling = detect_ceiling()
    print("" if ceiling is None else ceiling)


def _launch(app_args: list[str], dry_run: bool) -> None:
    from runjava.launcher import plan, run

    if dry_run:
        print(plan(app_args).command_line)
        return
    run(app_args)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="runjava",
        description="Start a JVM with memory options derived from container limits",
        epilog="Arguments after the launcher flags go to the application unchanged.",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Print the java command instead of running it"
    )
    parser.add_argument("command", nargs="?", choices=_SUBCOMMANDS, help="Launcher subcommand")

    raw = sys.argv[1:] if argv is None else list(argv)
    launcher_args, app_args = _split_args(raw)
    args = parser.parse_args(launcher_args)

    try:
        match args.command:
            case "options":
                _options()
            case "ceiling":
                _ceiling()
            case _:
                _launch(app_args, args.dry_run)
    except RunJavaError as exc:
        logger.error("Launch aborted", err=str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
