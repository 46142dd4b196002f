"""Structured logging singleton.

Reads os.environ directly so the logger is usable before Settings are
loaded; a broken config must still be reported. Everything goes to stderr,
stdout belongs to the ``options`` and ``ceiling`` subcommands.

The excepthook turns an unexpected launcher crash into one log record and
exit status 1 before java ever starts. The container then fails visibly
and its restart policy applies, instead of a bare traceback with no
timestamp in the log stream.

``LOG_FORMAT=json`` switches to one JSON object per line for container log
collectors; the default is the human-readable console renderer.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _setup_logging() -> structlog.stdlib.BoundLogger:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = os.environ.get("LOG_FORMAT", "console").lower()

    # stdlib root logger first, filter_by_level depends on it
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if fmt == "json":
        processors.append(structlog.processors.format_exc_info)
    else:
        processors.append(structlog.dev.set_exc_info)
    processors.append(_renderer(fmt))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("runjava")


logger = _setup_logging()


def _log_launcher_crash(
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_tb: object,
) -> None:
    if not issubclass(exc_type, Exception):
        # KeyboardInterrupt, SystemExit: keep the default behaviour
        sys.__excepthook__(exc_type, exc_value, exc_tb)  # type: ignore[arg-type]
        return
    logger.critical(
        "Launcher crashed before starting java",
        error_type=exc_type.__name__,
        exc_info=(exc_type, exc_value, exc_tb),
    )
    sys.exit(1)


sys.excepthook = _log_launcher_crash
