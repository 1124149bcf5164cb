"""Logging for the SPM Café service.

Application code logs through structlog. Records from uvicorn and other
libraries pass through the same ``ProcessorFormatter`` chain, so every line
carries the request id bound by the HTTP middleware. The console shows
coloured output in development and JSON in production and staging; the
rotating ``spmcafe.log`` / ``spmcafe_error.log`` files always hold JSON lines.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog

from shared.config import Settings, get_settings

LOG_FILE = "spmcafe.log"
ERROR_LOG_FILE = "spmcafe_error.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3
JSON_CONSOLE_ENVS = ("production", "staging")
QUIET_LOGGERS = ("uvicorn.access", "PIL", "asyncio")

PRE_CHAIN: list = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _json_formatter() -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
    )


def _console_formatter(settings: Settings) -> logging.Formatter:
    if settings.env in JSON_CONSOLE_ENVS:
        return _json_formatter()
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.RichTracebackFormatter(max_frames=3),
            ),
        ],
    )


def _rotating_handler(path: Path, level: int | str) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(_json_formatter())
    return handler


def configure_logging(settings: Settings | None = None) -> None:
    """Route stdlib and structlog output to the console and the log files.

    Safe to call more than once; previous root handlers are replaced.
    """
    settings = settings or get_settings()
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_console_formatter(settings))

    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root.handlers = [
        console,
        _rotating_handler(log_dir / LOG_FILE, settings.log_level),
        _rotating_handler(log_dir / ERROR_LOG_FILE, logging.ERROR),
    ]
    root.setLevel(settings.log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def add_context(**kwargs: Any) -> None:
    """Bind values (such as ``request_id``) to every later log line in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
