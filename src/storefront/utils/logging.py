"""Logging for the storefront.

Storefront code logs through structlog. Records emitted by libraries on the
standard library (protean, uvicorn) pass through the same ProcessorFormatter,
so every line on the console and in the files has one shape.

The console follows the environment: JSON in production and staging, a Rich
console renderer elsewhere. Log files are always JSON.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

_LEVELS_BY_ENV = {
    "production": logging.INFO,
    "staging": logging.INFO,
    "development": logging.DEBUG,
    "test": logging.WARNING,
}

_MAX_BYTES = 10 * 1024 * 1024
_BACKUP_COUNT = 5

# Applied to structlog events and to foreign stdlib records alike
_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def current_env() -> str:
    return os.getenv("PROTEAN_ENV", "development").lower()


def get_log_level() -> int:
    """`LOG_LEVEL` wins; otherwise the level follows `PROTEAN_ENV`."""
    override = os.getenv("LOG_LEVEL")
    if override:
        return logging.getLevelName(override.upper())
    return _LEVELS_BY_ENV.get(current_env(), logging.INFO)


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def _console_formatter() -> structlog.stdlib.ProcessorFormatter:
    if current_env() in ("production", "staging"):
        return _json_formatter()

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
            ),
        ],
    )


def _rotating_file(path: Path, level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(_json_formatter())
    return handler


def configure_logging(log_dir: str | None = None, log_file_prefix: str = "storefront") -> None:
    """Route stdlib and structlog output to the console, `<prefix>.log` and `<prefix>_error.log`.

    The directory is `log_dir` when given, else `$LOG_DIR`, else `./logs`.
    """
    level = get_log_level()

    log_path = Path(log_dir or os.getenv("LOG_DIR", "logs"))
    log_path.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_console_formatter())

    root = logging.getLogger()
    root.handlers = [
        console,
        _rotating_file(log_path / f"{log_file_prefix}.log", level),
        _rotating_file(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]
    root.setLevel(level)

    # Protean is chatty at INFO
    logging.getLogger("protean").setLevel(max(level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(**kwargs: Any) -> None:
    """Attach request details to every event logged until the context is cleared."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
