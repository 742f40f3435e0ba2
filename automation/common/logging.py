"""Structured logging configuration for the smoke checks.

This module standardizes logging across the flows using ``structlog``. It
produces either JSON (for CI log collectors) or a pretty console format (for
humans at a terminal) and binds a consistent ``service`` context so log lines
from the API, browser, and pipeline flows can be told apart.

Typical usage
- Call ``configure_logging(service_name, log_level, log_format)`` at startup
- Acquire loggers via ``get_logger(name)`` or ``CheckLogger``
"""

import logging
import sys
import time
from typing import Any, Optional

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name


def configure_logging(
    service_name: str,
    log_level: str = "INFO",
    log_format: str = "console",
) -> None:
    """Configure structured logging for a flow.

    Parameters
    - service_name: Logical name bound to each log line
    - log_level: ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR`` (case-insensitive)
    - log_format: ``json`` for CI; ``console`` for local runs
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_logger_name,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class CheckLogger:
    """Records the steps and the outcome of one check run.

    Use as a context manager: leaving the block with an exception logs the
    check as failed (the exception still propagates). A successful run must
    call ``passed`` explicitly.

        with CheckLogger("get_post_by_id", post_id=1) as log:
            log.step("Request sent")
            log.passed(status_code=200)
    """

    def __init__(self, check: str, **context: Any):
        self.check = check
        self.outcome: Optional[str] = None
        self._logger = structlog.get_logger("checks").bind(check=check, **context)
        self._start = time.perf_counter()

    def __enter__(self) -> "CheckLogger":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc is not None:
            self.failed(exc)
        return False

    def _elapsed_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 2)

    def step(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, **kwargs)

    def passed(self, **kwargs: Any) -> None:
        self.outcome = "passed"
        self._logger.info("Check passed", outcome=self.outcome, duration_ms=self._elapsed_ms(), **kwargs)

    def failed(self, error: BaseException) -> None:
        self.outcome = "failed"
        self._logger.error(
            "Check failed",
            outcome=self.outcome,
            duration_ms=self._elapsed_ms(),
            error_type=type(error).__name__,
            error=str(error),
        )


def log_performance(operation: str, duration_ms: float, **kwargs: Any) -> None:
    """Log how long a unit of work took.

    Parameters
    - operation: A stable identifier for the measured unit of work
    - duration_ms: Elapsed time in milliseconds
    - kwargs: Additional dimensions (e.g., status code, stage name)
    """
    logger = get_logger("performance")
    logger.info(
        f"Operation {operation} completed",
        operation=operation,
        duration_ms=round(duration_ms, 2),
        **kwargs
    )
