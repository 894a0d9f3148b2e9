"""Loguru setup carrying the current tick and site in every record."""

import contextvars
import sys
from typing import Any

from loguru import logger


# Context variables for maintaining tick/site context
tick_context: contextvars.ContextVar[dict[str, Any]] = contextvars.ContextVar("tick_context", default={})

_CONTEXT_DEFAULTS = {"tick_id": "-", "site_id": "-"}


class LoggingContext:
    """
    Bind tick/site fields to every log call made inside the block.

    Example:
        with LoggingContext(tick_id=7, site_id="c0ffee"):
            logger.info("Reading stored")  # Will include tick_id and site_id
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token = None

    def __enter__(self):
        current = tick_context.get().copy()
        current.update(self.fields)
        self.token = tick_context.set(current)
        return self

    def __exit__(self, *exc_info):
        if self.token:
            tick_context.reset(self.token)


def current_log_fields() -> dict[str, Any]:
    """Snapshot of the fields bound by enclosing LoggingContext blocks."""
    return tick_context.get().copy()


def _context_filter(record) -> bool:
    """Copy the bound tick/site fields into the record."""
    record["extra"].update(tick_context.get())
    return True


def configure_logging(level: str = "INFO", file: str | None = None) -> None:
    """
    Configure loguru to include tick/site context in all log messages.

    Called once from the API lifespan and the watch CLI.

    Args:
        level: Minimum level for the console sink
        file: Optional path of a rotating file sink
    """
    logger.remove()
    logger.configure(extra=_CONTEXT_DEFAULTS)

    logger.add(
        sink=sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>tick={extra[tick_id]}</cyan>:<cyan>site={extra[site_id]}</cyan> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        filter=_context_filter,
        level=level.upper(),
        colorize=True,
    )

    if file:
        logger.add(
            sink=file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | tick={extra[tick_id]} site={extra[site_id]} | {name}:{line} | {message}",
            filter=_context_filter,
            level="INFO",
            rotation="100 MB",
            retention="30 days",
            compression="zip",
        )
