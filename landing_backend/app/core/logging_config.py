"""
Logging for the Landing API.
Every record carries the id of the HTTP request being served ("-" outside a request).
"""
import logging
import sys
from contextvars import ContextVar

from landing_backend.app.core.config import settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"


class RequestIdFilter(logging.Filter):
    """Copies the current request id onto the record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure stdout logging for the service. Returns the package logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[handler],
    )
    return logging.getLogger("landing_backend")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"landing_backend.{name}")
