"""
Domain errors raised by the service layer.

Every module owns a catalog of ErrorDefinition entries (see error_catalog.py).
Services raise AppError with one of those entries; anything else escaping a
service operation is normalized to the module's DATABASE_ERROR.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

from fastapi import HTTPException
from sqlalchemy.orm import Session


@dataclass(frozen=True)
class ErrorDefinition:
    error_code: str
    message: str
    http_status: int


class AppError(HTTPException):
    """HTTPException carrying a stable error code for the response body."""

    def __init__(
        self,
        error: ErrorDefinition,
        message: str | None = None,
        details: Any = None,
    ):
        super().__init__(status_code=error.http_status, detail=message or error.message)
        self.error = error
        self.error_code = error.error_code
        self.details = details

    def __str__(self) -> str:
        return f"{self.error_code}: {self.detail}"


@contextmanager
def handle_service_errors(
    db: Session,
    fallback: ErrorDefinition,
    logger: logging.Logger,
    action: str,
) -> Iterator[None]:
    """
    Run a service operation: domain errors pass through, the rest become `fallback`.
    The session is rolled back on any failure so it stays usable.
    """
    try:
        yield
    except AppError:
        db.rollback()
        raise
    except Exception as exc:
        db.rollback()
        logger.error("%s failed error=%s", action, exc, exc_info=True)
        raise AppError(fallback) from exc
