"""
Exception handlers - every error leaves the API with the same JSON body:
{statusCode, timestamp, path, method, errorCode, message, details?}
"""
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from landing_backend.app.core.exceptions import AppError
from landing_backend.app.core.logging_config import get_logger

logger = get_logger("core.errors")

VALIDATION_ERROR_CODE = "VALIDATION_ERROR"
VALIDATION_ERROR_MESSAGE = "Los datos enviados no son válidos"


def build_error_body(
    request: Request,
    status_code: int,
    error_code: str,
    message: Any,
    details: Any = None,
) -> dict:
    body = {
        "statusCode": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
        "method": request.method,
        "errorCode": error_code,
        "message": message,
    }
    if details is not None:
        body["details"] = details
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc, AppError):
        error_code = exc.error_code
        details = exc.details
    else:
        error_code = f"HTTP_{exc.status_code}"
        details = None

    logger.error(
        "%s %s status=%s error_code=%s message=%s",
        request.method,
        request.url.path,
        exc.status_code,
        error_code,
        exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_body(request, exc.status_code, error_code, exc.detail, details),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    logger.warning(
        "%s %s status=400 error_code=%s fields=%s",
        request.method,
        request.url.path,
        VALIDATION_ERROR_CODE,
        [d["field"] for d in details],
    )
    return JSONResponse(
        status_code=400,
        content=build_error_body(request, 400, VALIDATION_ERROR_CODE, VALIDATION_ERROR_MESSAGE, details),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
