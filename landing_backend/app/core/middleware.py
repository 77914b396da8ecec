"""
Request logging middleware - method/path on entry, status and elapsed time on exit.
The request id is bound to every log record emitted while the request is served
and returned to the caller in the X-Request-ID header.
"""
import time
import uuid

from fastapi import FastAPI, Request

from landing_backend.app.core.logging_config import get_logger, request_id_var

logger = get_logger("http")

REQUEST_ID_HEADER = "X-Request-ID"


def register_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            logger.info("%s %s started", request.method, request.url.path)
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "%s %s failed elapsed_ms=%.1f",
                    request.method,
                    request.url.path,
                    (time.perf_counter() - started) * 1000,
                )
                raise
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "%s %s status=%s elapsed_ms=%.1f",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - started) * 1000,
            )
            return response
        finally:
            request_id_var.reset(token)
