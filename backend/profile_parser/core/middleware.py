"""
Request middleware: correlation ids, request logging and error translation
"""
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
import structlog

from profile_parser.core.exceptions import ProfileParserException

logger = structlog.get_logger()

CORRELATION_HEADER = "X-Correlation-ID"


def error_response(exc: ProfileParserException) -> JSONResponse:
    """Render a parser exception as the JSON error envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "message": exc.message,
                "details": exc.details,
                "type": exc.__class__.__name__,
            }
        },
    )


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to the structlog context for the request"""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its outcome and duration"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        logger.info("request_started", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
        except ProfileParserException as e:
            elapsed = time.perf_counter() - started
            logger.warning(
                "request_rejected",
                path=request.url.path,
                error=e.message,
                error_type=e.__class__.__name__,
                process_time=elapsed,
            )
            return error_response(e)
        except Exception as e:
            elapsed = time.perf_counter() - started
            logger.exception("unhandled_exception", path=request.url.path, error=str(e), process_time=elapsed)
            return JSONResponse(
                status_code=500,
                content={"error": {"message": "Internal server error", "type": "InternalServerError"}},
            )

        elapsed = time.perf_counter() - started
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=elapsed,
        )
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response
