from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from src.tasktracker.infrastructure.audit.append_log import AppendOnlyLog, format_timestamp
from src.tasktracker.presentation.schemas import ProblemDetails

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assigns a trace id to each request and records it in the request log."""

    def __init__(self, app: ASGIApp, log_path: str | Path) -> None:
        super().__init__(app)
        self._log = AppendOnlyLog(log_path)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        trace_id = uuid4().hex
        request.state.trace_id = trace_id

        endpoint = request.url.path
        if request.url.query:
            endpoint = f"{endpoint}?{request.url.query}"
        client_ip = request.client.host if request.client else "Unknown"
        user_agent = request.headers.get("user-agent", "Unknown")

        entry = (
            f"[{format_timestamp(datetime.now(timezone.utc))}] "
            f"Method: {request.method} | "
            f"Endpoint: {endpoint} | "
            f"Client IP: {client_ip} | "
            f"User-Agent: {user_agent}\n"
        )
        try:
            await self._log.append(entry)
        except OSError:
            logger.exception("Failed to write to API request log file: %s", self._log.path)
        logger.info(
            "API Request: %s %s from %s",
            request.method,
            endpoint,
            client_ip,
            extra={"trace_id": trace_id},
        )

        response = await call_next(request)
        response.headers[TRACE_HEADER] = trace_id
        return response


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """Turns any unhandled exception into an opaque 500 problem response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            trace_id = getattr(request.state, "trace_id", None) or uuid4().hex
            logger.error(
                "An unexpected error occurred: %s",
                exc,
                exc_info=exc,
                extra={"trace_id": trace_id},
            )
            problem = ProblemDetails(
                type="https://tools.ietf.org/html/rfc9110#section-15.6.1",
                title="Internal Server Error",
                status=500,
                detail="An unexpected error occurred while processing the request.",
                trace_id=trace_id,
            )
            return JSONResponse(
                status_code=500,
                content=problem.model_dump(mode="json", by_alias=True),
                media_type="application/problem+json",
            )
