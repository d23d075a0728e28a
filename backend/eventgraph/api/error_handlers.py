"""Error Handlers — every failure leaves the API as an EventGraphError envelope.

Invariants:
    - Pydantic request errors become RequestValidationFailed (400, per-field details)
    - Unhandled exceptions become InternalError (500); the original text is logged only
    - CRITICAL errors log at ERROR, everything else at WARNING
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from eventgraph.core.errors import (
    ErrorSeverity, EventGraphError, InternalError, RequestValidationFailed,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EventGraphError, _handle_eventgraph_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def _respond(request: Request, exc: EventGraphError, exc_info=None) -> JSONResponse:
    level = logging.ERROR if exc.severity is ErrorSeverity.CRITICAL else logging.WARNING
    logger.log(
        level,
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        exc_info=exc_info,
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "entity": exc.context.entity,
            "entity_id": exc.context.entity_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _handle_eventgraph_error(request: Request, exc: EventGraphError):
    return _respond(request, exc)


async def _handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return _respond(request, RequestValidationFailed(details))


async def _handle_unexpected_error(request: Request, exc: Exception):
    return _respond(request, InternalError(), exc_info=exc)
