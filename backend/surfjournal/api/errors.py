"""API errors and the handlers that render them as envelopes."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from surfjournal.config import Settings, get_settings
from surfjournal.schemas import Envelope


class ApiError(Exception):
    """Base error carrying an HTTP status and a user-facing message."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None, error: str | None = None):
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)


class BadInputError(ApiError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid request"


class UnauthorizedError(ApiError):
    """Missing credential or insufficient role."""

    status_code = 401
    default_message = "Authentication required"


class NotFoundError(ApiError):
    """Resource not found."""

    status_code = 404
    default_message = "Resource not found"


class ServerError(ApiError):
    """Unexpected failure; ``error`` is only exposed in development."""

    status_code = 500


def server_error(message: str, exc: Exception, settings: Settings) -> ServerError:
    detail = str(exc) if settings.is_development else None
    return ServerError(message, error=detail)


def envelope_response(
    status_code: int,
    message: str,
    error: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = Envelope(success=False, message=message, error=error)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return envelope_response(exc.status_code, exc.message, exc.error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return envelope_response(exc.status_code, message, headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = sorted(
        {".".join(str(part) for part in err["loc"] if part not in ("body", "query", "path")) for err in exc.errors()}
    )
    return envelope_response(400, f"Invalid or missing fields: {', '.join(f for f in fields if f)}")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    error = str(exc) if get_settings().is_development else None
    return envelope_response(500, ServerError.default_message, error)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
