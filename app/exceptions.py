# app/exceptions.py
"""
Errors raised by the request handlers and the handler that renders them.

Every error carries the HTTP status and the response *style* its endpoint
uses, because the user endpoints do not share one error body shape:

    error -> {"error": "<message>"}
    empty -> {}
    text  -> <message> as text/plain
"""

import enum
import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)


class ErrorStyle(str, enum.Enum):
    ERROR = "error"
    EMPTY = "empty"
    TEXT = "text"


class UsersApiError(Exception):
    """Base exception for the API."""

    status_code = 500

    def __init__(self, message: str, style: ErrorStyle = ErrorStyle.ERROR):
        super().__init__(message)
        self.message = message
        self.style = style

    def to_response(self) -> Response:
        if self.style is ErrorStyle.TEXT:
            return PlainTextResponse(self.message, status_code=self.status_code)
        if self.style is ErrorStyle.EMPTY:
            return JSONResponse({}, status_code=self.status_code)
        return JSONResponse({"error": self.message}, status_code=self.status_code)


class InvalidPayloadError(UsersApiError):
    """The request was malformed; raised before any persistence call."""

    status_code = 400


class UserNotFoundError(UsersApiError):
    """The request was well formed but no stored user matches the id."""

    status_code = 404


async def users_api_exception_handler(request: Request, exc: UsersApiError) -> Response:
    logger.warning(
        "%s %s -> %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return exc.to_response()
