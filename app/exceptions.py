# =============================================================================
# app/exceptions.py - API Exceptions and Handlers
# =============================================================================
# Centralized error handling for JSON endpoints.
#
# Each recognized error kind is an APIException subclass carrying its HTTP
# status and client-facing message. A single handler renders them as:
#
#   {"error": "<message>"}
#
# Anything that is not an APIException is left to FastAPI's defaults.
# =============================================================================

import logging
from typing import Any, Mapping

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class APIException(Exception):
    """
    Base exception for errors rendered as {"error": ...}.

    Subclasses set `status_code` and `message`; both are fixed per error
    kind so clients can rely on them.
    """

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        # detail is for logs only, never sent to the client
        super().__init__(detail or self.message)
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


class RecordNotFoundError(APIException):
    """Raised when a requested record doesn't exist."""

    status_code = 404
    message = "Record not found"


class ParameterMissingError(APIException):
    """Raised when a required request parameter is absent or blank."""

    status_code = 400
    message = "Bad request"

    def __init__(self, param: str):
        super().__init__(f"param is missing or the value is empty: {param}")
        self.param = param


def require_param(params: Mapping[str, Any] | None, key: str) -> Any:
    """
    Fetch a required parameter from a request body.

    Raises:
        ParameterMissingError: If the key is absent, None, or an empty
            string/collection
    """
    if not params or key not in params:
        raise ParameterMissingError(key)

    value = params[key]
    if isinstance(value, str):
        value = value.strip()
    if value is None or (isinstance(value, (str, dict, list)) and not value):
        raise ParameterMissingError(key)

    return value


# =============================================================================
# Exception Handlers
# =============================================================================

async def api_exception_handler(
    request: Request,
    exc: APIException
) -> JSONResponse:
    """Convert APIException to its fixed JSON response."""
    logger.info(
        f"{request.method} {request.url.path} -> {exc.status_code} "
        f"({type(exc).__name__}: {exc})"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
