# =============================================================================
# app/routers/base.py - Base Router for JSON Endpoints
# =============================================================================
# Every endpoint group under /api/v1 is built from create_api_router() so it
# shares the same behavior:
# - JSON is the only response format
# - RecordNotFoundError / ParameterMissingError render as {"error": ...}
#   (handler registered once in app/main.py)
#
# There is no CSRF middleware to opt out of: these endpoints are stateless
# and authenticated with bearer tokens, not cookies.
#
# Usage:
#   router = create_api_router(tags=["Posts"])
#
#   @router.get("/posts/{post_id}")
#   async def show(post_id: str):
#       raise RecordNotFoundError(post_id)   # -> 404 {"error": "Record not found"}
# =============================================================================

from typing import Any, TypeVar

from fastapi import APIRouter
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ErrorResponse(BaseModel):
    """Body returned for recognized API errors."""
    error: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Bad request"},
    404: {"model": ErrorResponse, "description": "Record not found"},
}


def create_api_router(**kwargs: Any) -> APIRouter:
    """
    Create an APIRouter with the shared JSON API defaults.

    Keyword arguments are passed through to APIRouter; `responses` is merged
    with the documented error responses.
    """
    responses = {**ERROR_RESPONSES, **kwargs.pop("responses", {})}
    kwargs.setdefault("default_response_class", JSONResponse)
    return APIRouter(responses=responses, **kwargs)


def load_params(model: type[ModelT], data: Any) -> ModelT:
    """
    Validate a nested request parameter against a pydantic model.

    Validation failures are reported the same way FastAPI reports body
    validation errors (422).
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e
