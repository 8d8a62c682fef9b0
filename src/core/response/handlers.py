import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core import exceptions
from src.core.response.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def success_response(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(data))


def no_content_response() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def error_response(
    message: str,
    status_code: int = status.HTTP_400_BAD_REQUEST,
    errors: Optional[Dict[str, List[str]]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def _field_message(field: str, error: Dict[str, Any]) -> str:
    error_type = error.get("type", "")
    if error_type == "json_invalid":
        return "The request body must be valid JSON."
    if error_type == "missing":
        return f"The {field} field is required."
    if error_type == "string_type":
        return f"The {field} must be a string."
    if error_type in ("int_parsing", "int_type"):
        return f"The {field} must be an integer."
    return error.get("msg", "The value is invalid.")


async def app_exception_handler(request: Request, exc: exceptions.AppException):
    message = str(exc.detail)
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        # server errors never expose their detail
        message = exceptions.ServiceException.default_detail
    return error_response(
        message=message,
        status_code=exc.status_code,
        errors=exc.errors if exc.status_code == exceptions.ValidationException.status_code else None,
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request parsing errors with the same field-keyed shape as service validation."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
            field = ".".join(loc) or "body"
        errors.setdefault(field, []).append(_field_message(field, error))
    logger.info("Validation error on %s: %s", request.url.path, errors)
    return error_response(
        message=exceptions.ValidationException.default_detail,
        status_code=exceptions.ValidationException.status_code,
        errors=errors,
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return error_response(
        message="Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(exceptions.AppException, app_exception_handler)  # type: ignore
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore
    app.add_exception_handler(Exception, global_exception_handler)
