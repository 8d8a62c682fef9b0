from typing import Dict, List, Optional

from fastapi import HTTPException, status

from src.core.response.schemas import ErrorDetail


class AppException(HTTPException):
    """Base class for errors rendered by the global exception handlers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Server Error"

    def __init__(
        self,
        detail: Optional[str] = None,
        error_details: Optional[List[ErrorDetail]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )
        self.error_details = error_details or []

    @property
    def errors(self) -> Dict[str, List[str]]:
        """Error messages grouped by field name."""
        grouped: Dict[str, List[str]] = {}
        for error in self.error_details:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


class UnauthorizedException(AppException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthenticated."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class NotFoundException(AppException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found."


class ValidationException(AppException):
    status_code = 422
    default_detail = "The given data was invalid"


class ConflictException(AppException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The resource already exists."


class ServiceException(AppException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Server Error"
