"""Error models and exception classes for the code execution gateway."""

import time
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    """Error type enumeration."""

    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL_SERVER = "internal_server"
    EXTERNAL_SERVICE = "external_service"


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: Optional[str] = Field(None, description="Field name for validation errors")
    message: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(None, description="Machine-readable error code")


class ErrorResponse(BaseModel):
    """Standardized error response model."""

    model_config = ConfigDict(use_enum_values=True)

    error: str = Field(..., description="Main error message")
    error_type: ErrorType = Field(..., description="Error category")
    details: Optional[List[ErrorDetail]] = Field(None, description="Additional error details")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")
    timestamp: float = Field(default_factory=time.time, description="Error timestamp")


# Custom Exception Classes


class GatewayException(Exception):
    """Base exception for the code execution gateway."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.INTERNAL_SERVER,
        status_code: int = 500,
        details: Optional[List[ErrorDetail]] = None,
        request_id: Optional[str] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.status_code = status_code
        self.details = details or []
        self.request_id = request_id
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert exception to error response model."""
        return ErrorResponse(
            error=self.message,
            error_type=self.error_type,
            details=self.details if self.details else None,
            request_id=self.request_id,
        )


class AuthenticationError(GatewayException):
    """Authentication related errors."""

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(
            message=message,
            error_type=ErrorType.AUTHENTICATION,
            status_code=401,
            **kwargs,
        )


class ValidationError(GatewayException):
    """Request validation errors."""

    def __init__(self, message: str = "Validation failed", **kwargs):
        super().__init__(message=message, error_type=ErrorType.VALIDATION, status_code=400, **kwargs)


class ExternalServiceError(GatewayException):
    """Upstream Runner failures, surfaced as Bad Gateway."""

    def __init__(self, service: str, message: str = None, **kwargs):
        error_message = message or f"External service error: {service}"
        self.service = service
        super().__init__(
            message=error_message,
            error_type=ErrorType.EXTERNAL_SERVICE,
            status_code=502,
            **kwargs,
        )
