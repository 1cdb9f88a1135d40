"""Data models for the code execution gateway."""

from .execution import (
    ExecutionStage,
    RunnerFile,
    RunnerRequest,
    RunOutput,
    ExecutionResult,
    ExecutionRequest,
    RunResponse,
    ExerciseExecuteRequest,
    SubmissionRequest,
    GradingOutcome,
    LanguageInfo,
)
from .errors import (
    ErrorType,
    ErrorDetail,
    ErrorResponse,
    GatewayException,
    AuthenticationError,
    ValidationError,
    ExternalServiceError,
)

__all__ = [
    # Execution models
    "ExecutionStage",
    "RunnerFile",
    "RunnerRequest",
    "RunOutput",
    "ExecutionResult",
    "ExecutionRequest",
    "RunResponse",
    "ExerciseExecuteRequest",
    "SubmissionRequest",
    "GradingOutcome",
    "LanguageInfo",
    # Error models
    "ErrorType",
    "ErrorDetail",
    "ErrorResponse",
    "GatewayException",
    "AuthenticationError",
    "ValidationError",
    "ExternalServiceError",
]
