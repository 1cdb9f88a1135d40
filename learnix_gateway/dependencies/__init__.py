"""Dependencies package for the code execution gateway."""

from .auth import (
    verify_api_key,
    get_current_user,
    AuthenticatedUser,
)
from .services import (
    get_runner_client,
    get_execution_service,
    get_exercise_service,
    ExecutionServiceDep,
    ExerciseServiceDep,
)

__all__ = [
    "verify_api_key",
    "get_current_user",
    "AuthenticatedUser",
    "get_runner_client",
    "get_execution_service",
    "get_exercise_service",
    "ExecutionServiceDep",
    "ExerciseServiceDep",
]
