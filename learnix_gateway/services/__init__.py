"""Services for the code execution gateway."""

from .execution import CodeExecutionService
from .exercises import ExerciseService
from .runner import RunnerClient

__all__ = [
    "CodeExecutionService",
    "ExerciseService",
    "RunnerClient",
]
