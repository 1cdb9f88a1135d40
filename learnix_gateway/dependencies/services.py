"""Service dependency injection for the code execution gateway."""

from functools import lru_cache
from typing import Annotated

import structlog
from fastapi import Depends

from ..config import settings
from ..services import CodeExecutionService, ExerciseService, RunnerClient

logger = structlog.get_logger(__name__)


@lru_cache()
def get_runner_client() -> RunnerClient:
    """Get the shared Runner client."""
    runner = settings.runner
    logger.info(
        "Runner client initialized",
        base_url=runner.base_url,
        timeout_seconds=runner.timeout_seconds,
    )
    return RunnerClient(base_url=runner.base_url, timeout=runner.timeout_seconds)


@lru_cache()
def get_execution_service() -> CodeExecutionService:
    """Get code execution service instance."""
    return CodeExecutionService(
        runner_client=get_runner_client(),
        mock_modules=settings.enable_module_mocks,
    )


@lru_cache()
def get_exercise_service() -> ExerciseService:
    """Get exercise grading service instance."""
    return ExerciseService(execution_service=get_execution_service())


# Type aliases for dependency injection
ExecutionServiceDep = Annotated[CodeExecutionService, Depends(get_execution_service)]
ExerciseServiceDep = Annotated[ExerciseService, Depends(get_exercise_service)]
