"""Exercise execution and submission endpoints."""

import structlog
from fastapi import APIRouter, Depends, Request

from ..dependencies.auth import AuthenticatedUser, get_current_user
from ..dependencies.services import ExerciseServiceDep
from ..models import ExecutionResult, ExerciseExecuteRequest, GradingOutcome, SubmissionRequest
from ._request import get_request_id, require_language

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/execute", response_model=ExecutionResult)
async def execute_exercise(
    request: ExerciseExecuteRequest,
    http_request: Request,
    exercise_service: ExerciseServiceDep,
):
    """Run exercise code and return the full Runner-shaped result."""
    request_id = get_request_id(http_request)
    language = require_language(request.language)

    logger.info(
        "Exercise execution request",
        request_id=request_id,
        language=language,
        code_length=len(request.code),
    )

    return await exercise_service.execute(language, request.code, request.stdin, request_id=request_id)


@router.post("/submit", response_model=GradingOutcome)
async def submit_exercise(
    request: SubmissionRequest,
    http_request: Request,
    exercise_service: ExerciseServiceDep,
    user: AuthenticatedUser = Depends(get_current_user),
):
    """Grade a submission.

    Wrong answers come back as 200 with ``success: false``; only Runner
    failures produce an error status.
    """
    request_id = get_request_id(http_request)
    language = require_language(request.language)

    logger.info(
        "Exercise submission",
        request_id=request_id,
        language=language,
        user=str(user),
        has_test_code=bool(request.test_code),
        has_expected_output=request.expected_output is not None,
    )

    return await exercise_service.validate_submission(
        language,
        request.code,
        expected_output=request.expected_output,
        test_code=request.test_code,
        request_id=request_id,
    )
