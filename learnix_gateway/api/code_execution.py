"""Guest code execution endpoints.

Public by design: the IDE playground lets guests run code without an
account. Only language mapping and shim injection happen here, no grading.
"""

import structlog
from fastapi import APIRouter, Request

from ..config.languages import LANGUAGES
from ..dependencies.services import ExecutionServiceDep
from ..models import ExecutionRequest, LanguageInfo, RunResponse
from ._request import get_request_id, require_language

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/run", response_model=RunResponse)
async def run_code(
    request: ExecutionRequest,
    http_request: Request,
    execution_service: ExecutionServiceDep,
):
    """Execute source code and return the flat stdout/stderr/code/output tuple.

    Runner failures are reported as 502 with a generic message.
    """
    request_id = get_request_id(http_request)
    request.language = require_language(request.language)

    logger.info(
        "Code execution request",
        request_id=request_id,
        language=request.language,
        code_length=len(request.source_code),
        has_stdin=request.stdin is not None,
    )

    return await execution_service.run(request, request_id=request_id)


@router.get("/languages", response_model=list[LanguageInfo])
async def list_languages():
    """List the languages with a pinned Runner runtime."""
    return [
        LanguageInfo(
            language=label,
            name=profile.name,
            runtime=profile.runtime_id,
            version=profile.runtime_version,
        )
        for label, profile in LANGUAGES.items()
    ]
