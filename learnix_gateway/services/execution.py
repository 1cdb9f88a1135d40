"""Code execution orchestrator.

Turns a platform execution request into a single Runner call and a
normalized result. Each request walks a fixed pipeline:

    RECEIVED -> PREPARED -> SUBMITTED -> COMPLETED | FAILED

1. Resolve the language label to a Runner profile
2. Inject JS/TS environment shims
3. POST the prepared program to the Runner
4. Map the Runner body to an ExecutionResult, or fail with a Bad Gateway

Nothing is retried.
"""

from dataclasses import dataclass
from typing import NoReturn, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError

from ..config.languages import LanguageProfile, is_shimmed_language, resolve_language
from ..models import (
    ExecutionRequest,
    ExecutionResult,
    ExecutionStage,
    ExternalServiceError,
    RunnerFile,
    RunnerRequest,
    RunResponse,
)
from .runner import RunnerClient, RunnerHttpError, RunnerOk, RunnerOutcome, describe_failure
from .shims import prepare_source, uses_express

logger = structlog.get_logger(__name__)

RUNNER_SERVICE_NAME = "Code Runner"
RUNNER_FAILURE_MESSAGE = "Failed to execute code service"


@dataclass
class ExecutionContext:
    """Context object passed through the execution pipeline."""

    language: str
    source_code: str
    stdin: Optional[str] = None
    request_id: str = ""
    stage: ExecutionStage = ExecutionStage.RECEIVED
    profile: Optional[LanguageProfile] = None
    prepared_source: Optional[str] = None


class CodeExecutionService:
    """Runs submissions on the remote Runner."""

    def __init__(self, runner_client: RunnerClient, mock_modules: bool = True):
        self.runner_client = runner_client
        self.mock_modules = mock_modules

    async def execute(
        self,
        language: str,
        source_code: str,
        stdin: Optional[str] = None,
        request_id: str = "",
    ) -> ExecutionResult:
        """Execute source code and return the Runner-shaped result.

        Raises:
            ExternalServiceError: the Runner was unreachable, answered with
                an error status, or returned a malformed body
        """
        ctx = ExecutionContext(
            language=language,
            source_code=source_code,
            stdin=stdin,
            request_id=request_id,
        )

        self._resolve(ctx)
        self._prepare(ctx)
        outcome = await self._submit(ctx)
        return self._complete(ctx, outcome)

    async def run(self, request: ExecutionRequest, request_id: str = "") -> RunResponse:
        """Execute a guest request and flatten the result."""
        result = await self.execute(
            request.language,
            request.source_code,
            request.stdin,
            request_id=request_id,
        )
        return RunResponse(
            stdout=result.run.stdout,
            stderr=result.run.stderr,
            code=result.run.code,
            output=result.run.output,
        )

    def _resolve(self, ctx: ExecutionContext) -> None:
        ctx.profile = resolve_language(ctx.language)

    def _prepare(self, ctx: ExecutionContext) -> None:
        ctx.prepared_source = prepare_source(
            ctx.language,
            ctx.source_code,
            ctx.stdin,
            mock_modules=self.mock_modules,
        )
        ctx.stage = ExecutionStage.PREPARED

        if self.mock_modules and is_shimmed_language(ctx.language) and uses_express(ctx.source_code):
            logger.info("Injecting Express mock shim", request_id=ctx.request_id, language=ctx.language)

    async def _submit(self, ctx: ExecutionContext) -> RunnerOutcome:
        payload = RunnerRequest(
            language=ctx.profile.runtime_id,
            version=ctx.profile.runtime_version,
            files=[RunnerFile(content=ctx.prepared_source)],
            stdin=ctx.stdin or "",
        )
        ctx.stage = ExecutionStage.SUBMITTED

        logger.info(
            "Executing code",
            request_id=ctx.request_id,
            language=ctx.language,
            runtime=ctx.profile.runtime_id,
            version=ctx.profile.runtime_version,
            code_length=len(ctx.source_code),
        )

        return await self.runner_client.execute(payload)

    def _complete(self, ctx: ExecutionContext, outcome: RunnerOutcome) -> ExecutionResult:
        if not isinstance(outcome, RunnerOk):
            self._fail(ctx, describe_failure(outcome), outcome)

        body = outcome.body
        if not isinstance(body, dict) or not isinstance(body.get("run"), dict):
            self._fail(ctx, "Malformed Runner response", outcome)

        try:
            result = ExecutionResult.model_validate(
                {
                    "language": ctx.profile.runtime_id,
                    "version": ctx.profile.runtime_version,
                    **body,
                }
            )
        except PydanticValidationError as e:
            self._fail(ctx, f"Malformed Runner response: {e.error_count()} invalid field(s)", outcome)

        ctx.stage = ExecutionStage.COMPLETED
        logger.info(
            "Code execution completed",
            request_id=ctx.request_id,
            runtime=result.language,
            version=result.version,
            exit_code=result.run.code,
            signal=result.run.signal,
        )
        return result

    def _fail(self, ctx: ExecutionContext, reason: str, outcome: RunnerOutcome) -> NoReturn:
        """Log the upstream failure and raise an opaque Bad Gateway."""
        failed_at = ctx.stage
        ctx.stage = ExecutionStage.FAILED
        logger.error(
            "Execution failed",
            request_id=ctx.request_id,
            language=ctx.language,
            runtime=ctx.profile.runtime_id if ctx.profile else None,
            stage=failed_at.value,
            outcome=type(outcome).__name__,
            status_code=outcome.status_code if isinstance(outcome, RunnerHttpError) else None,
            reason=reason,
        )
        raise ExternalServiceError(
            service=RUNNER_SERVICE_NAME,
            message=RUNNER_FAILURE_MESSAGE,
            request_id=ctx.request_id or None,
        )
