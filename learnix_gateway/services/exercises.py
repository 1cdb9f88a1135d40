"""Exercise execution and submission grading.

Two grading strategies, checked in this order:

- Test append: the instructor's test code is appended to the submission and
  run as one program. A failing assertion exits non-zero, so success is
  simply ``exit code == 0``. Works for interpreted languages without any
  test-framework integration.
- Exact output: the submission runs alone and its trimmed output must equal
  the trimmed expected output (case-sensitive, no other normalization).

With neither criterion the submission fails without calling the Runner.
"""

from typing import Optional

import structlog

from ..models import ExecutionResult, GradingOutcome
from .execution import CodeExecutionService

logger = structlog.get_logger(__name__)

NO_CRITERIA_MESSAGE = "No validation criteria provided"


class ExerciseService:
    """Runs and grades exercise submissions."""

    def __init__(self, execution_service: CodeExecutionService):
        self.execution_service = execution_service

    async def execute(
        self,
        language: str,
        code: str,
        stdin: Optional[str] = None,
        request_id: str = "",
    ) -> ExecutionResult:
        """Run exercise code and return the full Runner-shaped result."""
        return await self.execution_service.execute(language, code, stdin, request_id=request_id)

    async def validate_submission(
        self,
        language: str,
        code: str,
        expected_output: Optional[str] = None,
        test_code: Optional[str] = None,
        request_id: str = "",
    ) -> GradingOutcome:
        """Grade a submission.

        Args:
            language: Platform language label
            code: Student source code
            expected_output: Output to match after trimming both sides
            test_code: Instructor tests appended to the source; takes
                precedence over ``expected_output``

        Returns:
            GradingOutcome. Wrong answers and compile errors are ordinary
            ``success=False`` outcomes; only Runner failures raise.
        """
        if test_code:
            full_code = f"{code}\n\n{test_code}"
            result = await self.execution_service.execute(language, full_code, request_id=request_id)
            success = result.run.code == 0
            self._log_outcome("test_append", language, success, request_id, exit_code=result.run.code)
            return GradingOutcome(success=success, output=result.run.output.strip())

        if expected_output is not None:
            result = await self.execution_service.execute(language, code, request_id=request_id)
            actual_output = result.run.output.strip()
            success = actual_output == expected_output.strip()
            self._log_outcome("exact_output", language, success, request_id, exit_code=result.run.code)
            return GradingOutcome(success=success, output=actual_output)

        self._log_outcome("none", language, False, request_id)
        return GradingOutcome(success=False, output=NO_CRITERIA_MESSAGE)

    @staticmethod
    def _log_outcome(strategy: str, language: str, success: bool, request_id: str, **extra) -> None:
        logger.info(
            "Submission graded",
            request_id=request_id,
            strategy=strategy,
            language=language,
            success=success,
            **extra,
        )
