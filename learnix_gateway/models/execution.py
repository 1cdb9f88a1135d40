"""Models for code execution and exercise grading."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExecutionStage(str, Enum):
    """Lifecycle of a single execution request."""

    RECEIVED = "received"
    PREPARED = "prepared"
    SUBMITTED = "submitted"
    COMPLETED = "completed"
    FAILED = "failed"


# ----------------------------------------------------------------------------
# Runner wire models
# ----------------------------------------------------------------------------


class RunnerFile(BaseModel):
    """Single source file sent to the Runner."""

    content: str


class RunnerRequest(BaseModel):
    """Body of a Runner /execute call."""

    language: str
    version: str
    files: List[RunnerFile]
    stdin: str = ""


class RunOutput(BaseModel):
    """The `run` stage reported by the Runner."""

    stdout: str = ""
    stderr: str = ""
    code: Optional[int] = None
    signal: Optional[str] = None
    output: str = ""


class ExecutionResult(BaseModel):
    """Runner-shaped execution result returned by /exercises/execute."""

    run: RunOutput
    language: str = ""
    version: str = ""


# ----------------------------------------------------------------------------
# Platform request/response models
# ----------------------------------------------------------------------------


class ExecutionRequest(BaseModel):
    """Request model for /code-execution/run."""

    model_config = ConfigDict(populate_by_name=True)

    language: str = Field(..., min_length=1, description="Platform language label, case-insensitive")
    source_code: str = Field(..., alias="sourceCode", description="Source code to execute, may be empty")
    stdin: Optional[str] = Field(default=None, description="Optional standard input")


class RunResponse(BaseModel):
    """Flat response model for /code-execution/run."""

    stdout: str = ""
    stderr: str = ""
    code: Optional[int] = None
    output: str = ""


class ExerciseExecuteRequest(BaseModel):
    """Request model for /exercises/execute."""

    language: str = Field(..., min_length=1)
    code: str
    stdin: Optional[str] = None


class SubmissionRequest(BaseModel):
    """Request model for /exercises/submit."""

    model_config = ConfigDict(populate_by_name=True)

    language: str = Field(..., min_length=1)
    code: str
    expected_output: Optional[str] = Field(default=None, alias="expectedOutput")
    test_code: Optional[str] = Field(default=None, alias="testCode")


class GradingOutcome(BaseModel):
    """Result of grading a submission."""

    success: bool
    output: str


class LanguageInfo(BaseModel):
    """Registry entry exposed by /code-execution/languages."""

    language: str
    name: str
    runtime: str
    version: str
