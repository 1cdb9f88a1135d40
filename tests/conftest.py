"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment before importing config
os.environ["API_KEY"] = "test-api-key-for-testing-12345"
os.environ["API_KEYS"] = "secondary-key-for-testing-678"
os.environ["RUNNER_BASE_URL"] = "https://runner.test/api/v2/piston"
os.environ["RUNNER_TIMEOUT_SECONDS"] = "5"
os.environ["LOG_FORMAT"] = "console"

from learnix_gateway.services.execution import CodeExecutionService  # noqa: E402
from learnix_gateway.services.exercises import ExerciseService  # noqa: E402
from learnix_gateway.services.runner import RunnerClient, RunnerOk  # noqa: E402


def make_runner_body(
    output: str = "",
    code: int | None = 0,
    stdout: str | None = None,
    stderr: str = "",
    signal: str | None = None,
    language: str = "javascript",
    version: str = "18.15.0",
) -> dict:
    """Build a Runner /execute success body."""
    return {
        "run": {
            "stdout": output if stdout is None else stdout,
            "stderr": stderr,
            "code": code,
            "signal": signal,
            "output": output,
        },
        "language": language,
        "version": version,
    }


@pytest.fixture
def runner_body():
    """Factory for Runner success bodies."""
    return make_runner_body


@pytest.fixture
def mock_runner_client():
    """Runner client whose execute() returns a successful empty run."""
    client = MagicMock(spec=RunnerClient)
    client.execute = AsyncMock(return_value=RunnerOk(body=make_runner_body()))
    client.close = AsyncMock()
    return client


@pytest.fixture
def execution_service(mock_runner_client):
    """CodeExecutionService wired to the mocked Runner client."""
    return CodeExecutionService(runner_client=mock_runner_client, mock_modules=True)


@pytest.fixture
def exercise_service(execution_service):
    """ExerciseService wired to the mocked Runner client."""
    return ExerciseService(execution_service=execution_service)


@pytest.fixture
def auth_headers():
    """Provide authentication headers for tests."""
    return {"x-api-key": "test-api-key-for-testing-12345"}
