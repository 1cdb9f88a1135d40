"""HTTP client for the remote code Runner (Piston-compatible API).

Every call yields a tagged outcome instead of raising, so the caller decides
how transport and application failures are surfaced:

    RunnerOk(body) | RunnerNetworkError(error) | RunnerHttpError(status, body)
"""

from dataclasses import dataclass
from typing import Any, Union

import httpx
import structlog

from ..models.execution import RunnerRequest

logger = structlog.get_logger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown Error"


@dataclass(frozen=True)
class RunnerOk:
    """2xx response with a decoded JSON body."""

    body: Any


@dataclass(frozen=True)
class RunnerNetworkError:
    """The request never produced an HTTP response (DNS, reset, timeout)."""

    error: Exception


@dataclass(frozen=True)
class RunnerHttpError:
    """Non-2xx response; body is the decoded JSON or None if unparseable."""

    status_code: int
    body: Any = None


RunnerOutcome = Union[RunnerOk, RunnerNetworkError, RunnerHttpError]


def describe_failure(outcome: RunnerOutcome) -> str:
    """Best available error message for a failed Runner call.

    Falls back from the Runner's ``message`` field, to the transport
    exception text or the HTTP status, to a fixed "Unknown Error".
    """
    if isinstance(outcome, (RunnerOk, RunnerHttpError)) and isinstance(outcome.body, dict):
        message = outcome.body.get("message")
        if isinstance(message, str) and message:
            return message

    if isinstance(outcome, RunnerNetworkError):
        text = str(outcome.error)
        if text:
            return text

    if isinstance(outcome, RunnerHttpError):
        return f"Runner returned HTTP {outcome.status_code}"

    return UNKNOWN_ERROR_MESSAGE


class RunnerClient:
    """Issues /execute calls against the Runner."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the Runner client.

        Args:
            base_url: Runner API root, e.g. https://emkc.org/api/v2/piston
            timeout: Seconds to wait for a single execution
            http_client: Optional preconfigured client (tests inject transports)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    @property
    def execute_url(self) -> str:
        return f"{self.base_url}/execute"

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client for Runner communication."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    async def close(self):
        """Close resources."""
        if self._http_client:
            await self._http_client.aclose()

    async def execute(self, payload: RunnerRequest) -> RunnerOutcome:
        """Submit a program to the Runner.

        Args:
            payload: Runner request body

        Returns:
            Tagged outcome of the call; never raises for transport errors
        """
        client = await self._get_http_client()

        try:
            response = await client.post(
                self.execute_url,
                json=payload.model_dump(),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Runner request failed",
                url=self.execute_url,
                error_type=type(e).__name__,
                error=str(e),
            )
            return RunnerNetworkError(error=e)

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_success:
            return RunnerOk(body=body)

        logger.warning(
            "Runner returned error status",
            url=self.execute_url,
            status_code=response.status_code,
        )
        return RunnerHttpError(status_code=response.status_code, body=body)
