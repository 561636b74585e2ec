"""HTTP client for the visits orchestration API.

Only the session schedule endpoint is used by the timetable. Failures are
classified into TransientError (retried with tenacity) and PermanentError
(raised immediately) so callers can decide how to present them.
"""

import requests
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from src.timetable.config import TimetableConfig
from src.timetable.errors import (
    ApiError,
    AuthenticationError,
    DataIntegrityError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TransientError,
)
from src.timetable.logging import get_logger
from src.timetable.models import SessionSchedule, parse_session_schedules

logger = get_logger(__name__)

SESSION_SCHEDULE_PATH = "/visit-sessions/schedule"


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "api_request_retrying",
        attempt=retry_state.attempt_number,
        error=str(exc),
        type=type(exc).__name__,
    )


class OrchestrationApiClient:
    """Read-only client for the visits orchestration API."""

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout_seconds: float = 10,
        retry_attempts: int = 3,
        retry_wait_seconds: float = 1,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Orchestration API base URL, without trailing slash.
            token: Bearer token for the Authorization header (omitted if empty).
            timeout_seconds: Connect/read timeout per request.
            retry_attempts: Attempts per request for transient failures.
            retry_wait_seconds: Multiplier for the exponential backoff.
            session: Optional requests.Session to reuse connections.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout_seconds = timeout_seconds
        self.retry_attempts = retry_attempts
        self.retry_wait_seconds = retry_wait_seconds
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: TimetableConfig) -> "OrchestrationApiClient":
        return cls(
            base_url=config.orchestration_api_url,
            token=config.orchestration_api_token,
            timeout_seconds=config.api_timeout_seconds,
            retry_attempts=config.api_retry_attempts,
        )

    def get_session_schedule(self, prison_id: str, date: str) -> list[SessionSchedule]:
        """Get the visit session schedules running at a prison on a date.

        Args:
            prison_id: Prison code, e.g. "HEI".
            date: Date in YYYY-MM-DD format.

        Returns:
            Validated session schedules, in API order.

        Raises:
            NetworkError: If the API stays unreachable after all retries.
            NotFoundError: If the API does not know the prison.
            DataIntegrityError: If the response fails validation.
        """
        payload = self._get(SESSION_SCHEDULE_PATH, {"prisonId": prison_id, "date": date})
        schedules = parse_session_schedules(payload)
        logger.info(
            "session_schedule_fetched",
            prison_id=prison_id,
            date=date,
            schedules=len(schedules),
        )
        return schedules

    def _get(self, path: str, params: dict[str, str]) -> object:
        retrying = Retrying(
            stop=stop_after_attempt(self.retry_attempts),
            wait=wait_exponential(multiplier=self.retry_wait_seconds, max=10),
            retry=retry_if_exception_type(TransientError),
            before_sleep=_log_retry,
            reraise=True,
        )
        return retrying(self._get_once, path, params)

    def _get_once(self, path: str, params: dict[str, str]) -> object:
        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            response = self.session.get(
                url, params=params, headers=headers, timeout=self.timeout_seconds
            )
        except (requests.Timeout, requests.ConnectionError) as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        status = response.status_code
        if status == 404:
            raise NotFoundError(f"Not found: {url} {params}")
        if status in (401, 403):
            raise AuthenticationError(f"Not authorised for {url} (HTTP {status})")
        if status == 429:
            raise RateLimitError(f"Rate limited by {url}")
        if status >= 500:
            raise NetworkError(f"Server error from {url} (HTTP {status})")
        if status >= 400:
            raise ApiError(f"Request to {url} rejected (HTTP {status})", status_code=status)

        try:
            return response.json()
        except ValueError as e:
            raise DataIntegrityError(f"Response from {url} is not valid JSON") from e
