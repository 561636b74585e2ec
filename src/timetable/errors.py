"""Error hierarchy for orchestration API failures and bad schedule data.

The transient/permanent split lets tenacity retry decorators classify
failures that may succeed on retry vs failures that never will.

Example usage with tenacity:
    @retry(retry=retry_if_exception_type(TransientError), stop=stop_after_attempt(3))
    def get_session_schedule(prison_id: str, date: str):
        ...
"""


class TimetableError(Exception):
    """Base exception for all timetable errors."""

    pass


class TransientError(TimetableError):
    """Temporary failure that may succeed on retry."""

    pass


class NetworkError(TransientError):
    """The orchestration API could not be reached or answered with a 5xx.

    Examples: connection refused, read timeout, 503 Service Unavailable.
    """

    pass


class RateLimitError(NetworkError):
    """Rate limit exceeded (HTTP 429) - needs longer backoff."""

    pass


class PermanentError(TimetableError):
    """Failure that won't succeed on retry."""

    pass


class NotFoundError(PermanentError):
    """The requested prison or schedule does not exist (HTTP 404)."""

    pass


class AuthenticationError(PermanentError):
    """The API token was missing, expired or lacks the required role."""

    pass


class ApiError(PermanentError):
    """Any other client error returned by the orchestration API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DataIntegrityError(PermanentError):
    """Schedule data failed validation, e.g. a negative table capacity.

    Never coerce such values to zero: surface them to the caller instead.
    """

    def __init__(self, message: str, errors: list | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
