import logging
from collections.abc import Callable
from typing import Any

import httpx
from tenacity import RetryCallState, retry, retry_if_exception, stop_after_attempt, wait_exponential_jitter

logger = logging.getLogger(__name__)


def is_retryable(error: BaseException) -> bool:
    """Transport failures and 5xx responses are worth another attempt; 4xx are not."""
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code >= 500
    return isinstance(error, httpx.TransportError)


def default_http_retry(label: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Return a tenacity retry decorator configured for HTTP calls.

    *label* is interpolated into the warning message emitted before each
    retry attempt, e.g. ``"Retrying <label> (attempt 2): <error>"``.
    """

    def _log_retry(retry_state: RetryCallState) -> None:
        logger.warning("Retrying %s (attempt %d): %s", label, retry_state.attempt_number, retry_state.outcome)

    return retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=1, max=10),
        retry=retry_if_exception(is_retryable),
        before_sleep=_log_retry,
        reraise=True,
    )
