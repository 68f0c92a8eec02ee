"""Retry decorator for async callables with exponential backoff."""

from collections.abc import Awaitable, Callable

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from bloglist.monitoring import get_logger

logger = get_logger(__name__)

RETRIABLE_EXCEPTIONS: tuple[type[Exception], ...] = (ConnectionError, TimeoutError)

type ExceptionTypes = type[Exception] | tuple[type[Exception], ...]


def _log_before_sleep(max_retries: int) -> Callable[[RetryCallState], None]:
    """Build a tenacity ``before_sleep`` hook that logs each retry."""

    def before_sleep(retry_state: RetryCallState) -> None:
        outcome = retry_state.outcome
        logger.warning(
            "Retrying after failure",
            func=retry_state.fn.__name__ if retry_state.fn else "unknown",
            attempt=retry_state.attempt_number,
            max_attempts=max_retries,
            delay=round(retry_state.next_action.sleep, 2) if retry_state.next_action else 0,
            error=repr(outcome.exception()) if outcome else None,
        )

    return before_sleep


def with_retry[**P, T](
    max_retries: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
    exec_retry: ExceptionTypes = RETRIABLE_EXCEPTIONS,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async function on transient errors.

    Only the exception types in ``exec_retry`` are retried; anything else
    propagates on the first attempt. After the last attempt the original
    exception is re-raised.

    Args:
        max_retries: Total number of attempts.
        base_delay: First backoff delay in seconds; doubles on each retry.
        max_delay: Upper bound for a single delay in seconds.
        exec_retry: Exception type(s) worth another attempt.

    Returns:
        Decorator applying the retry policy.
    """
    return retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(exec_retry),
        before_sleep=_log_before_sleep(max_retries),
        reraise=True,
    )
