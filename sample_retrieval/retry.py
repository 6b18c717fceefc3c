"""Bounded retry helper for calls that can fail transiently."""

from __future__ import annotations

from typing import Callable, Optional, Type, TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    retry_if_exception_type,
    retry_never,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_WAIT = wait_exponential(multiplier=1, min=1, max=8)

RetryCallback = Callable[[RetryCallState], None]
TransientPredicate = Callable[[BaseException], bool]


def execute_with_retry(
    operation: Callable[[], T],
    on_retry: Optional[RetryCallback],
    *retryable: Type[BaseException],
    is_transient: Optional[TransientPredicate] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    wait: Optional[wait_base] = None,
) -> T:
    """
    Invoke ``operation``, retrying it while it fails transiently.

    Parameters
    ----------
    operation:
        Zero-argument callable performing the work.
    on_retry:
        Called with the tenacity retry state before each retry attempt.
    retryable:
        Exception types treated as transient.
    is_transient:
        Optional predicate marking further exceptions as transient.
    max_attempts:
        Total number of attempts, the first call included.
    wait:
        Delay strategy between attempts; exponential backoff by default.

    Returns the operation result unchanged. Once attempts are exhausted the
    last exception is re-raised as is; non-transient exceptions propagate
    on the first occurrence.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    condition = retry_if_exception_type(retryable) if retryable else retry_never
    if is_transient is not None:
        condition = condition | retry_if_exception(is_transient)

    retrying = Retrying(
        retry=condition,
        stop=stop_after_attempt(max_attempts),
        wait=wait if wait is not None else DEFAULT_WAIT,
        before_sleep=on_retry,
        reraise=True,
    )
    return retrying(operation)
