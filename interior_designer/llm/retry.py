"""Bounded retry wrapper for provider calls.

Each provider call is attempted exactly once under the default
`RetryPolicy(max_attempts=1)`. Raising `max_attempts` turns on exponential
backoff between attempts. Only `ProviderRequestError` is retried; the last
error is re-raised unchanged once attempts are exhausted.
"""

import logging

from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from interior_designer.core.errors import ProviderRequestError
from interior_designer.llm.provider_config import RetryPolicy


logger = logging.getLogger(__name__)


def call_with_retry(fn, policy: RetryPolicy | None = None, sleep=None):
    """Invoke `fn()` under `policy` and return its result.

    Args:
        fn: Zero-argument callable performing one provider request.
        policy: Retry settings; `None` means a single attempt.
        sleep: Optional sleep function override (tests).
    """
    policy = policy or RetryPolicy()
    kwargs = {}
    if sleep is not None:
        kwargs["sleep"] = sleep

    for attempt in Retrying(
        stop=stop_after_attempt(max(1, policy.max_attempts)),
        wait=wait_exponential(
            multiplier=policy.backoff_seconds,
            max=policy.max_backoff_seconds,
        ),
        retry=retry_if_exception_type(ProviderRequestError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
        **kwargs,
    ):
        with attempt:
            return fn()
