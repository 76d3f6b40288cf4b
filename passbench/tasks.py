"""
passbench.tasks
Runs benchmarks off the caller's thread for interactive front ends.
The estimator itself stays synchronous; this module only owns the thread.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable

from .errors import ConfigError
from .estimator import TimeEstimator
from .password_config import MAX_LENGTH

logger = logging.getLogger(__name__)


def validate_custom_range(min_length: int, max_length: int, step: int) -> None:
    """Check a custom benchmark range before handing it to the estimator."""
    if min_length <= 0:
        raise ConfigError(f"minimum length must be positive, got {min_length}")
    if max_length > MAX_LENGTH:
        raise ConfigError(f"maximum length must not exceed {MAX_LENGTH}, got {max_length}")
    if min_length > max_length:
        raise ConfigError(
            f"minimum length ({min_length}) must not be greater than maximum ({max_length})"
        )
    if step <= 0:
        raise ConfigError(f"step must be positive, got {step}")


class BenchmarkRunner:
    """
    Queue of benchmark runs executed one at a time on a worker thread.

    Every submitted run gets a fresh TimeEstimator (and with it a fresh
    PasswordGenerator), so nothing random is shared with the caller.
    """

    def __init__(self, estimator_factory: Callable[[], TimeEstimator] = TimeEstimator):
        self._estimator_factory = estimator_factory
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="passbench-bench")

    def _submit(self, name: str, fn: Callable[[TimeEstimator], str]) -> "Future[str]":
        def task() -> str:
            logger.debug("%s benchmark started on worker thread", name)
            return fn(self._estimator_factory())

        logger.info("queued %s benchmark", name)
        return self._executor.submit(task)

    def submit_quick(self) -> "Future[str]":
        return self._submit("quick", lambda est: est.run_quick_test())

    def submit_detailed(self) -> "Future[str]":
        return self._submit("detailed", lambda est: est.run_detailed_test())

    def submit_custom(self, min_length: int, max_length: int, step: int) -> "Future[str]":
        validate_custom_range(min_length, max_length, step)
        return self._submit(
            "custom", lambda est: est.run_custom_test(min_length, max_length, step)
        )

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.shutdown()
