"""
passbench.estimator

Benchmarks password generation across lengths and renders the timings as a
fixed-width text report.

- measure(length): time a batch of generations at one length
- run_quick_test / run_detailed_test / run_custom_test: measure a set of
  lengths and return the report text
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .errors import ConfigError, EstimationError
from .generator import PasswordGenerator
from .password_config import PasswordConfig

logger = logging.getLogger(__name__)

SAMPLES_PER_LENGTH = 10

QUICK_LENGTHS = (10_000, 100_000, 1_000_000)

DETAILED_MIN_LENGTH = 10_000
DETAILED_MAX_LENGTH = 1_000_000
DETAILED_STEP = 100_000

REPORT_HEADER = "PASSWORD GENERATION PERFORMANCE REPORT"
RULE = "─" * 55

_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def format_duration(nanos: float) -> str:
    """
    Render a duration in the most readable unit:
    nanoseconds below 1 ms, milliseconds below 1 s, seconds otherwise.
    """
    if nanos < _NS_PER_MS:
        return f"{nanos:.2f} ns"
    if nanos < _NS_PER_S:
        return f"{nanos / _NS_PER_MS:.2f} ms"
    return f"{nanos / _NS_PER_S:.2f} s"


@dataclass(frozen=True)
class PerformanceResult:
    password_length: int
    average_time_nanos: float
    sample_count: int

    @property
    def formatted_average_time(self) -> str:
        return format_duration(self.average_time_nanos)

    def __str__(self) -> str:
        return (
            f"Length: {self.password_length}, "
            f"Avg time: {self.formatted_average_time}, "
            f"Count: {self.sample_count}"
        )


def default_config(length: int) -> PasswordConfig:
    """Latin + digits + special, no required characters."""
    return PasswordConfig.build(length, latin=True, digits=True, special=True)


def lengths_in_range(min_length: int, max_length: int, step: int) -> List[int]:
    """Inclusive range [min_length, max_length] in increments of step."""
    return list(range(min_length, max_length + 1, step))


def render_report(results: Optional[List[PerformanceResult]], title: str) -> str:
    lines = ["", REPORT_HEADER, f"{title:<53}"]
    if not results:
        lines.append("No data for report.")
        return "\n".join(lines) + "\n"

    lines.append(f"{'Length':<15} | {'Avg time/password':<20} | {'Count':<15}")
    lines.append(RULE)
    for r in results:
        lines.append(
            f"{r.password_length:<15d} | {r.formatted_average_time:<20} | {r.sample_count:<15d}"
        )
    lines.append(RULE)
    return "\n".join(lines) + "\n"


class TimeEstimator:
    """
    Runs timed batches of password generations.

    All work happens synchronously on the calling thread; there is no
    cancellation or progress callback. A failure at any length aborts the
    whole run with EstimationError.
    """

    def __init__(
        self,
        generator: Optional[PasswordGenerator] = None,
        samples_per_length: int = SAMPLES_PER_LENGTH,
    ):
        if isinstance(samples_per_length, bool) or not isinstance(samples_per_length, int) or samples_per_length <= 0:
            raise ConfigError(f"samples per length must be a positive integer, got {samples_per_length!r}")
        self.generator = generator or PasswordGenerator()
        self.samples_per_length = samples_per_length
        logger.info("estimator ready, %d samples per length", samples_per_length)

    def measure(self, length: int) -> PerformanceResult:
        samples = self.samples_per_length
        logger.info("measuring length %d over %d passwords", length, samples)
        try:
            config = default_config(length)
            start = time.perf_counter_ns()
            for i in range(samples):
                if i and i % max(1, samples // 10) == 0:
                    logger.debug("progress %d/%d for length %d", i, samples, length)
                self.generator.generate(config)
            elapsed = time.perf_counter_ns() - start
        except Exception as e:
            logger.error("measurement failed for length %d: %s", length, e)
            raise EstimationError(f"measurement failed for length {length}: {e}", length) from e

        result = PerformanceResult(length, elapsed / samples, samples)
        logger.info("done: %s", result)
        return result

    def measure_lengths(self, lengths: Iterable[int]) -> List[PerformanceResult]:
        lengths = list(lengths)
        logger.info("benchmarking %d lengths", len(lengths))
        return [self.measure(length) for length in lengths]

    def run_quick_test(self) -> str:
        logger.info("running quick test")
        results = self.measure_lengths(QUICK_LENGTHS)
        return render_report(results, "QUICK TEST (3 checkpoints)")

    def run_detailed_test(self) -> str:
        logger.info("running detailed test")
        results = self.measure_lengths(
            lengths_in_range(DETAILED_MIN_LENGTH, DETAILED_MAX_LENGTH, DETAILED_STEP)
        )
        return render_report(results, "DETAILED TEST (10k-1M, step 100k)")

    def run_custom_test(self, min_length: int, max_length: int, step: int) -> str:
        logger.info("running custom test: %d-%d, step %d", min_length, max_length, step)
        results = self.measure_lengths(lengths_in_range(min_length, max_length, step))
        return render_report(
            results, f"CUSTOM TEST ({min_length}-{max_length}, step {step})"
        )
