"""
PassBench: secure password generation and generation-time benchmarks.
"""

from .errors import ConfigError, EstimationError, GenerationError, PassBenchError
from .estimator import PerformanceResult, TimeEstimator, format_duration
from .generator import PasswordGenerator, generate_password
from .password_config import MAX_LENGTH, PasswordConfig

__all__ = [
    "ConfigError",
    "EstimationError",
    "GenerationError",
    "PassBenchError",
    "PerformanceResult",
    "TimeEstimator",
    "format_duration",
    "PasswordGenerator",
    "generate_password",
    "MAX_LENGTH",
    "PasswordConfig",
]
