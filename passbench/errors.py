"""
passbench.errors
Exception types raised by the password configuration, generator and estimator.
"""

from typing import Optional


class PassBenchError(Exception):
    """Base class for every error raised by passbench."""


class ConfigError(PassBenchError, ValueError):
    """A PasswordConfig mutation or construction would break an invariant."""


class GenerationError(PassBenchError, ValueError):
    """The configuration handed to the generator cannot produce a password."""


class EstimationError(PassBenchError, RuntimeError):
    """A benchmark batch failed; wraps the underlying cause."""

    def __init__(self, message: str, length: Optional[int] = None):
        super().__init__(message)
        self.length = length
