#!/usr/bin/env python3
"""
Errors
======
Exception types raised by the word generator.

- ConfigurationError: invalid arguments, raised before any work is done
- SamplingError: a weighted table could not serve a draw (recovered internally)
- GenerationExhaustedError: the retry ceiling was hit while producing a word
"""


class NamekitError(Exception):
    """Base class for all namekit errors."""


class ConfigurationError(NamekitError, ValueError):
    """Raised when a generator, strategy or profile is given invalid settings."""


class SamplingError(NamekitError):
    """Raised when a weighted table has no entry for the requested value."""


class GenerationExhaustedError(NamekitError, RuntimeError):
    """
    Raised when a unique word could not be produced within the attempt limit.

    No partial result is kept: callers get exactly the requested number of
    words or this error.
    """

    def __init__(self, message: str, attempts: int = 0, accepted_count: int = 0):
        super().__init__(message)
        self.attempts = attempts
        self.accepted_count = accepted_count


__all__ = [
    'NamekitError',
    'ConfigurationError',
    'SamplingError',
    'GenerationExhaustedError',
]
