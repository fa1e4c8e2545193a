"""
absize/errors.py

Input-validation errors raised by the sample size calculator.

All of them derive from ``ValueError`` so callers that already guard
numeric helpers with ``except ValueError`` keep working.
"""

from __future__ import annotations


class SampleSizeError(ValueError):
    """Base class for invalid calculator inputs."""


class BaselineRateOutOfRange(SampleSizeError):
    pass


class TestRateInvalid(SampleSizeError):
    # keep pytest from trying to collect this as a test class
    __test__ = False


class SignificanceOutOfRange(SampleSizeError):
    pass


class PowerOutOfRange(SampleSizeError):
    pass


class SplitRatioOutOfRange(SampleSizeError):
    pass


class ZeroEffectSize(SampleSizeError):
    pass


class SampleSizeTooLarge(SampleSizeError):
    pass
