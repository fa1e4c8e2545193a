"""
absize: sample size planning for two-proportion A/B tests.

Public API is re-exported here for convenience.
"""

from importlib.metadata import PackageNotFoundError, version as _version

# ---- Version ----
try:
    __version__ = _version("absize")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# ---- Re-exports ----
# Normal distribution
from .quantile import (  # noqa: F401
    norm_cdf,
    norm_ppf,
    norm_ppf_array,
)

# Sample size
from .power import (  # noqa: F401
    CalculationInput,
    CalculationResult,
    Sidedness,
    achieved_power,
    calculate_sample_size,
    duration_days,
    required_sample_size,
    sample_size_table,
)

# Errors
from .errors import (  # noqa: F401
    SampleSizeError,
    BaselineRateOutOfRange,
    TestRateInvalid,
    SignificanceOutOfRange,
    PowerOutOfRange,
    SplitRatioOutOfRange,
    ZeroEffectSize,
    SampleSizeTooLarge,
)

__all__ = [
    "__version__",
    # quantile
    "norm_cdf",
    "norm_ppf",
    "norm_ppf_array",
    # power
    "CalculationInput",
    "CalculationResult",
    "Sidedness",
    "achieved_power",
    "calculate_sample_size",
    "duration_days",
    "required_sample_size",
    "sample_size_table",
    # errors
    "SampleSizeError",
    "BaselineRateOutOfRange",
    "TestRateInvalid",
    "SignificanceOutOfRange",
    "PowerOutOfRange",
    "SplitRatioOutOfRange",
    "ZeroEffectSize",
    "SampleSizeTooLarge",
]
