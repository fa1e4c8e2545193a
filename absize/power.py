"""
absize/power.py

Sample size planning for a two-proportion A/B test.

Conventions (match the original calculator page):
  - bcr: baseline conversion rate in percent (5 means 5%)
  - mde: relative minimum detectable effect in percent (30 means +30%)
  - alpha, power, split_ratio: fractions in (0,1)
  - split_ratio is the share of traffic sent to the test group

Variance uses the baseline proportion only, n = 2 (z_a + z_b)^2 p1 (1 - p1) / delta^2,
which is what most online calculators report. Do not swap in the pooled p-bar.
"""

from __future__ import annotations

import enum
import math
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Union

import pandas as pd

from .errors import (
    BaselineRateOutOfRange,
    PowerOutOfRange,
    SampleSizeTooLarge,
    SignificanceOutOfRange,
    SplitRatioOutOfRange,
    TestRateInvalid,
    ZeroEffectSize,
)
from .quantile import norm_cdf, norm_ppf


# -------------------------
# Types
# -------------------------

class Sidedness(enum.Enum):
    ONE_SIDED = "one-sided"
    TWO_SIDED = "two-sided"

    @classmethod
    def from_flag(cls, two_sided: Union[bool, "Sidedness"]) -> "Sidedness":
        if isinstance(two_sided, cls):
            return two_sided
        return cls.TWO_SIDED if two_sided else cls.ONE_SIDED

    @classmethod
    def parse(cls, text: str) -> "Sidedness":
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"sidedness must be 'one-sided' or 'two-sided', got {text!r}") from None


@dataclass(frozen=True)
class CalculationInput:
    bcr: float
    mde: float
    alpha: float = 0.05
    power: float = 0.8
    sided: Sidedness = Sidedness.TWO_SIDED
    split_ratio: float = 0.5


@dataclass(frozen=True)
class CalculationResult:
    control_size: int
    test_size: int
    total_size: int

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)


# -------------------------
# Validation
# -------------------------

def _rates(bcr: float, mde: float):
    p1 = bcr / 100
    p2 = p1 * (1 + mde / 100)
    if not (0 < p1 < 1):
        raise BaselineRateOutOfRange("Baseline conversion rate must be between 0 and 100%")
    if not (0 < p2 <= 1):
        raise TestRateInvalid("Resulting test conversion rate is invalid. Try a smaller MDE.")
    return p1, p2

def _check_alpha(alpha: float) -> None:
    if not (0 < alpha < 1):
        raise SignificanceOutOfRange("Significance level must be between 0 and 1")

def _check_power(power: float) -> None:
    if not (0 < power < 1):
        raise PowerOutOfRange("Statistical power must be between 0 and 1")

def _check_split(split_ratio: float) -> None:
    if not (0 < split_ratio < 1):
        raise SplitRatioOutOfRange("Split ratio must be between 0 and 1")

def _effect(p1: float, p2: float) -> float:
    delta = abs(p2 - p1)
    if delta == 0:
        raise ZeroEffectSize("Effect size must be non-zero. Increase the MDE.")
    return delta

def _ceil_size(n: float) -> int:
    if not math.isfinite(n):
        raise SampleSizeTooLarge("Required sample size is too large to compute. Check the split ratio.")
    return math.ceil(n)


# -------------------------
# z-scores
# -------------------------

def z_alpha(alpha: float, sided: Union[bool, Sidedness] = Sidedness.TWO_SIDED) -> float:
    two_sided = Sidedness.from_flag(sided) is Sidedness.TWO_SIDED
    a = alpha / 2.0 if two_sided else alpha
    return norm_ppf(1.0 - a)

def z_beta(power: float) -> float:
    return norm_ppf(power)


# -------------------------
# Sample size
# -------------------------

def required_sample_size(inp: CalculationInput) -> CalculationResult:
    """
    Group sizes needed to detect a relative lift of ``inp.mde`` percent over
    a baseline of ``inp.bcr`` percent.

    Raises a ``SampleSizeError`` subclass for the first invalid input, checked
    in this order: baseline rate, test rate, alpha, power, split ratio, then a
    zero (or underflowing) effect size. ``SampleSizeTooLarge`` is raised when
    the group sizes overflow a float, e.g. for an extreme split ratio.
    """
    p1, p2 = _rates(inp.bcr, inp.mde)
    _check_alpha(inp.alpha)
    _check_power(inp.power)
    _check_split(inp.split_ratio)

    za = z_alpha(inp.alpha, inp.sided)
    zb = z_beta(inp.power)
    delta = _effect(p1, p2)

    delta_sq = delta ** 2
    if delta_sq == 0:
        # underflow for vanishingly small rates
        raise ZeroEffectSize("Effect size is too small to compute. Increase the baseline rate or MDE.")
    n_equal = 2 * (za + zb) ** 2 * p1 * (1 - p1) / delta_sq

    # test:control ratio
    k = inp.split_ratio / (1 - inp.split_ratio)
    n_control = _ceil_size(n_equal * (1 + 1 / k) / 2)
    n_test = _ceil_size(n_control * k)
    return CalculationResult(n_control, n_test, n_control + n_test)

def calculate_sample_size(
    bcr: float,
    mde: float,
    alpha: float = 0.05,
    power: float = 0.8,
    two_sided: Union[bool, Sidedness] = True,
    split_ratio: float = 0.5,
) -> CalculationResult:
    return required_sample_size(CalculationInput(
        bcr=bcr,
        mde=mde,
        alpha=alpha,
        power=power,
        sided=Sidedness.from_flag(two_sided),
        split_ratio=split_ratio,
    ))


# -------------------------
# Planning helpers
# -------------------------

def achieved_power(
    bcr: float,
    mde: float,
    n_control: int,
    alpha: float = 0.05,
    sided: Union[bool, Sidedness] = Sidedness.TWO_SIDED,
    split_ratio: float = 0.5,
) -> float:
    """
    Power reached with ``n_control`` control units (and the matching test
    group for ``split_ratio``), under the same baseline-variance model
    used by required_sample_size.
    """
    p1, p2 = _rates(bcr, mde)
    _check_alpha(alpha)
    _check_split(split_ratio)
    if n_control < 1:
        raise ValueError("n_control must be >= 1")
    delta = _effect(p1, p2)

    k = split_ratio / (1 - split_ratio)
    n_equal = 2 * n_control / (1 + 1 / k)
    zb = delta * math.sqrt(n_equal / (2 * p1 * (1 - p1))) - z_alpha(alpha, sided)
    return norm_cdf(zb)

def duration_days(total_size: int, daily_units: int, allocation: float = 1.0) -> float:
    if daily_units <= 0 or total_size <= 0:
        raise ValueError("total_size and daily_units must be > 0")
    if not (0 < allocation <= 1):
        raise ValueError("allocation must be in (0,1]")
    return total_size / (daily_units * allocation)

def sample_size_table(
    bcr: float,
    mdes: Iterable[float],
    alpha: float = 0.05,
    power: float = 0.8,
    sided: Union[bool, Sidedness] = Sidedness.TWO_SIDED,
    split_ratio: float = 0.5,
) -> pd.DataFrame:
    """
    One row per relative MDE, handy for picking an effect the traffic can support.
    """
    sided = Sidedness.from_flag(sided)
    rows = []
    for mde in mdes:
        res = required_sample_size(CalculationInput(bcr, mde, alpha, power, sided, split_ratio))
        rows.append({
            "mde": float(mde),
            "p_test": bcr / 100 * (1 + mde / 100),
            "control_size": res.control_size,
            "test_size": res.test_size,
            "total_size": res.total_size,
        })
    return pd.DataFrame(rows, columns=["mde", "p_test", "control_size", "test_size", "total_size"])
