"""
absize/quantile.py

Standard normal helpers used by the sample size calculator.

What's included:
  - norm_ppf: inverse CDF (Acklam rational approximation, rel. error < 1.15e-9)
  - norm_ppf_array: the same approximation vectorized with numpy
  - norm_cdf: CDF via math.erf

norm_ppf does not validate its argument; p must be strictly inside (0,1).
"""

from __future__ import annotations

import math
from typing import Iterable, Union

import numpy as np


# -------------------------
# Coefficients
# -------------------------

# central region, numerator / denominator
_A = (
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
)
_B = (
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
)

# tails, numerator / denominator
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
)

P_LOW = 0.02425
P_HIGH = 1 - P_LOW


# -------------------------
# Polynomial helpers
# -------------------------

def _horner(coefs, x):
    acc = coefs[0]
    for c in coefs[1:]:
        acc = acc * x + c
    return acc

def _tail(q):
    # denominator has an implicit trailing 1
    return _horner(_C, q) / (_horner(_D, q) * q + 1)

def _central(q):
    r = q * q
    return _horner(_A, r) * q / (_horner(_B, r) * r + 1)


# -------------------------
# Public API
# -------------------------

def norm_cdf(x: float) -> float:
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))

def norm_ppf(p: float) -> float:
    """
    Inverse of the standard normal CDF: returns z with Phi(z) = p.

    Piecewise rational approximation with breakpoints P_LOW / P_HIGH.
    Constant time; no iteration and no input validation.
    """
    if p < P_LOW:
        return _tail(math.sqrt(-2.0 * math.log(p)))
    if p <= P_HIGH:
        return _central(p - 0.5)
    return -_tail(math.sqrt(-2.0 * math.log(1.0 - p)))

def norm_ppf_array(p: Union[float, Iterable[float], np.ndarray]) -> np.ndarray:
    """
    Vectorized norm_ppf. Instead of raising, p == 0 gives -inf, p == 1
    gives +inf and anything else outside [0,1] gives nan.
    """
    arr = np.asarray(p, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        q_lo = np.sqrt(-2.0 * np.log(arr))
        q_hi = np.sqrt(-2.0 * np.log(1.0 - arr))
        out = np.where(
            arr < P_LOW,
            _tail(q_lo),
            np.where(arr <= P_HIGH, _central(arr - 0.5), -_tail(q_hi)),
        )
    # tails evaluate inf/inf at the endpoints
    out = np.where(arr == 0.0, -np.inf, out)
    return np.where(arr == 1.0, np.inf, out)
