# tests/test_utils.py
from absize.power import CalculationResult
from absize.utils import fmt_count, fmt_float, fmt_pct, result_lines


def test_fmt_count_thousands_separator():
    assert fmt_count(6628) == "6,628"
    assert fmt_count(1234567) == "1,234,567"
    assert fmt_count(12) == "12"
    assert fmt_count(None) == "-"


def test_fmt_pct_and_float():
    assert fmt_pct(0.065) == "6.50%"
    assert fmt_pct(0.8, 0) == "80%"
    assert fmt_float(1.959963985, 3) == "1.960"


def test_result_lines():
    lines = result_lines(CalculationResult(3314, 3314, 6628))
    assert lines[0].endswith("6,628")
    assert all(line.endswith("-") for line in result_lines(None))
