"""Tests for result display."""

import numpy as np
import pytest

from core import CalcError, CalcErrorKind, run
from utils import format_error, format_result


@pytest.mark.parametrize(
    "value,expected",
    [
        (np.float64(7.0), "7"),
        (np.float64(4.8), "4.8"),
        (np.float64(-1.5), "-1.5"),
        (np.float64(0.1) + np.float64(0.2), "0.30000000000000004"),
        (np.float64(1e21), "1000000000000000000000"),
        (np.float64(1e-7), "0.0000001"),
        (np.float64(-0.0), "-0"),
        (np.int64(-3), "-3"),
        (np.int64(14), "14"),
    ],
)
def test_format_result(value, expected):
    assert format_result(value) == expected


def test_format_error():
    assert format_error(CalcError(CalcErrorKind.INVALID_RIGHT_SIDE)) == "Failed to parse right side value"


@pytest.mark.parametrize(
    "expression,expected",
    [("0 -1 *", "-0"), ("3.5 1.3 +", "4.8"), ("3 4 +", "7"), ("1 3 /", "0.3333333333333333")],
)
def test_format_evaluated_result(expression, expected):
    assert format_result(run(expression)) == expected
