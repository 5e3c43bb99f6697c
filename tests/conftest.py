"""Shared pytest fixtures for calculator tests."""

import pytest

from core import FLOAT64, INT64, RPNEvaluator


@pytest.fixture
def float_evaluator() -> RPNEvaluator:
    """Return the float64 evaluator."""
    return RPNEvaluator(FLOAT64)


@pytest.fixture
def int_evaluator() -> RPNEvaluator:
    """Return the int64 evaluator that lets division by zero escape."""
    return RPNEvaluator(INT64, int_division_by_zero="trap")


@pytest.fixture
def checked_int_evaluator() -> RPNEvaluator:
    """Return the int64 evaluator that reports division by zero as an evaluation error."""
    return RPNEvaluator(INT64, int_division_by_zero="error")
