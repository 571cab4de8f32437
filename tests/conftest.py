"""Shared loans used across the test modules.

Fixture loans:
- one-year $10K at 5 % starting 2024-01-01 (payment 856.07)
- thirty-year $200K at 3.5 % without dates (payment 898.09)
"""

from datetime import date

import pytest

from amort_calc.engine import amortize


@pytest.fixture
def start_date() -> date:
    return date(2024, 1, 1)


@pytest.fixture
def one_year_loan(start_date):
    return amortize(10_000.0, 5.0, 12, start_date)


@pytest.fixture
def mortgage():
    return amortize(200_000.0, 3.5, 360)
