"""Exceptions raised by the amortization engine.

Every failure is deterministic and tied to the inputs, so there is nothing to
retry: the three ``Invalid*`` errors come from eager validation before any
computation starts, and ``CalculationError`` aborts schedule generation when a
floating-point step or a date step leaves the representable range.
"""

from __future__ import annotations


class AmortizationError(ValueError):
    """Base class for inputs that cannot be amortized."""


class InvalidPeriods(AmortizationError):
    def __init__(self, periods: int) -> None:
        self.periods = periods
        super().__init__(f"Number of periods must be greater than 0, got {periods}")


class InvalidInterestRate(AmortizationError):
    def __init__(self, apr: float) -> None:
        self.apr = apr
        super().__init__(f"Interest rate must be greater than 0, got {apr}")


class InvalidLoanAmount(AmortizationError):
    def __init__(self, balance: float) -> None:
        self.balance = balance
        super().__init__(f"Loan amount must be greater than 0, got {balance}")


class CalculationError(AmortizationError):
    """A payment, interest, principal or date step produced an unusable value."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Calculation error: {message}")
