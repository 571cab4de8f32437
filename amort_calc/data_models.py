"""Data models for the amortization calculator.

This module defines dataclasses representing the entities the calculator
works with: a single installment (``Payment``), the fully computed result
(``Amortization``) and the bundle of user inputs (``LoanConfig``). Payments
and results are frozen; they are built once by the engine and never modified
afterwards.
"""

from dataclasses import dataclass
import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Payment:
    """One installment in an amortization schedule.

    Attributes
    ----------
    installment_number: int
        1-based position in the schedule.
    beginning_balance: float
        Principal owed before this installment, taken from the running
        accumulator that is decremented by each installment's principal.
    ending_balance: float
        ``beginning_balance - principal``.
    installment_amount: float
        The flat periodic payment. The final installment may actually pay
        less (``interest + principal``) when it clears a small residue.
    interest: float
        Cost of borrowing for this period.
    principal: float
        Portion of the installment that reduces the balance.
    remaining_balance: float
        Outstanding principal after this installment, threaded through the
        schedule loop independently of ``ending_balance``. Exactly zero on
        the final installment.
    date: Optional[datetime.date]
        Due date, or ``None`` when the loan has no start date.
    """

    installment_number: int
    beginning_balance: float
    ending_balance: float
    installment_amount: float
    interest: float
    principal: float
    remaining_balance: float
    date: Optional[datetime.date] = None

    @property
    def amount_paid(self) -> float:
        return self.interest + self.principal


@dataclass(frozen=True)
class Amortization:
    """A computed fixed-rate amortization.

    ``total_payment`` is the nominal ``periods * periodic_payment``; it is not
    the sum over ``schedule``, which differs slightly when the last
    installment is partial.
    """

    balance: float
    periods: int
    periodic_interest: float
    periodic_payment: float
    schedule: Tuple[Payment, ...]
    total_payment: float
    total_interest: float
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None


@dataclass
class LoanConfig:
    """User inputs for a single loan, as collected by the CLI."""

    balance: float
    loan_term: int  # number of monthly periods
    apr: float  # annual rate in percent, e.g. 5.0
    start_date: Optional[datetime.date] = None  # due date of the first installment
