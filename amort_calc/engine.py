"""Core calculation engine for the amortization calculator.

This module implements the financial logic for a fixed-rate, fixed-term loan:
the annuity (PMT) payment amount, the split of each installment into interest
and principal, and the schedule loop that runs until the balance reaches
exactly zero. Due dates, when a start date is given, advance by calendar
months. Results are returned as a frozen ``Amortization`` record.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Dict, List, Optional, Tuple

from .data_models import Amortization, LoanConfig, Payment
from .errors import (
    CalculationError,
    InvalidInterestRate,
    InvalidLoanAmount,
    InvalidPeriods,
)
from .utils import advance_one_month

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# Wide enough to quantize any finite float to cents.
WIDE_CONTEXT = Context(prec=400)

# Largest gap tolerated between the two running balances of an installment
# before it is reported.
BALANCE_DRIFT_TOLERANCE = 1e-6


def _is_finite(value: float) -> bool:
    return not (math.isinf(value) or math.isnan(value))


def _round_half_up(value: float) -> float:
    # Rounds the shortest decimal repr, so 2.675 is a tie and goes to 2.68;
    # scaling by 100 in binary floating point would give 2.67.
    return float(Decimal(repr(value)).quantize(CENT, rounding=ROUND_HALF_UP, context=WIDE_CONTEXT))


def validate_inputs(balance: float, apr: float, periods: int) -> None:
    """Reject inputs that cannot be amortized.

    Checks run in a fixed order (periods, rate, amount) so that the first
    offending argument is the one reported.
    """
    if isinstance(periods, bool) or not isinstance(periods, int):
        raise TypeError(f"periods must be an integer, got {periods!r}")
    if periods <= 0:
        raise InvalidPeriods(periods)
    if apr <= 0:
        raise InvalidInterestRate(apr)
    if balance <= 0:
        raise InvalidLoanAmount(balance)


def periodic_rate(apr: float) -> float:
    """Convert an annual percentage rate (5.0 means 5 %) to a monthly decimal rate."""
    return apr / 100 / 12


def calculate_periodic_payment_amount(balance: float, periodic_interest: float, periods: int) -> float:
    """Return the flat installment for the loan, rounded half-up to cents.

    The formula is:

        payment = P * (i * (1 + i)^n) / ((1 + i)^n - 1)

    where ``P`` is the principal, ``i`` is the periodic interest rate and
    ``n`` is the number of payments. Rounding is applied once, to the final
    value.
    """
    base = 1 + periodic_interest
    try:
        exp = base ** periods
    except OverflowError as exc:
        raise CalculationError("Overflow in payment calculation") from exc
    if not _is_finite(exp):
        raise CalculationError("Overflow in payment calculation")

    try:
        payment = balance * (periodic_interest * exp) / (exp - 1)
    except ZeroDivisionError as exc:
        raise CalculationError("Invalid payment calculation result") from exc
    if not _is_finite(payment):
        raise CalculationError("Invalid payment calculation result")

    rounded = _round_half_up(payment)
    if rounded <= 0:
        raise CalculationError(f"Payment rounds to {rounded:.2f}; the loan can never be paid off")
    return rounded


def calculate_payment(
    balance: float,
    installment_number: int,
    beginning_balance: float,
    periodic_interest: float,
    periodic_payment: float,
    due_date: Optional[date] = None,
) -> Payment:
    """Split one installment into interest and principal.

    ``balance`` is the outstanding principal carried by the schedule loop and
    ``beginning_balance`` the separately accumulated running total. When the
    outstanding balance is smaller than the periodic payment, this is the
    final installment: it pays off the whole balance and leaves exactly zero.
    """
    interest = balance * periodic_interest
    if not _is_finite(interest):
        raise CalculationError("Invalid interest calculation")

    final = balance < periodic_payment
    if final:
        principal = balance
    else:
        principal = periodic_payment - interest
    if not _is_finite(principal):
        raise CalculationError("Invalid principal calculation")
    if principal <= 0:
        raise CalculationError(
            f"Payment {periodic_payment:.2f} does not cover interest {interest:.2f} "
            f"on installment {installment_number}"
        )

    remaining_balance = 0.0 if final else balance - principal
    ending_balance = beginning_balance - principal

    return Payment(
        installment_number=installment_number,
        beginning_balance=beginning_balance,
        ending_balance=ending_balance,
        installment_amount=periodic_payment,
        interest=interest,
        principal=principal,
        remaining_balance=remaining_balance,
        date=due_date,
    )


def calculate_schedule(
    balance: float,
    periodic_interest: float,
    periodic_payment: float,
    start_date: Optional[date] = None,
) -> Tuple[List[Payment], Optional[date]]:
    """Build the installment list until the loan is paid off.

    Returns
    -------
    schedule: List[Payment]
        Installments numbered from 1 without gaps. The last one has a
        ``remaining_balance`` of exactly zero.
    end_date: Optional[date]
        One month past the last due date, or ``None`` without a start date.
    """
    schedule: List[Payment] = []
    installment_number = 1
    beginning_balance = balance
    current_date = start_date

    while balance > 0:
        payment = calculate_payment(
            balance,
            installment_number,
            beginning_balance,
            periodic_interest,
            periodic_payment,
            due_date=current_date,
        )
        balance = payment.remaining_balance

        if current_date is not None:
            current_date = advance_one_month(current_date)

        drift = abs(payment.ending_balance - payment.remaining_balance)
        if drift > BALANCE_DRIFT_TOLERANCE:
            logger.warning(
                "Installment %d: ending balance %.6f and remaining balance %.6f differ by %.6g",
                installment_number,
                payment.ending_balance,
                payment.remaining_balance,
                drift,
            )

        schedule.append(payment)
        installment_number += 1
        beginning_balance -= payment.principal

    return schedule, current_date


def calculate_total_payment(periods: int, periodic_payment: float) -> float:
    return periods * periodic_payment


def calculate_total_interest(total_payment: float, balance: float) -> float:
    return total_payment - balance


def amortize(
    balance: float,
    apr: float,
    periods: int,
    start_date: Optional[date] = None,
) -> Amortization:
    """Validate the inputs and compute the full amortization.

    Parameters
    ----------
    balance: float
        Principal borrowed; must be positive.
    apr: float
        Annual percentage rate in percent points; must be positive.
    periods: int
        Number of monthly installments; must be positive.
    start_date: Optional[date]
        Due date of the first installment. Without it no dates are tracked.

    Raises
    ------
    InvalidPeriods, InvalidInterestRate, InvalidLoanAmount
        When an input fails validation. Nothing is computed in that case.
    CalculationError
        When a numeric or date step is out of range. No partial schedule
        is returned.
    """
    validate_inputs(balance, apr, periods)

    periodic_interest = periodic_rate(apr)
    periodic_payment = calculate_periodic_payment_amount(balance, periodic_interest, periods)
    logger.debug(
        "Amortizing %.2f at %.4f%% over %d periods: payment %.2f",
        balance,
        apr,
        periods,
        periodic_payment,
    )

    schedule, end_date = calculate_schedule(balance, periodic_interest, periodic_payment, start_date)
    if len(schedule) != periods:
        logger.debug("Schedule has %d installments for %d requested periods", len(schedule), periods)

    total_payment = calculate_total_payment(periods, periodic_payment)
    return Amortization(
        balance=balance,
        periods=periods,
        periodic_interest=periodic_interest,
        periodic_payment=periodic_payment,
        schedule=tuple(schedule),
        total_payment=total_payment,
        total_interest=calculate_total_interest(total_payment, balance),
        start_date=start_date,
        end_date=end_date,
    )


def compute_amortization(config: LoanConfig) -> Amortization:
    """Compute the amortization described by a ``LoanConfig``."""
    return amortize(config.balance, config.apr, config.loan_term, config.start_date)


def summarize(amortization: Amortization) -> Dict[str, object]:
    """Return aggregate metrics for display and comparison.

    ``total_payment`` is the nominal figure stored on the amortization;
    ``scheduled_total`` is what the schedule actually pays, which is lower
    when the final installment is partial.
    """
    schedule = amortization.schedule
    scheduled_total = sum(p.amount_paid for p in schedule)
    first_date = schedule[0].date if schedule else None
    last_date = schedule[-1].date if schedule else None
    return {
        "loan_amount": amortization.balance,
        "apr": amortization.periodic_interest * 12 * 100,
        "periodic_interest": amortization.periodic_interest,
        "periods": amortization.periods,
        "periodic_payment": amortization.periodic_payment,
        "total_payment": amortization.total_payment,
        "total_interest": amortization.total_interest,
        "scheduled_total": scheduled_total,
        "payments_made": len(schedule),
        "first_payment_date": first_date.isoformat() if first_date else None,
        "last_payment_date": last_date.isoformat() if last_date else None,
        "end_date": amortization.end_date.isoformat() if amortization.end_date else None,
    }
