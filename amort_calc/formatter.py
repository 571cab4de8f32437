"""Output helpers for the amortization calculator.

This module renders amortizations as text: the plain multi-line report
(loan figures followed by one line per installment), a tab-separated
schedule table, a summary block and a side-by-side comparison of two loans.
Only built-in string formatting is used; money is shown with two decimals
and the periodic rate with four.
"""

from __future__ import annotations

from typing import Dict, Iterable

from .data_models import Amortization, Payment


def format_payment(payment: Payment) -> str:
    """Render one installment on a single line."""
    due = payment.date.isoformat() if payment.date else "N/A"
    return (
        f"Date: {due}, Interest: {payment.interest:.2f}, Principal: {payment.principal:.2f}, "
        f"Remaining Balance: {payment.remaining_balance:.2f}, "
        f"Beginning Balance: {payment.beginning_balance:.2f} "
        f"Ending Balance: {payment.ending_balance:.2f}"
    )


def format_amortization(amortization: Amortization) -> str:
    """Render the loan figures and every installment as a multi-line report."""
    lines = [
        "Amortization:",
        f"Loan Amount: {amortization.balance:.2f}",
        f"Periodic Interest Rate: {amortization.periodic_interest:.4f}",
        f"Total Periods: {amortization.periods}",
        f"Periodic Payment: {amortization.periodic_payment:.2f}",
        f"Total Payment: {amortization.total_payment:.2f}",
        f"Total Interest: {amortization.total_interest:.2f}",
        "Amortization Schedule:",
    ]
    for i, payment in enumerate(amortization.schedule, start=1):
        lines.append(f"Payment {i}: {format_payment(payment)}")
    return "\n".join(lines) + "\n"


def print_amortization(amortization: Amortization) -> None:
    print(format_amortization(amortization), end="")


def print_summary(summary: Dict[str, object]) -> None:
    """Print a summary of loan metrics in a human-readable format."""
    print("Summary")
    print("-" * 72)
    print(f"Loan amount        : {summary['loan_amount']:.2f}")
    print(f"APR                : {summary['apr']:.2f}%")
    print(f"Periodic rate      : {summary['periodic_interest']:.4f}")
    print(f"Periods            : {summary['periods']}")
    print(f"Periodic payment   : {summary['periodic_payment']:.2f}")
    print(f"Total payment      : {summary['total_payment']:.2f}")
    print(f"Total interest     : {summary['total_interest']:.2f}")
    # Only shown when the partial last installment makes the nominal total inexact.
    if abs(summary['scheduled_total'] - summary['total_payment']) >= 0.005:
        print(f"Scheduled total    : {summary['scheduled_total']:.2f}")
    print(f"Payments made      : {summary['payments_made']}")
    if summary.get('first_payment_date'):
        print(f"First payment date : {summary['first_payment_date']}")
        print(f"Last payment date  : {summary['last_payment_date']}")
        print(f"End date           : {summary['end_date']}")
    print("-" * 72)


def print_schedule(schedule: Iterable[Payment]) -> None:
    """Print the amortization schedule as a simple tab-separated table."""
    headers = [
        "No",
        "Date",
        "BeginBal",
        "Payment",
        "Principal",
        "Interest",
        "EndBal",
        "Remaining",
    ]
    print("\t".join(headers))
    for payment in schedule:
        row = [
            str(payment.installment_number),
            payment.date.isoformat() if payment.date else "-",
            f"{payment.beginning_balance:.2f}",
            f"{payment.amount_paid:.2f}",
            f"{payment.principal:.2f}",
            f"{payment.interest:.2f}",
            f"{payment.ending_balance:.2f}",
            f"{payment.remaining_balance:.2f}",
        ]
        print("\t".join(row))


def print_comparison(s1: Dict[str, object], s2: Dict[str, object]) -> None:
    """Print a comparison of two loan summaries side by side.

    The difference column is scenario2 - scenario1, so a negative value means
    the second scenario is cheaper or shorter.
    """
    print("Comparison")
    print("=" * 72)
    keys = [
        "periodic_payment",
        "total_payment",
        "total_interest",
        "payments_made",
    ]
    print(f"{'Metric':20s} {'Scenario1':>15s} {'Scenario2':>15s} {'Difference':>15s}")
    for key in keys:
        v1 = s1[key]
        v2 = s2[key]
        print(f"{key:20s} {v1:15.2f} {v2:15.2f} {v2 - v1:15.2f}")
    print("=" * 72)
