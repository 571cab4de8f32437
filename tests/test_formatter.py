"""Tests for the text renderings of an amortization."""

from datetime import date

from amort_calc.data_models import Payment
from amort_calc.engine import amortize, summarize
from amort_calc.formatter import (
    format_amortization,
    format_payment,
    print_comparison,
    print_schedule,
    print_summary,
)


def test_format_payment():
    payment = Payment(
        installment_number=1,
        beginning_balance=1_000.0,
        ending_balance=910.0,
        installment_amount=100.0,
        interest=10.0,
        principal=90.0,
        remaining_balance=910.0,
        date=date(2024, 1, 1),
    )
    assert format_payment(payment) == (
        "Date: 2024-01-01, Interest: 10.00, Principal: 90.00, Remaining Balance: 910.00, "
        "Beginning Balance: 1000.00 Ending Balance: 910.00"
    )


def test_format_payment_without_date():
    payment = Payment(1, 50.0, 0.0, 100.0, 0.5, 50.0, 0.0)
    assert format_payment(payment).startswith("Date: N/A, Interest: 0.50")


def test_format_amortization(one_year_loan):
    lines = format_amortization(one_year_loan).splitlines()
    assert lines[:8] == [
        "Amortization:",
        "Loan Amount: 10000.00",
        "Periodic Interest Rate: 0.0042",
        "Total Periods: 12",
        "Periodic Payment: 856.07",
        "Total Payment: 10272.84",
        "Total Interest: 272.84",
        "Amortization Schedule:",
    ]
    assert len(lines) == 8 + 12
    assert lines[8] == (
        "Payment 1: Date: 2024-01-01, Interest: 41.67, Principal: 814.40, "
        "Remaining Balance: 9185.60, Beginning Balance: 10000.00 Ending Balance: 9185.60"
    )
    assert lines[-1].startswith("Payment 12: Date: 2024-12-01,")
    assert lines[-1].endswith("Ending Balance: 0.00")


def test_print_summary(capsys, one_year_loan):
    print_summary(summarize(one_year_loan))
    out = capsys.readouterr().out
    assert "Periodic payment   : 856.07" in out
    assert "Total payment      : 10272.84" in out
    assert "Scheduled total" in out
    assert "End date           : 2025-01-01" in out


def test_print_summary_without_dates(capsys, mortgage):
    print_summary(summarize(mortgage))
    out = capsys.readouterr().out
    assert "Periodic payment   : 898.09" in out
    assert "First payment date" not in out


def test_print_schedule(capsys, one_year_loan):
    print_schedule(one_year_loan.schedule[:2])
    rows = capsys.readouterr().out.splitlines()
    assert rows[0].split("\t")[0] == "No"
    assert len(rows) == 3
    assert rows[1].split("\t")[:4] == ["1", "2024-01-01", "10000.00", "856.07"]


def test_print_comparison(capsys):
    short = summarize(amortize(10_000.0, 5.0, 12))
    long = summarize(amortize(10_000.0, 5.0, 24))
    print_comparison(short, long)
    out = capsys.readouterr().out
    assert "periodic_payment" in out
    assert "payments_made" in out
    payments_row = [line for line in out.splitlines() if line.startswith("payments_made")][0]
    assert payments_row.split()[1:] == ["12.00", "24.00", "12.00"]
