"""Command-line interface for the amortization calculator.

This module uses the ``click`` library to implement a multi-command
interface. Users can print a full amortization schedule, view only the
summary figures or compare two loan scenarios side by side.
"""

from __future__ import annotations

import logging
import shlex
from typing import Any, Dict, Optional

import click

from .data_models import Amortization, LoanConfig
from .engine import compute_amortization, summarize
from .errors import AmortizationError
from .formatter import print_amortization, print_comparison, print_schedule, print_summary
from .utils import parse_amount, parse_date

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_config_from_options(
    balance: str,
    rate: float,
    term: int,
    start_date: Optional[str] = None,
) -> LoanConfig:
    try:
        balance_value = parse_amount(balance)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--balance'")
    start_dt = None
    if start_date:
        try:
            start_dt = parse_date(start_date)
        except ValueError as exc:
            raise click.BadParameter(str(exc), param_hint="'--start-date'")
    return LoanConfig(balance=balance_value, loan_term=term, apr=rate, start_date=start_dt)


def run_config(config: LoanConfig) -> Amortization:
    """Amortize ``config``, turning engine errors into CLI errors."""
    try:
        return compute_amortization(config)
    except AmortizationError as exc:
        logger.debug("Rejected loan %r: %s", config, exc)
        raise click.ClickException(str(exc))


def parse_scenario_opts(opts: str) -> Dict[str, Any]:
    """Map a quoted option string onto ``build_config_from_options`` arguments."""
    tokens = shlex.split(opts)
    params: Dict[str, Any] = {
        "balance": None,
        "rate": None,
        "term": None,
        "start_date": None,
    }
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if i + 1 >= len(tokens):
            raise click.BadParameter(f"Option {token} in scenario needs a value")
        value = tokens[i + 1]
        try:
            if token in ("-b", "--balance"):
                params["balance"] = value
            elif token in ("-r", "--rate"):
                params["rate"] = float(value)
            elif token in ("-t", "--term"):
                params["term"] = int(value)
            elif token in ("-s", "--start-date"):
                params["start_date"] = value
            else:
                raise click.BadParameter(f"Unknown option in scenario: {token}")
        except ValueError:
            raise click.BadParameter(f"Invalid value for {token} in scenario: {value}")
        i += 2
    for required in ("balance", "rate", "term"):
        if params[required] is None:
            raise click.BadParameter(f"Scenario missing required option {required}")
    return params


def loan_options(func):
    """Attach the options shared by every single-loan command."""
    func = click.option("--start-date", "-s", "start_date", help="First payment date (YYYY-MM-DD or YYYY-MM)")(func)
    func = click.option("--term", "-t", "term", required=True, type=int, help="Number of monthly periods")(func)
    func = click.option("--rate", "-r", "rate", required=True, type=float, help="Annual interest rate (percent)")(func)
    func = click.option("--balance", "-b", "balance", required=True, help="Loan amount, e.g. 200000 or 200k")(func)
    return func


@click.group()
@click.option(
    "--log-level",
    "log_level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="AMORT_CALC_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """A command-line calculator for fixed-rate loan amortization."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@loan_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "text"]),
    default="table",
    help="Summary plus table, or the plain multi-line report",
)
@click.option(
    "--max-rows",
    "max_rows",
    type=click.IntRange(min=1),
    default=120,
    envvar="AMORT_CALC_MAX_ROWS",
    show_default=True,
    help="Rows of the table to print",
)
def schedule(
    balance: str,
    rate: float,
    term: int,
    start_date: Optional[str],
    output_format: str,
    max_rows: int,
) -> None:
    """Compute and print the full amortization schedule."""
    config = build_config_from_options(balance, rate, term, start_date)
    amortization = run_config(config)
    if output_format == "text":
        print_amortization(amortization)
        return
    print_summary(summarize(amortization))
    # Limit schedule length printed to avoid flooding the terminal
    payments = amortization.schedule
    if len(payments) > max_rows:
        click.echo(f"Schedule has {len(payments)} rows; showing first {max_rows} rows.")
        payments = payments[:max_rows]
    print_schedule(payments)


@cli.command()
@loan_options
def summary(balance: str, rate: float, term: int, start_date: Optional[str]) -> None:
    """Compute and print only the summary metrics for a loan."""
    config = build_config_from_options(balance, rate, term, start_date)
    print_summary(summarize(run_config(config)))


@cli.command()
@click.option("--scenario1", "scenario1", required=True, help="First scenario options quoted string")
@click.option("--scenario2", "scenario2", required=True, help="Second scenario options quoted string")
def compare(scenario1: str, scenario2: str) -> None:
    """Compare two loan scenarios.

    Scenarios are provided as quoted option strings, for example:

        amort-calc compare --scenario1 "-b 200k -r 3.5 -t 360" --scenario2 "-b 200k -r 3.2 -t 300"
    """
    config1 = build_config_from_options(**parse_scenario_opts(scenario1))
    config2 = build_config_from_options(**parse_scenario_opts(scenario2))
    summary1 = summarize(run_config(config1))
    summary2 = summarize(run_config(config2))
    print_comparison(summary1, summary2)


if __name__ == "__main__":
    cli()
