"""Tests for the click command-line interface."""

import logging

import click
import pytest
from click.testing import CliRunner

from amort_calc.main import build_config_from_options, cli, parse_scenario_opts


@pytest.fixture
def runner():
    return CliRunner()


class TestSummaryCommand:
    def test_prints_payment(self, runner):
        result = runner.invoke(cli, ["summary", "-b", "200k", "-r", "3.5", "-t", "360"])
        assert result.exit_code == 0, result.output
        assert "898.09" in result.output

    def test_invalid_rate(self, runner):
        result = runner.invoke(cli, ["summary", "-b", "10000", "--rate=-5", "-t", "12"])
        assert result.exit_code == 1
        assert "Interest rate must be greater than 0" in result.output

    def test_invalid_periods(self, runner):
        result = runner.invoke(cli, ["summary", "-b", "10000", "-r", "5", "-t", "0"])
        assert result.exit_code == 1
        assert "Number of periods must be greater than 0" in result.output

    def test_bad_start_date(self, runner):
        result = runner.invoke(cli, ["summary", "-b", "10000", "-r", "5", "-t", "12", "-s", "soon"])
        assert result.exit_code == 2
        assert "Invalid date string" in result.output


class TestScheduleCommand:
    def test_table(self, runner):
        result = runner.invoke(cli, ["schedule", "-b", "10000", "-r", "5", "-t", "12", "-s", "2024-01"])
        assert result.exit_code == 0, result.output
        assert "Summary" in result.output
        assert "2024-12-01" in result.output

    def test_text_report(self, runner):
        result = runner.invoke(
            cli,
            ["schedule", "-b", "10000", "-r", "5", "-t", "12", "-s", "2024-01-01", "--format", "text"],
        )
        assert result.exit_code == 0, result.output
        assert result.output.startswith("Amortization:\nLoan Amount: 10000.00\n")
        assert "Payment 12: Date: 2024-12-01" in result.output

    def test_max_rows(self, runner):
        result = runner.invoke(cli, ["schedule", "-b", "10000", "-r", "5", "-t", "12", "--max-rows", "5"])
        assert result.exit_code == 0, result.output
        assert "Schedule has 12 rows; showing first 5 rows." in result.output

    def test_max_rows_from_env(self, runner):
        result = runner.invoke(
            cli,
            ["schedule", "-b", "10000", "-r", "5", "-t", "12"],
            env={"AMORT_CALC_MAX_ROWS": "3"},
        )
        assert result.exit_code == 0, result.output
        assert "showing first 3 rows" in result.output

    def test_debug_logging(self, runner, caplog):
        with caplog.at_level(logging.DEBUG, logger="amort_calc.engine"):
            result = runner.invoke(cli, ["--log-level", "debug", "summary", "-b", "10000", "-r", "5", "-t", "12"])
        assert result.exit_code == 0, result.output
        messages = [r.getMessage() for r in caplog.records if r.name == "amort_calc.engine"]
        assert any(m.startswith("Amortizing 10000.00 at 5.0000% over 12 periods") for m in messages)


class TestCompareCommand:
    def test_compare(self, runner):
        result = runner.invoke(
            cli,
            ["compare", "--scenario1", "-b 200k -r 3.5 -t 360", "--scenario2", "-b 200k -r 3.2 -t 300"],
        )
        assert result.exit_code == 0, result.output
        assert "Comparison" in result.output
        assert "total_interest" in result.output

    def test_missing_option(self, runner):
        result = runner.invoke(cli, ["compare", "--scenario1", "-b 200k -r 3.5", "--scenario2", "-b 1k -r 3 -t 12"])
        assert result.exit_code == 2
        assert "missing required option term" in result.output


class TestOptionParsing:
    def test_build_config(self):
        config = build_config_from_options("1.5m", 4.25, 240, "2025-06")
        assert config.balance == 1_500_000.0
        assert config.apr == 4.25
        assert config.loan_term == 240
        assert config.start_date.isoformat() == "2025-06-01"

    def test_build_config_without_date(self):
        assert build_config_from_options("1000", 5.0, 12).start_date is None

    def test_parse_scenario(self):
        params = parse_scenario_opts("--balance 250k -r 6 -t 180 --start-date 2024-02-01")
        assert params == {"balance": "250k", "rate": 6.0, "term": 180, "start_date": "2024-02-01"}

    @pytest.mark.parametrize("opts", ["-x 1", "-b", "-r six -b 1 -t 2"])
    def test_parse_scenario_rejects(self, opts):
        with pytest.raises(click.BadParameter):
            parse_scenario_opts(opts)
