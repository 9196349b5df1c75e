import json

import pytest
from click.testing import CliRunner

from budget_verifier.cli import main
from budget_verifier.reports.console import SUCCESS_MESSAGE


@pytest.fixture
def runner():
    return CliRunner()


def test_reconcile_reports_missing(runner, bank_csv, budget_csv, filter_json):
    result = runner.invoke(
        main, ["reconcile", str(bank_csv), str(budget_csv), "-f", str(filter_json)]
    )

    assert result.exit_code == 0, result.output
    assert "There are 1 missing transactions" in result.output
    assert "COFFEE SHOP" in result.output
    assert "PAYROLL DEPOSIT" not in result.output


def test_reconcile_without_filters_reports_payroll(runner, tmp_path, bank_csv, budget_csv):
    empty = tmp_path / "empty.json"
    empty.write_text("[]")

    result = runner.invoke(main, ["reconcile", str(bank_csv), str(budget_csv), "-f", str(empty)])

    assert result.exit_code == 0, result.output
    assert "There are 2 missing transactions" in result.output
    assert "PAYROLL DEPOSIT" in result.output


def test_reconcile_success_message(runner, tmp_path, filter_json):
    bank = tmp_path / "bank.csv"
    bank.write_text("Date,Description,Amount\nsub,header\n01/10/2024,SHOP,-5.00\n")
    budget = tmp_path / "budget.csv"
    budget.write_text("Date,Account,Description,Details,Amount\n01/09/2024,Checking,Shop,,-5.00\n")

    result = runner.invoke(main, ["reconcile", str(bank), str(budget), "-f", str(filter_json)])

    assert result.exit_code == 0, result.output
    assert SUCCESS_MESSAGE in result.output


def test_date_range_override(runner, tmp_path, filter_json):
    bank = tmp_path / "bank.csv"
    bank.write_text("Date,Description,Amount\nsub,header\n01/20/2024,SHOP,-5.00\n")
    budget = tmp_path / "budget.csv"
    budget.write_text("Date,Account,Description,Details,Amount\n01/10/2024,Checking,Shop,,-5.00\n")

    narrow = runner.invoke(main, ["reconcile", str(bank), str(budget), "-f", str(filter_json)])
    wide = runner.invoke(
        main,
        ["reconcile", str(bank), str(budget), "-f", str(filter_json), "--date-range", "11"],
    )

    assert "There are 1 missing transactions" in narrow.output
    assert SUCCESS_MESSAGE in wide.output


def test_filters_path_from_config(runner, tmp_path, bank_csv, budget_csv, filter_json):
    config = tmp_path / "config.yaml"
    config.write_text(f"filters:\n  path: {json.dumps(str(filter_json))}\n")

    result = runner.invoke(
        main, ["reconcile", str(bank_csv), str(budget_csv), "-c", str(config)]
    )

    assert result.exit_code == 0, result.output
    assert "PAYROLL DEPOSIT" not in result.output


def test_missing_filter_file_is_fatal(runner, tmp_path, bank_csv, budget_csv):
    result = runner.invoke(
        main, ["reconcile", str(bank_csv), str(budget_csv), "-f", str(tmp_path / "none.json")]
    )

    assert result.exit_code == 1
    assert "Error" in result.output
    assert "missing transactions" not in result.output


def test_bank_without_header_is_fatal(runner, tmp_path, budget_csv, filter_json):
    bank = tmp_path / "bank.csv"
    bank.write_text("01/10/2024,SHOP,-5.00\n")

    result = runner.invoke(main, ["reconcile", str(bank), str(budget_csv), "-f", str(filter_json)])

    assert result.exit_code == 1
    assert "failed to find start of useful records" in result.output


def test_missing_input_file_is_rejected(runner, tmp_path, budget_csv):
    result = runner.invoke(main, ["reconcile", str(tmp_path / "nope.csv"), str(budget_csv)])

    assert result.exit_code != 0


def test_parse_bank(runner, bank_csv):
    result = runner.invoke(main, ["parse-bank", str(bank_csv)])

    assert result.exit_code == 0, result.output
    assert "GROCERY STORE #12" in result.output
    assert "Total transactions: 4" in result.output


def test_parse_budget(runner, budget_csv):
    result = runner.invoke(main, ["parse-budget", str(budget_csv)])

    assert result.exit_code == 0, result.output
    assert "weekly shop" in result.output
    assert "Total transactions: 3" in result.output


def test_init_config(runner, tmp_path):
    output = tmp_path / "config.yaml"

    result = runner.invoke(main, ["init-config", "-o", str(output)])

    assert result.exit_code == 0
    assert output.exists()
    assert "date_match_range_days: 7" in output.read_text()
