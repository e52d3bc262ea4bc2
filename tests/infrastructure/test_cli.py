"""End-to-end tests for the click CLI against a temporary data directory."""

import json
from datetime import date, timedelta

import pytest
from click.testing import CliRunner

from order_builder.infrastructure.bootstrap import DATA_DIR_ENV
from order_builder.infrastructure.cli.main import cli

CATALOG = {
    "products": [
        {
            "id": "api-gateway",
            "name": "API Gateway Pro",
            "description": "Enterprise-grade API management",
            "plans": [
                {"id": "gateway-starter", "name": "Starter Plan", "price": "99.00"},
                {"id": "gateway-professional", "name": "Professional Plan", "price": "299.00"},
            ],
        }
    ],
    "add_ons": [
        {"id": "api-calls", "name": "Additional API Calls", "description": "", "price": "0.001"},
        {"id": "storage-gb", "name": "Extra Storage", "description": "", "price": "0.10"},
    ],
}


@pytest.fixture
def runner(tmp_path, monkeypatch):
    (tmp_path / "catalog.json").write_text(json.dumps(CATALOG), encoding="utf-8")
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    return CliRunner()


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


class TestCatalogCommands:

    def test_list(self, runner):
        output = _invoke(runner, "catalog", "list")
        assert "API Gateway Pro [api-gateway]" in output
        assert "$299.00/mo" in output
        assert "$0.001 per unit" in output


class TestOrderCommands:

    def test_commands_need_an_order(self, runner):
        result = runner.invoke(cli, ["order", "show"])
        assert result.exit_code != 0
        assert "No order in progress" in result.output

    def test_start(self, runner):
        output = _invoke(runner, "order", "start")
        assert "Step 1: Customer Information" in output

    def test_next_reports_missing_fields(self, runner):
        _invoke(runner, "order", "start")
        result = runner.invoke(cli, ["order", "next"])
        assert result.exit_code != 0
        assert "customer.name: Name is required" in result.output

    def test_malformed_price(self, runner):
        _invoke(runner, "order", "start")
        result = runner.invoke(
            cli, ["order", "plan", "--product", "api-gateway",
                  "--plan", "gateway-starter", "--price", "12abc"]
        )
        assert result.exit_code != 0

    def test_partial_address_rejected(self, runner):
        _invoke(runner, "order", "start")
        result = runner.invoke(cli, ["order", "customer", "--line1", "123 Main St"])
        assert result.exit_code != 0

    def test_full_wizard(self, runner, tmp_path):
        start = (date.today() + timedelta(days=30)).isoformat()

        _invoke(runner, "order", "start")
        _invoke(runner, "order", "customer", "--name", "Jane Smith")
        assert "Step 2" in _invoke(runner, "order", "next")

        output = _invoke(
            runner, "order", "plan", "--product", "api-gateway", "--plan", "gateway-professional"
        )
        assert "Professional Plan at $299.00" in output
        assert "Step 3" in _invoke(runner, "order", "next")

        _invoke(runner, "order", "contract", "--start", start, "--months", "12")
        assert "Step 4" in _invoke(runner, "order", "next")

        output = _invoke(
            runner, "order", "addon", "--id", "api-calls", "--include", "--quantity", "1000"
        )
        assert "$1.00" in output

        output = _invoke(runner, "order", "show")
        assert "$300.00" in output
        assert "$25.00" in output

        output = _invoke(runner, "order", "finalize")
        assert "Total: $300.00" in output
        assert not (tmp_path / "draft.json").exists()

        history = json.loads((tmp_path / "orders.json").read_text(encoding="utf-8"))
        assert len(history) == 1
        assert history[0]["breakdown"]["total"] == 300

        output = _invoke(runner, "history", "list")
        assert "Jane Smith: API Gateway Pro / Professional Plan" in output

        output = _invoke(runner, "history", "delete", "--id", history[0]["id"])
        assert "deleted" in output
        assert "No orders found." in _invoke(runner, "history", "list")

    def test_show_in_other_locale(self, runner):
        _invoke(runner, "order", "start")
        _invoke(runner, "order", "plan", "--product", "api-gateway", "--plan", "gateway-starter")
        output = _invoke(runner, "order", "show", "--currency", "EUR", "--locale", "de_DE")
        assert "99,00" in output

    def test_unknown_locale(self, runner):
        _invoke(runner, "order", "start")
        result = runner.invoke(cli, ["order", "show", "--locale", "xx_YY"])
        assert result.exit_code == 1
        assert "Unknown locale: 'xx_YY'" in result.output

    def test_corrupt_draft_means_no_order(self, runner, tmp_path):
        (tmp_path / "draft.json").write_text("{not json", encoding="utf-8")
        result = runner.invoke(cli, ["order", "show"])
        assert result.exit_code == 1
        assert "No order in progress" in result.output

    def test_goto(self, runner):
        _invoke(runner, "order", "start")
        assert "Step 3: Contract Details" in _invoke(runner, "order", "goto", "--step", "3")

        result = runner.invoke(cli, ["order", "goto", "--step", "7"])
        assert result.exit_code == 1
        assert "Step must be between 1 and 4" in result.output


class TestHistoryCommands:

    def test_delete_unknown(self, runner):
        result = runner.invoke(cli, ["history", "delete", "--id", "missing"])
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_empty(self, runner):
        assert "No orders found." in _invoke(runner, "history", "list")

    def test_undecodable_history(self, runner, tmp_path):
        (tmp_path / "orders.json").write_bytes(b"\xff\xfe[")
        assert "No orders found." in _invoke(runner, "history", "list")

    def test_history_with_non_record_entries(self, runner, tmp_path):
        (tmp_path / "orders.json").write_text("[1, 2]", encoding="utf-8")
        assert "No orders found." in _invoke(runner, "history", "list")
