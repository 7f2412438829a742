"""Tests for the receipt-split command line."""

import json
from decimal import Decimal

import pytest
from typer.testing import CliRunner

from receipt_split.cli import app, format_money

runner = CliRunner()


@pytest.fixture
def write_session(tmp_path, monkeypatch):
    """Write a session document and return its path."""
    monkeypatch.chdir(tmp_path)

    def _write(**overrides):
        data = {
            "participants": ["Alice", "Bob"],
            "payer": "Alice",
            "entered_total": "20.00",
            "items": [{"name": "Pizza", "amount": "20.00", "assigned_to": ["Alice", "Bob"]}],
        }
        data.update(overrides)
        path = tmp_path / "session.json"
        path.write_text(json.dumps(data))
        return path

    return _write


class TestSplitCommand:
    """Test `receipt-split split`."""

    def test_prints_settlements(self, write_session):
        result = runner.invoke(app, ["split", str(write_session())])

        assert result.exit_code == 0
        assert "Settlements" in result.stdout
        assert "Bob" in result.stdout
        assert "$10.00" in result.stdout
        assert "Pizza: $20.00 ÷ 2 = $10.00" in result.stdout

    def test_json_output(self, write_session):
        result = runner.invoke(app, ["split", str(write_session()), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["settlements"][0]["from_participant"] == "Bob"
        assert data["settlements"][0]["to_participant"] == "Alice"
        assert data["settlements"][0]["amount"] == "10.00"
        assert data["person_totals"] == {"Alice": "10.00", "Bob": "10.00"}

    def test_warnings_are_shown(self, write_session):
        path = write_session(
            items=[
                {"name": "Pizza", "amount": "20.00", "assigned_to": ["Alice", "Bob"]},
                {"name": "Mystery", "amount": "1.00", "assigned_to": []},
            ]
        )

        result = runner.invoke(app, ["split", str(path)])

        assert result.exit_code == 0
        assert "Warnings" in result.stdout
        assert "not assigned" in result.stdout

    def test_nobody_owes(self, write_session):
        path = write_session(
            items=[{"name": "Steak", "amount": "20.00", "assigned_to": ["Alice"]}]
        )

        result = runner.invoke(app, ["split", str(path)])

        assert result.exit_code == 0
        assert "Nobody owes anything" in result.stdout

    def test_engine_error_exits_nonzero(self, write_session):
        result = runner.invoke(app, ["split", str(write_session(payer="Dave"))])

        assert result.exit_code == 1
        assert "Error" in result.stdout
        assert "not a participant" in result.stdout

    def test_invalid_document_exits_nonzero(self, write_session):
        result = runner.invoke(
            app, ["split", str(write_session(participants=["Alice", "Alice"]))]
        )

        assert result.exit_code == 1
        assert "Duplicate participant" in result.stdout

    def test_currency_symbol_applies_to_every_line(self, write_session, monkeypatch):
        monkeypatch.setenv("RECEIPT_SPLIT_CURRENCY_SYMBOL", "€")
        path = write_session(
            entered_total="21.00",
            items=[{"name": "Pizza", "amount": "20.00", "assigned_to": ["Alice", "Bob"]}],
        )

        result = runner.invoke(app, ["split", str(path)])

        assert result.exit_code == 0
        assert "Pizza: €20.00 ÷ 2 = €10.00" in result.stdout
        assert "€20.00" in result.stdout
        assert "$" not in result.stdout

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["split", str(tmp_path / "nope.json")])

        assert result.exit_code == 2


class TestTotalsCommand:
    """Test `receipt-split totals`."""

    def test_shows_reconciled_shares(self, write_session):
        path = write_session(
            participants=["Alice", "Bob", "Carol"],
            entered_total="10.00",
            items=[{"name": "Cake", "amount": "10.00", "assigned_to": ["All"]}],
        )

        result = runner.invoke(app, ["totals", str(path)])

        assert result.exit_code == 0
        assert "Alice (payer)" in result.stdout
        assert "$3.34" in result.stdout
        assert "$3.33" in result.stdout
        assert "Shares match the entered total" in result.stdout


class TestFormatMoney:
    """Test accounting-style money display."""

    def test_positive(self):
        assert format_money(Decimal("85.02"), use_color=False) == " $85.02 "

    def test_negative(self):
        assert format_money(Decimal("-85.02"), use_color=False) == "($85.02)"

    def test_thousands_separator(self):
        assert format_money(Decimal("1234.5"), symbol="€", use_color=False) == " €1,234.50 "
