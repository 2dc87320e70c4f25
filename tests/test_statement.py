"""Tests for statement rendering."""

from decimal import Decimal

from bankmodel.models.account import Account
from bankmodel.models.bank import Bank
from bankmodel.services.statement import render_statement


def test_render_statement():
    """Statement lists every account with exact balances and a total."""
    bank = Bank(name="Banco del estado")
    bank.add_account(Account("Ernesto", Decimal("2000")))
    bank.add_account(Account("Alejandro", Decimal("2000.8989")))

    lines = render_statement(bank).splitlines()

    assert lines[0] == "Banco del estado"
    assert lines[1].split() == ["Owner", "Balance"]
    assert lines[3].split() == ["Ernesto", "2000"]
    assert lines[4].split() == ["Alejandro", "2000.8989"]
    assert lines[-1].split() == ["Total", "4000.8989"]


def test_render_statement_keeps_decimal_digits():
    """Balances are not rounded through float."""
    bank = Bank(name="Banco")
    bank.add_account(Account("Ernesto", Decimal("0.10000000000000000001")))

    assert "0.10000000000000000001" in render_statement(bank)


def test_render_statement_empty_bank():
    """An empty bank renders the headers and a zero total."""
    lines = render_statement(Bank(name="Banco")).splitlines()

    assert lines[0] == "Banco"
    assert lines[1].split() == ["Owner", "Balance"]
    assert lines[-1].split() == ["Total", "0"]
