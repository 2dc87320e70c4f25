"""Accounts, banks and transfers between them."""

from bankmodel.models import Account, Bank, BankError, InsufficientFundsError

__all__ = ["Account", "Bank", "BankError", "InsufficientFundsError"]
