"""Data models for the bank account model."""

from .account import Account
from .bank import Bank
from .exceptions import (
    INSUFFICIENT_FUNDS_MESSAGE,
    BankError,
    InsufficientFundsError,
)

__all__ = [
    "Account",
    "Bank",
    "INSUFFICIENT_FUNDS_MESSAGE",
    "BankError",
    "InsufficientFundsError",
]
