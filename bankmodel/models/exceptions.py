"""Custom exceptions for the bank account model."""

INSUFFICIENT_FUNDS_MESSAGE = "Dinero insuficiente"


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a debit would leave an account with a negative balance."""

    def __init__(self, message: str = INSUFFICIENT_FUNDS_MESSAGE):
        super().__init__(message)
