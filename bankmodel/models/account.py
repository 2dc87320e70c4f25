"""Account data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from bankmodel.models.exceptions import InsufficientFundsError

if TYPE_CHECKING:
    from bankmodel.models.bank import Bank

logger = logging.getLogger(__name__)


def to_decimal(value) -> Decimal:
    """Coerce a number or numeric string to Decimal through its text form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(eq=False)
class Account:
    """Represents a bank account held by a single owner."""

    owner: str
    balance: Decimal | None
    bank: Bank | None = field(default=None, repr=False)

    def __post_init__(self):
        if self.balance is not None:
            self.balance = to_decimal(self.balance)

    @property
    def plain_balance(self) -> str:
        """Balance as plain decimal text, without exponent notation."""
        return format(self.balance, "f")

    def debit(self, amount) -> None:
        """
        Subtract amount from the balance.

        Args:
            amount: The amount to take out of the account

        Raises:
            InsufficientFundsError: If the resulting balance would be negative.
                The balance is left untouched in that case.
        """
        new_balance = self.balance - to_decimal(amount)
        if new_balance < 0:
            logger.warning(
                "Rejected debit of %s from %s: balance %s", amount, self.owner, self.balance
            )
            raise InsufficientFundsError()
        self.balance = new_balance
        logger.debug("Debited %s from %s, balance %s", amount, self.owner, self.balance)

    def credit(self, amount) -> None:
        """Add amount to the balance. The sign of amount is not checked."""
        self.balance = self.balance + to_decimal(amount)
        logger.debug("Credited %s to %s, balance %s", amount, self.owner, self.balance)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Account):
            return False
        if self.owner is None or self.balance is None:
            return False
        return self.owner == other.owner and self.balance == other.balance

    # mutable and compared by value
    __hash__ = None
