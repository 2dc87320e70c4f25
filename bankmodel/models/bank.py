"""Bank data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from bankmodel.models.account import Account

logger = logging.getLogger(__name__)


@dataclass
class Bank:
    """A named bank owning an ordered collection of accounts."""

    name: str = ""
    accounts: list[Account] = field(default_factory=list)

    @property
    def total_balance(self) -> Decimal:
        """Sum of the balances of every account in the bank."""
        return sum((account.balance for account in self.accounts), Decimal("0"))

    def add_account(self, account: Account) -> None:
        """
        Register an account with this bank.

        The account is appended to the collection and its bank
        back-reference is pointed at this bank. Duplicates are not checked.

        Args:
            account: The Account to add
        """
        self.accounts.append(account)
        account.bank = self
        logger.debug("Added account of %s to %s", account.owner, self.name)

    def find_accounts(self, owner: str) -> list[Account]:
        """
        Find the accounts held by an owner.

        Args:
            owner: The owner name to match exactly

        Returns:
            Matching accounts in the order they were added
        """
        return [account for account in self.accounts if account.owner == owner]

    def transfer(self, source: Account, destination: Account, amount) -> None:
        """
        Move funds from one account to another.

        The source is debited first. If the debit fails the error
        propagates and the destination is never credited.

        Args:
            source: The account to debit
            destination: The account to credit
            amount: The amount to move

        Raises:
            InsufficientFundsError: If the source cannot cover the amount
        """
        source.debit(amount)
        destination.credit(amount)
        logger.info(
            "Transferred %s from %s to %s", amount, source.owner, destination.owner
        )
