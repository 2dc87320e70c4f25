"""Demo entry point: build a bank, transfer between two accounts, print a statement."""
import logging
from decimal import Decimal

from dotenv import load_dotenv

from bankmodel.models import Account, Bank, BankError
from bankmodel.services.statement import render_statement
from bankmodel.settings import Settings


def configure_logging(settings: Settings) -> logging.Logger:
    logger = logging.getLogger('bankmodel')
    logger.setLevel(settings.log_level)
    handler = logging.FileHandler(filename=settings.log_path, encoding='utf-8', mode='w')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    logger.addHandler(handler)
    return logger


def build_bank(name: str) -> Bank:
    bank = Bank(name=name)
    bank.add_account(Account("Ernesto", Decimal("2500")))
    bank.add_account(Account("Alejandro", Decimal("1500.8989")))
    return bank


def main(amount: str = "500") -> int:
    load_dotenv()
    settings = Settings.load()
    logger = configure_logging(settings)

    bank = build_bank(settings.bank_name)
    source, destination = bank.accounts
    try:
        bank.transfer(source, destination, Decimal(amount))
    except BankError as err:
        logger.error("Transfer of %s failed: %s", amount, err)
        print(err)
        return 1
    print(render_statement(bank))
    return 0
