"""Plain-text statements of a bank's accounts."""

from tabulate import tabulate

from bankmodel.models.bank import Bank

HEADER = ["Owner", "Balance"]


def render_statement(bank: Bank) -> str:
    """
    Render the accounts of a bank as a right-aligned table.

    Balances are passed as plain decimal text with number parsing
    disabled, so tabulate never rounds them through float.

    Args:
        bank: The Bank to render

    Returns:
        The bank name on the first line followed by the table
    """
    rows = [[account.owner, account.plain_balance] for account in bank.accounts]
    rows.append(["Total", format(bank.total_balance, "f")])
    content = tabulate(
        [HEADER] + rows,
        headers="firstrow",
        stralign="right",
        disable_numparse=True,
    )
    return f"{bank.name}\n{content}"
