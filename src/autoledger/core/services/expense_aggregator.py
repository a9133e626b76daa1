"""
Expense aggregation.

Amounts are brought to whole cents before they are added, and every running
sum is rounded again after each addition. Category sums and the grand total
are built from the same rounded amounts, so they always reconcile exactly.
"""

from collections.abc import Iterable
from decimal import Decimal

from autoledger.core.entities.money import ZERO, round_currency
from autoledger.core.entities.report import ExpenseBreakdown
from autoledger.core.entities.vehicle import Expense, ExpenseCategory


def _ordered(sums: dict[ExpenseCategory, Decimal]) -> dict[ExpenseCategory, Decimal]:
    # Fixed category order keeps payloads stable whatever order rows arrive in.
    return {c: sums[c] for c in ExpenseCategory if sums.get(c, ZERO) != ZERO}


def aggregate_expenses(expenses: Iterable[Expense]) -> ExpenseBreakdown:
    """Sum expenses per category and overall, rounding to cents at every step."""
    sums: dict[ExpenseCategory, Decimal] = {}
    total = ZERO

    for expense in expenses:
        amount = round_currency(expense.amount)
        sums[expense.category] = round_currency(sums.get(expense.category, ZERO) + amount)
        total = round_currency(total + amount)

    return ExpenseBreakdown(by_category=_ordered(sums), total=total)


def sum_expenses_unrounded(expenses: Iterable[Expense]) -> ExpenseBreakdown:
    """Plain sums of the stored amounts, used by the legacy monthly report."""
    sums: dict[ExpenseCategory, Decimal] = {}
    total = Decimal(0)

    for expense in expenses:
        sums[expense.category] = sums.get(expense.category, Decimal(0)) + expense.amount
        total += expense.amount

    return ExpenseBreakdown(by_category=_ordered(sums), total=total)
