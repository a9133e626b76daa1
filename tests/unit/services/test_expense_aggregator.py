"""Tests for expense aggregation."""

from decimal import Decimal

from autoledger.core.entities import ExpenseCategory
from autoledger.core.services import aggregate_expenses, sum_expenses_unrounded


class TestAggregateExpenses:
    def test_empty(self):
        breakdown = aggregate_expenses([])
        assert breakdown.by_category == {}
        assert breakdown.total == Decimal("0.00")

    def test_amounts_rounded_to_cents(self, make_expense):
        breakdown = aggregate_expenses([make_expense(amount="1500.555")])
        assert breakdown.by_category == {ExpenseCategory.REPAIR: Decimal("1500.56")}
        assert breakdown.total == Decimal("1500.56")

    def test_categories_reconcile_with_total(self, make_expense):
        amounts = ["0.105", "0.1", "0.2", "33.335", "19.994", "0.005", "7.777"]
        categories = list(ExpenseCategory)
        expenses = [
            make_expense(amount=amount, category=categories[i % len(categories)])
            for i, amount in enumerate(amounts)
        ]

        breakdown = aggregate_expenses(expenses)

        assert sum(breakdown.by_category.values()) == breakdown.total
        for value in [*breakdown.by_category.values(), breakdown.total]:
            assert value == value.quantize(Decimal("0.01"))

    def test_float_drift_does_not_appear(self, make_expense):
        expenses = [make_expense(amount="0.1") for _ in range(10)]
        assert aggregate_expenses(expenses).total == Decimal("1.00")

    def test_zero_categories_omitted(self, make_expense):
        expenses = [
            make_expense(amount="0.004", category=ExpenseCategory.TRAVEL),
            make_expense(amount="25", category=ExpenseCategory.OTHER),
        ]
        breakdown = aggregate_expenses(expenses)
        assert list(breakdown.by_category) == [ExpenseCategory.OTHER]

    def test_category_order_is_fixed(self, make_expense):
        expenses = [
            make_expense(amount="1", category=ExpenseCategory.OTHER),
            make_expense(amount="1", category=ExpenseCategory.TRAVEL),
            make_expense(amount="1", category=ExpenseCategory.REPAIR),
        ]
        breakdown = aggregate_expenses(expenses)
        assert list(breakdown.by_category) == [
            ExpenseCategory.REPAIR,
            ExpenseCategory.TRAVEL,
            ExpenseCategory.OTHER,
        ]


class TestSumExpensesUnrounded:
    def test_keeps_sub_cent_precision(self, make_expense):
        expenses = [make_expense(amount="1500.555"), make_expense(amount="0.001")]
        breakdown = sum_expenses_unrounded(expenses)
        assert breakdown.total == Decimal("1500.556")
        assert breakdown.by_category[ExpenseCategory.REPAIR] == Decimal("1500.556")

    def test_empty(self):
        breakdown = sum_expenses_unrounded([])
        assert breakdown.by_category == {}
        assert breakdown.total == 0
