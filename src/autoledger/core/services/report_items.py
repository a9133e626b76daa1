"""Turns one sold vehicle plus its expenses into a report line."""

from datetime import tzinfo
from decimal import Decimal

from autoledger.core.entities.money import ZERO, round_currency
from autoledger.core.entities.report import ReportItem
from autoledger.core.entities.vehicle import Vehicle
from autoledger.core.services.expense_aggregator import (
    aggregate_expenses,
    sum_expenses_unrounded,
)
from autoledger.core.services.periods import sale_month


def build_report_item(vehicle: Vehicle, tz: tzinfo | None = None) -> ReportItem:
    """
    Build a cent-rounded report line.

    The builder does not look at ``vehicle.status``; filtering is the
    caller's job. A missing sold price counts as zero and a missing sold
    date yields month 0, so a damaged SOLD row still produces a line.
    """
    breakdown = aggregate_expenses(vehicle.expenses)
    sold_price = vehicle.sold_price if vehicle.sold_price is not None else ZERO
    total_cost = round_currency(vehicle.purchase_price + breakdown.total)
    profit = round_currency(sold_price - total_cost)

    return ReportItem(
        id=vehicle.id,
        date=vehicle.sold_date,
        reg_number=vehicle.reg_number,
        model=vehicle.label,
        purchase_price=vehicle.purchase_price,
        sold_price=sold_price,
        expenses=breakdown.by_category,
        total_expenses=breakdown.total,
        total_cost=total_cost,
        profit=profit,
        month=sale_month(vehicle.sold_date, tz),
    )


def build_legacy_report_item(vehicle: Vehicle, tz: tzinfo | None = None) -> ReportItem:
    """Same line as build_report_item, without any rounding."""
    breakdown = sum_expenses_unrounded(vehicle.expenses)
    sold_price = vehicle.sold_price if vehicle.sold_price is not None else Decimal(0)
    total_cost = vehicle.purchase_price + breakdown.total

    return ReportItem(
        id=vehicle.id,
        date=vehicle.sold_date,
        reg_number=vehicle.reg_number,
        model=vehicle.label,
        purchase_price=vehicle.purchase_price,
        sold_price=sold_price,
        expenses=breakdown.by_category,
        total_expenses=breakdown.total,
        total_cost=total_cost,
        profit=sold_price - total_cost,
        month=sale_month(vehicle.sold_date, tz),
    )
