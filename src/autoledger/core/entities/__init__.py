"""Core domain entities."""

from autoledger.core.entities.dealer import DealerProfile
from autoledger.core.entities.money import (
    CENT,
    ZERO,
    Money,
    round_currency,
    to_decimal,
)
from autoledger.core.entities.report import (
    MONTH_NAMES,
    AnnualReport,
    ExpenseBreakdown,
    MonthlyBreakdown,
    MonthlyReport,
    ReportItem,
    ReportPeriod,
    ReportResult,
    VehicleSummary,
)
from autoledger.core.entities.vehicle import (
    Expense,
    ExpenseCategory,
    Vehicle,
    VehicleStatus,
    resolve_is_public,
)

__all__ = [
    # Money
    "CENT",
    "ZERO",
    "Money",
    "round_currency",
    "to_decimal",
    # Vehicle
    "Vehicle",
    "VehicleStatus",
    "Expense",
    "ExpenseCategory",
    "resolve_is_public",
    # Dealer
    "DealerProfile",
    # Report
    "MONTH_NAMES",
    "ReportPeriod",
    "ExpenseBreakdown",
    "ReportItem",
    "MonthlyBreakdown",
    "AnnualReport",
    "MonthlyReport",
    "ReportResult",
    "VehicleSummary",
]
