"""Derived financial report entities. None of these are persisted."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from autoledger.core.entities.money import ZERO, Money
from autoledger.core.entities.vehicle import ExpenseCategory

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class ReportPeriod(BaseModel):
    """Inclusive instant range a report covers."""

    kind: Literal["annual", "monthly"]
    year: int
    month: int | None = None
    start: datetime
    end: datetime

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


class ExpenseBreakdown(BaseModel):
    """Per-category sums and grand total for one vehicle's expenses."""

    by_category: dict[ExpenseCategory, Money] = Field(default_factory=dict)
    total: Money = ZERO


class ReportItem(BaseModel):
    """One sold vehicle's financial line for a reporting period."""

    id: str
    date: datetime | None
    reg_number: str
    model: str  # "make model" display label
    purchase_price: Money
    sold_price: Money
    expenses: dict[ExpenseCategory, Money] = Field(default_factory=dict)
    total_expenses: Money
    total_cost: Money
    profit: Money
    month: int = 0  # 1-12, 0 when the sold date is missing


class MonthlyBreakdown(BaseModel):
    """One calendar month's rollup within an annual report."""

    month: int
    month_name: str
    vehicles_sold: int = 0
    revenue: Money = ZERO
    costs: Money = ZERO
    profit: Money = ZERO


class VehicleSummary(BaseModel):
    """Cost position of a single vehicle, sold or not."""

    vehicle_id: str
    expenses: ExpenseBreakdown
    break_even_cost: Money
    profit_margin: Money
    target_price: Money
    profit: Money | None = None  # realised, only once sold


class AnnualReport(BaseModel):
    items: list[ReportItem] = Field(default_factory=list)
    monthly_breakdown: list[MonthlyBreakdown] = Field(default_factory=list)


class MonthlyReport(BaseModel):
    items: list[ReportItem] = Field(default_factory=list)


class ReportResult(BaseModel):
    """
    Outcome of a report request.

    Either ``success`` with ``data`` or a failure with a single
    human-readable ``message``; never both.
    """

    success: bool
    data: AnnualReport | MonthlyReport | None = None
    message: str | None = None
    error_code: str | None = None

    @classmethod
    def ok(cls, data: AnnualReport | MonthlyReport) -> "ReportResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str, error_code: str = "REPORT_FAILED") -> "ReportResult":
        return cls(success=False, message=message, error_code=error_code)
