"""Core services - the financial aggregation and reporting engine."""

from autoledger.core.services.expense_aggregator import (
    aggregate_expenses,
    sum_expenses_unrounded,
)
from autoledger.core.services.monthly_rollup import monthly_rollup
from autoledger.core.services.periods import (
    annual_period,
    monthly_period,
    sale_month,
    validate_month,
    validate_year,
)
from autoledger.core.services.report_assembler import ReportAssembler
from autoledger.core.services.report_items import (
    build_legacy_report_item,
    build_report_item,
)
from autoledger.core.services.vehicle_summary import summarize_vehicle

__all__ = [
    "annual_period",
    "monthly_period",
    "sale_month",
    "validate_month",
    "validate_year",
    "aggregate_expenses",
    "sum_expenses_unrounded",
    "build_report_item",
    "build_legacy_report_item",
    "monthly_rollup",
    "ReportAssembler",
    "summarize_vehicle",
]
