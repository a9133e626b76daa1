"""Tests for report entities."""

from datetime import UTC, datetime
from decimal import Decimal

from autoledger.core.entities import (
    MONTH_NAMES,
    AnnualReport,
    ExpenseCategory,
    ReportItem,
    ReportPeriod,
    ReportResult,
)


def _item() -> ReportItem:
    return ReportItem(
        id="veh-1",
        date=datetime(2024, 6, 1, tzinfo=UTC),
        reg_number="ABC123",
        model="Toyota Corolla",
        purchase_price=Decimal("10000"),
        sold_price=Decimal("15000"),
        expenses={ExpenseCategory.REPAIR: Decimal("1500.56")},
        total_expenses=Decimal("1500.56"),
        total_cost=Decimal("11500.56"),
        profit=Decimal("3499.44"),
        month=6,
    )


class TestReportPeriod:
    def test_contains_is_inclusive(self):
        period = ReportPeriod(
            kind="annual",
            year=2024,
            start=datetime(2024, 1, 1, tzinfo=UTC),
            end=datetime(2024, 12, 31, 23, 59, 59, tzinfo=UTC),
        )
        assert period.contains(period.start)
        assert period.contains(period.end)
        assert not period.contains(datetime(2025, 1, 1, tzinfo=UTC))


class TestReportItem:
    def test_json_payload(self):
        data = _item().model_dump(mode="json")
        assert data["expenses"] == {"REPAIR": 1500.56}
        assert data["total_cost"] == 11500.56
        assert data["profit"] == 3499.44
        assert data["month"] == 6


class TestReportResult:
    def test_ok_has_no_message(self):
        result = ReportResult.ok(AnnualReport(items=[_item()]))
        assert result.success
        assert result.message is None
        assert result.error_code is None

    def test_fail_has_no_data(self):
        result = ReportResult.fail("Failed to generate report.")
        assert not result.success
        assert result.data is None
        assert result.error_code == "REPORT_FAILED"


def test_month_names():
    assert len(MONTH_NAMES) == 12
    assert MONTH_NAMES[0] == "January"
    assert MONTH_NAMES[-1] == "December"
