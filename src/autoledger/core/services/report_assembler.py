"""
Financial report assembly.

Runs period selection, the sold-vehicle query, item building and (for annual
reports) the monthly rollup. This is the one place where errors turn into a
structured ``ReportResult``: callers never see an exception from here, and a
failed report never carries partial data.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import tzinfo

from autoledger.config import get_logger
from autoledger.core.entities.report import (
    AnnualReport,
    MonthlyReport,
    ReportItem,
    ReportPeriod,
    ReportResult,
)
from autoledger.core.entities.vehicle import Vehicle, VehicleStatus
from autoledger.core.exceptions import ReportError, ValidationError
from autoledger.core.interfaces.vehicle_store import IVehicleStore
from autoledger.core.services.monthly_rollup import monthly_rollup
from autoledger.core.services.periods import (
    annual_period,
    monthly_period,
    validate_month,
    validate_year,
)
from autoledger.core.services.report_items import (
    build_legacy_report_item,
    build_report_item,
)

logger = get_logger(__name__)


class ReportAssembler:
    """
    Produces annual and monthly tax reports from the vehicle store.

    Stateless between calls: every request reads a fresh snapshot through
    ``list_sold_between`` and computes from it alone.
    """

    def __init__(self, vehicle_store: IVehicleStore, tz: tzinfo | None = None) -> None:
        self._store = vehicle_store
        self._tz = tz

    async def get_annual_report(self, year: int) -> ReportResult:
        """Cent-rounded report for a calendar year with a 12-month rollup."""
        try:
            validate_year(year)
            period = annual_period(year)
        except ValidationError as e:
            logger.info("annual_report_rejected", field=e.field, reason=e.message)
            return ReportResult.fail(e.message, e.code)

        try:
            items = await self._build_items(period, build_report_item)
            breakdown = monthly_rollup(items, year)
        except Exception:
            logger.error("annual_report_failed", year=year, exc_info=True)
            return _failed()

        logger.info("annual_report_generated", year=year, items=len(items))
        return ReportResult.ok(AnnualReport(items=items, monthly_breakdown=breakdown))

    async def get_monthly_report(self, month: int, year: int) -> ReportResult:
        """
        Legacy monthly report.

        Kept for existing consumers: lines are built from unrounded sums,
        unlike the annual report.
        """
        try:
            validate_month(month)
            validate_year(year)
            period = monthly_period(month, year, self._tz)
        except ValidationError as e:
            logger.info("monthly_report_rejected", field=e.field, reason=e.message)
            return ReportResult.fail(e.message, e.code)

        try:
            items = await self._build_items(period, build_legacy_report_item)
        except Exception:
            logger.error("monthly_report_failed", year=year, month=month, exc_info=True)
            return _failed()

        logger.info("monthly_report_generated", year=year, month=month, items=len(items))
        return ReportResult.ok(MonthlyReport(items=items))

    async def _build_items(
        self,
        period: ReportPeriod,
        build: Callable[[Vehicle, tzinfo | None], ReportItem],
    ) -> list[ReportItem]:
        vehicles = await self._store.list_sold_between(period.start, period.end)

        items: list[ReportItem] = []
        for vehicle in vehicles:
            if vehicle.status != VehicleStatus.SOLD:
                logger.warning("report_skipped_unsold_vehicle", vehicle_id=vehicle.id)
                continue
            if vehicle.sold_price is None or vehicle.sold_date is None:
                logger.warning("report_incomplete_sale_record", vehicle_id=vehicle.id)
            items.append(build(vehicle, self._tz))
        return items


def _failed() -> ReportResult:
    error = ReportError()
    return ReportResult.fail(error.message, error.code)
