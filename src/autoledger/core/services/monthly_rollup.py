"""Calendar-month rollup of annual report items."""

from collections.abc import Sequence

from autoledger.config import get_logger
from autoledger.core.entities.money import ZERO, round_currency
from autoledger.core.entities.report import MONTH_NAMES, MonthlyBreakdown, ReportItem

logger = get_logger(__name__)


def monthly_rollup(items: Sequence[ReportItem], year: int) -> list[MonthlyBreakdown]:
    """
    Roll items up into exactly twelve months, January first.

    Items are grouped on their precomputed ``month`` so the grouping follows
    whatever zone produced it. Month-0 items fall outside every bucket.
    Months without sales are zero-filled rather than omitted.
    """
    breakdown: list[MonthlyBreakdown] = []

    for number, name in enumerate(MONTH_NAMES, start=1):
        month_items = [item for item in items if item.month == number]
        breakdown.append(
            MonthlyBreakdown(
                month=number,
                month_name=name,
                vehicles_sold=len(month_items),
                revenue=round_currency(sum((i.sold_price for i in month_items), ZERO)),
                costs=round_currency(sum((i.total_cost for i in month_items), ZERO)),
                profit=round_currency(sum((i.profit for i in month_items), ZERO)),
            )
        )

    undated = sum(1 for item in items if item.month == 0)
    if undated:
        logger.warning("rollup_items_without_month", year=year, count=undated)

    return breakdown
