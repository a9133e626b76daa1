"""
Report period selection.

Annual windows are anchored to UTC while monthly windows are anchored to the
reporting time zone (the server's local zone unless configured). The two
anchors differ on purpose; callers comparing annual and monthly totals must
not assume the twelve monthly windows tile the annual one.
"""

from datetime import UTC, datetime, timedelta, tzinfo

from autoledger.core.entities.report import ReportPeriod
from autoledger.core.exceptions import ValidationError


def validate_year(year: object) -> int:
    """Reject anything that is not a four-digit integer year."""
    if not isinstance(year, int) or isinstance(year, bool):
        raise ValidationError("year", "must be an integer", year)
    if not 1000 <= year <= 9999:
        raise ValidationError("year", "must be a four-digit year", year)
    return year


def validate_month(month: object) -> int:
    """Reject anything that is not an integer month 1-12."""
    if not isinstance(month, int) or isinstance(month, bool):
        raise ValidationError("month", "must be an integer", month)
    if not 1 <= month <= 12:
        raise ValidationError("month", "must be between 1 and 12", month)
    return month


def _localize(naive: datetime, tz: tzinfo | None) -> datetime:
    if tz is None:
        return naive.astimezone()  # server local zone
    return naive.replace(tzinfo=tz)


def annual_period(year: int) -> ReportPeriod:
    """January 1 00:00:00 UTC through December 31 23:59:59 UTC."""
    return ReportPeriod(
        kind="annual",
        year=year,
        start=datetime(year, 1, 1, tzinfo=UTC),
        end=datetime(year, 12, 31, 23, 59, 59, tzinfo=UTC),
    )


def monthly_period(month: int, year: int, tz: tzinfo | None = None) -> ReportPeriod:
    """
    First instant of ``month`` through one millisecond before the next month.

    Boundaries are local midnights in ``tz``, returned normalized to UTC.
    December ends on its own last millisecond so that year 9999 stays
    representable. Raises ValidationError when the window cannot be
    expressed in UTC.
    """
    try:
        start = _localize(datetime(year, month, 1), tz).astimezone(UTC)
        if month == 12:
            last = datetime(year, 12, 31, 23, 59, 59, 999000)
            end = _localize(last, tz).astimezone(UTC)
        else:
            following = _localize(datetime(year, month + 1, 1), tz)
            end = following.astimezone(UTC) - timedelta(milliseconds=1)
    except (OverflowError, ValueError) as e:
        raise ValidationError("year", "period is outside the supported date range", year) from e

    return ReportPeriod(kind="monthly", year=year, month=month, start=start, end=end)


def sale_month(sold_date: datetime | None, tz: tzinfo | None = None) -> int:
    """Calendar month (1-12) of a sale in the reporting zone, 0 if unknown."""
    if sold_date is None:
        return 0
    if tz is None:
        return sold_date.astimezone().month
    return sold_date.astimezone(tz).month
