"""
Financial report endpoints.

Both endpoints always answer with the report envelope
``{success, data, message}``: 200 with data, 400 when the period is
invalid, 500 when the report could not be produced.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from autoledger.api.dependencies import get_report_assembler
from autoledger.application.dto.responses import ReportResponse
from autoledger.core.entities.report import ReportResult
from autoledger.core.services import ReportAssembler

router = APIRouter(prefix="/api/reports", tags=["reports"])

_ENVELOPE_RESPONSES = {
    400: {"model": ReportResponse, "description": "Invalid period"},
    500: {"model": ReportResponse, "description": "Report generation failed"},
}


def _parse_int(raw: str) -> int | None:
    # Path segments are text; only plain ASCII digits count as a number
    if raw.isascii() and raw.isdigit():
        return int(raw)
    return None


def _invalid(field: str) -> JSONResponse:
    result = ReportResult.fail(
        f"Validation error for '{field}': must be an integer", "VALIDATION_ERROR"
    )
    return _render(result)


def _render(result: ReportResult) -> JSONResponse:
    if result.success:
        status_code = status.HTTP_200_OK
    elif result.error_code == "VALIDATION_ERROR":
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    body = ReportResponse(success=result.success, data=result.data, message=result.message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@router.get(
    "/annual/{year}",
    response_model=ReportResponse,
    responses=_ENVELOPE_RESPONSES,
)
async def get_annual_report(
    year: str,
    assembler: ReportAssembler = Depends(get_report_assembler),
) -> JSONResponse:
    """Sold vehicles for a calendar year (UTC) with a twelve-month rollup."""
    parsed_year = _parse_int(year)
    if parsed_year is None:
        return _invalid("year")
    return _render(await assembler.get_annual_report(parsed_year))


@router.get(
    "/monthly/{year}/{month}",
    response_model=ReportResponse,
    responses=_ENVELOPE_RESPONSES,
)
async def get_monthly_report(
    year: str,
    month: str,
    assembler: ReportAssembler = Depends(get_report_assembler),
) -> JSONResponse:
    """Sold vehicles for one month in the reporting time zone, unrounded."""
    parsed_month = _parse_int(month)
    if parsed_month is None:
        return _invalid("month")
    parsed_year = _parse_int(year)
    if parsed_year is None:
        return _invalid("year")
    return _render(await assembler.get_monthly_report(parsed_month, parsed_year))
