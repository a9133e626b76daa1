"""
AutoLedger command line.

Usage:
    autoledger serve [--host HOST] [--port PORT] [--reload]
    autoledger migrate [--status]
    autoledger report annual YEAR
    autoledger report monthly YEAR MONTH
"""

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence

from autoledger.config import configure_logging, get_logger, get_settings
from autoledger.core.entities.report import ReportResult
from autoledger.core.exceptions import ConfigurationError
from autoledger.core.services import ReportAssembler
from autoledger.infrastructure.storage.sqlite import open_store
from autoledger.infrastructure.storage.sqlite.migrations import (
    get_migration_status,
    initialize_database,
)

logger = get_logger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "autoledger.api.main:create_app",
        factory=True,
        host=args.host or settings.api.host,
        port=args.port or settings.api.port,
        reload=args.reload or settings.api.debug,
    )
    return 0


async def _migrate(show_status: bool) -> int:
    db_path = get_settings().storage.db_path
    if show_status:
        status = await get_migration_status(db_path)
        print(json.dumps(status, indent=2))
        return 0

    results = await initialize_database(db_path)
    for result in results:
        state = "ok" if result.success else f"FAILED: {result.error}"
        print(f"v{result.version}_{result.name}: {state} ({result.execution_time_ms} ms)")
    if not results:
        print("Database is up to date.")
    return 0 if all(r.success for r in results) else 1


def cmd_migrate(args: argparse.Namespace) -> int:
    return asyncio.run(_migrate(args.status))


async def _report(kind: str, year: int, month: int | None) -> ReportResult:
    settings = get_settings()
    store = await open_store(
        settings.storage.db_path,
        pool_size=settings.storage.pool_size,
        busy_timeout=settings.storage.busy_timeout,
    )
    try:
        assembler = ReportAssembler(store.vehicles, tz=settings.report.tzinfo())
        if kind == "annual":
            return await assembler.get_annual_report(year)
        return await assembler.get_monthly_report(month, year)
    finally:
        await store.close()


def cmd_report(args: argparse.Namespace) -> int:
    result = asyncio.run(_report(args.kind, args.year, getattr(args, "month", None)))
    envelope = result.model_dump(mode="json", exclude={"error_code"})
    print(json.dumps(envelope, indent=2))
    return 0 if result.success else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autoledger",
        description="AutoLedger management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = sub.add_parser("serve", help="Start the HTTP API")
    p_serve.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    p_serve.add_argument("--port", type=int, default=None, help="Bind port (default: API_PORT)")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    # migrate
    p_migrate = sub.add_parser("migrate", help="Apply pending schema migrations")
    p_migrate.add_argument(
        "--status", action="store_true", help="Show applied and pending migrations only"
    )
    p_migrate.set_defaults(func=cmd_migrate)

    # report
    p_report = sub.add_parser("report", help="Print a financial report as JSON")
    kinds = p_report.add_subparsers(dest="kind", required=True)

    p_annual = kinds.add_parser("annual", help="Calendar-year report with monthly rollup")
    p_annual.add_argument("year", type=int)
    p_annual.set_defaults(func=cmd_report)

    p_monthly = kinds.add_parser("monthly", help="Single-month report")
    p_monthly.add_argument("year", type=int)
    p_monthly.add_argument("month", type=int)
    p_monthly.set_defaults(func=cmd_report)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        get_settings()
    except ConfigurationError as e:
        print(e.message, file=sys.stderr)
        return 2
    configure_logging(stream=sys.stderr)
    logger.debug("cli_command", command=args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
