"""Tests for the autoledger command line."""

import json
import sys

import pytest
import structlog

from autoledger import cli
from autoledger.config import get_settings, reset_settings


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch):
    # Leave the process-wide logging setup alone, but keep logs off stdout
    monkeypatch.setattr(
        cli,
        "configure_logging",
        lambda stream=None: structlog.configure(
            logger_factory=structlog.PrintLoggerFactory(sys.stderr)
        ),
    )
    yield
    structlog.reset_defaults()


def test_migrate_creates_database(capsys):
    assert cli.main(["migrate"]) == 0

    assert get_settings().storage.db_path.exists()
    assert "v001_initial: ok" in capsys.readouterr().out


def test_migrate_twice_is_up_to_date(capsys):
    cli.main(["migrate"])
    capsys.readouterr()

    assert cli.main(["migrate"]) == 0
    assert "Database is up to date." in capsys.readouterr().out


def test_migrate_status(capsys):
    assert cli.main(["migrate", "--status"]) == 0

    status = json.loads(capsys.readouterr().out)
    assert status["exists"] is False
    assert "001" in status["pending_migrations"]


def test_annual_report(capsys):
    assert cli.main(["report", "annual", "2024"]) == 0

    envelope = json.loads(capsys.readouterr().out)
    assert envelope["success"] is True
    assert envelope["data"]["items"] == []
    assert len(envelope["data"]["monthly_breakdown"]) == 12
    assert "error_code" not in envelope


def test_invalid_month_exits_nonzero(capsys):
    assert cli.main(["report", "monthly", "2024", "13"]) == 1

    envelope = json.loads(capsys.readouterr().out)
    assert envelope["success"] is False
    assert envelope["data"] is None


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_invalid_configuration_exits_2(monkeypatch, capsys):
    monkeypatch.setenv("REPORT_TIMEZONE", "Mars/Olympus_Mons")
    reset_settings()

    assert cli.main(["report", "annual", "2024"]) == 2
    assert "Unknown time zone" in capsys.readouterr().err
