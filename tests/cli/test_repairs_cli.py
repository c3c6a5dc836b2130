from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pytest

import src.cli.repairs as repairs_cli
from src.domain.exceptions import (
    DuplicateResourceError,
    RequestValidationError,
    ResourceNotFoundError,
)
from src.logging_config import LOG_NAME


@pytest.fixture(autouse=True)
def cli_logger(monkeypatch: pytest.MonkeyPatch) -> logging.Logger:
    # Keep CLI runs away from the real project logger and its file handler
    logger = logging.getLogger(f"{LOG_NAME}.test")
    monkeypatch.setattr(repairs_cli, "get_logger", lambda *a, **k: logger)
    return logger


@pytest.fixture
def db(tmp_path: Path) -> List[str]:
    return ["--store", "sqlite", "--db", str(tmp_path / "repairs.sqlite3")]


def _add(db: List[str], phone: str, name: str = "Kamau") -> int:
    return repairs_cli.main(
        [
            *db,
            "add",
            "--name",
            name,
            "--title",
            "Nikia 3300",
            "--brand",
            "Nokia",
            "--issue",
            "Charging port",
            "--phone",
            phone,
        ]
    )


def test_list_empty(db: List[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert repairs_cli.main([*db, "list"]) == 0
    assert "No repairs found." in capsys.readouterr().out


def test_add_then_list_and_get(db: List[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert _add(db, "800565222") == 0
    assert "Repair added." in capsys.readouterr().out

    assert repairs_cli.main([*db, "list"]) == 0
    out = capsys.readouterr().out
    assert "[id=1] Kamau | Nokia Nikia 3300 | Charging port | phone=800565222" in out

    assert repairs_cli.main([*db, "get", "1"]) == 0
    assert "Kamau" in capsys.readouterr().out


def test_add_duplicate_phone_exits_conflict(
    db: List[str], capsys: pytest.CaptureFixture[str]
) -> None:
    assert _add(db, "800565222") == 0
    assert _add(db, "800565222", name="Zumba") == repairs_cli.EXIT_CONFLICT
    assert "Phone Number already in use" in capsys.readouterr().err


def test_update_and_delete(db: List[str], capsys: pytest.CaptureFixture[str]) -> None:
    _add(db, "800565222")
    assert repairs_cli.main([*db, "update", "1", "--name", "Kamah"]) == 0
    assert "Repair updated." in capsys.readouterr().out

    repairs_cli.main([*db, "get", "1"])
    assert "Kamah" in capsys.readouterr().out

    assert repairs_cli.main([*db, "delete", "1"]) == 0
    assert "Repair deleted." in capsys.readouterr().out
    assert repairs_cli.main([*db, "get", "1"]) == repairs_cli.EXIT_NOT_FOUND
    assert "Repair with id [1] is not found" in capsys.readouterr().err


def test_update_without_changes_exits_invalid(
    db: List[str], capsys: pytest.CaptureFixture[str]
) -> None:
    _add(db, "800565222")
    assert repairs_cli.main([*db, "update", "1"]) == repairs_cli.EXIT_INVALID
    assert "No data changes found" in capsys.readouterr().err


def test_blank_field_exits_invalid(db: List[str], capsys: pytest.CaptureFixture[str]) -> None:
    rc = repairs_cli.main(
        [*db, "add", "--name", " ", "--title", "t", "--brand", "b", "--issue", "i", "--phone", "1"]
    )
    assert rc == repairs_cli.EXIT_INVALID
    assert "Error:" in capsys.readouterr().err


class _RaisingService:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def delete_by_id(self, repair_id: int) -> None:
        raise self.exc


@pytest.mark.parametrize(
    "exc, code",
    [
        (ResourceNotFoundError(3), repairs_cli.EXIT_NOT_FOUND),
        (DuplicateResourceError(), repairs_cli.EXIT_CONFLICT),
        (RequestValidationError(), repairs_cli.EXIT_INVALID),
    ],
)
def test_error_kinds_map_to_exit_codes(
    monkeypatch: pytest.MonkeyPatch, exc: Exception, code: int
) -> None:
    monkeypatch.setattr(repairs_cli, "RepairService", lambda repo: _RaisingService(exc))
    assert repairs_cli.main(["--store", "memory", "delete", "3"]) == code


def test_memory_store_starts_with_demo_repairs(capsys: pytest.CaptureFixture[str]) -> None:
    assert repairs_cli.main(["--store", "memory", "get", "1"]) == 0
    assert "Mucomba" in capsys.readouterr().out

    assert repairs_cli.main(["--store", "memory", "list"]) == 0
    out = capsys.readouterr().out
    assert "Mucomba" in out and "Ruger" in out


def test_memory_store_rejects_demo_phone_number(capsys: pytest.CaptureFixture[str]) -> None:
    rc = repairs_cli.main(["--store", "memory", "update", "2", "--phone", "722000000"])
    assert rc == repairs_cli.EXIT_CONFLICT
    assert "Phone Number already in use" in capsys.readouterr().err


def test_oversized_phone_number_exits_invalid(
    db: List[str], capsys: pytest.CaptureFixture[str]
) -> None:
    assert _add(db, "100000000000000000000") == repairs_cli.EXIT_INVALID
    assert "phone_number is too large" in capsys.readouterr().err

    assert repairs_cli.main([*db, "list"]) == 0
    assert "No repairs found." in capsys.readouterr().out


def test_rejected_command_is_logged(
    cli_logger: logging.Logger, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger=cli_logger.name)
    assert repairs_cli.main(["--store", "memory", "get", "9"]) == repairs_cli.EXIT_NOT_FOUND
    (record,) = caplog.records
    assert record.getMessage() == "Repair command rejected"
    assert record.error == "ResourceNotFoundError"
    # The project logger itself is left unconfigured by CLI runs
    assert logging.getLogger(LOG_NAME).handlers == []
