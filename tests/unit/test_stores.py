"""Tests for the memory and file application stores."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from appdoc.exceptions import DataIntegrityError, RecordFormatError
from appdoc.models import Application, ApplicationState
from appdoc.stores import FileApplicationStore, MemoryApplicationStore
from tests.fakes.sample_records import (
    ACTIVATED_ID,
    MISSING_ID,
    PENDING_ID,
    make_application,
    make_products,
)


def _write(directory: Path, application: Application, name: str | None = None) -> Path:
    path = directory / (name or f"{application.id}.json")
    path.write_text(application.model_dump_json(), encoding="utf-8")
    return path


class TestMemoryApplicationStore:
    def test_hit_and_miss(self, pending_application: Application) -> None:
        store = MemoryApplicationStore([pending_application])
        assert store.get(PENDING_ID) == pending_application
        assert store.get(MISSING_ID) is None
        assert len(store) == 1

    def test_empty_by_default(self) -> None:
        assert len(MemoryApplicationStore()) == 0

    def test_duplicate_ids_rejected(self, pending_application: Application) -> None:
        duplicate = make_application(ApplicationState.CLOSED, application_id=PENDING_ID)
        with pytest.raises(DataIntegrityError, match=str(PENDING_ID)):
            MemoryApplicationStore([pending_application, duplicate])


class TestFileApplicationStore:
    def test_reads_record(self, tmp_path: Path, activated_application: Application) -> None:
        _write(tmp_path, activated_application)
        loaded = FileApplicationStore(tmp_path).get(ACTIVATED_ID)
        assert loaded == activated_application

    def test_preserves_decimal_amounts(self, tmp_path: Path) -> None:
        application = make_application(
            ApplicationState.ACTIVATED, application_id=ACTIVATED_ID, products=make_products()
        )
        _write(tmp_path, application)
        loaded = FileApplicationStore(tmp_path).get(ACTIVATED_ID)
        assert loaded is not None
        assert loaded.products == application.products

    def test_missing_record_returns_none(self, tmp_path: Path) -> None:
        assert FileApplicationStore(tmp_path).get(MISSING_ID) is None

    def test_missing_directory_returns_none(self, tmp_path: Path) -> None:
        assert FileApplicationStore(tmp_path / "nope").get(MISSING_ID) is None

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / f"{PENDING_ID}.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(RecordFormatError) as exc_info:
            FileApplicationStore(tmp_path).get(PENDING_ID)
        assert exc_info.value.source.endswith(f"{PENDING_ID}.json")

    def test_invalid_record(self, tmp_path: Path) -> None:
        (tmp_path / f"{PENDING_ID}.json").write_text(
            json.dumps({"id": str(PENDING_ID), "state": "pending"}), encoding="utf-8"
        )
        with pytest.raises(RecordFormatError):
            FileApplicationStore(tmp_path).get(PENDING_ID)

    def test_id_mismatch(self, tmp_path: Path, activated_application: Application) -> None:
        _write(tmp_path, activated_application, name=f"{PENDING_ID}.json")
        with pytest.raises(DataIntegrityError, match="expected"):
            FileApplicationStore(tmp_path).get(PENDING_ID)

    def test_list_ids(
        self, tmp_path: Path, pending_application: Application, activated_application: Application
    ) -> None:
        _write(tmp_path, activated_application)
        _write(tmp_path, pending_application)
        (tmp_path / "notes.json").write_text("{}", encoding="utf-8")
        (tmp_path / "readme.txt").write_text("x", encoding="utf-8")

        assert FileApplicationStore(tmp_path).list_ids() == [PENDING_ID, ACTIVATED_ID]

    def test_unrecognised_state_loads(self, tmp_path: Path, pending_application: Application) -> None:
        record = json.loads(pending_application.model_dump_json())
        record["state"] = "withdrawn"
        (tmp_path / f"{PENDING_ID}.json").write_text(json.dumps(record), encoding="utf-8")

        loaded = FileApplicationStore(tmp_path).get(PENDING_ID)

        assert loaded is not None
        assert loaded.state is ApplicationState.UNKNOWN
