"""File-based application store — one JSON document per record."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from uuid import UUID

from appdoc.exceptions import DataIntegrityError, RecordFormatError
from appdoc.models import Application, parse_application

log = logging.getLogger(__name__)


class FileApplicationStore:
    """Reads ``<application id>.json`` files from a local directory.

    The file name is the identifier, so a directory can hold at most one
    record per id.  Records are re-read on every lookup.
    """

    def __init__(self, base_path: Path) -> None:
        self._base = base_path

    def _key_path(self, application_id: UUID) -> Path:
        return self._base / f"{application_id}.json"

    def get(self, application_id: UUID) -> Application | None:
        path = self._key_path(application_id)
        if not path.is_file():
            log.debug(f"No record file for {application_id} (path: {path})")
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RecordFormatError(f"Invalid JSON in {path}: {exc}", source=str(path)) from exc

        application = parse_application(data, source=str(path))
        if application.id != application_id:
            raise DataIntegrityError(
                f"Record in {path} has id {application.id}, expected {application_id}"
            )
        return application

    def list_ids(self) -> list[UUID]:
        """Return the ids of all records whose file name is a valid UUID."""
        ids: list[UUID] = []
        for path in self._base.glob("*.json"):
            try:
                ids.append(UUID(path.stem))
            except ValueError:
                log.debug(f"Skipping non-record file {path.name}")
        return sorted(ids, key=str)
