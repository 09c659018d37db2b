"""In-memory application store, dict-backed."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from uuid import UUID

from appdoc.exceptions import DataIntegrityError
from appdoc.models import Application

log = logging.getLogger(__name__)


class MemoryApplicationStore:
    """Holds records in a plain dict keyed by application id."""

    def __init__(self, applications: Iterable[Application] = ()) -> None:
        self._store: dict[UUID, Application] = {}
        for application in applications:
            if application.id in self._store:
                raise DataIntegrityError(f"Duplicate application id: {application.id}")
            self._store[application.id] = application

    def get(self, application_id: UUID) -> Application | None:
        application = self._store.get(application_id)
        log.debug(f"Memory store lookup {application_id}: {'hit' if application else 'miss'}")
        return application

    def __len__(self) -> int:
        return len(self._store)
