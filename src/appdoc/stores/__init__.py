"""Read-only application record stores."""

from __future__ import annotations

from appdoc.stores.file_store import FileApplicationStore
from appdoc.stores.memory_store import MemoryApplicationStore

__all__ = ["FileApplicationStore", "MemoryApplicationStore"]
