"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from appdoc.exceptions import ConfigurationError

if TYPE_CHECKING:
    from appdoc.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ConfigurationError on fatal misconfig."""
    _check_document(settings)
    _check_store(settings)


def _check_document(settings: AppSettings) -> None:
    """Every document links to support, so the address cannot be blank."""
    if not settings.document.support_email.strip():
        raise ConfigurationError(
            "APPDOC_DOCUMENT_SUPPORT_EMAIL must not be empty. "
            "Set it via environment variable."
        )
    if not settings.document.signature.strip():
        log.warning("APPDOC_DOCUMENT_SIGNATURE is empty; documents will be unsigned.")


def _check_store(settings: AppSettings) -> None:
    """Reject a file store pointing at a directory that does not exist."""
    if settings.store.backend == "file" and not settings.store.store_path.is_dir():
        raise ConfigurationError(
            f"APPDOC_STORE_STORE_PATH={settings.store.store_path} is not a directory. "
            f"Create it or set APPDOC_STORE_BACKEND=memory."
        )
