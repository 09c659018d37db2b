"""Collaborator protocols — the contracts the document generator depends on.

The generator never imports a concrete store, renderer or converter; any
object satisfying these protocols can be injected.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable
from uuid import UUID

from appdoc.models import Application, PdfOptions


@runtime_checkable
class IApplicationStore(Protocol):
    """Read-only lookup of application records."""

    def get(self, application_id: UUID) -> Application | None:
        """Return the single record for *application_id*, or ``None`` if absent."""
        ...


@runtime_checkable
class ITemplatePathProvider(Protocol):
    """Maps a logical document-kind name to a template path."""

    def get(self, name: str) -> str:
        """Return the template path for *name*. Raises KeyError if unknown."""
        ...


@runtime_checkable
class IViewRenderer(Protocol):
    """Binds a view model into a template and returns markup."""

    def render_from_path(self, path: str, view_model: Any) -> str:
        """Render the template at *path* (base URI + template path) with *view_model*."""
        ...


@runtime_checkable
class IPdfConverter(Protocol):
    """Converts rendered HTML markup into PDF bytes."""

    def generate_from_html(self, html: str, options: PdfOptions) -> bytes:
        """Apply *options* (page numbers, header) to *html* and return the PDF."""
        ...


@runtime_checkable
class IApplicationDocumentGenerator(Protocol):
    """Public entry point: one application id in, one document out."""

    def generate(self, application_id: UUID | str, base_uri: str) -> bytes | None:
        """Return the document bytes, or ``None`` when no document applies."""
        ...


__all__ = [
    "IApplicationStore",
    "ITemplatePathProvider",
    "IViewRenderer",
    "IPdfConverter",
    "IApplicationDocumentGenerator",
]
