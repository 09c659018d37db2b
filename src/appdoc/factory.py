"""Wiring for the concrete collaborators shipped with appdoc."""

from __future__ import annotations

import logging

from appdoc.core.config import AppSettings
from appdoc.generator import PdfApplicationDocumentGenerator
from appdoc.protocols import IApplicationStore
from appdoc.rendering.jinja_renderer import JinjaViewRenderer
from appdoc.stores import FileApplicationStore, MemoryApplicationStore
from appdoc.templates import PackageTemplatePathProvider

log = logging.getLogger(__name__)


def create_store(settings: AppSettings) -> IApplicationStore:
    """Build the record store selected by ``APPDOC_STORE_BACKEND``."""
    if settings.store.backend == "memory":
        return MemoryApplicationStore()
    return FileApplicationStore(settings.store.store_path)


def create_generator(
    settings: AppSettings | None = None,
    *,
    store: IApplicationStore | None = None,
) -> PdfApplicationDocumentGenerator:
    """Create a generator backed by Jinja2 templates and the reportlab converter.

    Args:
        settings: Application settings; read from the environment when omitted.
        store: Overrides the store selected by ``settings.store``.
    """
    from appdoc.rendering.pdf_converter import ReportLabPdfConverter

    settings = settings or AppSettings()
    store = store if store is not None else create_store(settings)
    log.debug("Creating generator with %s", type(store).__name__)
    return PdfApplicationDocumentGenerator(
        store=store,
        path_provider=PackageTemplatePathProvider(),
        renderer=JinjaViewRenderer(auto_reload=settings.template.auto_reload),
        pdf_converter=ReportLabPdfConverter(settings.pdf),
        config=settings.document,
    )
