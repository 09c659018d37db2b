"""PDF application document generator — the public entry point.

Usage::

    generator = PdfApplicationDocumentGenerator(
        store=FileApplicationStore(Path("./applications")),
        path_provider=PackageTemplatePathProvider(),
        renderer=JinjaViewRenderer(),
        pdf_converter=ReportLabPdfConverter(),
        config=DocumentConfig(),
    )
    pdf = generator.generate(application_id, bundled_templates_uri())

``generate`` returns ``None`` (and logs a warning) when the record does
not exist or its state has no document.  Errors raised by the
collaborators propagate unchanged.
"""

from __future__ import annotations

import logging
from uuid import UUID

from appdoc.builders import ApplicationViewBuilder, build_state_table
from appdoc.core.config import DocumentConfig
from appdoc.exceptions import MalformedInputError, MissingDependencyError
from appdoc.models import (
    PDF_HEADER,
    ApplicationState,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
)
from appdoc.protocols import IApplicationStore, IPdfConverter, ITemplatePathProvider, IViewRenderer

log = logging.getLogger(__name__)

PDF_OPTIONS = PdfOptions(
    page_numbers=PageNumbers.NUMERIC,
    header=HeaderOptions(repeat=HeaderRepeat.FIRST_PAGE_ONLY, html=PDF_HEADER),
)


def normalize_base_uri(base_uri: str) -> str:
    """Strip exactly one trailing ``/``; leave any other URI untouched."""
    if base_uri.endswith("/"):
        return base_uri[: len(base_uri) - 1]
    return base_uri


def parse_application_id(application_id: UUID | str) -> UUID:
    """Coerce *application_id* to a ``UUID``. Raises MalformedInputError."""
    if isinstance(application_id, UUID):
        return application_id
    if not isinstance(application_id, str):
        raise MalformedInputError(
            f"Application id must be a UUID or string, got {type(application_id).__name__}"
        )
    try:
        return UUID(application_id)
    except ValueError as exc:
        raise MalformedInputError(f"Malformed application id: {application_id!r}") from exc


class PdfApplicationDocumentGenerator:
    """Renders a PDF for one application, choosing the template by state.

    Every collaborator is required.  Passing ``None`` for any of them
    raises :class:`MissingDependencyError` immediately.
    """

    def __init__(
        self,
        store: IApplicationStore,
        path_provider: ITemplatePathProvider,
        renderer: IViewRenderer,
        pdf_converter: IPdfConverter,
        config: DocumentConfig,
        logger: logging.Logger = log,
    ) -> None:
        dependencies = {
            "store": store,
            "path_provider": path_provider,
            "renderer": renderer,
            "pdf_converter": pdf_converter,
            "config": config,
            "logger": logger,
        }
        for name, dependency in dependencies.items():
            if dependency is None:
                raise MissingDependencyError(name)

        self._store = store
        self._pdf_converter = pdf_converter
        self._logger = logger
        self._builders: dict[ApplicationState, ApplicationViewBuilder] = build_state_table(
            path_provider, renderer, config
        )

    def generate(self, application_id: UUID | str, base_uri: str) -> bytes | None:
        """Render the document for *application_id*.

        Args:
            application_id: Record identifier, as a ``UUID`` or its string form.
            base_uri: Base URI prefixed to template paths; one trailing
                ``/`` is ignored.

        Returns:
            PDF bytes, or ``None`` when the record is missing or its state
            has no document.

        Raises:
            MalformedInputError: If the id cannot be parsed or *base_uri* is empty.
        """
        app_id = parse_application_id(application_id)
        if not isinstance(base_uri, str) or not base_uri.strip():
            raise MalformedInputError("base_uri must be a non-empty string")
        base_uri = normalize_base_uri(base_uri)

        application = self._store.get(app_id)
        if application is None:
            self._logger.warning("No application found for id '%s'", app_id)
            return None

        builder: ApplicationViewBuilder | None = self._builders.get(application.state)
        if builder is None:
            self._logger.warning(
                "The application is in state '%s' and no valid document can be generated for it.",
                application.state.value,
            )
            return None

        html = builder.render(application, base_uri)
        pdf = self._pdf_converter.generate_from_html(html, PDF_OPTIONS)
        self._logger.debug("Generated %d byte document for %s", len(pdf), application.reference_number)
        return pdf
