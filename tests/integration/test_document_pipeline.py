"""End-to-end: file store → bundled Jinja2 templates → reportlab PDF."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("reportlab")
pytest.importorskip("bs4")

from appdoc.builders import ActivatedApplicationBuilder, InReviewApplicationBuilder, PendingApplicationBuilder  # noqa: E402
from appdoc.core.config import AppSettings, DocumentConfig, StoreConfig  # noqa: E402
from appdoc.factory import create_generator, create_store  # noqa: E402
from appdoc.generator import PdfApplicationDocumentGenerator  # noqa: E402
from appdoc.models import Application, ApplicationState  # noqa: E402
from appdoc.rendering.jinja_renderer import JinjaViewRenderer  # noqa: E402
from appdoc.stores import FileApplicationStore, MemoryApplicationStore  # noqa: E402
from appdoc.templates import PackageTemplatePathProvider, bundled_templates_uri  # noqa: E402
from tests.fakes.sample_records import (  # noqa: E402
    ACTIVATED_ID,
    CLOSED_ID,
    IN_REVIEW_ID,
    MISSING_ID,
    PENDING_ID,
    make_application,
    make_products,
)


@pytest.fixture
def record_dir(
    tmp_path: Path,
    pending_application: Application,
    activated_application: Application,
    in_review_application: Application,
    closed_application: Application,
) -> Path:
    for application in (pending_application, activated_application, in_review_application, closed_application):
        (tmp_path / f"{application.id}.json").write_text(application.model_dump_json(), encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(record_dir: Path, doc_config: DocumentConfig) -> AppSettings:
    return AppSettings(document=doc_config, store=StoreConfig(backend="file", store_path=record_dir))


@pytest.fixture
def real_generator(settings: AppSettings) -> PdfApplicationDocumentGenerator:
    return create_generator(settings)


def _render(builder_cls, application: Application, config: DocumentConfig) -> str:
    builder = builder_cls(PackageTemplatePathProvider(), JinjaViewRenderer(), config)
    return builder.render(application, bundled_templates_uri())


class TestGeneratedDocuments:
    @pytest.mark.parametrize("app_id", [PENDING_ID, ACTIVATED_ID, IN_REVIEW_ID])
    def test_supported_states_produce_pdf(self, real_generator: PdfApplicationDocumentGenerator, app_id) -> None:
        pdf = real_generator.generate(app_id, bundled_templates_uri())
        assert pdf is not None
        assert pdf.startswith(b"%PDF")

    @pytest.mark.parametrize("app_id", [PENDING_ID, ACTIVATED_ID, IN_REVIEW_ID])
    def test_repeat_calls_are_byte_identical(self, real_generator: PdfApplicationDocumentGenerator, app_id) -> None:
        first = real_generator.generate(app_id, bundled_templates_uri())
        second = real_generator.generate(str(app_id), bundled_templates_uri() + "/")
        assert first == second

    def test_closed_and_missing_yield_nothing(self, real_generator: PdfApplicationDocumentGenerator) -> None:
        assert real_generator.generate(CLOSED_ID, bundled_templates_uri()) is None
        assert real_generator.generate(MISSING_ID, bundled_templates_uri()) is None

    def test_store_override(self, settings: AppSettings, activated_application: Application) -> None:
        generator = create_generator(settings, store=MemoryApplicationStore([activated_application]))
        assert generator.generate(ACTIVATED_ID, bundled_templates_uri()) is not None
        assert generator.generate(PENDING_ID, bundled_templates_uri()) is None

    def test_create_store_follows_backend(self, settings: AppSettings) -> None:
        assert isinstance(create_store(settings), FileApplicationStore)
        memory = settings.model_copy(update={"store": StoreConfig(backend="memory")})
        assert isinstance(create_store(memory), MemoryApplicationStore)


class TestRenderedMarkup:
    def test_pending_document(self, pending_application: Application, doc_config: DocumentConfig) -> None:
        html = _render(PendingApplicationBuilder, pending_application, doc_config)

        assert "REF-1111" in html
        assert "Thandi Nkosi" in html
        assert "05 March 2024" in html
        assert "mailto:help@example.org" in html
        assert "Client Services Team" in html
        assert "<b>pending</b>" in html
        assert "Portfolio" not in html

    def test_activated_document_lists_funds_and_total(
        self, activated_application: Application, doc_config: DocumentConfig
    ) -> None:
        html = _render(ActivatedApplicationBuilder, activated_application, doc_config)

        assert "Balanced Fund" in html
        assert "250.00" in html
        assert "72.00" in html
        assert "Legal entity" not in html

    def test_legal_entity_shown_only_when_flagged(self, doc_config: DocumentConfig, legal_entity) -> None:
        flagged = make_application(
            ApplicationState.ACTIVATED, is_legal_entity=True, legal_entity=legal_entity, products=make_products()
        )
        unflagged = make_application(
            ApplicationState.ACTIVATED, is_legal_entity=False, legal_entity=legal_entity, products=make_products()
        )

        assert legal_entity.registration_number in _render(ActivatedApplicationBuilder, flagged, doc_config)
        assert legal_entity.registration_number not in _render(ActivatedApplicationBuilder, unflagged, doc_config)

    def test_in_review_document(self, in_review_application: Application, doc_config: DocumentConfig) -> None:
        html = _render(InReviewApplicationBuilder, in_review_application, doc_config)

        assert "address verification for FICA purposes" in html
        assert "01 April 2024" in html
        assert "Compliance" in html
        assert "Nkosi Holdings (Pty) Ltd" in html
        assert "72.00" in html

    def test_empty_portfolio_message(self, doc_config: DocumentConfig) -> None:
        html = _render(ActivatedApplicationBuilder, make_application(ApplicationState.ACTIVATED), doc_config)
        assert "No funds are held in this portfolio." in html
        assert "0.00" in html
