"""Shared fixtures for appdoc tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from appdoc.core.config import DocumentConfig
from appdoc.generator import PdfApplicationDocumentGenerator
from appdoc.models import Application, ApplicationState, LegalEntity, Review
from tests.fakes.fake_pdf import FakePdfConverter
from tests.fakes.fake_renderer import FakeViewRenderer
from tests.fakes.fake_store import FakeApplicationStore
from tests.fakes.fake_templates import FakeTemplatePathProvider
from tests.fakes.sample_records import (
    ACTIVATED_ID,
    CLOSED_ID,
    IN_REVIEW_ID,
    PENDING_ID,
    make_application,
    make_products,
)


@pytest.fixture
def doc_config() -> DocumentConfig:
    return DocumentConfig(
        support_email="help@example.org",
        signature="Client Services Team",
        tax_rate=Decimal("0.2"),
    )


@pytest.fixture
def legal_entity() -> LegalEntity:
    return LegalEntity(name="Nkosi Holdings (Pty) Ltd", registration_number="2019/123456/07")


@pytest.fixture
def pending_application() -> Application:
    return make_application(ApplicationState.PENDING, application_id=PENDING_ID)


@pytest.fixture
def activated_application() -> Application:
    return make_application(
        ApplicationState.ACTIVATED,
        application_id=ACTIVATED_ID,
        products=make_products(),
    )


@pytest.fixture
def in_review_application(legal_entity: LegalEntity) -> Application:
    return make_application(
        ApplicationState.IN_REVIEW,
        application_id=IN_REVIEW_ID,
        is_legal_entity=True,
        legal_entity=legal_entity,
        products=make_products(),
        current_review=Review(
            reason="Pending address check",
            opened_on=date(2024, 4, 1),
            reviewer="Compliance",
        ),
    )


@pytest.fixture
def closed_application() -> Application:
    return make_application(ApplicationState.CLOSED, application_id=CLOSED_ID)


@pytest.fixture
def store(
    pending_application: Application,
    activated_application: Application,
    in_review_application: Application,
    closed_application: Application,
) -> FakeApplicationStore:
    return FakeApplicationStore(
        pending_application,
        activated_application,
        in_review_application,
        closed_application,
    )


@pytest.fixture
def path_provider() -> FakeTemplatePathProvider:
    return FakeTemplatePathProvider()


@pytest.fixture
def renderer() -> FakeViewRenderer:
    return FakeViewRenderer()


@pytest.fixture
def pdf_converter() -> FakePdfConverter:
    return FakePdfConverter()


@pytest.fixture
def generator(
    store: FakeApplicationStore,
    path_provider: FakeTemplatePathProvider,
    renderer: FakeViewRenderer,
    pdf_converter: FakePdfConverter,
    doc_config: DocumentConfig,
) -> PdfApplicationDocumentGenerator:
    return PdfApplicationDocumentGenerator(
        store=store,
        path_provider=path_provider,
        renderer=renderer,
        pdf_converter=pdf_converter,
        config=doc_config,
    )
