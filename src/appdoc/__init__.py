"""appdoc: state-driven PDF documents for application records.

Usage::

    from appdoc import AppSettings, bundled_templates_uri, create_generator

    generator = create_generator(AppSettings())
    pdf = generator.generate("6f1c0d9e-3c1b-4a57-9f0e-2f4b8e1d7a10", bundled_templates_uri())
"""

from __future__ import annotations

from appdoc.builders import (
    ActivatedApplicationBuilder,
    InReviewApplicationBuilder,
    PendingApplicationBuilder,
)
from appdoc.core.config import AppSettings, DocumentConfig
from appdoc.exceptions import (
    AppDocError,
    ConfigurationError,
    DataIntegrityError,
    DocumentConversionError,
    MalformedInputError,
    MissingDependencyError,
    RecordFormatError,
    TemplateNotFoundError,
)
from appdoc.factory import create_generator
from appdoc.generator import PdfApplicationDocumentGenerator
from appdoc.models import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
    parse_application,
)
from appdoc.portfolio import flatten_funds, portfolio_total
from appdoc.review_messages import in_review_message
from appdoc.stores import FileApplicationStore, MemoryApplicationStore
from appdoc.templates import PackageTemplatePathProvider, bundled_templates_uri

__all__ = [
    "AppSettings",
    "DocumentConfig",
    "PdfApplicationDocumentGenerator",
    "create_generator",
    "PendingApplicationBuilder",
    "ActivatedApplicationBuilder",
    "InReviewApplicationBuilder",
    "Application",
    "ApplicationState",
    "Fund",
    "LegalEntity",
    "Person",
    "Product",
    "Review",
    "parse_application",
    "flatten_funds",
    "portfolio_total",
    "in_review_message",
    "FileApplicationStore",
    "MemoryApplicationStore",
    "PackageTemplatePathProvider",
    "bundled_templates_uri",
    "AppDocError",
    "ConfigurationError",
    "MissingDependencyError",
    "MalformedInputError",
    "DataIntegrityError",
    "RecordFormatError",
    "TemplateNotFoundError",
    "DocumentConversionError",
]
