"""Nested pydantic-settings configuration for the document generator.

Each group reads its own ``APPDOC_<GROUP>_*`` env vars::

    export APPDOC_DOCUMENT_SUPPORT_EMAIL=support@example.com
    export APPDOC_DOCUMENT_TAX_RATE=0.15
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from appdoc.templates import bundled_templates_uri


class DocumentConfig(BaseSettings):
    """Values copied into every generated document.

    Immutable once constructed; the generator receives it explicitly.

    Env vars use ``APPDOC_DOCUMENT_`` prefix::

        export APPDOC_DOCUMENT_SIGNATURE="Client Services"
    """

    model_config = {"env_prefix": "APPDOC_DOCUMENT_", "frozen": True}

    support_email: str = "support@example.com"
    signature: str = "Client Services"
    tax_rate: Decimal = Field(default=Decimal("0.20"), ge=0, le=1)


class StoreConfig(BaseSettings):
    """Application record store configuration.

    Env vars use ``APPDOC_STORE_`` prefix.
    """

    model_config = {"env_prefix": "APPDOC_STORE_"}

    backend: Literal["file", "memory"] = "file"
    store_path: Path = Path("./applications")


class TemplateConfig(BaseSettings):
    """Template lookup configuration.

    Env vars use ``APPDOC_TEMPLATE_`` prefix.
    """

    model_config = {"env_prefix": "APPDOC_TEMPLATE_"}

    base_uri: str = Field(default_factory=bundled_templates_uri)
    auto_reload: bool = False


class PDFFormattingConfig(BaseSettings):
    """PDF output formatting configuration.

    Env vars use ``APPDOC_PDF_`` prefix::

        export APPDOC_PDF_PAGE_SIZE=letter
    """

    model_config = {"env_prefix": "APPDOC_PDF_"}

    page_size: Literal["letter", "a4"] = "a4"
    margin_inches: float = Field(default=0.75, gt=0.0, le=3.0)
    font_family: str = "Helvetica"
    body_font_size: int = Field(default=10, ge=6, le=72)
    heading_font_size: int = Field(default=14, ge=6, le=72)


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``APPDOC_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "APPDOC_OBSERVABILITY_"}

    log_level: str = "INFO"
    # "auto" renders for the console on a TTY and JSON lines otherwise
    log_format: Literal["auto", "console", "json"] = "auto"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    document: DocumentConfig = Field(default_factory=DocumentConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    template: TemplateConfig = Field(default_factory=TemplateConfig)
    pdf: PDFFormattingConfig = Field(default_factory=PDFFormattingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
