"""Data models for appdoc.

Application records are pydantic models so stored JSON can be validated
on the way in.  View models and layout options are plain frozen
dataclasses: they are built fresh for one ``generate`` call and handed to
the renderer/converter, never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as _PydanticValidationError

from appdoc.exceptions import RecordFormatError

# ── Lifecycle state ──────────────────────────────────────────────────


class ApplicationState(str, Enum):
    """Lifecycle state of an application record."""

    PENDING = "pending"
    ACTIVATED = "activated"
    IN_REVIEW = "in_review"
    CLOSED = "closed"
    DECLINED = "declined"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> ApplicationState | None:
        # Stored states this version does not know about still load
        if isinstance(value, str):
            return cls.UNKNOWN
        return None

    @property
    def description(self) -> str:
        """Human-readable label shown on documents, e.g. ``"In Review"``."""
        return _STATE_DESCRIPTIONS[self]


_STATE_DESCRIPTIONS: dict[ApplicationState, str] = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.CLOSED: "Closed",
    ApplicationState.DECLINED: "Declined",
    ApplicationState.UNKNOWN: "Unknown",
}


# ── Application record ───────────────────────────────────────────────


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Person(_Record):
    """The applicant."""

    first_name: str
    surname: str


class LegalEntity(_Record):
    """Company details, present only on legal-entity applications."""

    name: str
    registration_number: str
    vat_number: str = ""


class Fund(_Record):
    """A single fund holding inside a product."""

    name: str = ""
    amount: Decimal
    fees: Decimal = Decimal("0")


class Product(_Record):
    name: str = ""
    funds: tuple[Fund, ...] = ()


class Review(_Record):
    """Current review attached to an application in review."""

    reason: Optional[str] = None
    opened_on: Optional[date] = None
    reviewer: str = ""
    notes: str = ""


class Application(_Record):
    """A single application record as returned by the store."""

    id: UUID
    reference_number: str
    state: ApplicationState
    person: Person
    applied_on: date
    is_legal_entity: bool = False
    legal_entity: Optional[LegalEntity] = None
    products: tuple[Product, ...] = Field(default_factory=tuple)
    current_review: Optional[Review] = None

    @field_validator("state", mode="before")
    @classmethod
    def _coerce_state(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ApplicationState(value)
        return value


def parse_application(data: Mapping[str, Any], *, source: str = "") -> Application:
    """Validate a JSON-shaped mapping into an :class:`Application`.

    Raises:
        RecordFormatError: If the mapping does not describe a valid record.
    """
    try:
        return Application.model_validate(data)
    except _PydanticValidationError as exc:
        raise RecordFormatError(
            f"Invalid application record{f' in {source}' if source else ''}: {exc}",
            source=source,
        ) from exc


# ── View models ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class PendingApplicationViewModel:
    """Fields common to every application document."""

    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str


@dataclass(frozen=True)
class ActivatedApplicationViewModel(PendingApplicationViewModel):
    # None unless the record is flagged as a legal entity
    legal_entity: Optional[LegalEntity] = None
    portfolio_funds: tuple[Fund, ...] = field(default_factory=tuple)
    portfolio_total_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class InReviewApplicationViewModel(ActivatedApplicationViewModel):
    in_review_message: str = ""
    in_review_information: Optional[Review] = None


ApplicationViewModel = Union[
    PendingApplicationViewModel,
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
]


# ── PDF layout options ───────────────────────────────────────────────


class PageNumbers(str, Enum):
    NONE = "none"
    NUMERIC = "numeric"


class HeaderRepeat(str, Enum):
    FIRST_PAGE_ONLY = "first_page_only"
    ALL_PAGES = "all_pages"


@dataclass(frozen=True)
class HeaderOptions:
    repeat: HeaderRepeat
    html: str


@dataclass(frozen=True)
class PdfOptions:
    """Pagination and header settings handed to the PDF converter."""

    page_numbers: PageNumbers = PageNumbers.NUMERIC
    header: Optional[HeaderOptions] = None


# Header fragment stamped on the first page of every application document.
PDF_HEADER = (
    '<table class="header"><tr>'
    "<td><b>Application Document</b></td>"
    '<td align="right">Private and confidential</td>'
    "</tr></table>"
)

__all__ = [
    "ApplicationState",
    "Person",
    "LegalEntity",
    "Fund",
    "Product",
    "Review",
    "Application",
    "parse_application",
    "PendingApplicationViewModel",
    "ActivatedApplicationViewModel",
    "InReviewApplicationViewModel",
    "ApplicationViewModel",
    "PageNumbers",
    "HeaderRepeat",
    "HeaderOptions",
    "PdfOptions",
    "PDF_HEADER",
]
