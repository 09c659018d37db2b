"""Per-state view model builders.

Each builder turns an :class:`Application` into the view model for one
lifecycle state, resolves that state's template and renders it to
markup.  The generator picks a builder from :func:`build_state_table`;
states missing from the table have no document.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from appdoc.core.config import DocumentConfig
from appdoc.models import (
    ActivatedApplicationViewModel,
    Application,
    ApplicationState,
    ApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)
from appdoc.portfolio import flatten_funds, portfolio_total
from appdoc.protocols import ITemplatePathProvider, IViewRenderer
from appdoc.review_messages import in_review_message

log = logging.getLogger(__name__)


def full_name(application: Application) -> str:
    return f"{application.person.first_name} {application.person.surname}"


def template_address(base_uri: str, path: str) -> str:
    """Join a normalized base URI and a template path with exactly one ``/``."""
    if base_uri.endswith("/") and path.startswith("/"):
        return f"{base_uri}{path[1:]}"
    if base_uri.endswith("/") or path.startswith("/"):
        return f"{base_uri}{path}"
    return f"{base_uri}/{path}"


class ApplicationViewBuilder:
    """Base builder: common fields plus template resolution and rendering.

    Subclasses set ``template_name`` and override :meth:`build_view_model`.
    """

    template_name: ClassVar[str] = ""

    def __init__(
        self,
        path_provider: ITemplatePathProvider,
        renderer: IViewRenderer,
        config: DocumentConfig,
    ) -> None:
        self._path_provider = path_provider
        self._renderer = renderer
        self._config = config

    def build_view_model(self, application: Application) -> ApplicationViewModel:
        raise NotImplementedError

    def render(self, application: Application, base_uri: str) -> str:
        """Build the view model and render it at ``base_uri`` + template path.

        *base_uri* must already have its trailing separator stripped.
        """
        path = self._path_provider.get(self.template_name)
        address = template_address(base_uri, path)
        view_model = self.build_view_model(application)
        log.debug("Rendering %s for %s from %s", self.template_name, application.reference_number, address)
        return self._renderer.render_from_path(address, view_model)

    def _common_fields(self, application: Application) -> dict:
        return {
            "reference_number": application.reference_number,
            "state": application.state.description,
            "full_name": full_name(application),
            "applied_on": application.applied_on,
            "support_email": self._config.support_email,
            "signature": self._config.signature,
        }

    def _portfolio_fields(self, application: Application) -> dict:
        return {
            "legal_entity": application.legal_entity if application.is_legal_entity else None,
            "portfolio_funds": flatten_funds(application.products),
            "portfolio_total_amount": portfolio_total(application.products, self._config.tax_rate),
        }


class PendingApplicationBuilder(ApplicationViewBuilder):
    template_name = "PendingApplication"

    def build_view_model(self, application: Application) -> PendingApplicationViewModel:
        return PendingApplicationViewModel(**self._common_fields(application))


class ActivatedApplicationBuilder(ApplicationViewBuilder):
    template_name = "ActivatedApplication"

    def build_view_model(self, application: Application) -> ActivatedApplicationViewModel:
        return ActivatedApplicationViewModel(
            **self._common_fields(application),
            **self._portfolio_fields(application),
        )


class InReviewApplicationBuilder(ApplicationViewBuilder):
    """Activated fields plus the review explanation and the review itself."""

    template_name = "InReviewApplication"

    def build_view_model(self, application: Application) -> InReviewApplicationViewModel:
        review = application.current_review
        return InReviewApplicationViewModel(
            **self._common_fields(application),
            **self._portfolio_fields(application),
            in_review_message=in_review_message(review.reason if review else None),
            in_review_information=review,
        )


def build_state_table(
    path_provider: ITemplatePathProvider,
    renderer: IViewRenderer,
    config: DocumentConfig,
) -> dict[ApplicationState, ApplicationViewBuilder]:
    """Return the builder for every state that has a document."""
    return {
        ApplicationState.PENDING: PendingApplicationBuilder(path_provider, renderer, config),
        ApplicationState.ACTIVATED: ActivatedApplicationBuilder(path_provider, renderer, config),
        ApplicationState.IN_REVIEW: InReviewApplicationBuilder(path_provider, renderer, config),
    }
