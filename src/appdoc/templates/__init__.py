"""Bundled HTML templates and the logical-name → template-path lookup.

Usage::

    from appdoc.templates import PackageTemplatePathProvider, bundled_templates_uri

    provider = PackageTemplatePathProvider()
    provider.get("PendingApplication")   # "/pending_application.html"
    bundled_templates_uri()              # "file:///.../appdoc/templates"
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

TEMPLATES_DIR = Path(__file__).resolve().parent

DEFAULT_TEMPLATE_PATHS: dict[str, str] = {
    "PendingApplication": "/pending_application.html",
    "ActivatedApplication": "/activated_application.html",
    "InReviewApplication": "/in_review_application.html",
}


def bundled_templates_uri() -> str:
    """``file://`` URI of the templates shipped with the package."""
    return TEMPLATES_DIR.as_uri()


class PackageTemplatePathProvider:
    """Resolves logical document names to paths relative to a base URI.

    Paths always start with ``/`` so they can be appended to a base URI
    whose trailing separator has been stripped.
    """

    def __init__(self, paths: Mapping[str, str] | None = None) -> None:
        self._paths = dict(DEFAULT_TEMPLATE_PATHS if paths is None else paths)

    def get(self, name: str) -> str:
        if name not in self._paths:
            raise KeyError(
                f"No template registered for {name!r}. "
                f"Available: {sorted(self._paths)}"
            )
        return self._paths[name]


__all__ = [
    "TEMPLATES_DIR",
    "DEFAULT_TEMPLATE_PATHS",
    "bundled_templates_uri",
    "PackageTemplatePathProvider",
]
