"""Markup rendering and PDF conversion.

Usage::

    from appdoc.rendering import JinjaViewRenderer, ReportLabPdfConverter

    html = JinjaViewRenderer().render_from_path(address, view_model)
    pdf = ReportLabPdfConverter().generate_from_html(html, options)
"""

from __future__ import annotations

from typing import Any

from appdoc.rendering.jinja_renderer import JinjaViewRenderer

__all__ = [
    "JinjaViewRenderer",
    "ReportLabPdfConverter",
]


def __getattr__(name: str) -> Any:
    """Lazy-load ReportLabPdfConverter so reportlab is only imported when needed."""
    if name == "ReportLabPdfConverter":
        from appdoc.rendering.pdf_converter import ReportLabPdfConverter

        return ReportLabPdfConverter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
