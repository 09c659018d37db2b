"""Centralized style constants for PDF output formatting."""

from __future__ import annotations

# ── Layout colors (hex strings) ──────────────────────────────────────
# Kept as plain hex so the converter can turn them into reportlab HexColor.

HEADER_BG_COLOR = "#1E3A5F"
HEADER_TEXT_COLOR = "#FFFFFF"
SECTION_BORDER_COLOR = "#CBD5E1"
TABLE_STRIPE_COLOR = "#F8FAFC"
CAPTION_TEXT_COLOR = "#6B7280"
NOTICE_BG_COLOR = "#FEF3C7"
NOTICE_BORDER_COLOR = "#D97706"

# ── HTML → paragraph style mapping ──────────────────────────────────

HEADING_STYLES: dict[str, str] = {
    "h1": "title",
    "h2": "heading",
    "h3": "subheading",
}

# ``<p class="...">`` values with their own paragraph style
PARAGRAPH_CLASS_STYLES: dict[str, str] = {
    "caption": "caption",
    "notice": "notice",
    "signature": "signature",
}

# Header band height reserved above the content frame, in inches
HEADER_BAND_INCHES = 0.45
