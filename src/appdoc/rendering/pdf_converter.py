"""HTML → PDF converter using reportlab.

Parses the rendered markup with BeautifulSoup and maps the block-level
subset the bundled templates use (``h1``–``h3``, ``p``, ``ul``/``ol``,
``table``, ``hr``) onto reportlab platypus flowables.  Inline ``b``/``i``/
``u``/``br``/``a`` are passed through as reportlab paragraph markup.

Output is built with ``invariant=1`` so identical markup always yields
byte-identical PDFs.
"""

from __future__ import annotations

import logging
import re
from io import BytesIO
from typing import Any
from xml.sax.saxutils import escape

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from appdoc.core.config import PDFFormattingConfig
from appdoc.exceptions import DocumentConversionError
from appdoc.models import HeaderRepeat, PageNumbers, PdfOptions
from appdoc.rendering.pdf_styles import (
    CAPTION_TEXT_COLOR,
    HEADER_BAND_INCHES,
    HEADER_BG_COLOR,
    HEADER_TEXT_COLOR,
    HEADING_STYLES,
    NOTICE_BG_COLOR,
    NOTICE_BORDER_COLOR,
    PARAGRAPH_CLASS_STYLES,
    SECTION_BORDER_COLOR,
    TABLE_STRIPE_COLOR,
)

try:
    from reportlab.lib import colors as rl_colors
    from reportlab.lib.colors import HexColor
    from reportlab.lib.enums import TA_CENTER, TA_RIGHT
    from reportlab.lib.pagesizes import A4, LETTER
    from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
    from reportlab.lib.units import inch
    from reportlab.platypus import (
        Flowable,
        HRFlowable,
        SimpleDocTemplate,
        Spacer,
        Table,
        TableStyle,
    )
    from reportlab.platypus import (
        Paragraph as _RawParagraph,
    )
    from reportlab.platypus.doctemplate import LayoutError
except ImportError as _exc:
    raise ImportError(
        "reportlab is required for PDF output. Install with: pip install appdoc-generator"
    ) from _exc

log = logging.getLogger(__name__)


# ── Unicode sanitization ────────────────────────────────────────────
# The standard Helvetica face lacks glyphs for several characters that
# show up in names and review notes.

_UNICODE_REPLACEMENTS: dict[str, str] = {
    "\u2011": "-",       # non-breaking hyphen
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    "\u2026": "...",     # ellipsis
}

_WHITESPACE = re.compile(r"\s+")

_INLINE_TAGS: dict[str, str] = {"b": "b", "strong": "b", "i": "i", "em": "i", "u": "u"}
_BLOCK_TAGS = ("h1", "h2", "h3", "p", "ul", "ol", "table", "hr", "div", "section")
_CONTAINER_TAGS = frozenset({"html", "body", "div", "section", "article", "main", "header", "footer"})
_SKIPPED_TAGS = frozenset({"head", "title", "style", "script", "meta", "link"})


def _sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def Paragraph(text: str, *args: Any, **kwargs: Any) -> _RawParagraph:  # noqa: N802
    """Paragraph that swaps out characters the base-14 fonts have no glyph for."""
    return _RawParagraph(_sanitize_text(str(text)), *args, **kwargs)


def inline_markup(node: Tag) -> str:
    """Convert the inline content of *node* to reportlab paragraph markup."""
    parts: list[str] = []
    for child in node.children:
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            parts.append(escape(_WHITESPACE.sub(" ", str(child))))
        elif child.name == "br":
            parts.append("<br/>")
        elif child.name in _INLINE_TAGS:
            tag = _INLINE_TAGS[child.name]
            parts.append(f"<{tag}>{inline_markup(child)}</{tag}>")
        elif child.name == "a" and child.get("href"):
            href = escape(str(child["href"]), {'"': "&quot;"})
            parts.append(f'<a href="{href}">{inline_markup(child)}</a>')
        elif child.name not in _SKIPPED_TAGS:
            parts.append(inline_markup(child))
    return "".join(parts).strip()


# ── Page size lookup ─────────────────────────────────────────────────

_PAGE_SIZES = {"letter": LETTER, "a4": A4}


def _hex(color_str: str) -> HexColor:
    return HexColor(color_str)


# ── ReportLabPdfConverter ────────────────────────────────────────────


class ReportLabPdfConverter:
    """Converts rendered HTML markup into a paginated PDF."""

    def __init__(self, config: PDFFormattingConfig | None = None) -> None:
        self._config = config or PDFFormattingConfig()
        self._page_size: tuple[float, float] = _PAGE_SIZES.get(self._config.page_size, A4)
        self._margin: float = self._config.margin_inches * inch
        self._styles = self._build_styles()

    # ── Public API ───────────────────────────────────────────────────

    def generate_from_html(self, html: str, options: PdfOptions) -> bytes:
        """Render *html* to PDF bytes, applying header and page-number *options*.

        Raises:
            DocumentConversionError: If reportlab cannot lay out the content.
        """
        soup = BeautifulSoup(html, "html.parser")
        story = self._blocks(soup.body or soup)
        if not story:
            story = [Spacer(1, 1)]

        header = self._header_flowables(options)
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self._page_size,
            leftMargin=self._margin,
            rightMargin=self._margin,
            topMargin=self._margin + HEADER_BAND_INCHES * inch,
            bottomMargin=self._margin + 0.3 * inch,
            title=soup.title.get_text(strip=True) if soup.title else "",
            creator="appdoc",
            invariant=1,
        )

        def on_first_page(canvas: Any, doc: Any) -> None:
            self._decorate_page(canvas, options, header)

        def on_later_pages(canvas: Any, doc: Any) -> None:
            repeat = options.header is not None and options.header.repeat == HeaderRepeat.ALL_PAGES
            self._decorate_page(canvas, options, header if repeat else [])

        try:
            doc.build(story, onFirstPage=on_first_page, onLaterPages=on_later_pages)
        except (LayoutError, ValueError) as exc:
            raise DocumentConversionError(f"Could not convert markup to PDF: {exc}") from exc

        pdf = buffer.getvalue()
        log.debug("Converted %d chars of markup to %d PDF bytes", len(html), len(pdf))
        return pdf

    # ── Style setup ──────────────────────────────────────────────────

    def _build_styles(self) -> dict[str, ParagraphStyle]:
        base = getSampleStyleSheet()
        font = self._config.font_family
        body_sz = self._config.body_font_size
        heading_sz = self._config.heading_font_size

        body = ParagraphStyle(
            "body",
            parent=base["BodyText"],
            fontName=font,
            fontSize=body_sz,
            leading=body_sz * 1.4,
            spaceAfter=6,
        )
        return {
            "title": ParagraphStyle(
                "title",
                parent=base["Title"],
                fontName=f"{font}-Bold",
                fontSize=heading_sz + 6,
                leading=(heading_sz + 6) * 1.2,
                alignment=TA_CENTER,
                spaceAfter=12,
                textColor=_hex(HEADER_BG_COLOR),
            ),
            "heading": ParagraphStyle(
                "heading",
                parent=base["Heading2"],
                fontName=f"{font}-Bold",
                fontSize=heading_sz,
                leading=heading_sz * 1.3,
                spaceBefore=14,
                spaceAfter=6,
                textColor=_hex(HEADER_BG_COLOR),
            ),
            "subheading": ParagraphStyle(
                "subheading",
                parent=base["Heading3"],
                fontName=f"{font}-Bold",
                fontSize=body_sz + 1,
                leading=(body_sz + 1) * 1.3,
                spaceBefore=8,
                spaceAfter=4,
            ),
            "body": body,
            "bullet": ParagraphStyle(
                "bullet",
                parent=body,
                leftIndent=18,
                bulletIndent=6,
                spaceAfter=3,
            ),
            "caption": ParagraphStyle(
                "caption",
                parent=body,
                fontName=f"{font}-Oblique",
                fontSize=body_sz - 1,
                textColor=_hex(CAPTION_TEXT_COLOR),
            ),
            "notice": ParagraphStyle(
                "notice",
                parent=body,
                backColor=_hex(NOTICE_BG_COLOR),
                borderColor=_hex(NOTICE_BORDER_COLOR),
                borderWidth=1,
                borderPadding=6,
                spaceBefore=6,
                spaceAfter=12,
            ),
            "signature": ParagraphStyle(
                "signature",
                parent=body,
                fontName=f"{font}-Bold",
                spaceBefore=12,
            ),
            "table_header": ParagraphStyle(
                "table_header",
                parent=body,
                fontName=f"{font}-Bold",
                fontSize=body_sz - 1,
                textColor=_hex(HEADER_TEXT_COLOR),
                spaceAfter=0,
            ),
            "table_cell": ParagraphStyle(
                "table_cell",
                parent=body,
                fontSize=body_sz - 1,
                spaceAfter=0,
            ),
            "table_cell_right": ParagraphStyle(
                "table_cell_right",
                parent=body,
                fontSize=body_sz - 1,
                alignment=TA_RIGHT,
                spaceAfter=0,
            ),
            "page_header": ParagraphStyle(
                "page_header",
                parent=body,
                fontSize=8,
                leading=10,
                textColor=_hex(HEADER_BG_COLOR),
                spaceAfter=0,
            ),
        }

    def _content_width(self) -> float:
        return float(self._page_size[0]) - 2 * self._margin

    # ══════════════════════════════════════════════════════════════════
    # Markup → flowables
    # ══════════════════════════════════════════════════════════════════

    def _blocks(self, node: Tag) -> list[Flowable]:
        items: list[Flowable] = []
        for child in node.children:
            if isinstance(child, PreformattedString):
                continue
            if isinstance(child, NavigableString):
                text = escape(_WHITESPACE.sub(" ", str(child)).strip())
                if text:
                    items.append(Paragraph(text, self._styles["body"]))
                continue

            name = child.name
            if name in _SKIPPED_TAGS:
                continue
            if name in HEADING_STYLES:
                items.append(Paragraph(inline_markup(child), self._styles[HEADING_STYLES[name]]))
            elif name == "p":
                items.extend(self._paragraph(child))
            elif name in ("ul", "ol"):
                items.extend(self._list(child))
            elif name == "table":
                items.append(self._table(child))
                items.append(Spacer(1, 8))
            elif name == "hr":
                items.append(
                    HRFlowable(
                        width="100%",
                        thickness=0.5,
                        color=_hex(SECTION_BORDER_COLOR),
                        spaceBefore=4,
                        spaceAfter=8,
                    )
                )
            elif name in _CONTAINER_TAGS and child.find(_BLOCK_TAGS) is not None:
                items.extend(self._blocks(child))
            else:
                items.extend(self._paragraph(child))
        return items

    def _paragraph(self, node: Tag) -> list[Flowable]:
        text = inline_markup(node)
        if not text:
            return []
        style_name = "body"
        for css_class in node.get("class") or []:
            if css_class in PARAGRAPH_CLASS_STYLES:
                style_name = PARAGRAPH_CLASS_STYLES[css_class]
                break
        return [Paragraph(text, self._styles[style_name])]

    def _list(self, node: Tag) -> list[Flowable]:
        items: list[Flowable] = []
        for index, li in enumerate(node.find_all("li", recursive=False), start=1):
            bullet = f"{index}." if node.name == "ol" else "\u2022"
            items.append(Paragraph(inline_markup(li), self._styles["bullet"], bulletText=bullet))
        return items

    def _table(self, node: Tag) -> Table:
        rows: list[list[Paragraph]] = []
        header_rows = 0
        for tr in node.find_all("tr"):
            cells = tr.find_all(["td", "th"], recursive=False)
            if not cells:
                continue
            is_header = all(cell.name == "th" for cell in cells)
            if is_header and len(rows) == header_rows:
                header_rows += 1
            rows.append([self._cell(cell) for cell in cells])

        if not rows:
            return Table([[""]])

        n_cols = max(len(r) for r in rows)
        for row in rows:
            row.extend(Paragraph("", self._styles["table_cell"]) for _ in range(n_cols - len(row)))

        total = self._content_width()
        table = Table(rows, colWidths=[total / n_cols] * n_cols, repeatRows=header_rows)

        commands: list[tuple[Any, ...]] = [
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
        if "data" in (node.get("class") or []):
            commands.append(("BOX", (0, 0), (-1, -1), 0.5, _hex(SECTION_BORDER_COLOR)))
            commands.append(("LINEBELOW", (0, 0), (-1, -1), 0.25, _hex(SECTION_BORDER_COLOR)))
            commands.append(
                ("ROWBACKGROUNDS", (0, header_rows), (-1, -1), [rl_colors.white, _hex(TABLE_STRIPE_COLOR)])
            )
        if header_rows:
            commands.append(("BACKGROUND", (0, 0), (-1, header_rows - 1), _hex(HEADER_BG_COLOR)))
        table.setStyle(TableStyle(commands))
        return table

    def _cell(self, cell: Tag) -> Paragraph:
        if cell.name == "th":
            style = self._styles["table_header"]
        elif cell.get("align") == "right" or "num" in (cell.get("class") or []):
            style = self._styles["table_cell_right"]
        else:
            style = self._styles["table_cell"]
        return Paragraph(inline_markup(cell), style)

    # ══════════════════════════════════════════════════════════════════
    # Page decoration
    # ══════════════════════════════════════════════════════════════════

    def _header_flowables(self, options: PdfOptions) -> list[Flowable]:
        if options.header is None or not options.header.html:
            return []
        fragment = BeautifulSoup(options.header.html, "html.parser")
        items: list[Flowable] = []
        for element in fragment.find_all(["table", "p"], recursive=False) or [fragment]:
            if element.name == "table":
                items.append(self._header_table(element))
            else:
                items.append(Paragraph(inline_markup(element), self._styles["page_header"]))
        return items

    def _header_table(self, node: Tag) -> Table:
        rows = []
        for tr in node.find_all("tr"):
            cells = tr.find_all(["td", "th"], recursive=False)
            row = []
            for cell in cells:
                style = ParagraphStyle(
                    "page_header_cell",
                    parent=self._styles["page_header"],
                    alignment=TA_RIGHT if cell.get("align") == "right" else self._styles["page_header"].alignment,
                )
                row.append(Paragraph(inline_markup(cell), style))
            if row:
                rows.append(row)
        n_cols = max((len(r) for r in rows), default=1)
        table = Table(rows or [[""]], colWidths=[self._content_width() / n_cols] * n_cols)
        table.setStyle(
            TableStyle(
                [
                    ("LINEBELOW", (0, -1), (-1, -1), 0.75, _hex(HEADER_BG_COLOR)),
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                    ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                    ("VALIGN", (0, 0), (-1, -1), "BOTTOM"),
                ]
            )
        )
        return table

    def _decorate_page(self, canvas: Any, options: PdfOptions, header: list[Flowable]) -> None:
        canvas.saveState()
        width, height = self._page_size

        # Header
        y = height - self._margin
        for flowable in header:
            _, h = flowable.wrap(self._content_width(), HEADER_BAND_INCHES * inch)
            flowable.drawOn(canvas, self._margin, y - h)
            y -= h

        # Footer
        if options.page_numbers == PageNumbers.NUMERIC:
            canvas.setFont(self._config.font_family, 8)
            canvas.setFillColor(rl_colors.grey)
            canvas.drawRightString(width - self._margin, self._margin, f"Page {canvas.getPageNumber()}")

        canvas.restoreState()
