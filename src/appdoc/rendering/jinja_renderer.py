"""Jinja2 markup renderer — binds a view model into an HTML template.

Templates are addressed by the full address the generator builds
(base URI + template path).  ``file://`` URIs and plain filesystem paths
are supported; the view model is exposed to the template as ``model``.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Callable
from urllib.parse import unquote, urlsplit
from urllib.request import url2pathname

from jinja2 import Environment, FunctionLoader, StrictUndefined, TemplateNotFound

from appdoc.exceptions import TemplateNotFoundError

log = logging.getLogger(__name__)

_CENTS = Decimal("0.01")


def format_money(value: Decimal | int | float | None) -> str:
    """Two-decimal display string with thousands separators, e.g. ``12,345.60``."""
    if value is None:
        return ""
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_UP):,}"


def format_date(value: date | None) -> str:
    """Long-form date, e.g. ``05 March 2024``."""
    if value is None:
        return ""
    return value.strftime("%d %B %Y")


def address_to_path(address: str) -> Path | None:
    """Map a template address to a local file path, or ``None`` if unsupported."""
    parts = urlsplit(address)
    # Single-letter "schemes" are Windows drive letters
    if parts.scheme == "" or len(parts.scheme) == 1:
        return Path(address)
    if parts.scheme == "file" and parts.netloc in ("", "localhost"):
        return Path(url2pathname(unquote(parts.path)))
    return None


class _AddressEnvironment(Environment):
    """Resolves relative ``{% extends %}``/``{% include %}`` names next to the parent."""

    def join_path(self, template: str, parent: str) -> str:
        if urlsplit(template).scheme or template.startswith("/") or "/" not in parent:
            return template
        return f"{parent.rsplit('/', 1)[0]}/{template}"


class JinjaViewRenderer:
    """Renders templates located by address with a shared Jinja2 environment.

    Compiled templates are cached by the environment; nothing else is
    kept between calls.
    """

    def __init__(self, *, auto_reload: bool = False) -> None:
        self._env = _AddressEnvironment(
            loader=FunctionLoader(self._load),
            autoescape=True,
            auto_reload=auto_reload,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["money"] = format_money
        self._env.filters["longdate"] = format_date

    @property
    def environment(self) -> Environment:
        return self._env

    def render_from_path(self, path: str, view_model: Any) -> str:
        """Render the template at *path* with *view_model* bound as ``model``.

        Raises:
            TemplateNotFoundError: If the address is unsupported or the file is missing.
        """
        try:
            template = self._env.get_template(path)
        except TemplateNotFound as exc:
            raise TemplateNotFoundError(f"Template not found: {path}") from exc
        html = template.render(model=view_model)
        log.debug("Rendered %s (%d chars)", path, len(html))
        return html

    def _load(self, address: str) -> tuple[str, str, Callable[[], bool]] | None:
        """Jinja loader hook: resolve *address* and read the template source."""
        path = address_to_path(address)
        if path is None:
            log.debug("Unsupported template address scheme: %s", address)
            return None
        if not path.is_file():
            return None

        source = path.read_text(encoding="utf-8")
        mtime = path.stat().st_mtime

        def uptodate() -> bool:
            try:
                return path.stat().st_mtime == mtime
            except OSError:
                return False

        return source, str(path), uptodate
