"""Typed dataclasses describing web asset configuration structures."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from pathlib import Path

from web_assets._constants import (
    DEFAULT_CSS_ROOT_URL,
    DEFAULT_ENCODING,
    DEFAULT_INLINE_JS_VARIABLE,
    DEFAULT_JS_ROOT_URL,
    DEFAULT_NAMESPACE_SEPARATOR,
    DEFAULT_REQUIRE_NAMESPACE,
)
from web_assets.naming import normalize_root_url

_JS_VARIABLE = re.compile(r"[A-Za-z_$][\w$]*(?:\.[A-Za-z_$][\w$]*)*", re.ASCII)


class WebAssetsConfigError(ValueError):
    """Raised when the asset configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class WebAssetsConfig:
    """Settings shared by every accumulator of a site.

    Attributes
    ----------
    asset_dir : Path
        Directory mirroring the URL space of the site's static files.
    css_root_url : str
        Root-relative URL under which stylesheets live; normalized to one
        leading and one trailing slash.
    js_root_url : str
        Root-relative URL under which scripts live; normalized like
        ``css_root_url``.
    encoding : str or None
        Value of the ``charset`` meta element; ``None`` omits the attribute.
    namespace_separator : str
        Separator used by namespaced identifiers (``Acme.Shop.Cart``).
    inline_js_variable : str
        Global JavaScript variable receiving the inline script.
    require_namespace : str
        Namespace of the RequireJS loader below ``js_root_url``.
    """

    asset_dir: Path
    css_root_url: str = DEFAULT_CSS_ROOT_URL
    js_root_url: str = DEFAULT_JS_ROOT_URL
    encoding: str | None = DEFAULT_ENCODING
    namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR
    inline_js_variable: str = DEFAULT_INLINE_JS_VARIABLE
    require_namespace: str = DEFAULT_REQUIRE_NAMESPACE

    def __post_init__(self) -> None:
        self.asset_dir = Path(self.asset_dir)
        self.css_root_url = _root_url(self.css_root_url, field="css_root_url")
        self.js_root_url = _root_url(self.js_root_url, field="js_root_url")
        if not self.namespace_separator or "/" in self.namespace_separator:
            msg = "'namespace_separator' must be a non-empty string without '/'."
            raise WebAssetsConfigError(msg)
        if not _JS_VARIABLE.fullmatch(self.inline_js_variable or ""):
            msg = (
                "'inline_js_variable' must be a JavaScript identifier or dotted "
                f"property path, got {self.inline_js_variable!r}."
            )
            raise WebAssetsConfigError(msg)


def _root_url(value: str | None, *, field: str) -> str:
    if value is None or not str(value).strip():
        msg = f"'{field}' must not be empty."
        raise WebAssetsConfigError(msg)
    return normalize_root_url(str(value))


@dc.dataclass(slots=True)
class CssEntryConfig:
    """One stylesheet instruction of a page description."""

    kind: typ.Literal["file", "list", "line"]
    value: str
    media: str | None = None
    push: bool = False


@dc.dataclass(slots=True)
class JsCallConfig:
    """A RequireJS function call registered for a page."""

    namespace: str
    function: str
    args: list[typ.Any] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class PageAssetsConfig:
    """Presentation metadata of a single page."""

    key: str
    title: list[str] = dc.field(default_factory=list)
    keywords: list[str] = dc.field(default_factory=list)
    meta: list[dict[str, str]] = dc.field(default_factory=list)
    css: list[CssEntryConfig] = dc.field(default_factory=list)
    js_calls: list[JsCallConfig] = dc.field(default_factory=list)
    js_main: str | None = None


@dc.dataclass(slots=True)
class AssetsSiteConfig:
    """Shared settings alongside the configured page descriptions."""

    settings: WebAssetsConfig
    pages: dict[str, PageAssetsConfig]
    default_page: str | None = None

    def get_page(self, page_id: str | None) -> PageAssetsConfig:
        """Return the requested page or fall back to the configured default."""
        if page_id is None:
            return self._get_default_page()
        try:
            return self.pages[page_id]
        except KeyError as exc:
            available = ", ".join(sorted(self.pages))
            msg = f"Unknown page '{page_id}'. Known pages: {available}"
            raise KeyError(msg) from exc

    def _get_default_page(self) -> PageAssetsConfig:
        if self.default_page and self.default_page in self.pages:
            return self.pages[self.default_page]
        if not self.pages:
            msg = "No pages configured in assets file."
            raise WebAssetsConfigError(msg)
        first_key = next(iter(self.pages))
        return self.pages[first_key]


__all__ = [
    "AssetsSiteConfig",
    "CssEntryConfig",
    "JsCallConfig",
    "PageAssetsConfig",
    "WebAssetsConfig",
    "WebAssetsConfigError",
]
