"""Per-request accumulator for page title, meta tags, and CSS/JS assets.

Request handlers register what a page needs while they run; the layout asks
for the rendered fragments once the body is known. Every stylesheet and script
referenced by a relative URL is checked against the asset directory when it is
registered, so a missing file fails the request that introduced it rather
than producing a broken page.

Examples
--------
>>> from pathlib import Path
>>> from web_assets import WebAssets, WebAssetsConfig
>>> assets = WebAssets(WebAssetsConfig(asset_dir=Path("public")))  # doctest: +SKIP
>>> assets.set_title("Shop")  # doctest: +SKIP
>>> assets.append_title("Cart")  # doctest: +SKIP
>>> assets.add_css_file("Acme.Shop.Cart")  # doctest: +SKIP
>>> str(assets.render_title())  # doctest: +SKIP
'<title>Shop - Cart</title>'
"""

from __future__ import annotations

import dataclasses as dc
import json
import logging
import typing as typ

from markupsafe import Markup

from ._constants import TITLE_IGNORED, TITLE_SEPARATOR
from .dirs import CoreDirs, file_exists, url_to_path
from .errors import AssetNotFoundError, AssetUrlError
from .html import HtmlElement, HtmlSerializer, serialize_all
from .manifest import read_css_list
from .naming import (
    combine_url,
    identifier_to_namespace,
    is_identifier,
    is_relative_url,
    normalize_url_path,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import WebAssetsConfig
    from .dirs import AssetDirs, ExistenceCheck
    from .html import MarkupSerializer

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class PageFragments:
    """Markup produced by a single render pass."""

    meta: Markup
    title: Markup
    css: Markup
    js: Markup

    def __html__(self) -> str:
        return self.meta + self.title + self.css + self.js


class WebAssets:
    """Accumulate presentation metadata for one page and render it as HTML."""

    def __init__(
        self,
        config: WebAssetsConfig,
        *,
        dirs: AssetDirs | None = None,
        exists: ExistenceCheck | None = None,
        serializer: MarkupSerializer | None = None,
    ) -> None:
        """Initialize an empty accumulator.

        Parameters
        ----------
        config : WebAssetsConfig
            URL roots, encoding, and naming conventions of the site.
        dirs : AssetDirs, optional
            Resolver for the asset directory; defaults to
            ``CoreDirs(config.asset_dir)``.
        exists : Callable[[Path], bool], optional
            Existence check applied to relative asset URLs; defaults to
            :func:`~web_assets.dirs.file_exists`.
        serializer : MarkupSerializer, optional
            HTML serializer; defaults to :class:`~web_assets.html.HtmlSerializer`.
        """
        self.config = config
        self.dirs = dirs or CoreDirs(config.asset_dir)
        self.exists = exists or file_exists
        self.serializer = serializer or HtmlSerializer()
        self._title = ""
        self._css_sources: list[dict[str, str | None]] = []
        self._css_lines: list[str] = []
        self._java_script = ""
        self._js_trailer: dict[str, str] | None = None
        self._keywords: list[str] = []
        self._meta_attributes: list[dict[str, str]] = []

    @property
    def title(self) -> str:
        """Return the page title."""
        return self._title

    def set_title(self, title: str | None) -> None:
        """Replace the page title; ``None`` clears it."""
        self._title = "" if title is None else str(title)

    def append_title(self, addendum: str | None) -> None:
        """Append ``addendum`` to the title, separated by ``" - "``."""
        if addendum is None or str(addendum) in TITLE_IGNORED:
            return
        if self._title:
            self._title += TITLE_SEPARATOR
        self._title += str(addendum)

    def push_title(self, prefix: str | None) -> None:
        """Prepend ``prefix`` to the title, separated by ``" - "``."""
        if prefix is None or str(prefix) in TITLE_IGNORED:
            return
        if self._title:
            self._title = f"{prefix}{TITLE_SEPARATOR}{self._title}"
        else:
            self._title = str(prefix)

    def add_css_file(self, location: str, media: str | None = None) -> None:
        """Append a stylesheet given by URL or namespaced identifier.

        Parameters
        ----------
        location : str
            URL of the stylesheet (relative URLs are combined with the CSS
            root) or an identifier such as ``Acme.Shop.Cart``, which maps to
            ``<css root>Acme/Shop/Cart[.<media>].css``.
        media : str, optional
            Media the stylesheet targets; ``None`` means all media.

        Raises
        ------
        AssetNotFoundError
            If the URL is relative and no such file exists below the asset
            directory.
        AssetUrlError
            If a relative URL climbs above the URL root.
        """
        self._css_sources.append(self._css_source(location, media))

    def push_css_file(self, location: str, media: str | None = None) -> None:
        """Prepend a stylesheet; see :meth:`add_css_file`."""
        self._css_sources.insert(0, self._css_source(location, media))

    def css_identifier_to_url(self, identifier: str, media: str | None = None) -> str:
        """Return the root-relative URL of an identifier's stylesheet."""
        namespace = identifier_to_namespace(
            identifier, self.config.namespace_separator
        )
        suffix = f".{media}.css" if media is not None else ".css"
        return f"{self.config.css_root_url}{namespace}{suffix}"

    def add_css_line(self, line: str) -> None:
        """Append a snippet to the internal stylesheet."""
        self._css_lines.append(line)

    def push_css_line(self, line: str) -> None:
        """Prepend a snippet to the internal stylesheet."""
        self._css_lines.insert(0, line)

    def add_css_list(self, location: str, media: str | None = None) -> None:
        """Append every stylesheet named in a list manifest, in file order.

        Raises
        ------
        MalformedListError
            If the manifest lacks its header or an entry leaves the URL root.
        AssetNotFoundError
            If the manifest or one of its entries does not exist; the error
            names the manifest and the entry's line number. Nothing is
            registered in that case.
        """
        self._css_sources.extend(self._css_list(location, media))

    def push_css_list(self, location: str, media: str | None = None) -> None:
        """Prepend the stylesheets of a list manifest as one block."""
        self._css_sources[:0] = self._css_list(location, media)

    def add_js_call(
        self,
        namespace: str,
        function_name: str,
        args: cabc.Sequence[typ.Any] = (),
    ) -> None:
        """Call ``function_name`` of a RequireJS module once the page loads.

        Parameters
        ----------
        namespace : str
            RequireJS namespace (``Acme/Shop``) or identifier (``Acme.Shop``).
        function_name : str
            Function exported by the module.
        args : Sequence, optional
            JSON-serializable arguments.

        Raises
        ------
        AssetNotFoundError
            If ``<js root><namespace>.js`` does not exist.
        AssetUrlError
            If the namespace climbs above the JavaScript root.
        """
        namespace = self._js_namespace(namespace)
        self._require_file(self._js_namespace_to_url(namespace), kind="JavaScript")
        encoded = ",".join(json.dumps(arg) for arg in args)
        self._java_script += (
            f'require(["{namespace}"],function(page){{'
            f"'use strict';page.{function_name}({encoded});}});"
        )
        logger.debug("registered js call %s.%s", namespace, function_name)

    def set_js_main(self, namespace: str) -> None:
        """Load RequireJS with ``<js root><namespace>.main.js`` as data-main.

        Raises
        ------
        AssetNotFoundError
            If the main script does not exist.
        """
        namespace = self._js_namespace(namespace)
        main_url = self._checked_url(
            f"{self.config.js_root_url}{namespace}.main.js", kind="JavaScript"
        )
        self._require_file(main_url, kind="JavaScript")
        self._js_trailer = {
            "src": self._js_namespace_to_url(self.config.require_namespace),
            "data-main": main_url,
        }

    def set_js_trailer(self, src: str) -> None:
        """Emit a single script element for a prebuilt bundle; no existence check."""
        self._js_trailer = {"src": src}

    def add_meta_attributes(self, attributes: cabc.Mapping[str, str]) -> None:
        """Add a meta element with the given attributes."""
        self._meta_attributes.append(dict(attributes))

    def add_keyword(self, keyword: str) -> None:
        """Add a keyword to the keywords meta element."""
        self._keywords.append(keyword)

    def add_keywords(self, keywords: cabc.Iterable[str]) -> None:
        """Add several keywords to the keywords meta element."""
        self._keywords.extend(keywords)

    def css_elements(self) -> list[HtmlElement]:
        """Return link elements for every source plus the internal stylesheet."""
        elements = [
            HtmlElement("link", dict(source), void=True)
            for source in self._css_sources
        ]
        if self._css_lines:
            elements.append(
                HtmlElement(
                    "style",
                    {"type": "text/css", "media": "all"},
                    html="".join(self._css_lines),
                )
            )
        return elements

    def js_elements(self) -> list[HtmlElement]:
        """Return the inline script element and the trailer script element."""
        elements: list[HtmlElement] = []
        if self._java_script:
            js = f"require([],function(){{{self._java_script}}});"
            payload = json.dumps(js).replace("</", "<\\/")
            elements.append(
                HtmlElement(
                    "script",
                    {"type": "text/javascript"},
                    html=(
                        f"/*<![CDATA[*/{self.config.inline_js_variable}="
                        f"{payload}/*]]>*/"
                    ),
                )
            )
        if self._js_trailer:
            elements.append(HtmlElement("script", dict(self._js_trailer)))
        return elements

    def meta_elements(self) -> list[HtmlElement]:
        """Return the keywords, explicit, and charset meta elements, in order."""
        attribute_sets: list[dict[str, str | None]] = []
        if self._keywords:
            attribute_sets.append(
                {"name": "keywords", "content": ",".join(self._keywords)}
            )
        attribute_sets.extend(dict(attrs) for attrs in self._meta_attributes)
        attribute_sets.append({"charset": self.config.encoding})
        return [HtmlElement("meta", attrs, void=True) for attrs in attribute_sets]

    def title_elements(self) -> list[HtmlElement]:
        """Return the title element, or nothing for an empty title."""
        if not self._title:
            return []
        return [HtmlElement("title", text=self._title)]

    def render_css(self) -> Markup:
        """Render the stylesheet links and the internal stylesheet."""
        return serialize_all(self.serializer, self.css_elements())

    def render_js(self) -> Markup:
        """Render the inline script and the trailer script."""
        return serialize_all(self.serializer, self.js_elements())

    def render_meta(self) -> Markup:
        """Render the meta elements."""
        return serialize_all(self.serializer, self.meta_elements())

    def render_title(self) -> Markup:
        """Render the title element."""
        return serialize_all(self.serializer, self.title_elements())

    def render(self) -> PageFragments:
        """Render every fragment from the current state."""
        return PageFragments(
            meta=self.render_meta(),
            title=self.render_title(),
            css=self.render_css(),
            js=self.render_js(),
        )

    def _css_source(self, location: str, media: str | None) -> dict[str, str | None]:
        if is_identifier(location, self.config.namespace_separator):
            url = self.css_identifier_to_url(location, media)
        else:
            url = combine_url(self.config.css_root_url, location)
        if is_relative_url(url):
            url = self._checked_url(url, kind="CSS")
            self._require_file(url, kind="CSS")
        logger.debug("registered stylesheet %s (media=%s)", url, media)
        return self._css_entry(url, media)

    def _css_list(
        self, location: str, media: str | None
    ) -> list[dict[str, str | None]]:
        manifest_url = self._checked_url(
            combine_url(self.config.css_root_url, location), kind="CSS list"
        )
        manifest_path = self._require_file(manifest_url, kind="CSS list")
        sources: list[dict[str, str | None]] = []
        for entry in read_css_list(manifest_path, manifest_url):
            if is_relative_url(entry.url):
                full_path = url_to_path(self.dirs.asset_dir(), entry.url)
                if not self.exists(full_path):
                    raise AssetNotFoundError(
                        full_path, kind="CSS", manifest=manifest_path, line=entry.line
                    )
            sources.append(self._css_entry(entry.url, media))
        logger.debug("loaded %d stylesheets from %s", len(sources), manifest_url)
        return sources

    @staticmethod
    def _css_entry(url: str, media: str | None) -> dict[str, str | None]:
        return {"href": url, "media": media, "rel": "stylesheet", "type": "text/css"}

    def _js_namespace(self, namespace: str) -> str:
        if is_identifier(namespace, self.config.namespace_separator):
            return identifier_to_namespace(namespace, self.config.namespace_separator)
        return namespace

    def _js_namespace_to_url(self, namespace: str) -> str:
        return f"{self.config.js_root_url}{namespace}.js"

    @staticmethod
    def _checked_url(url: str, *, kind: str) -> str:
        normalized = normalize_url_path(url)
        if normalized is None:
            raise AssetUrlError(url, kind=kind)
        return normalized

    def _require_file(self, url: str, *, kind: str) -> Path:
        full_path = url_to_path(
            self.dirs.asset_dir(), self._checked_url(url, kind=kind)
        )
        if not self.exists(full_path):
            raise AssetNotFoundError(full_path, kind=kind)
        return full_path


__all__ = ["PageFragments", "WebAssets"]
