"""Render a complete ``<head>`` block from an asset accumulator.

Layouts that are not themselves Jinja templates can still emit a consistent
document head: :class:`HeadBuilder` loads ``head.jinja`` from the package
templates, hands it the rendered fragments of a :class:`WebAssets`, and either
returns the markup or writes it to disk. :func:`build_page_assets` replays a
page description from ``assets.yaml`` into a fresh accumulator, which is how
the ``assets render`` command produces its output.

>>> from pathlib import Path
>>> from web_assets.config import load_assets_config
>>> site = load_assets_config(Path("assets.yaml"))  # doctest: +SKIP
>>> assets = build_page_assets(site.get_page("cart"), site.settings)  # doctest: +SKIP
>>> HeadBuilder(assets).run(Path("public/cart-head.html"))  # doctest: +SKIP
PosixPath('public/cart-head.html')
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .assets import WebAssets

if typ.TYPE_CHECKING:
    from .config import PageAssetsConfig, WebAssetsConfig


class HeadBuilder:
    """Render the document head of a page from its accumulated assets."""

    def __init__(
        self, assets: WebAssets, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        assets : WebAssets
            Accumulator holding the page's title, meta tags, and assets.
        templates_dir : Path, optional
            Directory containing ``head.jinja``. Defaults to
            ``web_assets/templates``.
        """
        self.assets = assets
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("head.jinja")

    def render(self) -> str:
        """Return the rendered head block, ending with a newline."""
        html = self.template.render(fragments=self.assets.render())
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output_path: Path) -> Path:
        """Render the head block and write it to ``output_path`` as UTF-8."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


def build_page_assets(
    page: PageAssetsConfig, settings: WebAssetsConfig, **collaborators: typ.Any
) -> WebAssets:
    """Replay a page description into a new :class:`WebAssets`.

    Parameters
    ----------
    page : PageAssetsConfig
        Page description loaded from ``assets.yaml``.
    settings : WebAssetsConfig
        Shared site settings.
    **collaborators
        Forwarded to :class:`WebAssets` (``dirs``, ``exists``, ``serializer``).

    Returns
    -------
    WebAssets
        Accumulator with every instruction of ``page`` applied in order.

    Raises
    ------
    AssetNotFoundError
        If the description references a missing stylesheet or script.
    MalformedListError
        If a referenced CSS list manifest is malformed.
    """
    assets = WebAssets(settings, **collaborators)
    for part in page.title:
        assets.append_title(part)
    assets.add_keywords(page.keywords)
    for attributes in page.meta:
        assets.add_meta_attributes(attributes)
    for entry in page.css:
        match (entry.kind, entry.push):
            case ("file", False):
                assets.add_css_file(entry.value, entry.media)
            case ("file", True):
                assets.push_css_file(entry.value, entry.media)
            case ("list", False):
                assets.add_css_list(entry.value, entry.media)
            case ("list", True):
                assets.push_css_list(entry.value, entry.media)
            case ("line", False):
                assets.add_css_line(entry.value)
            case ("line", True):
                assets.push_css_line(entry.value)
    for call in page.js_calls:
        assets.add_js_call(call.namespace, call.function, call.args)
    if page.js_main:
        assets.set_js_main(page.js_main)
    return assets


__all__ = ["HeadBuilder", "build_page_assets"]
