"""Track per-request page metadata and render it into HTML fragments.

A :class:`WebAssets` instance collects the title, meta tags, stylesheets,
inline CSS, and RequireJS calls a page needs while the request is handled,
then renders them once the layout asks for them.

Exports
-------
- ``WebAssets``: the accumulator/renderer.
- ``WebAssetsConfig``: site-wide settings (asset directory, URL roots).
- ``AssetNotFoundError`` / ``MalformedListError`` / ``AssetUrlError``:
  registration failures.
- ``app`` / ``main``: the ``assets`` command line.

Examples
--------
>>> from pathlib import Path
>>> from web_assets import WebAssets, WebAssetsConfig
>>> assets = WebAssets(WebAssetsConfig(asset_dir=Path(".")))
>>> assets.append_title("Shop")
>>> assets.push_title("Acme")
>>> assets.title
'Acme - Shop'
"""

from __future__ import annotations

from .assets import PageFragments, WebAssets
from .cli import app, main
from .config import WebAssetsConfig
from .errors import (
    AssetNotFoundError,
    AssetUrlError,
    MalformedListError,
    WebAssetsError,
)
from .html import HtmlElement, HtmlSerializer

__all__ = [
    "AssetNotFoundError",
    "AssetUrlError",
    "HtmlElement",
    "HtmlSerializer",
    "MalformedListError",
    "PageFragments",
    "WebAssets",
    "WebAssetsConfig",
    "WebAssetsError",
    "app",
    "main",
]
