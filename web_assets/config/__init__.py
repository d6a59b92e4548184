"""Load and validate web asset configuration YAML.

This subpackage parses an ``assets.yaml`` file into typed dataclasses: the
site-wide :class:`WebAssetsConfig` (asset directory, URL roots, encoding, and
naming conventions) and one :class:`PageAssetsConfig` per described page. The
primary entry point is :func:`load_assets_config`.

Examples
--------
>>> from pathlib import Path
>>> from web_assets.config import load_assets_config
>>> site = load_assets_config(Path("config/assets.yaml"))  # doctest: +SKIP
>>> site.get_page("cart").title  # doctest: +SKIP
['Shop', 'Cart']
"""

from .loader import load_assets_config
from .models import (
    AssetsSiteConfig,
    CssEntryConfig,
    JsCallConfig,
    PageAssetsConfig,
    WebAssetsConfig,
    WebAssetsConfigError,
)

__all__ = [
    "AssetsSiteConfig",
    "CssEntryConfig",
    "JsCallConfig",
    "PageAssetsConfig",
    "WebAssetsConfig",
    "WebAssetsConfigError",
    "load_assets_config",
]
