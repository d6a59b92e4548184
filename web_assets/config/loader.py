"""Load web asset configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from web_assets._constants import (
    DEFAULT_CSS_ROOT_URL,
    DEFAULT_ENCODING,
    DEFAULT_INLINE_JS_VARIABLE,
    DEFAULT_JS_ROOT_URL,
    DEFAULT_NAMESPACE_SEPARATOR,
    DEFAULT_REQUIRE_NAMESPACE,
)

from .helpers import (
    _build_css_entries,
    _build_js_calls,
    _build_meta,
    _optional_str,
    _resolve_asset_dir,
    _string_list,
)
from .models import (
    AssetsSiteConfig,
    PageAssetsConfig,
    WebAssetsConfig,
    WebAssetsConfigError,
)


def load_assets_config(path: Path) -> AssetsSiteConfig:
    """Load the YAML file describing asset settings and page metadata.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``assets.yaml``). A relative ``defaults.asset_dir`` is resolved against
        the directory holding this file.

    Returns
    -------
    AssetsSiteConfig
        Shared :class:`WebAssetsConfig` settings plus every page description.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    WebAssetsConfigError
        If required settings are missing or a page entry is malformed.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from web_assets.config import load_assets_config
    >>> config = load_assets_config(Path("assets.yaml"))  # doctest: +SKIP
    >>> config.settings.css_root_url  # doctest: +SKIP
    '/css/'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults") or {}
    if not isinstance(defaults, dict):
        msg = "'defaults' must be a mapping of setting names to values."
        raise WebAssetsConfigError(msg)

    settings = _build_settings(defaults, base_dir=path.resolve().parent)

    pages_raw = raw.get("pages") or {}
    if not isinstance(pages_raw, dict):
        msg = "'pages' must be a mapping of page keys to page descriptions."
        raise WebAssetsConfigError(msg)

    pages: dict[str, PageAssetsConfig] = {}
    for key, payload in pages_raw.items():
        match payload:
            case dict():
                pages[str(key)] = _build_page_config(key=str(key), payload=payload)
            case None:
                pages[str(key)] = PageAssetsConfig(key=str(key))
            case _:
                msg = f"Page '{key}' must be a mapping."
                raise WebAssetsConfigError(msg)

    return AssetsSiteConfig(
        settings=settings,
        pages=pages,
        default_page=_optional_str(defaults.get("default_page")),
    )


def _build_settings(
    defaults: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> WebAssetsConfig:
    """Build the shared settings from the ``defaults`` block.

    Root URLs, the namespace separator, and the inline variable name are
    validated by :class:`WebAssetsConfig` itself.
    """

    def setting(name: str, default: str) -> str:
        value = defaults.get(name, default)
        return "" if value is None else str(value)

    return WebAssetsConfig(
        asset_dir=_resolve_asset_dir(defaults.get("asset_dir"), base_dir),
        css_root_url=setting("css_root_url", DEFAULT_CSS_ROOT_URL),
        js_root_url=setting("js_root_url", DEFAULT_JS_ROOT_URL),
        encoding=_optional_str(defaults.get("encoding", DEFAULT_ENCODING)),
        namespace_separator=setting(
            "namespace_separator", DEFAULT_NAMESPACE_SEPARATOR
        ),
        inline_js_variable=setting("inline_js_variable", DEFAULT_INLINE_JS_VARIABLE),
        require_namespace=setting("require_namespace", DEFAULT_REQUIRE_NAMESPACE),
    )


def _build_page_config(
    *, key: str, payload: typ.Mapping[str, typ.Any]
) -> PageAssetsConfig:
    """Build a PageAssetsConfig for a single page entry."""
    return PageAssetsConfig(
        key=key,
        title=_string_list(payload.get("title"), field=f"pages.{key}.title"),
        keywords=_string_list(payload.get("keywords"), field=f"pages.{key}.keywords"),
        meta=_build_meta(payload.get("meta"), page=key),
        css=_build_css_entries(payload.get("css"), page=key),
        js_calls=_build_js_calls(payload.get("js_calls"), page=key),
        js_main=_optional_str(payload.get("js_main")),
    )


__all__ = ["load_assets_config"]
