"""Shared fixtures building a small on-disk asset tree.

The tree mirrors the URL space of a site: ``/css/foo.css`` lives at
``<asset_dir>/css/foo.css``. Tests register assets against it so existence
checks run against real files.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from web_assets import WebAssets, WebAssetsConfig

ASSET_FILES = (
    "css/foo.css",
    "css/bar.css",
    "css/baz.css",
    "css/Acme/Shop/Cart.css",
    "css/Acme/Shop/Cart.print.css",
    "css/vendor/normalize.css",
    "css/shop/base.css",
    "css/shop/widgets/cart.css",
    "js/require.js",
    "js/Acme/Shop.js",
    "js/Acme/Shop/Cart.js",
    "js/Acme/Shop/Cart.main.js",
)


def _write_list(asset_dir: Path, url: str, *lines: str) -> Path:
    path = asset_dir.joinpath(*url.strip("/").split("/"))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    """Return a populated asset directory."""
    root = tmp_path / "public"
    for relative in ASSET_FILES:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("/* fixture */\n", encoding="utf-8")
    return root


@pytest.fixture
def config(asset_dir: Path) -> WebAssetsConfig:
    """Return settings with the default URL roots and charset."""
    return WebAssetsConfig(asset_dir=asset_dir)


@pytest.fixture
def write_list(asset_dir: Path) -> typ.Callable[..., Path]:
    """Return a helper writing a CSS list manifest at a root-relative URL."""

    def _write(url: str, *lines: str) -> Path:
        return _write_list(asset_dir, url, *lines)

    return _write


@pytest.fixture
def assets(config: WebAssetsConfig) -> WebAssets:
    """Return an empty accumulator bound to the fixture asset tree."""
    return WebAssets(config)
