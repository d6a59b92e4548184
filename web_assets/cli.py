"""Cyclopts CLI entrypoint for rendering page heads and checking CSS lists.

The ``assets`` console script defined here loads an ``assets.yaml`` file,
replays a page description into a :class:`~web_assets.assets.WebAssets`
accumulator, and writes the rendered ``<head>`` block. It can also validate a
CSS list manifest against the asset directory, which is handy in CI before a
deploy.

Examples
--------
Render the head of the default page to stdout:

>>> from web_assets.cli import main
>>> main()  # doctest: +SKIP

Validate a list manifest:

>>> from web_assets.cli import app
>>> app(["check-list", "lists/shop.txt", "--config", "assets.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .assets import WebAssets
from .config import load_assets_config
from .head import HeadBuilder, build_page_assets

DEFAULT_CONFIG = Path("config/assets.yaml")

app = App(name="assets", config=cyclopts.config.Env("WEB_ASSETS_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@app.command(help="Render the <head> block of a configured page.")
def render(
    *,
    page: typ.Annotated[
        str | None, Parameter(help="Page identifier", env_var="WEB_ASSETS_PAGE")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to assets config", env_var="WEB_ASSETS_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write the head block here instead of stdout"),
    ] = None,
) -> None:
    """Render the head block for one page of the asset configuration.

    Parameters
    ----------
    page : str or None, optional
        Page key to render; ``None`` selects the configured default page.
    config : Path, optional
        Path to the ``assets.yaml`` file (overridable via
        ``WEB_ASSETS_CONFIG``).
    output : Path or None, optional
        Destination file. When omitted the markup is printed.

    Raises
    ------
    AssetNotFoundError
        If the page references a stylesheet or script missing from disk.
    MalformedListError
        If a referenced CSS list manifest is malformed.
    """
    site_config = load_assets_config(config)
    page_config = site_config.get_page(page)
    builder = HeadBuilder(build_page_assets(page_config, site_config.settings))
    if output is None:
        print(builder.render(), end="")
        return
    written = builder.run(output)
    print(f"wrote {_format_path(written)}")


@app.command(name="check-list", help="Validate a CSS list manifest.")
def check_list(
    location: str,
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to assets config", env_var="WEB_ASSETS_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Resolve every entry of a CSS list manifest and print its URL.

    Parameters
    ----------
    location : str
        Manifest URL, relative to the CSS root or root-relative.
    config : Path, optional
        Path to the ``assets.yaml`` file providing the asset directory.

    Raises
    ------
    AssetNotFoundError
        If the manifest or one of its entries is missing; the message names
        the manifest line.
    MalformedListError
        If the manifest has no header or is not valid UTF-8.
    """
    site_config = load_assets_config(config)
    assets = WebAssets(site_config.settings)
    assets.add_css_list(location)
    for element in assets.css_elements():
        print(element.attributes["href"])


def main() -> None:
    """Invoke the Cyclopts application that powers the ``assets`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
