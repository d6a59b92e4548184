"""Unit tests for location and namespace mapping helpers."""

from __future__ import annotations

import pytest

from web_assets.naming import (
    combine_url,
    identifier_to_namespace,
    is_identifier,
    is_relative_url,
    normalize_root_url,
    normalize_url_path,
)


def test_identifier_to_namespace_default_separator() -> None:
    assert identifier_to_namespace("Acme.Shop.Cart") == "Acme/Shop/Cart"


def test_identifier_to_namespace_backslash_separator() -> None:
    assert identifier_to_namespace("Acme\\Shop\\Cart", "\\") == "Acme/Shop/Cart"


@pytest.mark.parametrize(
    ("location", "expected"),
    [
        ("Acme.Shop.Cart", True),
        ("Acme.Cart", True),
        ("site.css", False),
        ("Acme.Shop.js", False),
        ("site", False),
        ("shop/site.css", False),
        ("/css/site.css", False),
        ("Acme.Shop-Cart", False),
    ],
)
def test_is_identifier(location: str, expected: bool) -> None:
    assert is_identifier(location) is expected, (
        f"expected is_identifier({location!r}) to be {expected}"
    )


def test_is_identifier_respects_separator() -> None:
    assert is_identifier("Acme\\Shop", "\\")
    assert not is_identifier("Acme.Shop", "\\")


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("foo.css", True),
        ("/css/foo.css", True),
        ("https://cdn.example/foo.css", False),
        ("//cdn.example/foo.css", False),
    ],
)
def test_is_relative_url(url: str, expected: bool) -> None:
    assert is_relative_url(url) is expected


def test_combine_url() -> None:
    assert combine_url("/css/", "foo.css") == "/css/foo.css"
    assert combine_url("/css/", "shop/foo.css") == "/css/shop/foo.css"
    assert combine_url("/css/", "/static/foo.css") == "/static/foo.css"
    assert combine_url("/css/", "https://cdn.example/a.css") == (
        "https://cdn.example/a.css"
    )


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("css", "/css/"),
        ("/css", "/css/"),
        ("css/", "/css/"),
        ("//", "/"),
        ("a/b", "/a/b/"),
    ],
)
def test_normalize_root_url(url: str, expected: str) -> None:
    assert normalize_root_url(url) == expected


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("/css/foo.css", "/css/foo.css"),
        ("/css/./shop/../foo.css", "/css/foo.css"),
        ("/css/../foo.css", "/foo.css"),
        ("/css/../../foo.css", None),
        ("/css/shop/../../../foo.css", None),
    ],
)
def test_normalize_url_path(url: str, expected: str | None) -> None:
    assert normalize_url_path(url) == expected
