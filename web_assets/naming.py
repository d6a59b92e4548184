"""Map symbolic asset locations onto root-relative URLs.

Pages refer to their assets either by URL (``foo.css``, ``/css/site.css``,
``https://cdn.example/x.css``) or by a namespaced identifier such as
``Acme.Shop.CartPage``. Identifiers are translated into a slash-separated
namespace (``Acme/Shop/CartPage``) that doubles as a RequireJS module name and
as the path of the page-specific CSS/JS file below the configured URL roots.

Examples
--------
>>> identifier_to_namespace("Acme.Shop.CartPage")
'Acme/Shop/CartPage'
>>> identifier_to_namespace("Acme\\\\Shop", separator="\\\\")
'Acme/Shop'
>>> combine_url("/css/", "site.css")
'/css/site.css'
>>> combine_url("/css/", "https://cdn.example/x.css")
'https://cdn.example/x.css'
>>> is_identifier("Acme.Shop.CartPage"), is_identifier("site.css")
(True, False)
>>> normalize_url_path("/css/shop/../foo.css")
'/css/foo.css'
"""

from __future__ import annotations

import posixpath
import re
from urllib.parse import urlsplit

_SEGMENT = r"[A-Za-z_][A-Za-z0-9_]*"
_FILE_SUFFIXES = frozenset({"css", "js"})


def identifier_to_namespace(identifier: str, separator: str = ".") -> str:
    """Return the slash-separated namespace for ``identifier``."""
    return identifier.replace(separator, "/")


def is_identifier(location: str, separator: str = ".") -> bool:
    """Return whether ``location`` reads as a namespaced identifier.

    An identifier has at least two word segments joined by ``separator``. A
    trailing ``css`` or ``js`` segment marks a filename, not an identifier.
    """
    sep = re.escape(separator)
    if not re.fullmatch(rf"{_SEGMENT}(?:{sep}{_SEGMENT})+", location):
        return False
    last = location.rsplit(separator, 1)[-1]
    return last.lower() not in _FILE_SUFFIXES


def is_relative_url(url: str) -> bool:
    """Return whether ``url`` has neither a scheme nor a host."""
    parts = urlsplit(url)
    return not (parts.scheme or parts.netloc)


def combine_url(base: str, url: str) -> str:
    """Join ``url`` onto ``base`` unless it is already root-relative or absolute."""
    if not is_relative_url(url) or url.startswith("/"):
        return url
    return posixpath.join(base, url)


def normalize_root_url(url: str) -> str:
    """Return ``url`` with exactly one leading and one trailing slash."""
    stripped = url.strip().strip("/")
    return f"/{stripped}/" if stripped else "/"


def normalize_url_path(url: str) -> str | None:
    """Collapse the ``.`` and ``..`` segments of a root-relative URL.

    Returns ``None`` when a ``..`` segment climbs above the URL root.
    """
    depth = 0
    for segment in url.split("/"):
        if segment == "..":
            depth -= 1
        elif segment not in ("", "."):
            depth += 1
        if depth < 0:
            return None
    return posixpath.normpath(url)


__all__ = [
    "combine_url",
    "identifier_to_namespace",
    "is_identifier",
    "is_relative_url",
    "normalize_root_url",
    "normalize_url_path",
]
