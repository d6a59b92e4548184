"""Parse CSS list manifests.

A list manifest names several stylesheets that belong together, one per line::

    # css-list
    # Shop styles, in cascade order.
    base.css
    widgets/cart.css
    /css/vendor/normalize.css

The first line is the header and must start with ``#`` and contain the
keyword ``css-list``. Blank lines and ``#`` comments are skipped. Entries with
a leading slash are root-relative URLs; all other entries are relative to the
directory of the manifest itself.
"""

from __future__ import annotations

import codecs
import dataclasses as dc
import logging
import posixpath
import typing as typ

from ._constants import CSS_LIST_KEYWORD, LIST_COMMENT_PREFIX
from .errors import AssetNotFoundError, MalformedListError
from .naming import is_relative_url, normalize_url_path

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ListEntry:
    """One resolved manifest entry.

    Attributes
    ----------
    url : str
        Root-relative (or absolute) URL of the listed stylesheet.
    line : int
        1-based line number of the entry inside the manifest.
    """

    url: str
    line: int


def is_list_header(line: str) -> bool:
    """Return whether ``line`` is a valid CSS list header."""
    stripped = line.strip()
    return stripped.startswith(LIST_COMMENT_PREFIX) and CSS_LIST_KEYWORD in stripped


def parse_css_list(text: str, *, path: Path, manifest_url: str) -> list[ListEntry]:
    """Parse the manifest ``text`` loaded from ``path``.

    Parameters
    ----------
    text : str
        Manifest contents.
    path : Path
        Filesystem path of the manifest, used in error messages.
    manifest_url : str
        Root-relative URL of the manifest; relative entries resolve against
        its directory.

    Returns
    -------
    list[ListEntry]
        Entries in file order.

    Raises
    ------
    MalformedListError
        If the header is missing or an entry escapes the URL root.
    """
    lines = text.splitlines()
    if not lines or not is_list_header(lines[0]):
        msg = f"first line must be a '{LIST_COMMENT_PREFIX} {CSS_LIST_KEYWORD}' header"
        raise MalformedListError(path, msg, line=1)

    base = posixpath.dirname(manifest_url)
    entries: list[ListEntry] = []
    for number, raw in enumerate(lines[1:], start=2):
        entry = raw.strip()
        if not entry or entry.startswith(LIST_COMMENT_PREFIX):
            continue
        url = _resolve_entry(entry, base, path=path, line=number)
        logger.debug("list %s line %d -> %s", path, number, url)
        entries.append(ListEntry(url=url, line=number))
    return entries


def read_css_list(path: Path, manifest_url: str) -> list[ListEntry]:
    """Read and parse the manifest stored at ``path``.

    Raises
    ------
    AssetNotFoundError
        If the manifest cannot be opened.
    MalformedListError
        If the manifest is not valid UTF-8 or fails to parse.
    """
    try:
        data = path.read_bytes().removeprefix(codecs.BOM_UTF8)
    except FileNotFoundError as exc:
        raise AssetNotFoundError(path, kind="CSS list") from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        line = data.count(b"\n", 0, exc.start) + 1
        raise MalformedListError(path, "not valid UTF-8", line=line) from exc
    return parse_css_list(text, path=path, manifest_url=manifest_url)


def _resolve_entry(entry: str, base: str, *, path: Path, line: int) -> str:
    if not is_relative_url(entry):
        return entry
    joined = entry if entry.startswith("/") else posixpath.join(base, entry)
    normalized = normalize_url_path(joined)
    if normalized is None:
        msg = f"entry '{entry}' points outside the asset root"
        raise MalformedListError(path, msg, line=line)
    return normalized


__all__ = [
    "ListEntry",
    "is_list_header",
    "parse_css_list",
    "read_css_list",
]
