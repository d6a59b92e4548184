"""Exceptions raised while registering web assets."""

from __future__ import annotations

from pathlib import Path


class WebAssetsError(Exception):
    """Base class for all asset registration failures."""


class AssetNotFoundError(WebAssetsError, FileNotFoundError):
    """Raised when a relative asset URL does not resolve to a file on disk.

    Attributes
    ----------
    path : Path
        Full filesystem path that was checked.
    kind : str
        Human label for the asset type (``"CSS"`` or ``"JavaScript"``).
    manifest : Path or None
        Manifest that listed the asset, when the asset came from a list file.
    line : int or None
        1-based line number of the entry inside ``manifest``.
    """

    def __init__(
        self,
        path: Path,
        *,
        kind: str = "Asset",
        manifest: Path | None = None,
        line: int | None = None,
    ) -> None:
        self.path = path
        self.kind = kind
        self.manifest = manifest
        self.line = line
        if manifest is not None:
            msg = (
                f"{kind} file '{path}' listed in '{manifest}' at line {line} "
                "does not exist"
            )
        else:
            msg = f"{kind} file '{path}' does not exist"
        super().__init__(msg)


class MalformedListError(WebAssetsError, ValueError):
    """Raised when a CSS list manifest cannot be parsed."""

    def __init__(self, path: Path, reason: str, *, line: int | None = None) -> None:
        self.path = path
        self.line = line
        self.reason = reason
        location = f"'{path}'" if line is None else f"'{path}' at line {line}"
        super().__init__(f"Malformed list file {location}: {reason}")


class AssetUrlError(WebAssetsError, ValueError):
    """Raised when a relative asset URL climbs above the URL root."""

    def __init__(self, url: str, *, kind: str = "Asset") -> None:
        self.url = url
        self.kind = kind
        super().__init__(f"{kind} URL '{url}' points outside the asset root")


__all__ = [
    "AssetNotFoundError",
    "AssetUrlError",
    "MalformedListError",
    "WebAssetsError",
]
