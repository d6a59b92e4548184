"""Directory resolution and existence checks for web assets."""

from __future__ import annotations

import typing as typ
from pathlib import Path

ExistenceCheck = typ.Callable[[Path], bool]


class AssetDirs(typ.Protocol):
    """Resolve the filesystem directory that holds the web assets."""

    def asset_dir(self) -> Path: ...


class CoreDirs:
    """Serve assets from a fixed directory.

    Parameters
    ----------
    root : Path
        Directory mirroring the site's URL space; ``/css/site.css`` lives at
        ``root / "css" / "site.css"``.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def asset_dir(self) -> Path:
        """Return the absolute asset directory."""
        return self.root.resolve()


def file_exists(path: Path) -> bool:
    """Return whether ``path`` names a regular file."""
    return path.is_file()


def url_to_path(asset_dir: Path, url: str) -> Path:
    """Return the full filesystem path of the root-relative ``url``."""
    return asset_dir.joinpath(*[part for part in url.split("/") if part])


__all__ = ["AssetDirs", "CoreDirs", "ExistenceCheck", "file_exists", "url_to_path"]
