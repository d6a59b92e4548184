"""Utility helpers shared by the web asset configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import CssEntryConfig, JsCallConfig, WebAssetsConfigError

CSS_ENTRY_KINDS: tuple[str, ...] = ("file", "list", "line")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_asset_dir(value: object | None, base_dir: Path) -> Path:
    """Resolve ``asset_dir`` relative to the directory of the config file."""
    text = _optional_str(value)
    if text is None:
        msg = "'defaults.asset_dir' is required."
        raise WebAssetsConfigError(msg)
    path = Path(text).expanduser()
    return path if path.is_absolute() else base_dir / path


def _string_list(value: object | None, *, field: str) -> list[str]:
    """Normalize a scalar or list into a list of non-empty strings."""
    match value:
        case None:
            return []
        case str() as text:
            return [text] if text.strip() else []
        case list() as items:
            return [str(item) for item in items if str(item).strip()]
        case _:
            msg = f"'{field}' must be a string or a list of strings."
            raise WebAssetsConfigError(msg)


def _build_meta(value: object | None, *, page: str) -> list[dict[str, str]]:
    """Build the explicit meta attribute sets of a page."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Page '{page}': 'meta' must be a list of mappings."
        raise WebAssetsConfigError(msg)
    result: list[dict[str, str]] = []
    for item in value:
        if not isinstance(item, dict):
            msg = f"Page '{page}': every 'meta' entry must be a mapping."
            raise WebAssetsConfigError(msg)
        result.append({str(key): str(val) for key, val in item.items()})
    return result


def _build_css_entries(value: object | None, *, page: str) -> list[CssEntryConfig]:
    """Build the stylesheet instructions of a page, preserving their order."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Page '{page}': 'css' must be a list."
        raise WebAssetsConfigError(msg)
    entries: list[CssEntryConfig] = []
    for item in value:
        if isinstance(item, str):
            entries.append(CssEntryConfig(kind="file", value=item))
            continue
        if not isinstance(item, dict):
            msg = f"Page '{page}': css entries must be strings or mappings."
            raise WebAssetsConfigError(msg)
        kinds = [kind for kind in CSS_ENTRY_KINDS if kind in item]
        if len(kinds) != 1:
            msg = (
                f"Page '{page}': each css entry needs exactly one of "
                f"{', '.join(CSS_ENTRY_KINDS)}."
            )
            raise WebAssetsConfigError(msg)
        kind = typ.cast("typ.Literal['file', 'list', 'line']", kinds[0])
        entries.append(
            CssEntryConfig(
                kind=kind,
                value=str(item[kind]),
                media=_optional_str(item.get("media")),
                push=bool(item.get("push", False)),
            )
        )
    return entries


def _build_js_calls(value: object | None, *, page: str) -> list[JsCallConfig]:
    """Build the RequireJS calls of a page."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Page '{page}': 'js_calls' must be a list."
        raise WebAssetsConfigError(msg)
    calls: list[JsCallConfig] = []
    for item in value:
        if not isinstance(item, dict):
            msg = f"Page '{page}': js calls must be mappings."
            raise WebAssetsConfigError(msg)
        namespace = _optional_str(item.get("namespace"))
        function = _optional_str(item.get("function"))
        if namespace is None or function is None:
            msg = f"Page '{page}': js calls need 'namespace' and 'function'."
            raise WebAssetsConfigError(msg)
        args = item.get("args") or []
        if not isinstance(args, list):
            args = [args]
        calls.append(JsCallConfig(namespace=namespace, function=function, args=args))
    return calls


__all__ = [
    "CSS_ENTRY_KINDS",
    "_build_css_entries",
    "_build_js_calls",
    "_build_meta",
    "_optional_str",
    "_resolve_asset_dir",
    "_string_list",
]
