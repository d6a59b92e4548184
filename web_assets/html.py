"""Serialize HTML elements with MarkupSafe escaping.

The accumulator never builds markup by hand; it describes elements as
:class:`HtmlElement` values and hands them to an :class:`HtmlSerializer`.
Callers that render through their own templating layer can take the
descriptors instead of the serialized strings.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup, escape

AttributeValue = str | int | float | bool | None
Attributes = typ.Mapping[str, AttributeValue]


@dc.dataclass(slots=True)
class HtmlElement:
    """Structured description of a single HTML element.

    Attributes
    ----------
    tag : str
        Element name, e.g. ``"link"`` or ``"script"``.
    attributes : dict[str, AttributeValue]
        Attributes in output order. ``None`` and ``False`` values are omitted.
    text : str or None
        Plain text content, escaped on serialization.
    html : str or None
        Raw HTML content, emitted verbatim. Takes precedence over ``text``.
    void : bool
        Whether the element has no content and no end tag.
    """

    tag: str
    attributes: dict[str, AttributeValue] = dc.field(default_factory=dict)
    text: str | None = None
    html: str | None = None
    void: bool = False


class MarkupSerializer(typ.Protocol):
    """Interface for turning element descriptions into markup."""

    def void_element(self, tag: str, attributes: Attributes) -> str: ...

    def element(
        self,
        tag: str,
        attributes: Attributes,
        text: str | None = None,
        html: str | None = None,
    ) -> str: ...

    def escape(self, text: str) -> str: ...


class HtmlSerializer:
    """Default serializer producing XHTML-style void elements."""

    def void_element(self, tag: str, attributes: Attributes) -> Markup:
        """Return ``<tag attr="..."/>``."""
        return Markup(f"<{tag}{self._attributes(attributes)}/>")

    def element(
        self,
        tag: str,
        attributes: Attributes,
        text: str | None = None,
        html: str | None = None,
    ) -> Markup:
        """Return ``<tag ...>content</tag>`` with ``text`` escaped or ``html`` raw."""
        if html is not None:
            inner = html
        elif text is not None:
            inner = str(escape(text))
        else:
            inner = ""
        return Markup(f"<{tag}{self._attributes(attributes)}>{inner}</{tag}>")

    def escape(self, text: str) -> Markup:
        """Return ``text`` with HTML special characters escaped."""
        return escape(text)

    @staticmethod
    def _attributes(attributes: Attributes) -> str:
        parts: list[str] = []
        for name, value in attributes.items():
            if value is None or value is False:
                continue
            if value is True:
                value = name
            parts.append(f' {name}="{escape(str(value))}"')
        return "".join(parts)


def serialize_all(serializer: MarkupSerializer, elements: list[HtmlElement]) -> Markup:
    """Serialize ``elements`` in order and concatenate the result."""
    chunks: list[str] = []
    for element in elements:
        if element.void:
            chunks.append(serializer.void_element(element.tag, element.attributes))
        else:
            chunks.append(
                serializer.element(
                    element.tag,
                    element.attributes,
                    text=element.text,
                    html=element.html,
                )
            )
    return Markup("".join(chunks))


__all__ = [
    "AttributeValue",
    "Attributes",
    "HtmlElement",
    "HtmlSerializer",
    "MarkupSerializer",
    "serialize_all",
]
