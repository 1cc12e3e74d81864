"""
Node tree produced by the composer.

The tree is the single place rendering decisions live. Two serializers read
it: ``rendering.html`` turns it into markup for the static endpoint, and the
interactive mount ships ``model_dump`` of it as JSON and builds DOM from it
in the browser.
"""
from __future__ import annotations

from typing import Annotated, Dict, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Text(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class RawHTML(BaseModel):
    """Markup that has already been sanitized; serializers insert it verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["html"] = "html"
    html: str


class Element(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["element"] = "element"
    tag: str
    attrs: Dict[str, str] = Field(default_factory=dict)
    style: Dict[str, str] = Field(default_factory=dict)
    children: List["Node"] = Field(default_factory=list)


Node = Annotated[Union[Element, Text, RawHTML], Field(discriminator="kind")]

Element.model_rebuild()


Child = Union[Element, Text, RawHTML, str, None]


def h(
    tag: str,
    attrs: Optional[Dict[str, object]] = None,
    *children: Union[Child, Iterable[Child]],
    style: Optional[Dict[str, object]] = None,
) -> Element:
    """
    Build an Element.

    Attribute and style values of ``None`` or ``False`` are dropped, ``True``
    becomes a bare boolean attribute. Children may be nodes, strings (wrapped
    as Text), ``None`` (skipped) or iterables of those.
    """
    clean_attrs: Dict[str, str] = {}
    for name, value in (attrs or {}).items():
        if value is None or value is False:
            continue
        clean_attrs[name] = "" if value is True else str(value)

    clean_style = {
        name: str(value) for name, value in (style or {}).items() if value is not None
    }

    return Element(
        tag=tag,
        attrs=clean_attrs,
        style=clean_style,
        children=list(_flatten(children)),
    )


def _flatten(children) -> Iterable[Node]:
    for child in children:
        if child is None:
            continue
        if isinstance(child, (Element, Text, RawHTML)):
            yield child
        elif isinstance(child, str):
            if child:
                yield Text(text=child)
        else:
            yield from _flatten(child)


def text_content(node: Node) -> str:
    """Concatenated text of a node; raw HTML contributes its source."""
    if isinstance(node, Text):
        return node.text
    if isinstance(node, RawHTML):
        return node.html
    return "".join(text_content(child) for child in node.children)


def find_all(node: Node, predicate) -> List[Element]:
    """Depth-first, document-order search."""
    found: List[Element] = []
    if isinstance(node, Element):
        if predicate(node):
            found.append(node)
        for child in node.children:
            found.extend(find_all(child, predicate))
    return found
