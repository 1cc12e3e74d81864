"""
HTML serialization of the node tree and the document templates around it.

No DOM and no Flask: this module is plain string assembly (MarkupSafe for
escaping, Jinja2 for the document shells) so it runs on worker threads and
in any edge runtime that can host Python.
"""
from __future__ import annotations

import json
from typing import List, Optional

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from publicsite.rendering.composer import Composition, ComposedDocument
from publicsite.rendering.nodes import Element, Node, RawHTML, Text

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

_env = Environment(
    loader=PackageLoader("publicsite", "templates"),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def style_to_css(style) -> str:
    return "; ".join(f"{name}: {value}" for name, value in style.items())


def _open_tag(node: Element) -> str:
    parts: List[str] = [node.tag]
    for name, value in node.attrs.items():
        if value == "":
            parts.append(str(escape(name)))
        else:
            parts.append(f'{escape(name)}="{escape(value)}"')
    if node.style:
        parts.append(f'style="{escape(style_to_css(node.style))}"')
    return "<" + " ".join(parts) + ">"


def render_node(node: Node) -> str:
    if isinstance(node, Text):
        return str(escape(node.text))
    if isinstance(node, RawHTML):
        return node.html
    if node.tag in VOID_ELEMENTS:
        return _open_tag(node)
    inner = "".join(render_node(child) for child in node.children)
    return f"{_open_tag(node)}{inner}</{node.tag}>"


def render_document(
    composition: Composition,
    *,
    mount_config: Optional[dict] = None,
    mount_script_url: Optional[str] = None,
) -> str:
    """
    Full HTML document for a composed page or a tenant 404.

    ``mount_config`` and ``mount_script_url`` are only passed by the
    interactive preview routes; the static endpoint ships no client runtime
    beyond the small inline enhancement script.
    """
    is_page = isinstance(composition, ComposedDocument)
    template = _env.get_template("document.html")
    return template.render(
        title=composition.title,
        description=composition.description,
        primary_color=composition.theme.primary_color,
        body=Markup(render_node(composition.body)),
        is_page=is_page,
        mount_config=Markup(_script_json(mount_config)) if mount_config else None,
        mount_script_url=mount_script_url,
    )


def render_site_not_found() -> str:
    return _env.get_template("site_not_found.html").render()


def render_error_document() -> str:
    return _env.get_template("error.html").render()


def _script_json(data: dict) -> str:
    # Safe inside <script type="application/json">: no tag can be closed early.
    return (
        json.dumps(data)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )
