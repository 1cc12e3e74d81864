"""
Both delivery paths must show the same blocks in the same order.

The static endpoint's HTML and the mount API's JSON tree are reduced to an
ordered list of (block kind, visible text) and compared.
"""

from __future__ import annotations

from html.parser import HTMLParser

import pytest


class BlockTextParser(HTMLParser):
    VOID = {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}

    def __init__(self) -> None:
        super().__init__()
        self.blocks = []
        self._depth = 0
        self._block_depth = None

    def handle_starttag(self, tag, attrs):
        if tag in self.VOID:
            return
        self._depth += 1
        attrs = dict(attrs)
        if self._block_depth is None and "data-block" in attrs:
            self._block_depth = self._depth
            self.blocks.append([attrs["data-block"], ""])

    def handle_endtag(self, tag):
        if tag in self.VOID:
            return
        if self._block_depth == self._depth:
            self._block_depth = None
        self._depth -= 1

    def handle_data(self, data):
        if self._block_depth is not None:
            self.blocks[-1][1] += data


def _squash(text: str) -> str:
    return " ".join(text.split())


def blocks_from_html(html: str):
    parser = BlockTextParser()
    parser.feed(html)
    return [(kind, _squash(text)) for kind, text in parser.blocks]


def _tree_text(node) -> str:
    if node["kind"] == "text":
        return node["text"]
    if node["kind"] == "html":
        parser = HTMLParser()
        chunks = []
        parser.handle_data = chunks.append
        parser.feed(node["html"])
        return "".join(chunks)
    return "".join(_tree_text(child) for child in node["children"])


def blocks_from_tree(node, found=None):
    found = [] if found is None else found
    if node["kind"] != "element":
        return found
    if "data-block" in node["attrs"]:
        found.append((node["attrs"]["data-block"], _squash(_tree_text(node))))
        return found
    for child in node["children"]:
        blocks_from_tree(child, found)
    return found


@pytest.mark.parametrize("path", ["/", "/about", "/pricing"])
def test_static_and_interactive_show_same_blocks(client, path) -> None:
    static = client.get("/render", query_string={"domain": "acme.com", "path": path})
    mounted = client.get("/api/v1/public/page", query_string={"domain": "acme.com", "path": path})

    assert static.status_code == mounted.status_code == 200

    from_html = blocks_from_html(static.get_data(as_text=True))
    from_tree = blocks_from_tree(mounted.get_json()["tree"])
    assert from_html
    assert from_html == from_tree
