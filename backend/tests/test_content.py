"""Tests for the content model's tolerant parsing."""

from __future__ import annotations

import inspect
from decimal import Decimal

from publicsite.domain import content as content_module
from publicsite.domain.content import BlockType, Page, Product, Theme, parse_blocks

from .conftest import make_site


class TestParseBlocks:
    def test_blocks_document(self) -> None:
        blocks = parse_blocks({"blocks": [{"type": "hero", "content": {"headline": "Hi"}}]})
        assert [b.kind for b in blocks] == [BlockType.HERO]

    def test_bare_list(self) -> None:
        blocks = parse_blocks([{"type": "cta"}, {"type": "text"}])
        assert [b.type for b in blocks] == ["cta", "text"]

    def test_legacy_html_becomes_text_block(self) -> None:
        blocks = parse_blocks("<p>Old page</p>")
        assert len(blocks) == 1
        assert blocks[0].kind is BlockType.TEXT
        assert blocks[0].content == {"text": "<p>Old page</p>"}

    def test_garbage(self) -> None:
        assert parse_blocks(None) == []
        assert parse_blocks({"blocks": "nope"}) == []
        assert parse_blocks("   ") == []
        assert parse_blocks([1, None, "x"]) == []

    def test_unknown_kind_is_kept_but_has_no_kind(self) -> None:
        (block,) = parse_blocks([{"type": "carousel"}])
        assert block.kind is None


class TestModels:
    def test_page_blocks_property(self) -> None:
        page = Page(id="p", site_id="s", slug="x", content={"blocks": [{"type": "image"}]}, title=None)
        assert page.title == ""
        assert page.blocks[0].kind is BlockType.IMAGE

    def test_product_defaults(self) -> None:
        product = Product(id="p", title="Kit", price_amount=None, price_currency=None)
        assert product.price_amount == Decimal("0")
        assert product.price_currency == "USD"

    def test_theme_falls_back_to_default_color(self) -> None:
        assert Theme.for_site(make_site(primary_color=None)).primary_color == "#0ea5e9"
        assert Theme.for_site(make_site(primary_color="red;}")).primary_color == "#0ea5e9"
        assert Theme.for_site(make_site(primary_color="#123456")).primary_color == "#123456"

    def test_site_settings(self) -> None:
        site = make_site(settings={"logo_url": "https://cdn.example.com/logo.png"})
        assert site.logo_url == "https://cdn.example.com/logo.png"
        assert site.description == ""
        assert make_site(settings=None).settings == {}

    def test_content_model_does_not_depend_on_rendering(self) -> None:
        assert "publicsite.rendering" not in inspect.getsource(content_module)
