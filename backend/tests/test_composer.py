"""Tests for page selection, navigation and document composition."""

from __future__ import annotations

import pytest

from publicsite.rendering.composer import (
    ComposedDocument,
    CompositionSettings,
    NotFoundDocument,
    compose_page,
    normalize_request_path,
    select_page,
)
from publicsite.rendering.nodes import find_all, text_content
from publicsite.rendering.urls import DomainPreviewUrls, SlugPreviewUrls

from .conftest import HOME, make_page, make_site


def _nav_links(document):
    nav = find_all(document.body, lambda el: el.tag == "nav")[0]
    return find_all(nav, lambda el: el.tag == "a")


def _blocks(document):
    return [el.attrs["data-block"] for el in find_all(document.body, lambda el: "data-block" in el.attrs)]


class TestNormalizeRequestPath:
    @pytest.mark.parametrize(
        "raw, expected",
        [(None, "/"), ("", "/"), ("/", "/"), ("/about/", "/about"), ("about", "/about"), ("/about?x=1#top", "/about")],
    )
    def test_normalize(self, raw, expected) -> None:
        assert normalize_request_path(raw) == expected


class TestSelectPage:
    def test_home_slug_wins_regardless_of_position(self, pages) -> None:
        page, is_home = select_page(pages, "/", HOME)
        assert page.slug == HOME
        assert is_home is True

    def test_first_page_when_no_home_slug(self) -> None:
        pages = [make_page("about"), make_page("contact")]
        page, _ = select_page(pages, "/", HOME)
        assert page.slug == "about"

    def test_slug_match(self, pages) -> None:
        page, is_home = select_page(pages, "/about", HOME)
        assert page.slug == "about"
        assert is_home is False

    def test_no_match(self, pages) -> None:
        assert select_page(pages, "/missing", HOME) == (None, False)

    def test_no_pages(self) -> None:
        assert select_page([], "/", HOME) == (None, True)


class TestComposePage:
    def test_about_page(self, site, pages, products) -> None:
        document = compose_page(site, pages, products, "/about")
        assert isinstance(document, ComposedDocument)
        assert document.page.slug == "about"
        assert document.status == 200
        assert "About us" in text_content(document.body)

    def test_home_page_end_to_end(self) -> None:
        site = make_site(id="s1", slug="acme", custom_domain=None)
        home = make_page(
            HOME,
            site_id="s1",
            page_type="home",
            content=[{"type": "hero", "content": {"headline": "Welcome"}}],
        )
        document = compose_page(site, [home], [], "/")

        hero = find_all(document.body, lambda el: el.attrs.get("data-block") == "hero")[0]
        assert "Welcome" in text_content(hero)
        active = [link for link in _nav_links(document) if "active" in link.attrs["class"].split()]
        assert [text_content(link) for link in active] == ["Home"]
        assert active[0].attrs["href"] == "/"

    @pytest.mark.parametrize("path", ["/", "/about", "/anything"])
    def test_zero_pages_is_not_found(self, site, path) -> None:
        document = compose_page(site, [], [], path)
        assert isinstance(document, NotFoundDocument)
        assert document.status == 404

    def test_unknown_path_links_home(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/nope")
        assert isinstance(document, NotFoundDocument)
        assert document.path == "/nope"
        text = text_content(document.body)
        assert "Page Not Found" in text
        go_home = find_all(document.body, lambda el: el.tag == "a" and text_content(el) == "Go Home")[0]
        assert go_home.attrs["href"] == "/"

    def test_block_order_is_preserved(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/")
        assert _blocks(document) == ["hero", "features"]

    def test_failing_block_is_skipped(self, site, monkeypatch) -> None:
        from publicsite.rendering import blocks

        def explode(block, theme):
            raise ValueError("bad block")

        monkeypatch.setitem(blocks.BLOCK_RENDERERS, blocks.BlockType.STATS, explode)
        page = make_page(HOME, [{"type": "stats"}, {"type": "cta", "content": {"headline": "Still here"}}])
        document = compose_page(site, [page], [], "/")
        assert _blocks(document) == ["cta"]

    def test_seo_fallbacks(self, site) -> None:
        plain = compose_page(site, [make_page(HOME, title="Start")], [], "/")
        assert plain.title == "Start"
        assert plain.description == "Courses for makers"

        seo = compose_page(
            site,
            [make_page(HOME, seo_title="Learn", seo_description="Best courses")],
            [],
            "/",
        )
        assert (seo.title, seo.description) == ("Learn", "Best courses")

        untitled = compose_page(make_site(settings={}), [make_page(HOME, title="")], [], "/")
        assert untitled.title == "Acme Academy"
        assert untitled.description == ""


class TestNavigation:
    def test_allow_list_order_and_labels(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/about")
        labels = [text_content(link) for link in _nav_links(document)]
        assert labels == ["Home", "Pricing", "About"]

    def test_pages_outside_allow_list_are_hidden(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/secret-landing")
        assert document.page.slug == "secret-landing"
        hrefs = [link.attrs["href"] for link in _nav_links(document)]
        assert "/secret-landing" not in hrefs

    def test_pricing_is_call_to_action(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/")
        pricing = [link for link in _nav_links(document) if text_content(link) == "Pricing"][0]
        assert "nav-cta" in pricing.attrs["class"]
        assert pricing.style["background"] == "#7c3aed"

    def test_active_entry(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/about")
        active = [link for link in _nav_links(document) if link.attrs.get("aria-current") == "page"]
        assert [text_content(link) for link in active] == ["About"]

    def test_home_entry_active_when_requested_by_slug(self, site, pages) -> None:
        document = compose_page(site, pages, [], f"/{HOME}")
        assert document.page.slug == HOME
        active = [link for link in _nav_links(document) if link.attrs.get("aria-current") == "page"]
        assert [text_content(link) for link in active] == ["Home"]

    def test_custom_labels(self, site, pages) -> None:
        settings = CompositionSettings(nav_slugs=("about",), nav_labels={"about": "Our Story"})
        document = compose_page(site, pages, [], "/", settings=settings)
        assert [text_content(link) for link in _nav_links(document)] == ["Our Story"]


class TestChrome:
    def test_header_uses_logo_when_present(self, pages) -> None:
        site = make_site(settings={"logo_url": "https://cdn.example.com/logo.png"})
        document = compose_page(site, pages, [], "/")
        logo = find_all(document.body, lambda el: el.tag == "img" and "logo" in el.attrs.get("class", ""))
        assert logo[0].attrs["src"] == "https://cdn.example.com/logo.png"

    def test_header_falls_back_to_name(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/")
        header = find_all(document.body, lambda el: el.tag == "header")[0]
        assert "Acme Academy" in text_content(header)
        assert find_all(header, lambda el: "data-menu-toggle" in el.attrs)

    def test_footer(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/", year=2030)
        footer = find_all(document.body, lambda el: el.tag == "footer")[0]
        text = text_content(footer)
        assert "© 2030 Acme Academy. All rights reserved." in text
        assert "Powered by CreatorApp" in text


class TestProducts:
    def test_grid(self, site, pages, products) -> None:
        document = compose_page(site, pages, products, "/")
        grid = find_all(document.body, lambda el: el.attrs.get("data-section") == "products")[0]
        text = text_content(grid)
        assert "Our Products" in text
        assert "$19.50 USD" in text
        assert "$49 USD" in text

        cards = find_all(grid, lambda el: el.tag == "a")
        assert cards[0].attrs["href"] == "/site/site-acme/product/prod-1"

    def test_placeholder_and_truncation(self, site, pages) -> None:
        from publicsite.domain.content import Product

        product = Product(id="p", title="Long", description="x" * 300, price_amount=5)
        document = compose_page(site, pages, [product], "/")
        card = find_all(document.body, lambda el: "product" in el.attrs.get("class", "").split())[0]
        assert "📦" in text_content(card)
        description = find_all(card, lambda el: "product-description" in el.attrs.get("class", ""))[0]
        assert len(text_content(description)) == 120

    def test_no_products_no_grid(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/")
        assert not find_all(document.body, lambda el: el.attrs.get("data-section") == "products")


class TestUrlSchemes:
    def test_slug_preview_links(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/about", urls=SlugPreviewUrls("acme"))
        hrefs = [link.attrs["href"] for link in _nav_links(document)]
        assert hrefs == ["/s/acme", "/s/acme/pricing", "/s/acme/about"]

    def test_domain_preview_links(self, site, pages) -> None:
        document = compose_page(site, pages, [], "/", urls=DomainPreviewUrls("acme.com"))
        hrefs = [link.attrs["href"] for link in _nav_links(document)]
        assert hrefs[0] == "/site-preview?domain=acme.com&path=%2F"
        assert hrefs[2] == "/site-preview?domain=acme.com&path=%2Fabout"

    def test_not_found_links_preview_root(self, site) -> None:
        document = compose_page(site, [], [], "/", urls=SlugPreviewUrls("acme"))
        assert document.home_url == "/s/acme"
