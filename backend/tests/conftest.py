"""Shared fixtures: a small tenant catalogue served by the in-memory reader."""

from __future__ import annotations

import time
from decimal import Decimal

import pytest

from publicsite import create_app
from publicsite.domain.content import Page, Product, Site
from publicsite.repositories import InMemorySiteReader

HOME = "creatorappu-landing-page"


def make_site(**overrides) -> Site:
    data = {
        "id": "site-acme",
        "name": "Acme Academy",
        "slug": "acme",
        "custom_domain": "acme.com",
        "domain_verification_status": "verified",
        "status": "active",
        "primary_color": "#7c3aed",
        "settings": {"description": "Courses for makers"},
    }
    data.update(overrides)
    return Site(**data)


def make_page(slug: str, blocks=None, **overrides) -> Page:
    data = {
        "id": f"page-{slug}",
        "site_id": "site-acme",
        "title": slug.replace("-", " ").title(),
        "slug": slug,
        "content": {"blocks": blocks or []},
        "status": "published",
    }
    data.update(overrides)
    return Page(**data)


class FailingReader(InMemorySiteReader):
    """Resolves normally but blows up when content is listed."""

    def list_published_pages(self, site_id):
        raise ConnectionError("database unavailable")


class SlowReader(InMemorySiteReader):
    def __init__(self, *args, delay: float = 5.0, **kwargs):
        super().__init__(*args, **kwargs)
        self.delay = delay

    def list_published_products(self, site_id):
        time.sleep(self.delay)
        return super().list_published_products(site_id)


@pytest.fixture
def site() -> Site:
    return make_site()


@pytest.fixture
def pages():
    return [
        make_page(
            "about",
            [{"id": "b1", "type": "text", "content": {"text": "<p>About us</p>"}}],
        ),
        make_page(
            HOME,
            [
                {"id": "h1", "type": "hero", "content": {"headline": "Welcome", "ctaText": "Join"}},
                {"id": "f1", "type": "features", "content": {
                    "headline": "Why us",
                    "features": [{"icon": "🚀", "title": "Fast", "description": "Ship quickly"}],
                }},
            ],
            title="Home",
            page_type="home",
        ),
        make_page("pricing", [{"id": "p1", "type": "pricing", "content": {"plans": [
            {"name": "Pro", "price": "$49", "highlighted": True, "features": ["All courses"]},
        ]}}]),
        make_page("secret-landing", [{"id": "s1", "type": "cta", "content": {"headline": "Hidden"}}]),
        make_page("draft", [], status="draft"),
    ]


@pytest.fixture
def products():
    return [
        Product(id="prod-1", title="Starter Kit", description="Everything to begin", price_amount=Decimal("19.50")),
        Product(id="prod-2", title="Masterclass", price_amount=49, thumbnail_url="https://cdn.example.com/m.png"),
    ]


@pytest.fixture
def reader(site, pages, products):
    reader = InMemorySiteReader(
        sites=[
            site,
            make_site(id="site-beta", name="Beta", slug="beta", custom_domain="www.beta.io"),
            make_site(
                id="site-pending",
                name="Pending",
                slug="pending",
                custom_domain="pending.com",
                domain_verification_status="unverified",
            ),
            make_site(id="site-off", name="Off", slug="off", custom_domain=None, status="inactive"),
        ],
        pages=pages,
    )
    for product in products:
        reader.add_product(site.id, product)
    return reader


@pytest.fixture
def app(reader):
    app = create_app("testing", reader=reader)
    yield app
    app.extensions["static_renderer"].shutdown()
    app.extensions["site_pipeline"].fetcher.shutdown()


@pytest.fixture
def client(app):
    return app.test_client()
