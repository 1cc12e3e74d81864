# publicsite/repositories/sqlalchemy.py
"""
SiteReader backed by the Flask-SQLAlchemy models.

Each call opens its own application context, so the reader can be used from
the content-fetch worker threads, which never inherit the request's context.
Rows are converted to content models before the context (and the session
bound to it) is torn down.
"""
from typing import List, Optional

from sqlalchemy import func

from publicsite.domain import content
from publicsite.models import Page, Product, Site
from publicsite.normalizers import normalize_page, normalize_product, normalize_site


class SqlAlchemySiteReader:
    def __init__(self, app):
        self.app = app

    def find_site_by_custom_domain(self, domain: str) -> Optional[content.Site]:
        with self.app.app_context():
            site = Site.query.filter(
                func.lower(Site.custom_domain) == domain.lower(),
                Site.domain_verification_status == "verified",
                Site.status == "active",
            ).first()
            return normalize_site(site) if site else None

    def find_site_by_slug(self, slug: str) -> Optional[content.Site]:
        with self.app.app_context():
            site = Site.query.filter(
                func.lower(Site.slug) == slug.lower(),
                Site.status == "active",
            ).first()
            return normalize_site(site) if site else None

    def list_published_pages(self, site_id: str) -> List[content.Page]:
        with self.app.app_context():
            pages = (
                Page.query.filter_by(site_id=site_id, status="published")
                .order_by(Page.created_at.asc(), Page.id.asc())
                .all()
            )
            return [normalize_page(p) for p in pages]

    def list_published_products(self, site_id: str) -> List[content.Product]:
        with self.app.app_context():
            products = (
                Product.query.filter_by(site_id=site_id, status="published")
                .order_by(Product.created_at.desc(), Product.id.desc())
                .all()
            )
            return [normalize_product(p) for p in products]
