from typing import Iterable, List, Optional

from publicsite.domain.content import (
    DomainVerificationStatus,
    Page,
    PageStatus,
    Product,
    Site,
    SiteStatus,
)


class InMemorySiteReader:
    """
    SiteReader over plain lists, applying the same filters as the SQL reader.

    Used by the test-suite and by embedding hosts that already hold the
    records (for example an editor previewing unsaved content).
    """

    def __init__(
        self,
        sites: Iterable[Site] = (),
        pages: Iterable[Page] = (),
        products: Iterable[Product] = (),
        product_sites: Optional[dict] = None,
    ):
        self.sites = list(sites)
        self.pages = list(pages)
        self.products = list(products)
        # product id -> site id; Product carries no owner of its own.
        self.product_sites = dict(product_sites or {})

    def add_product(self, site_id: str, product: Product) -> None:
        self.products.append(product)
        self.product_sites[product.id] = site_id

    def find_site_by_custom_domain(self, domain: str) -> Optional[Site]:
        domain = domain.lower()
        return next(
            (
                site
                for site in self.sites
                if site.custom_domain
                and site.custom_domain.lower() == domain
                and site.domain_verification_status == DomainVerificationStatus.VERIFIED
                and site.status == SiteStatus.ACTIVE
            ),
            None,
        )

    def find_site_by_slug(self, slug: str) -> Optional[Site]:
        slug = slug.lower()
        return next(
            (
                site
                for site in self.sites
                if site.slug.lower() == slug and site.status == SiteStatus.ACTIVE
            ),
            None,
        )

    def list_published_pages(self, site_id: str) -> List[Page]:
        return [
            page
            for page in self.pages
            if page.site_id == site_id and page.status == PageStatus.PUBLISHED
        ]

    def list_published_products(self, site_id: str) -> List[Product]:
        owned = [
            product for product in self.products if self.product_sites.get(product.id) == site_id
        ]
        return list(reversed(owned))
