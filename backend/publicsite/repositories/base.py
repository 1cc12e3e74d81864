from typing import List, Optional, Protocol

from publicsite.domain.content import Page, Product, Site


class SiteReader(Protocol):
    """
    Read interface the renderer depends on.

    Implementations return only what the public site may show: active sites,
    published pages (oldest first) and published products (newest first).
    Errors are raised as-is; callers wrap them in UpstreamFetchFailure.
    """

    def find_site_by_custom_domain(self, domain: str) -> Optional[Site]:
        ...

    def find_site_by_slug(self, slug: str) -> Optional[Site]:
        ...

    def list_published_pages(self, site_id: str) -> List[Page]:
        ...

    def list_published_products(self, site_id: str) -> List[Product]:
        ...
