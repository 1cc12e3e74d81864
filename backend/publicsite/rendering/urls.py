"""
Link schemes for the places a tenant site is served from.

A page link looks different on a custom domain (``/about``), under the slug
preview (``/s/acme/about``) and under the legacy domain preview
(``/site-preview?domain=acme.com&path=/about``). The composer only ever asks
a UrlScheme.
"""
from urllib.parse import quote, urlencode


class UrlScheme:
    """Links for a site served at its own root (custom domain or subdomain)."""

    def page_url(self, slug: str, *, is_home: bool = False) -> str:
        if is_home or not slug:
            return "/"
        return f"/{quote(slug)}"

    def product_url(self, site, product) -> str:
        return f"/site/{quote(str(site.id))}/product/{quote(str(product.id))}"


class SlugPreviewUrls(UrlScheme):
    def __init__(self, site_slug: str):
        self.site_slug = site_slug

    def page_url(self, slug: str, *, is_home: bool = False) -> str:
        if is_home or not slug:
            return f"/s/{quote(self.site_slug)}"
        return f"/s/{quote(self.site_slug)}/{quote(slug)}"


class DomainPreviewUrls(UrlScheme):
    def __init__(self, domain: str):
        self.domain = domain

    def page_url(self, slug: str, *, is_home: bool = False) -> str:
        path = "/" if is_home or not slug else f"/{slug}"
        return "/site-preview?" + urlencode({"domain": self.domain, "path": path})


ROOT_URLS = UrlScheme()
