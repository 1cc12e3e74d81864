"""Site header, footer, navigation and the storefront product grid."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from publicsite.domain.content import NavEntry, Page, Product, Site, Theme
from publicsite.rendering.nodes import Element, h
from publicsite.rendering.styles import format_price, safe_media_url, truncate
from publicsite.rendering.urls import UrlScheme

PRODUCTS_HEADING = "Our Products"
PRODUCT_PLACEHOLDER = "📦"
CTA_NAV_SLUGS = ("pricing",)


def build_nav(
    pages: Sequence[Page],
    *,
    nav_slugs: Iterable[str],
    labels: Dict[str, str],
    home_slug: str,
    current_slug: Optional[str],
    is_home: bool,
    urls: UrlScheme,
) -> List[NavEntry]:
    """
    Nav entries for the allow-listed slugs, in allow-list order.

    Pages outside the allow-list never appear. The home slug links to the
    tenant root and is the active entry on the root path or on its own slug.
    """
    by_slug = {}
    for page in pages:
        by_slug.setdefault(page.slug, page)

    entries = []
    for slug in nav_slugs:
        page = by_slug.get(slug)
        if page is None:
            continue
        entry_is_home = slug == home_slug
        entries.append(
            NavEntry(
                slug=slug,
                label=labels.get(slug) or page.title or slug,
                href=urls.page_url(slug, is_home=entry_is_home),
                is_home=entry_is_home,
                is_cta=slug in CTA_NAV_SLUGS,
                active=(is_home or slug == current_slug) if entry_is_home else (not is_home and slug == current_slug),
            )
        )
    return entries


def _nav_link(entry: NavEntry, theme: Theme) -> Element:
    classes = ["nav-link"]
    if entry.active:
        classes.append("active")
    if entry.is_cta:
        classes.append("nav-cta")

    if entry.is_cta:
        style = {"background": theme.primary_color, "color": "#fff"}
    elif entry.active:
        style = {"color": theme.primary_color}
    else:
        style = None

    return h(
        "a",
        {
            "href": entry.href,
            "class": " ".join(classes),
            "data-nav": True,
            "aria-current": "page" if entry.active else None,
        },
        entry.label,
        style=style,
    )


def render_header(site: Site, nav: Sequence[NavEntry], theme: Theme, urls: UrlScheme) -> Element:
    logo_url = safe_media_url(site.logo_url)
    if logo_url:
        brand = h("img", {"class": "logo", "src": logo_url, "alt": site.name})
    else:
        brand = h("span", {"class": "site-name"}, site.name)

    return h(
        "header",
        {"class": "site-header"},
        h(
            "div",
            {"class": "header-inner"},
            h("a", {"href": urls.page_url("", is_home=True), "class": "brand", "data-nav": True}, brand),
            h(
                "button",
                {"type": "button", "class": "menu-toggle", "aria-label": "Toggle menu", "data-menu-toggle": True},
                h("span"),
                h("span"),
                h("span"),
            ),
            h("nav", {"class": "nav-links"}, [_nav_link(entry, theme) for entry in nav]),
        ),
    )


def render_footer(site: Site, nav: Sequence[NavEntry], platform_name: str, year: Optional[int] = None) -> Element:
    year = year or datetime.now(timezone.utc).year
    return h(
        "footer",
        {"class": "site-footer"},
        h(
            "div",
            {"class": "footer-links"},
            [h("a", {"href": entry.href, "data-nav": True}, entry.label) for entry in nav],
        ),
        h("p", {"class": "copyright"}, f"© {year} {site.name}. All rights reserved."),
        h("p", {"class": "powered-by"}, "Powered by ", h("span", None, platform_name)),
    )


def render_product_card(product: Product, site: Site, theme: Theme, urls: UrlScheme) -> Element:
    thumbnail = safe_media_url(product.thumbnail_url)
    if thumbnail:
        media = h("img", {"src": thumbnail, "alt": product.title, "loading": "lazy"})
    else:
        media = h("div", {"class": "product-placeholder"}, PRODUCT_PLACEHOLDER)

    return h(
        "a",
        {"class": "card product", "href": urls.product_url(site, product)},
        media,
        h(
            "div",
            {"class": "product-info"},
            h("h3", {"class": "product-title"}, product.title),
            h("p", {"class": "product-description"}, truncate(product.description)),
            h(
                "div",
                {"class": "product-price"},
                format_price(product.price_amount, product.price_currency),
                style={"color": theme.primary_color},
            ),
        ),
    )


def render_product_grid(products: Sequence[Product], site: Site, theme: Theme, urls: UrlScheme) -> Optional[Element]:
    if not products:
        return None
    return h(
        "section",
        {"class": "products", "data-section": "products"},
        h(
            "div",
            {"class": "container"},
            h("h2", {"class": "center"}, PRODUCTS_HEADING),
            h(
                "div",
                {"class": "grid grid-products"},
                [render_product_card(product, site, theme, urls) for product in products],
            ),
        ),
    )
