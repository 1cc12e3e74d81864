# publicsite/rendering/composer.py
"""
Page composition: select the page for a request path and assemble the
document tree (header, blocks, product grid, footer) plus its metadata.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

from publicsite.domain.content import Page, Product, Site, Theme
from publicsite.rendering.blocks import render_block
from publicsite.rendering.chrome import (
    build_nav,
    render_footer,
    render_header,
    render_product_grid,
)
from publicsite.rendering.nodes import Element, h
from publicsite.rendering.urls import ROOT_URLS, UrlScheme

logger = logging.getLogger(__name__)


class CompositionSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    home_slug: str = "creatorappu-landing-page"
    nav_slugs: Tuple[str, ...] = (
        "creatorappu-landing-page",
        "curriculum",
        "pricing",
        "about",
        "free-creator-toolkit",
        "contact",
    )
    nav_labels: Dict[str, str] = Field(
        default_factory=lambda: {
            "creatorappu-landing-page": "Home",
            "curriculum": "Curriculum",
            "pricing": "Pricing",
            "about": "About",
            "free-creator-toolkit": "Free Toolkit",
            "contact": "Contact",
        }
    )
    default_color: str = "#0ea5e9"
    platform_name: str = "CreatorApp"

    @classmethod
    def from_config(cls, config) -> "CompositionSettings":
        return cls(
            home_slug=config["HOME_PAGE_SLUG"],
            nav_slugs=tuple(config["NAV_SLUGS"]),
            nav_labels=dict(config["NAV_LABELS"]),
            default_color=config["DEFAULT_PRIMARY_COLOR"],
            platform_name=config["PLATFORM_NAME"],
        )


class ComposedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    site: Site
    page: Page
    theme: Theme
    title: str
    description: str
    body: Element
    status: int = 200


class NotFoundDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    site: Site
    path: str
    theme: Theme
    home_url: str
    title: str
    description: str = ""
    body: Element
    status: int = 404


Composition = Union[ComposedDocument, NotFoundDocument]


def normalize_request_path(path: Optional[str]) -> str:
    """``""``/``None`` -> ``/``; drops query, fragment and trailing slashes."""
    path = urlsplit(path or "/").path or "/"
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def select_page(
    pages: Sequence[Page], request_path: str, home_slug: str
) -> Tuple[Optional[Page], bool]:
    """Return ``(page, is_home)`` for a normalized request path."""
    is_home = request_path in ("/", "")
    if not pages:
        return None, is_home

    if is_home:
        home_page = next((p for p in pages if p.slug == home_slug), pages[0])
        return home_page, True

    return next((p for p in pages if f"/{p.slug}" == request_path), None), False


def _render_blocks(page: Page, theme: Theme):
    for index, block in enumerate(page.blocks):
        try:
            node = render_block(block, theme)
        except Exception:
            logger.exception(
                "Block %s (%r) on page %s failed to render", block.id or index, block.type, page.id
            )
            continue
        if node is not None:
            yield node


def compose_page(
    site: Site,
    pages: Sequence[Page],
    products: Sequence[Product],
    request_path: Optional[str],
    *,
    urls: UrlScheme = ROOT_URLS,
    settings: Optional[CompositionSettings] = None,
    year: Optional[int] = None,
) -> Composition:
    settings = settings or CompositionSettings()
    theme = Theme.for_site(site, settings.default_color)
    path = normalize_request_path(request_path)

    page, is_home = select_page(pages, path, settings.home_slug)

    nav = build_nav(
        pages,
        nav_slugs=settings.nav_slugs,
        labels=settings.nav_labels,
        home_slug=settings.home_slug,
        current_slug=page.slug if page is not None else None,
        is_home=is_home,
        urls=urls,
    )
    header = render_header(site, nav, theme, urls)
    footer = render_footer(site, nav, settings.platform_name, year)

    if page is None:
        home_url = urls.page_url("", is_home=True)
        return NotFoundDocument(
            site=site,
            path=path,
            theme=theme,
            home_url=home_url,
            title=f"404 - Page Not Found | {site.name}",
            body=_root(site, None, header, _not_found_main(home_url, theme), footer),
        )

    main = h(
        "main",
        {"data-page": page.slug},
        list(_render_blocks(page, theme)),
        render_product_grid(products, site, theme, urls),
    )

    return ComposedDocument(
        site=site,
        page=page,
        theme=theme,
        title=page.seo_title or page.title or site.name,
        description=page.seo_description or site.description or "",
        body=_root(site, page, header, main, footer),
    )


def _not_found_main(home_url: str, theme: Theme) -> Element:
    return h(
        "main",
        {"class": "not-found", "data-page": "404"},
        h("h1", {"class": "not-found-code"}, "404"),
        h("h2", None, "Page Not Found"),
        h("p", None, "The page you are looking for does not exist."),
        h(
            "a",
            {"href": home_url, "class": "btn", "data-nav": True},
            "Go Home",
            style={"background": theme.primary_color},
        ),
    )


def _root(site: Site, page: Optional[Page], header, main, footer) -> Element:
    return h(
        "div",
        {"id": "site-root", "data-site": site.slug, "data-page": page.slug if page else None},
        header,
        main,
        footer,
    )
