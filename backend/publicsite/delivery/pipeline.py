# publicsite/delivery/pipeline.py
"""
resolve -> fetch -> compose, shared by both delivery adapters.

The adapters differ only in how they serialize the resulting Composition,
so everything up to and including the node tree lives here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from publicsite.delivery.fetch import ContentFetcher, SiteContent
from publicsite.rendering.composer import (
    Composition,
    CompositionSettings,
    compose_page,
)
from publicsite.rendering.urls import ROOT_URLS, SlugPreviewUrls, UrlScheme
from publicsite.repositories.base import SiteReader
from publicsite.resolution.resolver import Resolution, TenantResolver


@dataclass(frozen=True)
class LoadedSite:
    resolution: Resolution
    content: SiteContent


@dataclass(frozen=True)
class RenderOutcome:
    loaded: LoadedSite
    composition: Composition

    @property
    def status(self) -> int:
        return self.composition.status


class SitePipeline:
    def __init__(
        self,
        resolver: TenantResolver,
        fetcher: ContentFetcher,
        settings: Optional[CompositionSettings] = None,
    ):
        self.resolver = resolver
        self.fetcher = fetcher
        self.settings = settings or CompositionSettings()

    @classmethod
    def from_config(cls, reader: SiteReader, config) -> "SitePipeline":
        return cls(
            TenantResolver.from_config(reader, config),
            ContentFetcher(
                reader,
                max_workers=config["FETCH_MAX_WORKERS"],
                timeout=config["RENDER_TIMEOUT_SECONDS"],
            ),
            CompositionSettings.from_config(config),
        )

    def load(self, host: Optional[str], path: Optional[str] = None) -> LoadedSite:
        """Raises SiteNotFound or UpstreamFetchFailure."""
        resolution = self.resolver.resolve_request(host, path)
        return LoadedSite(resolution, self.fetcher.fetch(resolution.site))

    def compose(
        self,
        loaded: LoadedSite,
        path: Optional[str] = None,
        *,
        urls: Optional[UrlScheme] = None,
        year: Optional[int] = None,
    ) -> Composition:
        content = loaded.content
        return compose_page(
            content.site,
            content.pages,
            content.products,
            loaded.resolution.path if path is None else path,
            urls=urls or self.urls_for(loaded.resolution),
            settings=self.settings,
            year=year,
        )

    def render(
        self,
        host: Optional[str],
        path: Optional[str] = None,
        *,
        urls: Optional[UrlScheme] = None,
    ) -> RenderOutcome:
        loaded = self.load(host, path)
        return RenderOutcome(loaded, self.compose(loaded, urls=urls))

    @staticmethod
    def urls_for(resolution: Resolution) -> UrlScheme:
        if resolution.preview:
            return SlugPreviewUrls(resolution.site.slug)
        return ROOT_URLS
