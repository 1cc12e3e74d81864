# publicsite/delivery/fetch.py
"""
Concurrent content fetch for a resolved site.

Published pages and published products are independent reads; both are
submitted to a shared thread pool and both must finish before composition
starts. Any reader error (or a pool timeout) surfaces as
UpstreamFetchFailure, never as "not found".
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from dataclasses import dataclass
from typing import List, Optional

from publicsite.domain.content import Page, Product, Site
from publicsite.domain.exceptions import UpstreamFetchFailure
from publicsite.repositories.base import SiteReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteContent:
    site: Site
    pages: List[Page]
    products: List[Product]


class ContentFetcher:
    def __init__(self, reader: SiteReader, *, max_workers: int = 8, timeout: Optional[float] = None):
        self.reader = reader
        self.timeout = timeout
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="site-fetch")

    def fetch(self, site: Site) -> SiteContent:
        pages_future = self._pool.submit(self.reader.list_published_pages, site.id)
        products_future = self._pool.submit(self.reader.list_published_products, site.id)

        pages = self._result(pages_future, "list_published_pages", site)
        products = self._result(products_future, "list_published_products", site)
        return SiteContent(site=site, pages=list(pages or []), products=list(products or []))

    def _result(self, future, operation: str, site: Site):
        try:
            return future.result(timeout=self.timeout)
        except FutureTimeout as exc:
            future.cancel()
            raise UpstreamFetchFailure(operation, f"{operation} timed out for site {site.id}") from exc
        except Exception as exc:
            logger.exception("%s failed for site %s", operation, site.id)
            raise UpstreamFetchFailure(operation, str(exc)) from exc

    def shutdown(self) -> None:
        self._pool.shutdown(wait=False)
