# publicsite/delivery/static.py
"""
Static document endpoint core: domain + path -> (status, full HTML).

The whole pipeline runs on a dedicated render pool so a hung read is
answered with the error document after ``timeout`` seconds instead of
holding the request open.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from dataclasses import dataclass
from typing import Optional

from publicsite.delivery.pipeline import SitePipeline
from publicsite.domain.exceptions import SiteNotFound, UpstreamFetchFailure
from publicsite.rendering.html import (
    render_document,
    render_error_document,
    render_site_not_found,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaticResponse:
    status: int
    html: str

    @property
    def cacheable(self) -> bool:
        return self.status == 200


class StaticDocumentRenderer:
    def __init__(self, pipeline: SitePipeline, *, timeout: float = 8.0, max_workers: int = 8):
        self.pipeline = pipeline
        self.timeout = timeout
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="site-render")

    def render(self, domain: Optional[str], path: Optional[str] = None) -> StaticResponse:
        future = self._pool.submit(self._render, domain, path or "/")
        try:
            return future.result(timeout=self.timeout)
        except FutureTimeout:
            future.cancel()
            logger.error("Rendering %s%s timed out after %ss", domain, path, self.timeout)
            return StaticResponse(500, render_error_document())

    def _render(self, domain: Optional[str], path: str) -> StaticResponse:
        try:
            outcome = self.pipeline.render(domain, path)
            html = render_document(outcome.composition)
        except SiteNotFound as exc:
            logger.info("No site for host %r", exc.host)
            return StaticResponse(404, render_site_not_found())
        except UpstreamFetchFailure:
            logger.exception("Upstream failure rendering %s%s", domain, path)
            return StaticResponse(500, render_error_document())
        except Exception:
            logger.exception("Unexpected error rendering %s%s", domain, path)
            return StaticResponse(500, render_error_document())

        return StaticResponse(outcome.status, html)

    def shutdown(self) -> None:
        self._pool.shutdown(wait=False)
