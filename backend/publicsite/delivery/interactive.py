# publicsite/delivery/interactive.py
"""
Interactive mount: JSON payloads for the browser mount script, and the
MountController state machine embedding hosts drive directly.

Every navigation takes a new generation token. A result is applied only if
its token is still the newest one, so a slow response for an earlier
navigation can never overwrite the page the visitor moved on to.
"""
from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Dict, Optional

from publicsite.delivery.pipeline import LoadedSite, SitePipeline
from publicsite.domain.exceptions import PageNotFound, SiteNotFound
from publicsite.rendering.composer import ComposedDocument, Composition
from publicsite.rendering.urls import UrlScheme

logger = logging.getLogger(__name__)


class MountState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    SITE_NOT_FOUND = "site_not_found"
    PAGE_NOT_FOUND = "page_not_found"
    ERROR = "error"


def state_for(composition: Composition) -> MountState:
    if isinstance(composition, ComposedDocument):
        return MountState.READY
    return MountState.PAGE_NOT_FOUND


def build_payload(state: MountState, composition: Optional[Composition] = None) -> Dict[str, Any]:
    """JSON body of ``/api/v1/public/page``; ``tree`` is the composed node tree."""
    if composition is None:
        return {"state": state.value, "site": None, "title": "", "description": "", "tree": None}

    site = composition.site
    return {
        "state": state.value,
        "site": {"id": site.id, "name": site.name, "slug": site.slug},
        "title": composition.title,
        "description": composition.description,
        "tree": composition.body.model_dump(mode="json"),
    }


class MountController:
    def __init__(self, pipeline: SitePipeline, domain: str, *, urls: Optional[UrlScheme] = None):
        self.pipeline = pipeline
        self.domain = domain
        self.urls = urls
        self.state = MountState.LOADING
        self.composition: Optional[Composition] = None
        self.error: Optional[Exception] = None
        self.path: Optional[str] = None
        self._loaded: Optional[LoadedSite] = None
        self._generation = 0
        self._lock = threading.Lock()

    def begin(self, path: str) -> int:
        with self._lock:
            self._generation += 1
            self.state = MountState.LOADING
            self.path = path
            return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def load(self, path: str = "/") -> MountState:
        """Resolve, fetch and compose ``path``; the first mount of a tenant."""
        token = self.begin(path)
        try:
            loaded = self.pipeline.load(self.domain, path)
            composition = self.pipeline.compose(loaded, urls=self.urls)
        except Exception as exc:
            self.fail(token, exc)
        else:
            self.complete(token, composition, loaded)
        return self.state

    def navigate(self, path: str) -> MountState:
        """
        Move to another page of the loaded tenant.

        Content already fetched for the tenant is reused, so only the
        composition runs again. Before the first successful load this is
        the same as ``load``.
        """
        if self._loaded is None:
            return self.load(path)

        token = self.begin(path)
        try:
            composition = self.pipeline.compose(self._loaded, path, urls=self.urls)
        except Exception as exc:
            self.fail(token, exc)
        else:
            self.complete(token, composition, self._loaded)
        return self.state

    def complete(self, token: int, composition: Composition, loaded: Optional[LoadedSite] = None) -> bool:
        with self._lock:
            if not self.is_current(token):
                logger.debug("Dropping stale render %s (current %s)", token, self._generation)
                return False
            self.composition = composition
            if loaded is not None:
                self._loaded = loaded
            self.state = state_for(composition)
            self.error = None
            if self.state is MountState.PAGE_NOT_FOUND:
                self.error = PageNotFound(composition.site.id, composition.path)
            return True

    def fail(self, token: int, exc: Exception) -> bool:
        with self._lock:
            if not self.is_current(token):
                logger.debug("Dropping stale failure %s (current %s): %s", token, self._generation, exc)
                return False
            self.composition = None
            self.error = exc
            if isinstance(exc, SiteNotFound):
                self.state = MountState.SITE_NOT_FOUND
            else:
                logger.exception("Mount of %s%s failed", self.domain, self.path, exc_info=exc)
                self.state = MountState.ERROR
            return True

    def payload(self) -> Dict[str, Any]:
        return build_payload(self.state, self.composition)
