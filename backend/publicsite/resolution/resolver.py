# publicsite/resolution/resolver.py
"""
Host-based tenant resolution.

An ordered list of named strategies is tried against the normalized host;
the first one that finds an active site wins:

    custom-domain      verified custom domain, as given
    custom-domain-www  verified custom domain stored with a ``www.`` prefix
    subdomain-suffix   ``<slug>.<reserved suffix>``
    literal-slug       the host itself used as a slug

The two slug strategies never run for excluded hosts (the platform's own
domains and loopback), which are the main application rather than tenants. Only those hosts
honor the ``/s/<slug>`` preview path, so a tenant host always maps to one
site.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from publicsite.domain.content import Site
from publicsite.domain.exceptions import SiteNotFound, UpstreamFetchFailure
from publicsite.repositories.base import SiteReader
from publicsite.resolution.cache import SiteCache

logger = logging.getLogger(__name__)

PREVIEW_PATH = re.compile(r"^/s/(?P<slug>[^/?#]+)(?P<rest>/[^?#]*)?")


def normalize_host(host: Optional[str]) -> str:
    """``WWW.Acme.com:8443.`` -> ``acme.com``."""
    host = (host or "").strip().lower()
    if host.startswith("[") and "]" in host:
        host = host[1 : host.index("]")]
    elif host.count(":") == 1:
        host = host.split(":", 1)[0]
    host = host.rstrip(".")
    if host.startswith("www."):
        host = host[4:]
    return host


@dataclass(frozen=True)
class Resolution:
    site: Site
    strategy: str
    path: str
    preview: bool = False


class Strategy:
    name = ""
    uses_slug = False

    def lookup(self, reader: SiteReader, host: str) -> Optional[Site]:
        raise NotImplementedError


class CustomDomainStrategy(Strategy):
    name = "custom-domain"

    def lookup(self, reader, host):
        return _verified(reader.find_site_by_custom_domain(host))


class CustomDomainWwwStrategy(Strategy):
    name = "custom-domain-www"

    def lookup(self, reader, host):
        return _verified(reader.find_site_by_custom_domain(f"www.{host}"))


class SubdomainSuffixStrategy(Strategy):
    name = "subdomain-suffix"
    uses_slug = True

    def __init__(self, suffixes: Iterable[str]):
        self.suffixes = tuple(
            suffix if suffix.startswith(".") else f".{suffix}" for suffix in suffixes
        )

    def lookup(self, reader, host):
        for suffix in self.suffixes:
            if host.endswith(suffix):
                slug = host[: -len(suffix)]
                if slug and "." not in slug:
                    return _active(reader.find_site_by_slug(slug))
        return None


class LiteralSlugStrategy(Strategy):
    name = "literal-slug"
    uses_slug = True

    def lookup(self, reader, host):
        return _active(reader.find_site_by_slug(host))


def _active(site: Optional[Site]) -> Optional[Site]:
    # Readers filter already; an inactive site must never resolve.
    if site is not None and site.is_active:
        return site
    return None


def _verified(site: Optional[Site]) -> Optional[Site]:
    site = _active(site)
    if site is not None and site.has_verified_domain:
        return site
    return None


class TenantResolver:
    def __init__(
        self,
        reader: SiteReader,
        *,
        reserved_suffixes: Sequence[str] = (".creatorapp.site", ".creatorapp.us"),
        excluded_hosts: Iterable[str] = ("localhost", "127.0.0.1"),
        cache: Optional[SiteCache] = None,
    ):
        self.reader = reader
        self.excluded_hosts = frozenset(normalize_host(host) for host in excluded_hosts)
        self.strategies: Tuple[Strategy, ...] = (
            CustomDomainStrategy(),
            CustomDomainWwwStrategy(),
            SubdomainSuffixStrategy(reserved_suffixes),
            LiteralSlugStrategy(),
        )
        self.cache = cache
        self._literal_slug = self.strategies[-1]

    @classmethod
    def from_config(cls, reader: SiteReader, config) -> "TenantResolver":
        ttl = config.get("SITE_CACHE_TTL", 0)
        return cls(
            reader,
            reserved_suffixes=config["RESERVED_SUBDOMAIN_SUFFIXES"],
            excluded_hosts=config["EXCLUDED_HOSTS"],
            cache=SiteCache(ttl) if ttl and ttl > 0 else None,
        )

    def resolve(self, host: Optional[str], path_override: Optional[str] = None) -> Site:
        return self.resolve_request(host, path_override).site

    def resolve_request(self, host: Optional[str], path: Optional[str] = None) -> Resolution:
        """
        Resolve a host (and optionally a request path) to a tenant.

        On a platform (excluded) host, a preview path ``/s/<slug>/<rest>``
        selects the tenant by slug and the returned path is ``/<rest>``. On a
        tenant host ``/s/...`` is an ordinary page path of that tenant.
        """
        normalized = normalize_host(host)
        if not normalized:
            raise SiteNotFound(host)

        excluded = normalized in self.excluded_hosts
        preview = PREVIEW_PATH.match(path or "") if excluded else None
        if preview:
            slug = preview.group("slug").lower()
            site, strategy = self._cached(("slug", slug), (self._literal_slug,), slug)
            if site is None:
                raise SiteNotFound(f"/s/{slug}")
            return Resolution(site, strategy, preview.group("rest") or "/", preview=True)

        if excluded:
            strategies = tuple(s for s in self.strategies if not s.uses_slug)
        else:
            strategies = self.strategies

        site, strategy = self._cached(("host", normalized), strategies, normalized)
        if site is None:
            raise SiteNotFound(normalized)
        return Resolution(site, strategy, path or "/")

    def _cached(self, cache_key, strategies, key) -> Tuple[Optional[Site], Optional[str]]:
        if self.cache is not None:
            hit = self.cache.get(cache_key)
            if hit is not None:
                return hit

        for strategy in strategies:
            try:
                site = strategy.lookup(self.reader, key)
            except Exception as exc:
                raise UpstreamFetchFailure(f"resolve:{strategy.name}") from exc
            if site is not None:
                logger.debug("Resolved %s to site %s via %s", key, site.id, strategy.name)
                if self.cache is not None:
                    self.cache.set(cache_key, (site, strategy.name))
                return site, strategy.name

        return None, None
