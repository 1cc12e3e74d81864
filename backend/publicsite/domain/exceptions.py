class PublicSiteError(Exception):
    """Base class for errors raised while serving a tenant site."""


class SiteNotFound(PublicSiteError):
    def __init__(self, host):
        self.host = host
        super().__init__(f"No active site matches host '{host}'")


class PageNotFound(PublicSiteError):
    def __init__(self, site_id, path):
        self.site_id = site_id
        self.path = path
        super().__init__(f"Site {site_id} has no published page at '{path}'")


class UpstreamFetchFailure(PublicSiteError):
    """The site reader failed or timed out. Never reported as not found."""

    def __init__(self, operation, message=None):
        self.operation = operation
        super().__init__(message or f"Upstream read failed during '{operation}'")
