from .resolver import Resolution, TenantResolver, normalize_host

__all__ = ["Resolution", "TenantResolver", "normalize_host"]
