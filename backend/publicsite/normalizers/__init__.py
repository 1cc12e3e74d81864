from .site import normalize_site
from .page import normalize_page
from .product import normalize_product

__all__ = ["normalize_site", "normalize_page", "normalize_product"]
