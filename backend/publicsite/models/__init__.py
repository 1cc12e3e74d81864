from .site import Site
from .page import Page
from .product import Product

__all__ = ["Site", "Page", "Product"]
