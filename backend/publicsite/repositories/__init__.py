from .base import SiteReader
from .memory import InMemorySiteReader
from .sqlalchemy import SqlAlchemySiteReader

__all__ = ["SiteReader", "InMemorySiteReader", "SqlAlchemySiteReader"]
