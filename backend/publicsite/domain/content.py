# publicsite/domain/content.py
"""
Read-only content model consumed by the renderer.

Records arrive from a SiteReader already filtered (active sites, published
pages and products). Parsing is tolerant: a malformed block payload becomes
an empty mapping instead of a validation error, so one bad block can never
take a whole page down.
"""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from publicsite.utils.colors import safe_color


class SiteStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class DomainVerificationStatus(str, Enum):
    UNVERIFIED = "unverified"
    VERIFIED = "verified"


class PageStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class BlockType(str, Enum):
    HERO = "hero"
    TEXT = "text"
    IMAGE = "image"
    STATS = "stats"
    FEATURES = "features"
    TESTIMONIAL = "testimonial"
    CTA = "cta"
    FORM = "form"
    PRICING = "pricing"
    VIDEO = "video"
    GALLERY = "gallery"


class Site(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    slug: str
    custom_domain: Optional[str] = None
    domain_verification_status: DomainVerificationStatus = DomainVerificationStatus.UNVERIFIED
    status: SiteStatus = SiteStatus.ACTIVE
    primary_color: Optional[str] = None
    settings: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("settings", mode="before")
    @classmethod
    def _settings_mapping(cls, value):
        return value if isinstance(value, dict) else {}

    @property
    def is_active(self) -> bool:
        return self.status == SiteStatus.ACTIVE

    @property
    def has_verified_domain(self) -> bool:
        return (
            bool(self.custom_domain)
            and self.domain_verification_status == DomainVerificationStatus.VERIFIED
        )

    @property
    def description(self) -> str:
        return self.settings.get("description") or ""

    @property
    def logo_url(self) -> Optional[str]:
        return self.settings.get("logo_url") or None


class Block(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    type: str = ""
    content: Dict[str, Any] = Field(default_factory=dict)
    styles: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("content", "styles", mode="before")
    @classmethod
    def _mapping_or_empty(cls, value):
        return value if isinstance(value, dict) else {}

    @field_validator("type", mode="before")
    @classmethod
    def _type_string(cls, value):
        return value if isinstance(value, str) else ""

    @property
    def kind(self) -> Optional[BlockType]:
        """The declared block kind, or None for types this renderer does not know."""
        try:
            return BlockType(self.type)
        except ValueError:
            return None


def parse_blocks(content: Any) -> List[Block]:
    """
    Extract the ordered block list from a page's content document.

    Accepts ``{"blocks": [...]}``, a bare list of blocks, or a legacy HTML
    string (rendered as a single text block). Entries that are not mappings
    are dropped.
    """
    if isinstance(content, str):
        return [Block(type=BlockType.TEXT.value, content={"text": content})] if content.strip() else []

    if isinstance(content, dict):
        raw_blocks = content.get("blocks")
    else:
        raw_blocks = content

    if not isinstance(raw_blocks, list):
        return []

    return [Block.model_validate(raw) for raw in raw_blocks if isinstance(raw, dict)]


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    site_id: str
    title: str = ""
    slug: str
    content: Any = None
    status: PageStatus = PageStatus.PUBLISHED
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    page_type: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def _title_string(cls, value):
        return value or ""

    @property
    def blocks(self) -> List[Block]:
        return parse_blocks(self.content)


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: Optional[str] = None
    price_amount: Decimal = Decimal("0")
    price_currency: str = "USD"
    thumbnail_url: Optional[str] = None
    product_type: Optional[str] = None

    @field_validator("price_amount", mode="before")
    @classmethod
    def _amount_or_zero(cls, value):
        return 0 if value is None else value

    @field_validator("price_currency", mode="before")
    @classmethod
    def _currency_or_usd(cls, value):
        return (value or "USD").upper()


class NavEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    label: str
    href: str
    is_home: bool = False
    is_cta: bool = False
    active: bool = False


class Theme(BaseModel):
    """Explicit render theme; passed to every renderer instead of global state."""

    model_config = ConfigDict(frozen=True)

    primary_color: str

    @classmethod
    def for_site(cls, site: Site, default_color: str = "#0ea5e9") -> "Theme":
        return cls(primary_color=safe_color(site.primary_color, default_color))
