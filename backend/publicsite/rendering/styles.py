"""
Guards for tenant-authored values that end up inside style attributes or URLs.

Tenants edit paddings, alignment and links freely; anything that does not look
like a plain CSS value or a safe URL falls back to the renderer default.
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional
from urllib.parse import urlsplit

_LENGTH = re.compile(r"^-?\d+(?:\.\d+)?(?:px|rem|em|%|vh|vw)?$")

TEXT_ALIGNMENTS = {"left", "center", "right", "justify"}
SAFE_URL_SCHEMES = {"http", "https", "mailto", "tel"}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "$",
    "AUD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
}


def safe_padding(value, default: str) -> str:
    """Accepts one to four CSS lengths, e.g. ``100px 20px``."""
    if not isinstance(value, str):
        return default
    parts = value.split()
    if 1 <= len(parts) <= 4 and all(_LENGTH.match(part) for part in parts):
        return " ".join(parts)
    return default


def safe_text_align(value, default: str = "center") -> str:
    if isinstance(value, str) and value.strip().lower() in TEXT_ALIGNMENTS:
        return value.strip().lower()
    return default


def safe_url(value, default: Optional[str] = None) -> Optional[str]:
    """
    Return the URL when it is relative, a fragment, or uses an allowed scheme.

    ``javascript:``, ``data:`` and friends are rejected, as are values with
    control characters that browsers silently strip before parsing.
    """
    if not isinstance(value, str):
        return default
    value = value.strip()
    if not value or any(ord(ch) < 32 for ch in value):
        return default
    scheme = urlsplit(value).scheme.lower()
    if not scheme or scheme in SAFE_URL_SCHEMES:
        return value
    return default


def safe_media_url(value) -> Optional[str]:
    """Like safe_url, restricted to http(s) and relative paths."""
    url = safe_url(value)
    if url and urlsplit(url).scheme.lower() in ("mailto", "tel"):
        return None
    return url


def css_url(value) -> Optional[str]:
    """Wrap a media URL for use in ``background-image``; None when unsafe."""
    url = safe_media_url(value)
    if url is None or any(ch in url for ch in "\"'()\\"):
        return None
    return f'url("{url}")'


def format_price(amount, currency: str = "USD") -> str:
    """``49`` -> ``$49 USD``; ``19.5`` -> ``$19.50 USD``."""
    currency = (currency or "USD").upper()
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        value = Decimal("0")

    if value == value.to_integral_value():
        number = f"{value:,.0f}"
    else:
        number = f"{value:,.2f}"

    symbol = CURRENCY_SYMBOLS.get(currency, "")
    return f"{symbol}{number} {currency}"


def truncate(text, limit: int = 120) -> str:
    if not text:
        return ""
    text = " ".join(str(text).split())
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def is_light_background(color: str) -> bool:
    # Only the two light presets the page builder offers count as light.
    return color.strip().lower() in ("#f8fafc", "#ffffff")
