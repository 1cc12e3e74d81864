"""Color guards shared by the content model and the renderers."""
import re

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_HEX6 = re.compile(r"^#[0-9a-fA-F]{6}$")
_HEX3 = re.compile(r"^#[0-9a-fA-F]{3}$")
_FUNC_COLOR = re.compile(
    r"^(?:rgb|rgba|hsl|hsla)\(\s*[0-9.%]+\s*,\s*[0-9.%]+\s*,\s*[0-9.%]+\s*(?:,\s*[0-9.]+\s*)?\)$"
)
_NAMED_COLOR = re.compile(r"^[a-zA-Z]{3,20}$")


def safe_color(value, default: str) -> str:
    if not isinstance(value, str):
        return default
    value = value.strip()
    if _HEX_COLOR.match(value) or _FUNC_COLOR.match(value) or _NAMED_COLOR.match(value):
        return value
    return default


def tint(color: str, alpha: str, fallback: str) -> str:
    """
    ``#7c3aed`` + ``15`` -> ``#7c3aed15``. Three-digit hex is expanded first;
    any other color form has no alpha suffix and yields ``fallback``.
    """
    if _HEX3.match(color):
        color = "#" + "".join(ch * 2 for ch in color[1:])
    if _HEX6.match(color):
        return f"{color}{alpha}"
    return fallback
