# publicsite/rendering/blocks.py
"""
One renderer per block kind.

Each renderer maps a Block and the site Theme to a ``<section>`` Element
tagged with ``data-block``. Renderers only read through the ``_text``,
``_items`` and ``_url`` helpers, so a missing or mistyped field drops that
piece of output instead of raising.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from publicsite.domain.content import Block, BlockType, Theme
from publicsite.rendering.nodes import Element, RawHTML, h
from publicsite.rendering.sanitize import sanitize_html
from publicsite.rendering.styles import (
    css_url,
    is_light_background,
    safe_media_url,
    safe_padding,
    safe_text_align,
    safe_url,
)
from publicsite.utils.colors import safe_color, tint

DARK = "#0f172a"
MUTED = "#64748b"
BODY = "#334155"
BORDER = "#e2e8f0"
SURFACE = "#f8fafc"
SUCCESS = "#22c55e"

DEFAULT_HERO_OVERLAY = "rgba(10, 30, 60, 0.7)"
DEFAULT_HERO_PADDING = "100px 20px"
DEFAULT_CTA_BACKGROUND = DARK
DEFAULT_FEATURE_ICON = "★"
CHECK_GLYPH = "✓"
PLAY_GLYPH = "▶"
MOST_POPULAR = "Most Popular"


# -------------------------------------------------
# Field access
# -------------------------------------------------

def _text(content: Dict[str, Any], key: str) -> str:
    value = content.get(key)
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip() if isinstance(value, str) else str(value)


def _items(content: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    value = content.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _strings(content: Dict[str, Any], key: str) -> List[str]:
    value = content.get(key)
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if isinstance(item, (str, int, float)) and str(item)]


def _url(content: Dict[str, Any], key: str, default: Optional[str] = None) -> Optional[str]:
    return safe_url(content.get(key), default)


def _media(content: Dict[str, Any], key: str) -> Optional[str]:
    return safe_media_url(content.get(key))


def _section(kind: BlockType, block: Block, *children, style=None) -> Element:
    return h(
        "section",
        {"data-block": kind.value, "id": f"block-{block.id}" if block.id else None},
        *children,
        style=style,
    )


def _heading(tag: str, text: str, **style) -> Optional[Element]:
    if not text:
        return None
    return h(tag, None, text, style=style)


# -------------------------------------------------
# Renderers
# -------------------------------------------------

def render_hero(block: Block, theme: Theme) -> Element:
    c, s = block.content, block.styles
    background_image = css_url(c.get("backgroundImage"))

    if background_image:
        background = {
            "background-image": background_image,
            "background-size": "cover",
            "background-position": "center",
        }
        overlay = safe_color(s.get("overlay"), DEFAULT_HERO_OVERLAY)
    else:
        background = {
            "background": f"linear-gradient(135deg, {theme.primary_color} 0%, {DARK} 100%)"
        }
        overlay = "transparent"

    cta_text = _text(c, "ctaText")
    cta = None
    if cta_text:
        cta = h(
            "a",
            {"href": _url(c, "ctaUrl", "#"), "class": "btn btn-hero"},
            cta_text,
            style={"background": "#fff", "color": theme.primary_color},
        )

    return _section(
        BlockType.HERO,
        block,
        h(
            "div",
            {"class": "hero-overlay", "aria-hidden": "true"},
            style={"position": "absolute", "inset": "0", "background": overlay},
        ),
        h(
            "div",
            {"class": "hero-inner"},
            h("h1", {"class": "hero-headline"}, _text(c, "headline")),
            h("p", {"class": "hero-subheadline"}, _text(c, "subheadline")),
            cta,
            style={
                "text-align": safe_text_align(s.get("textAlign")),
                "padding": safe_padding(s.get("padding"), DEFAULT_HERO_PADDING),
            },
        ),
        style=dict(background, position="relative"),
    )


def render_text(block: Block, theme: Theme) -> Element:
    return _section(
        BlockType.TEXT,
        block,
        h("div", {"class": "prose"}, RawHTML(html=sanitize_html(block.content.get("text")))),
    )


def render_image(block: Block, theme: Theme) -> Element:
    c = block.content
    caption = _text(c, "caption")
    src = _media(c, "url")
    return _section(
        BlockType.IMAGE,
        block,
        h(
            "figure",
            {"class": "image-frame"},
            h("img", {"src": src or "", "alt": _text(c, "alt") or "Image", "loading": "lazy"}) if src else None,
            h("figcaption", None, caption) if caption else None,
        ),
    )


def render_stats(block: Block, theme: Theme) -> Element:
    c, s = block.content, block.styles
    background = safe_color(s.get("backgroundColor"), theme.primary_color)
    light = is_light_background(background)
    value_color = DARK if light else "#ffffff"
    label_color = MUTED if light else "rgba(255,255,255,0.8)"

    stats = [
        h(
            "div",
            {"class": "stat"},
            h("div", {"class": "stat-value"}, _text(stat, "value"), style={"color": value_color}),
            h("div", {"class": "stat-label"}, _text(stat, "label"), style={"color": label_color}),
        )
        for stat in _items(c, "stats")
    ]

    return _section(
        BlockType.STATS,
        block,
        h(
            "div",
            {"class": "container center"},
            _heading("h2", _text(c, "headline"), color=value_color),
            h("div", {"class": "grid grid-stats"}, stats),
        ),
        style={"background": background},
    )


def _section_header(c: Dict[str, Any]) -> Optional[Element]:
    headline = _text(c, "headline")
    if not headline:
        return None
    return h(
        "div",
        {"class": "section-header"},
        h("h2", None, headline),
        _heading("p", _text(c, "subheadline")),
    )


def render_features(block: Block, theme: Theme) -> Element:
    c = block.content
    cards = []
    for feature in _items(c, "features"):
        icon = _text(feature, "icon")
        cards.append(
            h(
                "div",
                {"class": "card feature"},
                h(
                    "div",
                    {"class": "feature-icon"},
                    h(
                        "span",
                        None,
                        icon if icon and len(icon) <= 4 else DEFAULT_FEATURE_ICON,
                        style={"color": theme.primary_color},
                    ),
                    style={"background": tint(theme.primary_color, "15", SURFACE)},
                ),
                h("h3", None, _text(feature, "title")),
                h("p", None, _text(feature, "description")),
            )
        )

    return _section(
        BlockType.FEATURES,
        block,
        h("div", {"class": "container"}, _section_header(c), h("div", {"class": "grid grid-cards"}, cards)),
    )


def render_testimonial(block: Block, theme: Theme) -> Element:
    c = block.content
    author = _text(c, "author")
    avatar = _media(c, "avatar")
    role = _text(c, "role")
    return _section(
        BlockType.TESTIMONIAL,
        block,
        h(
            "div",
            {"class": "container narrow"},
            h(
                "figure",
                {"class": "card testimonial"},
                h("img", {"class": "avatar", "src": avatar, "alt": author}) if avatar else None,
                h(
                    "div",
                    None,
                    h("blockquote", None, f"“{_text(c, 'quote')}”"),
                    h("figcaption", {"class": "author"}, author),
                    h("p", {"class": "role"}, role) if role else None,
                ),
            ),
        ),
        style={"background": SURFACE},
    )


def render_cta(block: Block, theme: Theme) -> Element:
    c, s = block.content, block.styles
    background = safe_color(s.get("backgroundColor"), DEFAULT_CTA_BACKGROUND)
    button_text = _text(c, "buttonText")
    description = _text(c, "description")
    return _section(
        BlockType.CTA,
        block,
        h(
            "div",
            {"class": "container narrow center"},
            h("h2", None, _text(c, "headline")),
            h("p", None, description) if description else None,
            h(
                "a",
                {"href": _url(c, "buttonUrl", "#"), "class": "btn btn-hero"},
                button_text,
                style={"background": "#fff", "color": background},
            )
            if button_text
            else None,
        ),
        style={"background": background, "color": "#fff"},
    )


def _form_field(field: Dict[str, Any]) -> Element:
    label = _text(field, "label")
    name = _text(field, "name") or label.lower().replace(" ", "_")
    field_type = _text(field, "type") or "text"
    required = bool(field.get("required"))

    if field_type == "textarea":
        control = h(
            "textarea",
            {"name": name, "placeholder": label, "required": required, "rows": 4},
        )
    else:
        control = h(
            "input",
            {"type": field_type, "name": name, "placeholder": label, "required": required},
        )

    return h(
        "div",
        {"class": "field"},
        h(
            "label",
            None,
            label,
            h("span", {"class": "required"}, " *") if required else None,
        ),
        control,
    )


def render_form(block: Block, theme: Theme) -> Element:
    c = block.content
    description = _text(c, "description")
    return _section(
        BlockType.FORM,
        block,
        h(
            "div",
            {"class": "container form-wrap"},
            _heading("h2", _text(c, "headline")),
            h("p", {"class": "form-description"}, description) if description else None,
            h(
                "form",
                {
                    "data-form-block": True,
                    "data-success-message": _text(c, "successMessage") or "Submitted!",
                    "data-success-color": SUCCESS,
                },
                [_form_field(field) for field in _items(c, "fields")],
                h(
                    "button",
                    {"type": "submit", "class": "btn btn-block"},
                    _text(c, "submitButtonText") or "Submit",
                    style={"background": theme.primary_color},
                ),
            ),
        ),
    )


def _pricing_plan(plan: Dict[str, Any], theme: Theme) -> Element:
    highlighted = plan.get("highlighted") is True
    return h(
        "div",
        {"class": "card plan highlighted" if highlighted else "card plan"},
        h(
            "div",
            {"class": "badge"},
            MOST_POPULAR,
            style={"background": theme.primary_color},
        )
        if highlighted
        else None,
        h("h3", None, _text(plan, "name")),
        h(
            "div",
            {"class": "plan-price"},
            h("span", {"class": "amount"}, _text(plan, "price")),
            h("span", {"class": "period"}, _text(plan, "period")),
        ),
        h(
            "ul",
            {"class": "plan-features"},
            [
                h("li", None, h("span", {"class": "check"}, CHECK_GLYPH), h("span", None, feature))
                for feature in _strings(plan, "features")
            ],
        ),
        h(
            "a",
            {"href": _url(plan, "buttonUrl", "#enroll"), "class": "btn btn-block"},
            _text(plan, "buttonText") or "Get Started",
            style={
                "background": theme.primary_color if highlighted else "#f1f5f9",
                "color": "#fff" if highlighted else DARK,
            },
        ),
        style={"border": f"2px solid {theme.primary_color}"} if highlighted else None,
    )


def render_pricing(block: Block, theme: Theme) -> Element:
    c = block.content
    return _section(
        BlockType.PRICING,
        block,
        h(
            "div",
            {"class": "container"},
            _section_header(c),
            h(
                "div",
                {"class": "grid grid-cards align-start"},
                [_pricing_plan(plan, theme) for plan in _items(c, "plans")],
            ),
        ),
    )


def render_video(block: Block, theme: Theme) -> Optional[Element]:
    c = block.content
    headline = _text(c, "headline") or _text(c, "title")
    description = _text(c, "description")
    video_url = _media(c, "videoUrl")
    thumbnail = _media(c, "thumbnailUrl")

    if video_url:
        media = h(
            "div",
            {"class": "video-frame"},
            h(
                "iframe",
                {
                    "src": video_url,
                    "title": headline or "Video",
                    "allowfullscreen": True,
                    "loading": "lazy",
                },
            ),
        )
    elif thumbnail:
        media = h(
            "div",
            {"class": "video-thumb"},
            h("img", {"src": thumbnail, "alt": "Video thumbnail"}),
            h("div", {"class": "play-overlay"}, h("span", {"class": "play"}, PLAY_GLYPH)),
        )
    else:
        return None

    return _section(
        BlockType.VIDEO,
        block,
        h(
            "div",
            {"class": "container narrow center"},
            _heading("h2", headline),
            h("p", {"class": "muted"}, description) if description else None,
            media,
        ),
    )


def render_gallery(block: Block, theme: Theme) -> Element:
    c = block.content
    images = []
    for index, image in enumerate(_items(c, "images"), start=1):
        src = _media(image, "url")
        if not src:
            continue
        images.append(
            h(
                "img",
                {"src": src, "alt": _text(image, "alt") or f"Gallery image {index}", "loading": "lazy"},
            )
        )

    return _section(
        BlockType.GALLERY,
        block,
        h(
            "div",
            {"class": "container"},
            _heading("h2", _text(c, "headline")),
            h("div", {"class": "grid grid-gallery"}, images),
        ),
    )


BLOCK_RENDERERS: Dict[BlockType, Callable[[Block, Theme], Optional[Element]]] = {
    BlockType.HERO: render_hero,
    BlockType.TEXT: render_text,
    BlockType.IMAGE: render_image,
    BlockType.STATS: render_stats,
    BlockType.FEATURES: render_features,
    BlockType.TESTIMONIAL: render_testimonial,
    BlockType.CTA: render_cta,
    BlockType.FORM: render_form,
    BlockType.PRICING: render_pricing,
    BlockType.VIDEO: render_video,
    BlockType.GALLERY: render_gallery,
}

_unhandled = set(BlockType) - set(BLOCK_RENDERERS)
if _unhandled:
    raise RuntimeError(f"Block kinds without a renderer: {sorted(k.value for k in _unhandled)}")


def render_block(block: Block, theme: Theme) -> Optional[Element]:
    """Render one block; unknown kinds render as nothing."""
    kind = block.kind
    if kind is None:
        return None
    return BLOCK_RENDERERS[kind](block, theme)
