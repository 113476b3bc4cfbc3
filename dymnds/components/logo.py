"""Diamond logo fragment used across the storefront pages."""
from __future__ import annotations

from markupsafe import Markup

LOGO_SRC = "/diamond-white.png"
ANIMATION_CLASS = "diamond-dance"


def render_diamond_logo(class_name: str = "", alt: str = "") -> Markup:
    """Render the animated diamond ``<img>``; the caller's classes follow the animation class."""
    css_class = f"{ANIMATION_CLASS} {class_name or ''}"
    return Markup('<img src="{src}" alt="{alt}" class="{cls}">').format(
        src=LOGO_SRC,
        alt=alt or "",
        cls=css_class,
    )
