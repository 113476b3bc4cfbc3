"""Static head metadata for each storefront route."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str
    canonical: Optional[str] = None


SITE_META = PageMeta(
    title="DYMNDS | Premium Athletic Wear",
    description=(
        "Elevate your grind. Premium fitness apparel for athletes who refuse to settle. "
        "Pressure creates diamonds."
    ),
)
SITE_KEYWORDS = "athletic wear, fitness apparel, premium clothing, workout gear, activewear"
SITE_OPEN_GRAPH = {
    "title": "DYMNDS | Premium Athletic Wear",
    "description": "Pressure creates diamonds. Premium fitness apparel for athletes who refuse to settle.",
    "image": "/dymnds-logo-black.png",
}
SITE_ICON = "/diamond-black.png"

APP_META = PageMeta(
    title="The DYMNDS App | Coming Soon",
    description=(
        "Your personal fitness coach. Workout tracking, nutrition, progress analytics "
        "— all free. Join the waitlist."
    ),
)

CART_META = PageMeta(
    title="Your Cart | DYMNDS",
    description="Review your DYMNDS cart. 10% of your order funds survivor healing.",
)

FAQ_META = PageMeta(
    title="FAQ | DYMNDS",
    description="Frequently asked questions about DYMNDS products, shipping, and more.",
    canonical="https://dymnds.ca/faq",
)

SHOP_META = PageMeta(
    title="Shop All | DYMNDS Athletic Wear",
    description=(
        "Browse the full DYMNDS collection. Premium activewear for men and women. "
        "10% of every order funds healing."
    ),
)

CONTACT_META = PageMeta(
    title="Contact Us | DYMNDS",
    description="Questions, feedback, or partnerships? Get in touch with the DYMNDS team.",
    canonical="https://dymnds.ca/contact",
)

SIZE_GUIDE_META = PageMeta(
    title="Size Guide | DYMNDS",
    description="Find your perfect fit. DYMNDS size charts for tops and bottoms, XS to XL.",
    canonical="https://dymnds.ca/size-guide",
)

CAREERS_META = PageMeta(
    title="Careers | DYMNDS",
    description="Join the DYMNDS team. Build something legendary.",
)

SHIPPING_META = PageMeta(
    title="Shipping Info | DYMNDS",
    description="Shipping information, delivery times, and tracking for DYMNDS orders.",
)

RETURNS_META = PageMeta(
    title="Returns & Exchanges | DYMNDS",
    description="Return policy and exchange information for DYMNDS products.",
)

TERMS_META = PageMeta(
    title="Terms of Service | DYMNDS",
    description="Terms and conditions for using the DYMNDS website and purchasing products.",
    canonical="https://dymnds.ca/terms",
)

PRIVACY_META = PageMeta(
    title="Privacy Policy | DYMNDS",
    description="How DYMNDS collects, uses, and protects your personal information.",
    canonical="https://dymnds.ca/privacy",
)

ROUTE_METADATA: dict[str, PageMeta] = {
    "/": SITE_META,
    "/app": APP_META,
    "/cart": CART_META,
    "/faq": FAQ_META,
    "/shop": SHOP_META,
    "/contact": CONTACT_META,
    "/size-guide": SIZE_GUIDE_META,
    "/careers": CAREERS_META,
    "/shipping": SHIPPING_META,
    "/returns": RETURNS_META,
    "/terms": TERMS_META,
    "/privacy": PRIVACY_META,
}


def metadata_for(path: str) -> PageMeta:
    """Return the metadata declared for a route, or the site defaults."""
    key = (path or "/").rstrip("/") or "/"
    return ROUTE_METADATA.get(key, SITE_META)


def resolve_head(path: str) -> dict:
    """
    Merge route metadata over the site defaults for the head template.

    Route entries replace title, description and canonical; keywords, Open
    Graph and icon always come from the site level.
    """
    meta = metadata_for(path)
    return {
        "title": meta.title,
        "description": meta.description,
        "canonical": meta.canonical,
        "keywords": SITE_KEYWORDS,
        "og": dict(SITE_OPEN_GRAPH),
        "icon": SITE_ICON,
    }
