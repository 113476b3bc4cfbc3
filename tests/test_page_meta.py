from __future__ import annotations

import dataclasses

import pytest

from dymnds.domain import page_meta
from dymnds.domain.page_meta import metadata_for, resolve_head


def test_app_coming_soon_metadata():
    meta = metadata_for("/app")
    assert meta.title == "The DYMNDS App | Coming Soon"
    assert meta.description == (
        "Your personal fitness coach. Workout tracking, nutrition, progress analytics "
        "— all free. Join the waitlist."
    )
    assert meta.canonical is None


def test_cart_metadata():
    meta = metadata_for("/cart")
    assert meta.title == "Your Cart | DYMNDS"
    assert meta.description == "Review your DYMNDS cart. 10% of your order funds survivor healing."
    assert meta.canonical is None


def test_faq_metadata_has_canonical():
    meta = metadata_for("/faq")
    assert meta.title == "FAQ | DYMNDS"
    assert meta.description == "Frequently asked questions about DYMNDS products, shipping, and more."
    assert meta.canonical == "https://dymnds.ca/faq"


def test_shop_metadata():
    meta = metadata_for("/shop")
    assert meta.title == "Shop All | DYMNDS Athletic Wear"
    assert meta.description == (
        "Browse the full DYMNDS collection. Premium activewear for men and women. "
        "10% of every order funds healing."
    )


@pytest.mark.parametrize(
    "path,title,canonical",
    [
        ("/contact", "Contact Us | DYMNDS", "https://dymnds.ca/contact"),
        ("/size-guide", "Size Guide | DYMNDS", "https://dymnds.ca/size-guide"),
        ("/careers", "Careers | DYMNDS", None),
        ("/shipping", "Shipping Info | DYMNDS", None),
        ("/returns", "Returns & Exchanges | DYMNDS", None),
        ("/terms", "Terms of Service | DYMNDS", "https://dymnds.ca/terms"),
        ("/privacy", "Privacy Policy | DYMNDS", "https://dymnds.ca/privacy"),
    ],
)
def test_secondary_pages(path, title, canonical):
    meta = metadata_for(path)
    assert meta.title == title
    assert meta.canonical == canonical


def test_unknown_route_and_trailing_slash():
    assert metadata_for("/nope") is page_meta.SITE_META
    assert metadata_for("/faq/") is page_meta.FAQ_META
    assert metadata_for("") is page_meta.SITE_META


def test_metadata_records_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        page_meta.SHOP_META.title = "changed"  # type: ignore[misc]


def test_resolve_head_inherits_site_open_graph():
    head = resolve_head("/cart")
    assert head["title"] == "Your Cart | DYMNDS"
    assert head["canonical"] is None
    assert head["keywords"] == page_meta.SITE_KEYWORDS
    assert head["og"]["title"] == "DYMNDS | Premium Athletic Wear"
    assert head["icon"] == "/diamond-black.png"
    head["og"]["title"] = "mutated"
    assert page_meta.SITE_OPEN_GRAPH["title"] == "DYMNDS | Premium Athletic Wear"
