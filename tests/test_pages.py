from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from dymnds.app import app
from dymnds.core import config as core_config

client = TestClient(app)


@pytest.mark.parametrize(
    "path,title",
    [
        ("/", "DYMNDS | Premium Athletic Wear"),
        ("/app", "The DYMNDS App | Coming Soon"),
        ("/cart", "Your Cart | DYMNDS"),
        ("/faq", "FAQ | DYMNDS"),
        ("/shop", "Shop All | DYMNDS Athletic Wear"),
        ("/returns", "Returns &amp; Exchanges | DYMNDS"),
    ],
)
def test_pages_render_route_title(path, title):
    resp = client.get(path)
    assert resp.status_code == 200
    assert f"<title>{title}</title>" in resp.text


def test_faq_head_has_canonical_and_structured_data():
    resp = client.get("/faq")
    assert '<link rel="canonical" href="https://dymnds.ca/faq">' in resp.text
    assert '"@type": "FAQPage"' in resp.text


def test_cart_head_has_description_and_no_canonical():
    resp = client.get("/cart")
    assert (
        '<meta name="description" content="Review your DYMNDS cart. 10% of your order funds survivor healing.">'
        in resp.text
    )
    assert 'rel="canonical"' not in resp.text


def test_pages_include_logo_and_open_graph():
    resp = client.get("/shop")
    assert 'class="diamond-dance brand-mark"' in resp.text
    assert 'alt="DYMNDS"' in resp.text
    assert '<meta property="og:title" content="DYMNDS | Premium Athletic Wear">' in resp.text


def test_security_and_request_id_headers():
    resp = client.get("/")
    assert resp.headers["X-Frame-Options"] == "DENY"
    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert len(resp.headers["X-Request-ID"]) == 8


def test_unknown_root_asset_is_404():
    assert client.get("/definitely-not-a-page").status_code == 404


def test_content_security_policy_allows_only_own_images():
    csp = client.get("/").headers["Content-Security-Policy"]
    assert "img-src 'self' data:;" in csp
    assert "firebasestorage" not in csp


def test_devtools_wellknown_path_is_not_served():
    assert client.get("/.well-known/appspecific/com.chrome.devtools.json").status_code == 404


@pytest.mark.parametrize("asset", ["diamond-white.png", "diamond-black.png", "dymnds-logo-black.png"])
def test_bundled_brand_assets_are_served(asset):
    resp = client.get(f"/{asset}")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"


@pytest.fixture()
def brand_assets(tmp_path, monkeypatch):
    monkeypatch.setenv("BRAND_ASSETS_DIR", str(tmp_path))
    core_config.get_settings.cache_clear()
    yield tmp_path
    core_config.get_settings.cache_clear()


def test_brand_assets_dir_overrides_bundled_images(brand_assets):
    (brand_assets / "diamond-white.png").write_bytes(b"\x89PNG\r\n\x1a\nbrand")
    resp = client.get("/diamond-white.png")
    assert resp.status_code == 200
    assert resp.content == b"\x89PNG\r\n\x1a\nbrand"
    assert client.get("/diamond-black.png").status_code == 404
