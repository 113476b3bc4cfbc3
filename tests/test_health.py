from __future__ import annotations

import re

from fastapi.testclient import TestClient

from dymnds.app import app
from dymnds.routers.health import SITEMAP_STATIC

client = TestClient(app)


def test_health_ok(temp_db):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert set(body) == {"status", "timestamp"}


def test_health_unhealthy_without_database(no_db):
    resp = client.get("/api/health")
    assert resp.status_code == 503
    assert resp.json()["status"] == "unhealthy"


def test_sitemap_lists_static_routes(temp_db):
    resp = client.get("/sitemap.xml")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/xml")
    assert "<loc>https://dymnds.ca</loc>" in resp.text
    assert "<loc>https://dymnds.ca/faq</loc>" in resp.text
    assert "<loc>https://dymnds.ca/cart</loc>" not in resp.text
    assert "<loc>https://dymnds.ca/shop</loc>" not in resp.text
    assert "/products/" not in resp.text


def test_every_sitemap_location_is_served(no_db):
    resp = client.get("/sitemap.xml")
    locs = re.findall(r"<loc>([^<]+)</loc>", resp.text)
    assert len(locs) == len(SITEMAP_STATIC)
    for loc in locs:
        path = loc.removeprefix("https://dymnds.ca") or "/"
        assert client.get(path).status_code == 200, loc


def test_sitemap_does_not_need_database(no_db):
    resp = client.get("/sitemap.xml")
    assert resp.status_code == 200
    assert "<loc>https://dymnds.ca/terms</loc>" in resp.text
