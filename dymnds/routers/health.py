from __future__ import annotations

import logging
from xml.sax.saxutils import escape

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError

from dymnds.core.utils import absolute_url, iso_utc
from dymnds.repositories.sql_repository import SQLRepository

router = APIRouter(prefix="", tags=["health"])
logger = logging.getLogger(__name__)
_sql_repo = SQLRepository()

# (path, changefreq, priority). Only pages this app serves; /shop and /cart
# stay out: one duplicates the collection listing and the other is per-visitor.
SITEMAP_STATIC = [
    ("/", "weekly", "1.0"),
    ("/app", "monthly", "0.6"),
    ("/contact", "monthly", "0.5"),
    ("/faq", "monthly", "0.5"),
    ("/careers", "monthly", "0.5"),
    ("/returns", "monthly", "0.5"),
    ("/shipping", "monthly", "0.5"),
    ("/size-guide", "monthly", "0.5"),
    ("/privacy", "yearly", "0.3"),
    ("/terms", "yearly", "0.3"),
]


@router.get("/api/health")
def health():
    """Expose only status and timestamp; individual checks stay private."""
    status = "healthy"
    try:
        _sql_repo.ping()
    except (SQLAlchemyError, RuntimeError):
        logger.error("Health check could not reach the database", exc_info=True)
        status = "unhealthy"
    return JSONResponse(
        {"status": status, "timestamp": iso_utc()},
        status_code=503 if status == "unhealthy" else 200,
        headers={"Cache-Control": "no-store"},
    )


def _url_entry(loc: str, lastmod: str, changefreq: str, priority: str) -> str:
    return (
        "<url>"
        f"<loc>{escape(loc)}</loc>"
        f"<lastmod>{lastmod}</lastmod>"
        f"<changefreq>{changefreq}</changefreq>"
        f"<priority>{priority}</priority>"
        "</url>"
    )


@router.get("/sitemap.xml")
def sitemap():
    now = iso_utc()
    entries = [_url_entry(absolute_url(path), now, freq, prio) for path, freq, prio in SITEMAP_STATIC]
    body = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
        + "".join(entries)
        + "</urlset>"
    )
    return Response(body, media_type="application/xml")
