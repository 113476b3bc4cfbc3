import hashlib
import logging
import os
import pathlib
import shutil

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from dymnds.components.logo import render_diamond_logo
from dymnds.core.config import get_settings
from dymnds.core.logging_setup import configure_logging
from dymnds.core.request_id import RequestIdMiddleware
from dymnds.routers import health as health_router
from dymnds.routers import pages as pages_router


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; "
            "img-src 'self' data:; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="DYMNDS Storefront")

BASE = os.path.dirname(__file__)
WEB = os.path.join(BASE, "..", "web")
# Brand images live at the site root (/diamond-white.png, /favicon.ico).
ROOT_ASSETS = {"diamond-white.png", "diamond-black.png", "dymnds-logo-black.png", "favicon.ico"}


class CachedStaticFiles(StaticFiles):
    def set_headers(self, scope, resp, path, stat_result):
        # Fingerprinted assets never change under the same name.
        resp.headers["Cache-Control"] = "public, max-age=31536000, immutable"


app.mount("/static", CachedStaticFiles(directory=WEB), name="static")
templates = Jinja2Templates(directory=os.path.join(BASE, "..", "templates"))
templates.env.globals["diamond_logo"] = render_diamond_logo

allowed_cors = {settings.public_base_url}
if settings.app_env != "prod":
    allowed_cors.update({"http://localhost:8000", "http://127.0.0.1:8000"})
allowed_cors = {origin for origin in allowed_cors if origin}
if allowed_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(allowed_cors),
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
app.add_middleware(RequestIdMiddleware)


def _fingerprint_asset(rel_path: str) -> str:
    """
    Copy an asset under a short content hash: "site.css" -> "site.<hash8>.css".
    Returns the versioned file name (without /static).
    """
    src = pathlib.Path(WEB) / rel_path
    if not src.exists():
        return rel_path.replace("\\", "/")
    data = src.read_bytes()
    h = hashlib.sha1(data).hexdigest()[:8]
    dst = src.with_name(f"{src.stem}.{h}{src.suffix}")
    if not dst.exists():
        shutil.copy2(src, dst)
    return dst.name


try:
    _css_fp = _fingerprint_asset("site.css")
except OSError:
    logger.warning("Could not fingerprint site.css; serving it unversioned", exc_info=True)
    _css_fp = "site.css"
CSS_HREF = f"/static/{_css_fp}"
app.state.css_href = CSS_HREF
app.state.templates = templates


app.include_router(health_router.router)
app.include_router(pages_router.router)


# Registered after the routers so page paths win over this catch-all.
@app.get("/{asset_name}", include_in_schema=False)
def root_asset(asset_name: str):
    if asset_name not in ROOT_ASSETS:
        return Response(status_code=404)
    # BRAND_ASSETS_DIR points at the real brand artwork; web/img ships stand-ins.
    assets_dir = get_settings().brand_assets_dir or os.path.join(WEB, "img")
    path = os.path.join(assets_dir, asset_name)
    if os.path.exists(path):
        return FileResponse(path)
    if asset_name == "favicon.ico":
        return Response(status_code=204)
    return Response(status_code=404)


pages_router.configure_pages(css_href=CSS_HREF)


def create_app() -> FastAPI:
    """Factory for uvicorn/gunicorn."""
    return app
