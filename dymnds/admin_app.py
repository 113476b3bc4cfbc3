from __future__ import annotations

import html
import logging
import os
import secrets
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from dymnds.core.config import get_settings
from dymnds.core.logging_setup import configure_logging, mask_email
from dymnds.core.rate_limiter import client_ip, rate_limit_ip
from dymnds.core.request_id import RequestIdMiddleware, current_request_id
from dymnds.core.security import verify_password
from dymnds.core.utils import as_utc, iso_utc, utcnow
from dymnds.repositories.sql_repository import SQLRepository
from dymnds.services.cleanup_service import CleanupService


settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="DYMNDS Admin")
app.add_middleware(RequestIdMiddleware)
repo = SQLRepository()
cleanup_service = CleanupService(repo)

ADMIN_COOKIE = "admin_session"
ADMIN_COOKIE_SECURE = settings.app_env == "prod" or (os.getenv("ADMIN_COOKIE_SECURE") or "").strip() == "1"
ADMIN_HOSTS = {h.strip() for h in (os.getenv("ADMIN_HOST", "") or "").split(",") if h.strip()}
ADMIN_HOSTS.update({"localhost:8001", "127.0.0.1:8001"})


# ---------------------- helpers ----------------------
def _admin_allowed(email: str) -> bool:
    allowed = get_settings().admin_emails
    if allowed:
        return (email or "").lower() in allowed
    return (email or "").lower().endswith("@dymnds.ca")


def _check_origin(request: Request) -> bool:
    origin = request.headers.get("origin") or request.headers.get("referer") or ""
    host = (request.headers.get("host") or "").strip()
    allowed = set(ADMIN_HOSTS)
    if host:
        allowed.add(host)
    if not origin:
        return True
    netloc = origin.split("://", 1)[-1].split("/", 1)[0]
    return netloc in allowed


def _issue_admin_session(email: str) -> tuple[str, str]:
    csrf_token = secrets.token_urlsafe(32)
    expires_at = utcnow() + timedelta(seconds=get_settings().admin_session_ttl_seconds)
    token = repo.create_admin_session(email, csrf_token, expires_at)
    return token, csrf_token


def _load_admin_session(token: Optional[str]):
    if not token:
        return None
    sess = repo.get_admin_session(token)
    if not sess or (sess.expires_at and as_utc(sess.expires_at) < utcnow()):
        repo.delete_admin_session(token)
        return None
    return sess


def require_admin(request: Request) -> str:
    sess = _load_admin_session(request.cookies.get(ADMIN_COOKIE))
    if not sess:
        raise HTTPException(401, "not authenticated")
    email = sess.email
    user = repo.get_user(email)
    if not user or not user.email_verified_at:
        raise HTTPException(403, "email not verified")
    if not _admin_allowed(email):
        raise HTTPException(403, "forbidden")
    return email


def _layout(title: str, body: str) -> HTMLResponse:
    return HTMLResponse(
        f"""
        <!doctype html><html lang='en'><head>
        <meta charset='utf-8'><meta name='viewport' content='width=device-width,initial-scale=1'>
        <link rel="stylesheet" href="https://unpkg.com/@picocss/pico@2.0.6/css/pico.min.css">
        <title>{html.escape(title)}</title>
        <style>table {{font-size:14px}} td,th {{white-space:nowrap}}</style>
        </head><body>
        <main class="container">
          <nav><ul><li><strong>DYMNDS Admin</strong></li></ul>
              <ul><li><a href="/cleanup">Cleanup</a></li><li><a href="/logout">Sign out</a></li></ul>
          </nav>
          {body}
        </main>
        </body></html>
        """
    )


# ---------------------- auth ----------------------
@app.get("/login", response_class=HTMLResponse)
def login_page(next: str = "/cleanup", error: str = ""):
    messages = {
        "credentials": "Invalid credentials.",
        "not_allowed": "User is not an administrator.",
        "not_verified": "E-mail not verified.",
    }
    msg = messages.get(error, "")
    return HTMLResponse(
        f"""
        <!doctype html><html lang='en'><head>
        <meta charset='utf-8'><meta name='viewport' content='width=device-width,initial-scale=1'>
        <link rel="stylesheet" href="https://unpkg.com/@picocss/pico@2.0.6/css/pico.min.css">
        <title>Admin | Sign in</title></head>
        <body><main class="container">
          <article>
            <h1>Admin | Sign in</h1>
            {('<mark role="alert">' + html.escape(msg) + '</mark>') if msg else ''}
            <form method='post' action='/login'>
              <input type='hidden' name='next' value='{html.escape(next)}'>
              <label>E-mail</label><input name='email' type='email' required>
              <label>Password</label><input name='password' type='password' required>
              <button style='margin-top:12px'>Sign in</button>
            </form>
          </article>
        </main></body></html>
        """
    )


@app.post("/login")
def do_login(request: Request, email: str = Form(...), password: str = Form(...), next: str = Form("/cleanup")):
    rate_limit_ip(request, "admin:login", limit=10, window_seconds=60)
    if not _check_origin(request):
        return RedirectResponse("/login?error=credentials", status_code=303)
    user = repo.get_user(email)
    if not user or not verify_password(password, user.password_hash):
        logger.warning("Failed admin login for %s from %s", mask_email(email), client_ip(request))
        return RedirectResponse("/login?error=credentials", status_code=303)
    if not user.email_verified_at:
        return RedirectResponse("/login?error=not_verified", status_code=303)
    if not _admin_allowed(email):
        logger.warning("Non-admin login attempt for %s", mask_email(email))
        return RedirectResponse("/login?error=not_allowed", status_code=303)
    tok, csrf_token = _issue_admin_session(email)
    # Only same-site relative targets.
    target = next if next.startswith("/") and not next.startswith("//") else "/cleanup"
    resp = RedirectResponse(target, status_code=303)
    resp.set_cookie(
        ADMIN_COOKIE,
        value=tok,
        httponly=True,
        samesite="strict",
        secure=ADMIN_COOKIE_SECURE,
        max_age=get_settings().admin_session_ttl_seconds,
        path="/",
    )
    resp.headers["X-CSRF-Token"] = csrf_token
    return resp


@app.get("/logout")
def logout(request: Request):
    tok = request.cookies.get(ADMIN_COOKIE)
    if tok:
        repo.delete_admin_session(tok)
    resp = RedirectResponse("/login", status_code=303)
    resp.delete_cookie(ADMIN_COOKIE, path="/")
    return resp


@app.get("/")
def index():
    return RedirectResponse("/cleanup", status_code=303)


# ---------------------- cleanup ----------------------
def _section(title: str, count: int, rows: list[str]) -> str:
    items = "".join(f"<li>{html.escape(r)}</li>" for r in rows) or "<li>Nothing to review.</li>"
    return f"<article><h3>{html.escape(title)} ({count})</h3><ul>{items}</ul></article>"


@app.get("/cleanup", response_class=HTMLResponse)
def cleanup_page(request: Request):
    try:
        require_admin(request)
    except HTTPException:
        return RedirectResponse("/login?next=/cleanup", status_code=303)
    report = cleanup_service.build_report(get_settings().cleanup_retention_days)
    days = get_settings().cleanup_retention_days
    body = (
        "<h1>Data cleanup report</h1>"
        f"<p>Generated {html.escape(iso_utc())}. Nothing on this page is deleted automatically.</p>"
        + _section("Orphaned customer notes", report.orphaned_notes.count, report.orphaned_notes.emails)
        + _section(f"Waitlist entries older than {days} days", report.stale_waitlist.count, report.stale_waitlist.emails)
        + _section(
            "Orders without product reference",
            report.orders_without_product_ref.count,
            [
                f"{o.order_id} (items {', '.join(map(str, o.affected_item_indices))}) {o.customer_email}"
                for o in report.orders_without_product_ref.affected_orders
            ],
        )
        + _section(
            "Soft-deleted products",
            report.soft_deleted_products.count,
            [f"{r.id} deleted {r.deleted_days_ago} days ago" for r in report.soft_deleted_products.records],
        )
        + _section(
            "Soft-deleted orders",
            report.soft_deleted_orders.count,
            [f"{r.id} deleted {r.deleted_days_ago} days ago" for r in report.soft_deleted_orders.records],
        )
    )
    return _layout("Admin | Cleanup", body)


@app.get("/api/cleanup")
def cleanup_report(request: Request):
    """Read-only integrity report; deletions go through separate, confirmed flows."""
    try:
        admin_email = require_admin(request)
    except HTTPException as exc:
        logger.warning("Unauthorized cleanup report access attempt from %s", client_ip(request))
        return JSONResponse({"success": False, "error": exc.detail}, status_code=exc.status_code)

    logger.info("Cleanup report requested by %s", mask_email(admin_email))
    try:
        report = cleanup_service.build_report(get_settings().cleanup_retention_days)
    except Exception:
        request_id = current_request_id()
        logger.error("Error generating cleanup report", exc_info=True)
        return JSONResponse(
            {
                "success": False,
                "generated_at": iso_utc(),
                "error": "Internal server error while generating cleanup report.",
                "request_id": request_id,
            },
            status_code=500,
        )
    generated_at = iso_utc()
    logger.info("Cleanup report generated with %d issues", report.total_issues())
    return {"success": True, "report": report.to_dict(), "generated_at": generated_at}


@app.post("/api/cleanup")
def cleanup_report_post():
    logger.warning("POST /api/cleanup attempted; hard deletions are not supported here")
    return JSONResponse(
        {
            "success": False,
            "error": "POST method not supported. Use GET to retrieve cleanup report only.",
        },
        status_code=405,
    )


def create_admin_app() -> FastAPI:
    return app
