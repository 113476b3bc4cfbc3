"""Request identifiers for correlating log lines across one request."""
from __future__ import annotations

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

_INBOUND_RE = re.compile(r"[A-Za-z0-9-]{8,64}")
_current: ContextVar[str] = ContextVar("request_id", default="-")


def generate_request_id() -> str:
    """
    Return a short id made of the first 8 hex chars of a random UUID4.

    Only 32 random bits survive the truncation, so collisions become likely
    after tens of thousands of ids. Use it to tag log lines, never as a key.
    """
    return str(uuid.uuid4())[:8]


def current_request_id() -> str:
    return _current.get()


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id, expose it to logging and echo it back."""

    async def dispatch(self, request, call_next):
        inbound = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
        request_id = inbound if _INBOUND_RE.fullmatch(inbound) else generate_request_id()
        token = _current.set(request_id)
        request.state.request_id = request_id
        try:
            response = await call_next(request)
        finally:
            _current.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
