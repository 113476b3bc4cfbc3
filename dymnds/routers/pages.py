from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from dymnds.domain.page_meta import resolve_head

router = APIRouter(prefix="", tags=["pages"])

CSS_HREF = "/static/site.css"

FAQS = [
    (
        "What is DYMNDS?",
        "DYMNDS is premium athletic wear built for those who push limits. Every piece is engineered "
        "for performance, comfort, and style. Plus, 10% of every purchase supports survivors on "
        "their healing journey.",
    ),
    (
        "How does the 10% impact work?",
        "10% of every order goes directly to funding therapy, safe housing, and healing programs "
        "for survivors. When you wear DYMNDS, you help others shine.",
    ),
    (
        "What sizes do you offer?",
        "We offer sizes XS through XXL. Each product page has a detailed size guide to help you "
        "find the perfect fit.",
    ),
    (
        "How do I care for my DYMNDS gear?",
        "Machine wash cold with like colors. Tumble dry low or hang dry. Do not bleach or iron.",
    ),
    (
        "Can I change or cancel my order?",
        "Contact us at support@dymnds.ca within 2 hours of placing your order and we'll do our "
        "best to help.",
    ),
]

# (template, heading, intro) per route; head metadata comes from page_meta.
PAGES = {
    "/": ("home.html", "Pressure Creates Diamonds", "Premium fitness apparel for athletes who refuse to settle."),
    "/app": ("page.html", "The DYMNDS App", "Workout tracking, nutrition logging and progress analytics. Coming soon."),
    "/cart": ("page.html", "Your Cart", "10% of your order funds survivor healing."),
    "/faq": ("faq.html", "Frequently Asked Questions", "Everything you need to know about DYMNDS."),
    "/shop": ("page.html", "Shop All", "Premium activewear for men and women."),
    "/contact": ("page.html", "Contact Us", "Questions, feedback, or partnerships? Write to support@dymnds.ca."),
    "/size-guide": ("page.html", "Size Guide", "Size charts for tops and bottoms, XS to XL."),
    "/careers": ("page.html", "Careers", "Join the DYMNDS team. Build something legendary."),
    "/shipping": ("page.html", "Shipping Info", "Delivery times and tracking for DYMNDS orders."),
    "/returns": ("page.html", "Returns & Exchanges", "Return policy and exchange information."),
    "/terms": ("page.html", "Terms of Service", "Terms and conditions for using the DYMNDS website."),
    "/privacy": ("page.html", "Privacy Policy", "How DYMNDS collects, uses, and protects your information."),
}


def configure_pages(*, css_href: str) -> None:
    """Configure shared assets for the storefront routes."""
    global CSS_HREF
    CSS_HREF = css_href or "/static/site.css"


def _templates(request: Request):
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def _render(request: Request, path: str, **extra) -> HTMLResponse:
    template, heading, intro = PAGES[path]
    context = {
        "request": request,
        "head": resolve_head(path),
        "css_href": CSS_HREF,
        "heading": heading,
        "intro": intro,
    }
    context.update(extra)
    return _templates(request).TemplateResponse(request, template, context)


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return _render(request, "/")


@router.get("/app", response_class=HTMLResponse)
def app_coming_soon(request: Request):
    return _render(request, "/app")


@router.get("/cart", response_class=HTMLResponse)
def cart(request: Request):
    return _render(request, "/cart")


@router.get("/faq", response_class=HTMLResponse)
def faq(request: Request):
    return _render(request, "/faq", faqs=FAQS)


@router.get("/shop", response_class=HTMLResponse)
def shop(request: Request):
    return _render(request, "/shop")


@router.get("/contact", response_class=HTMLResponse)
def contact(request: Request):
    return _render(request, "/contact")


@router.get("/size-guide", response_class=HTMLResponse)
def size_guide(request: Request):
    return _render(request, "/size-guide")


@router.get("/careers", response_class=HTMLResponse)
def careers(request: Request):
    return _render(request, "/careers")


@router.get("/shipping", response_class=HTMLResponse)
def shipping(request: Request):
    return _render(request, "/shipping")


@router.get("/returns", response_class=HTMLResponse)
def returns(request: Request):
    return _render(request, "/returns")


@router.get("/terms", response_class=HTMLResponse)
def terms(request: Request):
    return _render(request, "/terms")


@router.get("/privacy", response_class=HTMLResponse)
def privacy(request: Request):
    return _render(request, "/privacy")
