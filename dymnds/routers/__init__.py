"""
FastAPI routers for the public storefront app.

Each module exposes an APIRouter included by app.py: storefront pages in
pages.py, operational endpoints (health, sitemap) in health.py.
"""
