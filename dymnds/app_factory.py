"""Entry points for public and admin FastAPI apps."""
from dymnds.app import app as public_app, create_app
from dymnds.admin_app import app as admin_app, create_admin_app

__all__ = ["public_app", "admin_app", "create_app", "create_admin_app"]
