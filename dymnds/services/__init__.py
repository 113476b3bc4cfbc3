"""
Use cases that orchestrate repositories for the routers and admin app.

Routers call these services instead of opening database sessions directly.
"""
