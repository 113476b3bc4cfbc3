"""Reusable HTML fragments shared by the page templates."""

from .logo import render_diamond_logo

__all__ = ["render_diamond_logo"]
