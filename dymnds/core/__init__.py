"""
Core utilities shared across the DYMNDS storefront.

This package hosts configuration, logging, request ids, rate limiting and
password hashing. Routers and services depend on these primitives instead of
reading the environment or wiring handlers themselves.
"""
