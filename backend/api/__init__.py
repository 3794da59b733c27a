"""
Storefront customer API package.

Provides the FastAPI application for customer login and profile access.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
