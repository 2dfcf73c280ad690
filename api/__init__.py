"""
Code review API package.

Provides the FastAPI application for account management and code review.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
