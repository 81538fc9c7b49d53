# app/__init__.py
"""
Users REST API package.

Serve it with uvicorn directly:
    uvicorn app:app --reload

or with the host and port from Settings:
    python -m app
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
