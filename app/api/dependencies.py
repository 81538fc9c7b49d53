# app/api/dependencies.py
"""Dependencies shared by the routers."""

from fastapi import Request
from sqlalchemy.engine import Engine

from app.config import Settings
from app.db.engine import AppContext


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db_engine(request: Request) -> Engine:
    """The engine opened by the application lifespan."""
    return get_context(request).engine


def get_app_settings(request: Request) -> Settings:
    return get_context(request).settings
