# app/db/engine.py

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.config import Settings
from app.db.schema import metadata

logger = logging.getLogger(__name__)


def get_engine(settings: Settings) -> Engine:
    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        # FastAPI runs sync handlers on a thread pool
        connect_args["check_same_thread"] = False

    # DATABASE_ECHO=true if you want to see SQL printed in the terminal
    return create_engine(
        settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        connect_args=connect_args,
        future=True,
    )


class AppContext:
    """
    The one shared storage handle of a running application.

    Opened by the application lifespan on startup, closed on shutdown.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("AppContext is not open")
        return self._engine

    def open(self) -> None:
        self._engine = get_engine(self.settings)
        metadata.create_all(self._engine)
        logger.info("Storage ready at %s", self._engine.url.render_as_string(hide_password=True))

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.info("Storage connections closed")
