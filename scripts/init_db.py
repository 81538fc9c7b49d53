# scripts/init_db.py
"""Drop and recreate the users table in DATABASE_URL."""

import logging

from app.config import get_settings
from app.db.engine import get_engine
from app.db.schema import metadata

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    engine = get_engine(settings)
    metadata.drop_all(engine)
    metadata.create_all(engine)
    engine.dispose()
    logger.info("DB schema created at %s", settings.DATABASE_URL)


if __name__ == "__main__":
    main()
