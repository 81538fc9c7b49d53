# scripts/seed.py
"""
Insert a few sample users so the demo page has something to show.

Usage:
    python -m scripts.seed
"""

import logging

from app.config import get_settings
from app.db import users as users_db
from app.db.engine import AppContext

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {"name": "Alice", "email": "alice@prisma.io"},
    {"name": "Nilu", "email": "nilu@prisma.io"},
    {"name": "Mahmoud", "email": "mahmoud@prisma.io"},
]


def load_into_db(context: AppContext, users_list) -> int:
    with context.engine.begin() as conn:
        for user in users_list:
            row = users_db.create_user(conn, name=user["name"], email=user["email"])
            logger.info("Created user %s (%s)", row["id"], row["email"])
    return len(users_list)


def main():
    context = AppContext(get_settings())
    context.open()
    try:
        n_users = load_into_db(context, SAMPLE_USERS)
    finally:
        context.close()

    logger.info("Users inserted: %s", n_users)


if __name__ == "__main__":
    main()
