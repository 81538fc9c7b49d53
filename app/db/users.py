# app/db/users.py
"""
Persistence operations for the users table.

Every function takes an open connection; transactions belong to the caller.
Lookups of an id with no row raise sqlalchemy.exc.NoResultFound. A user_id of
None (a path segment that is not a number) compares as NULL and so never
matches a row.
"""

from typing import Dict, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, RowMapping

from app.db.schema import users

_columns = (users.c.id, users.c.name, users.c.email)


def list_users(conn: Connection) -> List[RowMapping]:
    stmt = select(*_columns).order_by(users.c.id)
    return list(conn.execute(stmt).mappings().all())


def get_user(conn: Connection, user_id: Optional[int]) -> RowMapping:
    stmt = select(*_columns).where(users.c.id == user_id)
    return conn.execute(stmt).mappings().one()


def create_user(conn: Connection, name: str, email: str) -> RowMapping:
    result = conn.execute(insert(users).values(name=name, email=email))
    return get_user(conn, result.inserted_primary_key[0])


def update_user(conn: Connection, user_id: Optional[int], values: Dict[str, str]) -> RowMapping:
    """
    Overwrite the given columns of one user and return the updated row.

    Columns not in ``values`` keep their stored value. An empty ``values``
    leaves the row untouched.
    """
    if values:
        conn.execute(update(users).where(users.c.id == user_id).values(**values))
    # Raises NoResultFound when no row has this id, updated or not.
    return get_user(conn, user_id)


def delete_user(conn: Connection, user_id: Optional[int]) -> RowMapping:
    """Delete one user and return the row as it was before deletion."""
    row = get_user(conn, user_id)
    conn.execute(delete(users).where(users.c.id == user_id))
    return row
