# app/api/users.py

import logging
from typing import Any, Dict, List, Union

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoResultFound

from app.api.dependencies import get_app_settings, get_db_engine
from app.api.validation import (
    coerce_id,
    read_body,
    read_json_object,
    validate_create,
    validate_merge,
    validate_replace,
)
from app.config import Settings
from app.db import users as users_db
from app.exceptions import ErrorStyle, UserNotFoundError
from app.models.users import UserCreate, UserOut, UserPatch

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

_error_body = {
    "application/json": {
        "schema": {"type": "object", "properties": {"error": {"type": "string"}}}
    }
}
_text_body = {"text/plain": {"schema": {"type": "string"}}}


def _json_request_body(schema: Dict[str, Any]) -> Dict[str, Any]:
    # Bodies are parsed by hand so validation can answer 400 instead of 422;
    # this keeps them documented in /docs.
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema}},
        }
    }


def _row_to_user(row) -> UserOut:
    return UserOut(id=row["id"], name=row["name"], email=row["email"])


@router.get(
    "",
    response_model=List[UserOut],
    summary="Retrieve a list of users",
    description="User list",
)
def list_users(engine: Engine = Depends(get_db_engine)) -> List[UserOut]:
    with engine.connect() as conn:
        rows = users_db.list_users(conn)

    return [_row_to_user(row) for row in rows]


@router.get(
    "/{user_id}",
    response_model=UserOut,
    summary="Retrieve a single user",
    responses={404: {"description": "User not found (empty object)"}},
)
def get_user(user_id: str, engine: Engine = Depends(get_db_engine)) -> UserOut:
    """
    Look up one user. An id that is not a number is simply not found.
    """
    coerced = coerce_id(user_id)

    try:
        with engine.connect() as conn:
            row = users_db.get_user(conn, coerced)
    except NoResultFound:
        raise UserNotFoundError(f"User {user_id} not found", style=ErrorStyle.EMPTY)

    return _row_to_user(row)


@router.post(
    "",
    response_model=UserOut,
    summary="Creates new user",
    openapi_extra=_json_request_body(UserCreate.model_json_schema()),
    responses={400: {"description": "Missing or mistyped name/email", "content": _error_body}},
)
def create_user(
    body: Dict[str, Any] = Depends(read_json_object),
    engine: Engine = Depends(get_db_engine),
) -> UserOut:
    values = validate_create(body)

    with engine.begin() as conn:
        row = users_db.create_user(conn, **values)

    logger.info("Created user %s", row["id"])
    return _row_to_user(row)


@router.patch(
    "/{user_id}",
    response_model=UserOut,
    summary="Update particular data for a user",
    description=(
        "Fields left out, or sent as null/empty, keep their stored value."
    ),
    openapi_extra=_json_request_body(UserPatch.model_json_schema()),
    responses={
        400: {"description": "Mistyped name/email", "content": _error_body},
        404: {"description": "User not found", "content": _error_body},
    },
)
def patch_user(
    user_id: str,
    body: Dict[str, Any] = Depends(read_json_object),
    engine: Engine = Depends(get_db_engine),
) -> UserOut:
    values = validate_merge(body)
    coerced = coerce_id(user_id)

    try:
        with engine.begin() as conn:
            row = users_db.update_user(conn, coerced, values)
    except NoResultFound:
        raise UserNotFoundError("User not found")

    logger.info("Updated user %s fields %s", coerced, sorted(values))
    return _row_to_user(row)


@router.put(
    "/{user_id}",
    response_class=PlainTextResponse,
    summary="Replace user data",
    description=(
        "Fields are sent under a `data` key. Every field present overwrites "
        "the stored value; absent fields are kept."
    ),
    openapi_extra=_json_request_body(
        {"type": "object", "properties": {"data": UserPatch.model_json_schema()}}
    ),
    responses={
        200: {"description": "User updated", "content": _text_body},
        400: {"description": "Invalid id or user data", "content": _text_body},
        404: {"description": "User not found", "content": _text_body},
    },
)
def replace_user(
    user_id: str,
    raw_body: bytes = Depends(read_body),
    engine: Engine = Depends(get_db_engine),
) -> str:
    coerced, values = validate_replace(user_id, raw_body)

    try:
        with engine.begin() as conn:
            users_db.update_user(conn, coerced, values)
    except NoResultFound:
        raise UserNotFoundError(f"User {coerced} not found", style=ErrorStyle.TEXT)

    logger.info("Replaced user %s fields %s", coerced, sorted(values))
    return f"User {coerced} updated successfully"


@router.delete(
    "/{user_id}",
    response_model=None,
    summary="Deletes a user",
    description=(
        "Answers with the deleted user, or with a sentence when "
        "DELETE_RESPONSE_STYLE=message."
    ),
    responses={
        200: {
            "description": "User deleted",
            "content": {
                "application/json": {"schema": UserOut.model_json_schema()},
                **_text_body,
            },
        },
        404: {"description": "User not found", "content": {**_error_body, **_text_body}},
    },
)
def delete_user(
    user_id: str,
    engine: Engine = Depends(get_db_engine),
    settings: Settings = Depends(get_app_settings),
) -> Union[UserOut, PlainTextResponse]:
    as_message = settings.DELETE_RESPONSE_STYLE == "message"
    coerced = coerce_id(user_id)

    try:
        with engine.begin() as conn:
            row = users_db.delete_user(conn, coerced)
    except NoResultFound:
        if as_message:
            raise UserNotFoundError(
                f"User with id {user_id} not found", style=ErrorStyle.TEXT
            )
        raise UserNotFoundError("User not found")

    logger.info("Deleted user %s", coerced)
    if as_message:
        return PlainTextResponse(f"User with id {user_id} has been deleted")
    return _row_to_user(row)
