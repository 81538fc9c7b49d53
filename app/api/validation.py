# app/api/validation.py
"""
Request validation for the user endpoints.

Validators either return the cleaned values or raise InvalidPayloadError,
so a handler never reaches storage with a payload that failed a check.

Truthiness follows JSON client conventions rather than Python's:
null, false, 0, NaN and "" are falsy, while [] and {} are not.
"""

import json
import math
from typing import Any, Dict, Optional, Tuple

from fastapi import Request

from app.exceptions import ErrorStyle, InvalidPayloadError

MISSING_FIELDS = "name or email is missing in user data!"
WRONG_TYPES = "name or email have wrong data types!"
INVALID_JSON = "request body is not valid JSON"

USER_FIELDS = ("name", "email")

MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def is_falsy(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    if isinstance(value, str):
        return value == ""
    return False


def coerce_id(raw: str) -> Optional[int]:
    """
    Convert a path segment to a user id, or None when it is not a number.

    "7", " 7 ", "7.0", "7e0" and "0x7" all give 7; "abc", "7.5", "inf" and
    non-ASCII digits such as "٧" give None. None never matches a stored row.
    """
    text = raw.strip()
    # int() and float() accept any Unicode digit and digit separators
    if not text.isascii() or "_" in text:
        return None
    if text[:2].lower() in ("0x", "0o", "0b"):
        try:
            value = int(text, 0)
        except ValueError:
            return None
    else:
        try:
            value = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return None
            if not (math.isfinite(number) and number.is_integer()):
                return None
            value = int(number)
    # Beyond a 64-bit integer no stored id can match
    if not MIN_ID <= value <= MAX_ID:
        return None
    return value


def parse_json_object(raw: bytes, style: ErrorStyle = ErrorStyle.ERROR) -> Dict[str, Any]:
    """
    Decode a request body as a dict.

    An empty body or a JSON value that is not an object reads as {}.
    """
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise InvalidPayloadError(INVALID_JSON, style=style)
    return body if isinstance(body, dict) else {}


async def read_body(request: Request) -> bytes:
    return await request.body()


async def read_json_object(request: Request) -> Dict[str, Any]:
    return parse_json_object(await request.body())


def validate_create(body: Dict[str, Any]) -> Dict[str, str]:
    name, email = body.get("name"), body.get("email")

    if is_falsy(name) or is_falsy(email):
        raise InvalidPayloadError(MISSING_FIELDS)

    if not isinstance(name, str) or not isinstance(email, str):
        raise InvalidPayloadError(WRONG_TYPES)

    return {"name": name, "email": email}


def validate_merge(body: Dict[str, Any]) -> Dict[str, str]:
    """
    Values for a partial update.

    Falsy fields count as not provided, so an empty string can never be
    written through this path.
    """
    values = {}
    for field in USER_FIELDS:
        value = body.get(field)
        if is_falsy(value):
            continue
        if not isinstance(value, str):
            raise InvalidPayloadError(WRONG_TYPES)
        values[field] = value
    return values


def validate_replace(raw_id: str, raw_body: bytes) -> Tuple[int, Dict[str, str]]:
    """
    Id and values for a full update whose fields arrive under a "data" key.

    The id is checked before the body is decoded. Every field present in
    data overwrites the stored one, empty strings included. Errors are
    reported as plain text.
    """
    user_id = coerce_id(raw_id)
    if user_id is None:
        raise InvalidPayloadError(f"Invalid user id: {raw_id}", style=ErrorStyle.TEXT)

    data = parse_json_object(raw_body, style=ErrorStyle.TEXT).get("data")
    if not isinstance(data, dict):
        raise InvalidPayloadError("Missing user data", style=ErrorStyle.TEXT)

    values = {}
    for field in USER_FIELDS:
        if field not in data:
            continue
        if not isinstance(data[field], str):
            raise InvalidPayloadError(WRONG_TYPES, style=ErrorStyle.TEXT)
        values[field] = data[field]
    return user_id, values
