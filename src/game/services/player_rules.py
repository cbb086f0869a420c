from __future__ import annotations

import math
import re
from datetime import datetime, timedelta
from typing import Any

from src.game.exceptions import BadRequestError, InvalidFieldError, MissingFieldError

# Naive UTC is what the players table stores.
EPOCH = datetime(1970, 1, 1)

REQUIRED_FIELDS = ("name", "title", "race", "birthday", "profession", "experience")
UPDATABLE_FIELDS = ("name", "title", "birthday", "level", "profession", "race", "banned", "experience")

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30
EXPERIENCE_MAX = 10_000_000
BIRTHDAY_MIN_YEAR = 2000
BIRTHDAY_MAX_YEAR = 3000

_MAX_ID = 2**63 - 1
_DIGITS = re.compile(r"[0-9]+")


def millis_to_datetime(value: int) -> datetime:
    return EPOCH + timedelta(milliseconds=value)


def datetime_to_millis(value: datetime) -> int:
    return (value - EPOCH) // timedelta(milliseconds=1)


def id_check(raw: str | None) -> int:
    if raw is None or raw == "" or raw == "0":
        raise BadRequestError(f"Id value is not valid. ID = {raw}")
    if not _DIGITS.fullmatch(raw):
        raise BadRequestError("ID is not a number")
    player_id = int(raw)
    if player_id <= 0 or player_id > _MAX_ID:
        raise BadRequestError(f"Id value is not valid. ID = {raw}")
    return player_id


def _check_fields(record: dict[str, Any]) -> dict[str, Any]:
    """Check the constrained fields present in ``record``.

    Returns a copy with ``birthday`` converted from epoch milliseconds.
    """
    checked = dict(record)

    name = checked.get("name")
    if name is not None and not 1 <= len(name) <= NAME_MAX_LENGTH:
        raise InvalidFieldError("name", "Name length is incorrect")

    title = checked.get("title")
    if title is not None and len(title) > TITLE_MAX_LENGTH:
        raise InvalidFieldError("title", "The title is incorrect")

    experience = checked.get("experience")
    if experience is not None and not 0 <= experience <= EXPERIENCE_MAX:
        raise InvalidFieldError("experience", "The Experience size is incorrect")

    birthday = checked.get("birthday")
    if birthday is not None:
        if not isinstance(birthday, datetime):
            try:
                birthday = millis_to_datetime(int(birthday))
            except OverflowError as error:
                raise InvalidFieldError("birthday", "The date of player Birthday is incorrect") from error
        if not BIRTHDAY_MIN_YEAR <= birthday.year <= BIRTHDAY_MAX_YEAR:
            raise InvalidFieldError("birthday", "The date of player Birthday is incorrect")
        checked["birthday"] = birthday

    return checked


def validate_for_create(record: dict[str, Any]) -> dict[str, Any]:
    for field in REQUIRED_FIELDS:
        if record.get(field) is None:
            raise MissingFieldError(field)
    checked = _check_fields(record)
    if checked.get("banned") is None:
        checked["banned"] = False
    return checked


def validate_for_update(partial: dict[str, Any]) -> dict[str, Any]:
    return _check_fields(partial)


def apply_update(existing: dict[str, Any], partial: dict[str, Any]) -> dict[str, Any]:
    """Overwrite the fields of ``existing`` that ``partial`` carries.

    A supplied ``level`` is taken as-is here; ``derive_level_and_remainder``
    replaces it right after.
    """
    for field in UPDATABLE_FIELDS:
        if partial.get(field) is not None:
            existing[field] = partial[field]
    return existing


def derive_level_and_remainder(record: dict[str, Any]) -> dict[str, Any]:
    experience = record["experience"]
    record["level"] = int((math.sqrt(2500 + 200 * experience) - 50) / 100)
    record["until_next_level"] = int(50 * (record["level"] + 1) * (record["level"] + 2) - experience)
    return record
