from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from src.game.db.models import players
from src.game.enums import Profession, Race
from src.game.services.player_rules import millis_to_datetime

# Upper birthday bound is pulled back by one hour and one millisecond when
# both bounds are given.
BEFORE_ADJUSTMENT_MS = 3_600_001


@dataclass(frozen=True)
class PlayerCriteria:
    name: str | None = None
    title: str | None = None
    race: Race | None = None
    profession: Profession | None = None
    banned: bool | None = None
    min_level: float | None = None
    max_level: float | None = None
    min_experience: float | None = None
    max_experience: float | None = None
    after: int | None = None
    before: int | None = None


def _birthday_bound(millis: int) -> datetime:
    try:
        return millis_to_datetime(millis)
    except OverflowError:
        return datetime.max if millis > 0 else datetime.min


def name_like(name: str | None) -> ColumnElement | None:
    return None if name is None else players.c.name.like(f"%{name}%")


def title_like(title: str | None) -> ColumnElement | None:
    return None if title is None else players.c.title.like(f"%{title}%")


def race_equals(race: Race | None) -> ColumnElement | None:
    return None if race is None else players.c.race == race


def profession_equals(profession: Profession | None) -> ColumnElement | None:
    return None if profession is None else players.c.profession == profession


def banned_equals(banned: bool | None) -> ColumnElement | None:
    if banned is None:
        return None
    return players.c.banned.is_(True) if banned else players.c.banned.is_(False)


def _range(column, low: Any, high: Any) -> ColumnElement | None:
    if low is None and high is None:
        return None
    if low is None:
        return column <= high
    if high is None:
        return column >= low
    return column.between(low, high)


def level_range(min_level: float | None, max_level: float | None) -> ColumnElement | None:
    return _range(players.c.level, min_level, max_level)


def experience_range(min_experience: float | None, max_experience: float | None) -> ColumnElement | None:
    return _range(players.c.experience, min_experience, max_experience)


def birthday_range(after: int | None, before: int | None) -> ColumnElement | None:
    if after is None and before is None:
        return None
    if after is None:
        return players.c.birthday <= _birthday_bound(before)
    if before is None:
        return players.c.birthday >= _birthday_bound(after)
    return players.c.birthday.between(
        _birthday_bound(after),
        _birthday_bound(before - BEFORE_ADJUSTMENT_MS),
    )


def build_player_clauses(criteria: PlayerCriteria) -> list[ColumnElement | None]:
    return [
        name_like(criteria.name),
        title_like(criteria.title),
        banned_equals(criteria.banned),
        level_range(criteria.min_level, criteria.max_level),
        birthday_range(criteria.after, criteria.before),
        profession_equals(criteria.profession),
        race_equals(criteria.race),
        experience_range(criteria.min_experience, criteria.max_experience),
    ]


def build_player_filter(criteria: PlayerCriteria | None = None) -> ColumnElement:
    """AND every present clause; no criteria matches every player."""
    clauses = [clause for clause in build_player_clauses(criteria or PlayerCriteria()) if clause is not None]
    return and_(true(), *clauses)
