from __future__ import annotations

from typing import Any

from sqlalchemy import delete, exists, func, insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.sql.elements import ColumnElement

from src.game.db.models import PLAYER_FIELDS, players


class PlayersRepository:
    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    def exists(self, player_id: int) -> bool:
        query = select(exists().where(players.c.id == player_id))
        return bool(self._connection.execute(query).scalar())

    def find_by_id(self, player_id: int) -> dict[str, Any] | None:
        row = self._connection.execute(select(players).where(players.c.id == player_id)).mappings().first()
        return dict(row) if row else None

    def find_all(
        self,
        predicate: ColumnElement,
        page_number: int | None = None,
        page_size: int | None = None,
    ) -> list[dict[str, Any]]:
        query = select(players).where(predicate).order_by(players.c.id)
        if page_size is not None:
            query = query.limit(page_size).offset((page_number or 0) * page_size)
        rows = self._connection.execute(query).mappings().all()
        return [dict(row) for row in rows]

    def count(self, predicate: ColumnElement) -> int:
        total = self._connection.execute(select(func.count()).select_from(players).where(predicate)).scalar()
        return int(total or 0)

    def save(self, player: dict[str, Any]) -> dict[str, Any]:
        values = {field: player[field] for field in PLAYER_FIELDS}
        player_id = player.get("id")
        if player_id is None:
            result = self._connection.execute(insert(players).values(**values))
            player_id = result.inserted_primary_key[0]
        else:
            self._connection.execute(update(players).where(players.c.id == player_id).values(**values))
        return self.find_by_id(player_id)

    def delete_by_id(self, player_id: int) -> None:
        self._connection.execute(delete(players).where(players.c.id == player_id))
