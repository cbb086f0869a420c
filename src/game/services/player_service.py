from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Any, Callable

from sqlalchemy.engine import Connection

from src.game.db.repositories.player_filters import PlayerCriteria, build_player_filter
from src.game.db.repositories.players_repository import PlayersRepository
from src.game.exceptions import NotFoundError
from src.game.services.player_rules import (
    apply_update,
    derive_level_and_remainder,
    validate_for_create,
    validate_for_update,
)

logger = logging.getLogger("game.players")

TransactionFactory = Callable[[], AbstractContextManager[Connection]]


class PlayerService:
    """Player operations, each run inside a single database transaction."""

    def __init__(self, transaction: TransactionFactory) -> None:
        self._transaction = transaction

    def get_player(self, player_id: int) -> dict[str, Any]:
        with self._transaction() as connection:
            repository = PlayersRepository(connection)
            player = repository.find_by_id(player_id)
        if player is None:
            raise NotFoundError("Player", "ID", player_id)
        return player

    def list_players(self, criteria: PlayerCriteria, *, page_number: int, page_size: int) -> list[dict[str, Any]]:
        with self._transaction() as connection:
            return PlayersRepository(connection).find_all(
                build_player_filter(criteria),
                page_number=page_number,
                page_size=page_size,
            )

    def count_players(self, criteria: PlayerCriteria | None = None) -> int:
        with self._transaction() as connection:
            return PlayersRepository(connection).count(build_player_filter(criteria))

    def create_player(self, record: dict[str, Any]) -> dict[str, Any]:
        player = derive_level_and_remainder(validate_for_create(record))
        player.pop("id", None)
        with self._transaction() as connection:
            saved = PlayersRepository(connection).save(player)
        logger.info("Created player %s", saved["id"])
        return saved

    def update_player(self, player_id: int, partial: dict[str, Any]) -> dict[str, Any]:
        with self._transaction() as connection:
            repository = PlayersRepository(connection)
            existing = repository.find_by_id(player_id)
            if existing is None:
                raise NotFoundError("Player", "ID", player_id)
            changes = validate_for_update(partial)
            player = derive_level_and_remainder(apply_update(existing, changes))
            saved = repository.save(player)
        logger.info("Updated player %s", player_id)
        return saved

    def delete_player(self, player_id: int) -> None:
        with self._transaction() as connection:
            repository = PlayersRepository(connection)
            if not repository.exists(player_id):
                raise NotFoundError("Player", "ID", player_id)
            repository.delete_by_id(player_id)
        logger.info("Deleted player %s", player_id)
