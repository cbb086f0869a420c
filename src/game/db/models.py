from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, MetaData, String, Table

from src.game.enums import Profession, Race

metadata = MetaData()

players = Table(
    "players",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(12), nullable=False),
    Column("title", String(30), nullable=False),
    Column("race", Enum(Race, native_enum=False, length=20), nullable=False),
    Column("profession", Enum(Profession, native_enum=False, length=20), nullable=False),
    Column("birthday", DateTime, nullable=False),
    Column("banned", Boolean, nullable=False, default=False),
    Column("experience", Integer, nullable=False),
    Column("level", Integer, nullable=False),
    Column("until_next_level", Integer, nullable=False),
)

PLAYER_FIELDS = tuple(column.name for column in players.columns if column.name != "id")
