from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.game.enums import Profession, Race
from src.game.services.player_rules import datetime_to_millis


class PlayerPayload(BaseModel):
    name: str | None = None
    title: str | None = None
    race: Race | None = None
    profession: Profession | None = None
    birthday: int | None = None
    banned: bool | None = None
    experience: int | None = None
    level: int | None = None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class PlayerResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int
    banned: bool
    experience: int
    level: int
    until_next_level: int = Field(alias="untilNextLevel")

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "PlayerResponse":
        birthday = row["birthday"]
        if isinstance(birthday, datetime):
            birthday = datetime_to_millis(birthday)
        return cls(**{**row, "birthday": birthday})
