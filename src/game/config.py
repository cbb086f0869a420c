from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    db_path: Path
    cors_allow_origins: list[str]
    request_body_limit_bytes: int
    default_page_size: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    db_path = Path(os.getenv("GAME_DB_PATH", str(PROJECT_ROOT / "data" / "players.db"))).expanduser()
    cors_raw = os.getenv("GAME_CORS_ALLOW_ORIGINS", "http://localhost:8080")
    origins = [entry.strip() for entry in cors_raw.split(",") if entry.strip()]
    if not origins:
        origins = ["http://localhost:8080"]

    return Settings(
        db_path=db_path,
        cors_allow_origins=origins,
        request_body_limit_bytes=int(os.getenv("GAME_REQUEST_BODY_LIMIT_BYTES", str(1024 * 1024))),
        default_page_size=max(1, int(os.getenv("GAME_DEFAULT_PAGE_SIZE", "3"))),
    )


def reset_settings_cache() -> None:
    get_settings.cache_clear()
