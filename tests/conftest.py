from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool


def birthday_ms(year: int, month: int = 1, day: int = 1) -> int:
    return int(datetime(year, month, day, tzinfo=timezone.utc).timestamp()) * 1000


@pytest.fixture()
def player_payload():
    def build(**overrides):
        payload = {
            "name": "Ragnar",
            "title": "Lord of the North",
            "race": "HUMAN",
            "profession": "WARRIOR",
            "birthday": birthday_ms(2005, 6, 15),
            "experience": 1000,
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture()
def memory_engine():
    engine = create_engine(
        "sqlite+pysqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    from src.game.db.models import metadata

    metadata.create_all(engine)
    with engine.connect() as connection:
        connection.exec_driver_sql("PRAGMA case_sensitive_like=ON")
    yield engine
    engine.dispose()


@pytest.fixture()
def app_client(tmp_path: Path):
    os.environ["GAME_DB_PATH"] = str(tmp_path / "players-test.db")
    os.environ["GAME_REQUEST_BODY_LIMIT_BYTES"] = "512"
    os.environ["GAME_DEFAULT_PAGE_SIZE"] = "3"

    import src.game.config as config
    import src.game.db.engine as db_engine

    config.reset_settings_cache()
    db_engine.reset_engine_cache()

    from src.game.main import create_app

    app = create_app()

    with TestClient(app) as client:
        yield client

    db_engine.reset_engine_cache()


@pytest.fixture()
def millis():
    return birthday_ms
