from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Connection

from .engine import get_engine
from .models import metadata


def bootstrap_database() -> None:
    metadata.create_all(get_engine())


@contextmanager
def db_transaction() -> Iterator[Connection]:
    engine = get_engine()
    with engine.begin() as connection:
        yield connection
