from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from src.game.db.repositories.player_filters import (
    BEFORE_ADJUSTMENT_MS,
    PlayerCriteria,
    birthday_range,
    build_player_clauses,
    build_player_filter,
)
from src.game.db.repositories.players_repository import PlayersRepository
from src.game.enums import Profession, Race
from src.game.services.player_rules import datetime_to_millis, derive_level_and_remainder

BASE_DAY = datetime(2010, 1, 1)


def _player(name, *, experience=1000, race=Race.HUMAN, profession=Profession.WARRIOR, banned=False, birthday=BASE_DAY):
    return derive_level_and_remainder(
        {
            "name": name,
            "title": f"{name} the Bold",
            "race": race,
            "profession": profession,
            "birthday": birthday,
            "banned": banned,
            "experience": experience,
        }
    )


@pytest.fixture()
def repository(memory_engine):
    with memory_engine.begin() as connection:
        repository = PlayersRepository(connection)
        repository.save(_player("Alice", experience=4999, race=Race.ELF))
        repository.save(_player("alina", experience=5500, profession=Profession.DRUID, banned=True))
        repository.save(_player("Borin", experience=21000, race=Race.DWARF, birthday=BASE_DAY + timedelta(days=10)))
        repository.save(_player("Gorm", experience=23100, race=Race.ORC, banned=True))
        yield repository


def _names(repository, **criteria):
    return [row["name"] for row in repository.find_all(build_player_filter(PlayerCriteria(**criteria)))]


def test_absent_criteria_contribute_nothing():
    assert all(clause is None for clause in build_player_clauses(PlayerCriteria()))


def test_no_criteria_matches_everything(repository):
    assert _names(repository) == ["Alice", "alina", "Borin", "Gorm"]
    assert repository.count(build_player_filter()) == 4


def test_name_is_case_sensitive_substring(repository):
    assert _names(repository, name="li") == ["Alice", "alina"]
    assert _names(repository, name="Al") == ["Alice"]


def test_title_substring(repository):
    assert _names(repository, title="Gorm the") == ["Gorm"]


def test_enum_and_banned_equality(repository):
    assert _names(repository, race=Race.DWARF) == ["Borin"]
    assert _names(repository, profession=Profession.DRUID) == ["alina"]
    assert _names(repository, banned=True) == ["alina", "Gorm"]
    assert _names(repository, banned=False) == ["Alice", "Borin"]


def test_level_range_policies(repository):
    assert _names(repository, min_level=10, max_level=20) == ["alina", "Borin"]
    assert _names(repository, min_level=20) == ["Borin", "Gorm"]
    assert _names(repository, max_level=9) == ["Alice"]


def test_experience_range_policies(repository):
    assert _names(repository, min_experience=5500, max_experience=21000) == ["alina", "Borin"]
    assert _names(repository, max_experience=5000) == ["Alice"]
    assert _names(repository, min_experience=21000) == ["Borin", "Gorm"]


def test_criteria_combine_with_and(repository):
    assert _names(repository, banned=True, min_level=15) == ["Gorm"]
    assert _names(repository, name="li", race=Race.HUMAN) == ["alina"]


def test_birthday_between_pulls_back_upper_bound(memory_engine):
    after = datetime_to_millis(BASE_DAY)
    before = after + 20 * 24 * 3600 * 1000
    with memory_engine.begin() as connection:
        repository = PlayersRepository(connection)
        for name, offset in [("start", 0), ("edge", before - BEFORE_ADJUSTMENT_MS - after), ("late", before - 3_600_000 - after)]:
            repository.save(_player(name, birthday=BASE_DAY + timedelta(milliseconds=offset)))

        assert _names(repository, after=after, before=before) == ["start", "edge"]
        assert _names(repository, before=before) == ["start", "edge", "late"]
        assert _names(repository, after=after + 1) == ["edge", "late"]


def test_birthday_range_single_sided_has_no_adjustment():
    clause = birthday_range(None, 3_600_001_000)
    assert clause.right.value == datetime(1970, 2, 11, 16, 0, 1)


def test_pagination_slices_in_id_order(repository):
    predicate = build_player_filter()
    assert [row["name"] for row in repository.find_all(predicate, page_number=0, page_size=3)] == ["Alice", "alina", "Borin"]
    assert [row["name"] for row in repository.find_all(predicate, page_number=1, page_size=3)] == ["Gorm"]
    assert repository.find_all(predicate, page_number=2, page_size=3) == []
