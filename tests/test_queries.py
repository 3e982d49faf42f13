import pytest

from conftest import make_record
from top100_archive.calculation.queries import (
    available_divisions,
    available_seasons,
    filter_standings,
    search,
)
from top100_archive.models.enums import StandingsSort


@pytest.fixture
def rows():
    return [
        make_record(season="9", division=2, position=2, team="Crimson", manager="Zed", points=70),
        make_record(season="10", division=1, position=3, team="Blue FC", manager="Amy", points=60),
        make_record(season="10", division=1, position=1, team="Azure", manager="Bob / Amy", points=80),
        make_record(season="10", division=2, position=1, team="Amber", manager="", points=75),
    ]


def test_available_seasons_newest_first(rows):
    assert available_seasons(rows) == ["10", "9"]


def test_available_divisions_for_season(rows):
    assert available_divisions(rows, "10") == [1, 2]
    assert available_divisions(rows, "9") == [2]
    assert available_divisions(rows, "99") == []


def test_filter_by_season_and_division(rows):
    result = filter_standings(rows, season="10", division="1")
    assert [r.team for r in result] == ["Azure", "Blue FC"]


@pytest.mark.parametrize(
    "sort, expected",
    [
        (StandingsSort.POSITION, ["Azure", "Amber", "Blue FC"]),
        (StandingsSort.POINTS, ["Azure", "Amber", "Blue FC"]),
        (StandingsSort.TEAM, ["Amber", "Azure", "Blue FC"]),
        (StandingsSort.MANAGER, ["Amber", "Blue FC", "Azure"]),
        (StandingsSort.DIVISION, ["Azure", "Blue FC", "Amber"]),
    ],
)
def test_filter_sort_orders(rows, sort, expected):
    assert [r.team for r in filter_standings(rows, season="10", sort=sort)] == expected


def test_search_matches_team_or_manager(rows):
    assert [r.team for r in search(rows, "amy")] == ["Azure", "Blue FC"]
    assert [r.team for r in search(rows, "CRIM")] == ["Crimson"]
    assert search(rows, "nobody") == []


def test_search_orders_by_season_then_division_then_position(rows):
    assert [r.team for r in search(rows, "")] == ["Azure", "Blue FC", "Amber", "Crimson"]


def test_season_filters_accept_numbers(rows):
    assert [r.team for r in filter_standings(rows, season=10, division=1)] == ["Azure", "Blue FC"]
    assert available_divisions(rows, 10) == [1, 2]
