import pytest

from top100_archive.normalization.keys import (
    build_key,
    build_loose_key,
    manager_keys,
    normalize_division,
    normalize_team_name,
    season_sort_key,
)


@pytest.mark.parametrize(
    "raw, expected",
    [("Division 3", "3"), ("3", "3"), (3, "3"), ("  Premier ", "Premier"), (None, "")],
)
def test_normalize_division(raw, expected):
    assert normalize_division(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Atlético", "atletico"),
        ("Atletico FC", "atletico"),
        ("AFC Wimbledon", "wimbledon"),
        ("Red SC", "red"),
        ("Blue Club (ENG)", "blue"),
        ("São  Paulo--FC", "sao paulo"),
        ("Fcbarcelona", "fcbarcelona"),  # Stop words only match whole words
    ],
)
def test_normalize_team_name(raw, expected):
    assert normalize_team_name(raw) == expected


def test_build_key_is_stable_and_ignores_suffixes_and_accents():
    assert build_key("12", "3", "Atlético") == build_key("12", "3", "Atletico FC")
    assert build_key("12", "3", "Atlético") == build_key("12", "3", "Atlético")
    assert build_key(" 12 ", "Division 3", "atletico") == "12|3|atletico"


def test_build_key_distinguishes_season_and_division():
    assert build_key("12", "3", "Red") != build_key("13", "3", "Red")
    assert build_key("12", "3", "Red") != build_key("12", "4", "Red")


def test_loose_key_strips_club_prefixes():
    assert build_loose_key("1", "2", "Real Betis") == build_key("1", "2", "Betis")
    assert build_loose_key("1", "2", "PSV") == build_key("1", "2", "PSV")


def test_manager_keys_split_joint_management():
    assert manager_keys("Alice / Bob") == ["Alice / Bob", "Alice", "Bob"]
    assert manager_keys(" Alice ") == ["Alice"]
    assert manager_keys("") == []
    assert manager_keys(None) == []


def test_season_sort_key_is_numeric():
    seasons = ["10", "9", "S11", "legacy"]
    assert sorted(seasons, key=season_sort_key) == ["9", "10", "S11", "legacy"]
