from conftest import make_record
from top100_archive.calculation.playoffs import PlayoffWinners
from top100_archive.calculation.profiles import build_manager_profiles, list_managers
from top100_archive.normalization.normalizer import StandingsNormalizer


def test_manager_profile_totals(standings_table, winners_table):
    records = StandingsNormalizer().normalize(standings_table)
    profiles = build_manager_profiles(records, PlayoffWinners.from_table(winners_table))

    assert sorted(profiles) == ["Manager 0", "Manager 1", "Manager 2", "Manager 3"]
    profile = profiles["Manager 1"]
    assert profile.appearances == 20
    assert profile.titles == 4
    assert profile.auto_promotions == 0
    assert profile.playoff_wins == 1
    assert profile.relegations == 4
    assert profile.sackings == 0
    assert profile.team_count == 10
    assert profile.seasons == ["10", "11"]
    assert profile.season_count == 2

    assert profiles["Manager 2"].auto_promotions == 2
    assert profiles["Manager 2"].sackings == 4


def test_career_is_sorted_and_classified():
    rows = [
        make_record(season="11", division=2, position=3, team="B", manager="Ann"),
        make_record(season="9", division=1, position=19, team="A", manager="Ann"),
        make_record(season="10", division=2, position=1, team="B", manager="Ann"),
    ]
    profile = build_manager_profiles(rows)["Ann"]
    assert [c.record.season for c in profile.career] == ["9", "10", "11"]
    assert [c.badge.kind.value for c in profile.career] == ["AUTO_SACKED", "CHAMPION", "PROMOTED"]
    assert profile.teams == ["A", "B"]


def test_joint_managers_get_their_own_profiles():
    rows = [make_record(manager="Ann / Ben"), make_record(season="11", manager="Ben")]
    profiles = build_manager_profiles(rows)
    assert profiles["Ben"].appearances == 2
    assert profiles["Ann"].appearances == 1
    assert profiles["Ann / Ben"].appearances == 1


def test_list_managers_filters_by_substring():
    rows = [make_record(manager="Ann / Ben"), make_record(manager="Carl"), make_record(manager="")]
    assert list_managers(rows) == ["Ann", "Ann / Ben", "Ben", "Carl"]
    assert list_managers(rows, "an") == ["Ann", "Ann / Ben"]
