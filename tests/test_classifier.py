import itertools

import pytest

from conftest import make_record
from top100_archive.calculation.classifier import classify, get_badge, get_row_style, get_tags
from top100_archive.calculation.pipeline import run_pipeline
from top100_archive.calculation.playoffs import PlayoffWinners
from top100_archive.calculation.rules import (
    is_auto_promoted,
    is_champion,
    is_continental,
    is_playoff_band,
    is_relegated,
    is_shield,
)
from top100_archive.models.enums import BadgeKind, Category
from top100_archive.models.standing import PlayoffWinnerEntry


def labels(record, winners=None):
    return [tag.label for tag in get_tags(record, winners)]


def test_auto_promoted_scenario():
    record = make_record(season="10", division=3, position=2, team="Blue FC", points=70)
    assert labels(record) == ["Auto-Promoted"]
    assert get_badge(record).kind == BadgeKind.PROMOTED


def test_playoff_winner_scenario():
    record = make_record(season="10", division=3, position=5, team="Red SC", points=60)
    winners = PlayoffWinners.from_entries(
        [PlayoffWinnerEntry(season="10", division=3, winning_team_raw="Red")]
    )
    assert labels(record, winners) == ["Playoff Band", "Promoted via Playoff"]
    assert get_badge(record, winners).kind == BadgeKind.PROMOTED
    assert classify(record, winners).playoff_winner is True


def test_playoff_band_without_win_is_not_promoted():
    record = make_record(division=3, position=5, team="Red SC")
    assert labels(record, PlayoffWinners.empty()) == ["Playoff Band"]
    assert get_badge(record).kind == BadgeKind.NONE
    assert classify(record).promoted is False


def test_relegated_and_sacked_scenario():
    record = make_record(season="10", division=1, position=19)
    assert labels(record) == ["Relegated", "Auto-Sacked"]
    assert get_badge(record).kind == BadgeKind.AUTO_SACKED


def test_champion_and_continental_slots():
    assert labels(make_record(division=1, position=1)) == ["Champions"]
    assert labels(make_record(division=1, position=3)) == ["SMFA Champions Cup"]
    assert labels(make_record(division=1, position=7)) == ["SMFA Shield"]
    assert get_badge(make_record(division=1, position=7)).kind == BadgeKind.SHIELD
    assert get_badge(make_record(division=2, position=1)).kind == BadgeKind.CHAMPION


def test_position_17_is_relegated_but_not_sacked():
    record = make_record(division=2, position=17)
    assert labels(record) == ["Relegated"]
    assert get_badge(record).kind == BadgeKind.RELEGATED


def test_division_five_sacking_without_relegation():
    record = make_record(division=5, position=20)
    assert labels(record) == ["Auto-Sacked"]


def test_malformed_values_get_no_tags():
    record = make_record(division=0, position=0)
    assert get_tags(record) == []
    assert get_badge(record).kind == BadgeKind.NONE
    assert get_row_style(record) == "plain"
    assert not is_champion("abc")
    assert not is_relegated("x", "19")


@pytest.mark.parametrize("division", [0, 1, 6, 7, 12])
def test_promotion_rules_only_apply_to_divisions_two_to_five(division):
    winners = PlayoffWinners.from_entries(
        [PlayoffWinnerEntry(season="10", division=division, winning_team_raw="Blue")]
    )
    for position in range(0, 22):
        record = make_record(division=division, position=position, team="Blue")
        assert not is_auto_promoted(division, position)
        assert not is_playoff_band(division, position)
        assert not winners.is_winner(record)


def test_every_record_gets_exactly_one_badge():
    winners = PlayoffWinners(["10|3|blue", "10|4|blue"])
    for division, position in itertools.product(range(0, 8), range(0, 22)):
        record = make_record(division=division, position=position, team="Blue")
        badge = get_badge(record, winners)
        assert isinstance(badge.kind, BadgeKind)
        tags = {tag.category for tag in get_tags(record, winners)}
        if not tags:
            assert badge.kind == BadgeKind.NONE


def test_champion_never_overlaps_promotion():
    for division, position in itertools.product(range(0, 8), range(0, 22)):
        if is_champion(position):
            assert not is_auto_promoted(division, position)
            assert not is_playoff_band(division, position)
            assert not is_continental(division, position)
            assert not is_shield(division, position)


def test_row_style_precedence():
    assert get_row_style(make_record(division=1, position=1)) == "champion"
    assert get_row_style(make_record(division=2, position=3)) == "promoted"
    assert get_row_style(make_record(division=1, position=19)) == "relegated"
    assert get_row_style(make_record(division=4, position=6)) == "playoffs"
    assert get_row_style(make_record(division=5, position=18)) == "sacked"


def test_classified_record_helpers():
    classified = classify(make_record(division=2, position=2))
    assert classified.has(Category.AUTO_PROMOTED)
    assert classified.promoted
    assert classified.tags[0].style == "green"


@pytest.mark.parametrize(
    "position, expected",
    [("1.0", True), ("1", True), ("10.0", False), (" 1 ", True)],
)
def test_decimal_positions_read_as_integers(position, expected):
    assert is_champion(position) is expected


def test_decimal_formatted_rows_keep_their_classification():
    table = [
        ["Season", "Division", "Position", "Team", "Points"],
        ["10", "1", "1.0", "Top", "90"],
        ["10", "3", "2.0", "Up", "80"],
    ]
    top, up = run_pipeline(table).records
    assert top.record.position == 1
    assert [t.label for t in top.tags] == ["Champions"]
    assert top.badge.kind == BadgeKind.CHAMPION
    assert up.record.position == 2
    assert [t.label for t in up.tags] == ["Auto-Promoted"]
    assert up.badge.kind == BadgeKind.PROMOTED
