import pytest

from top100_archive.models.standing import StandingRecord

HEADER = [
    "Season", "Division", "Position", "Team", "P", "W", "D", "L",
    "GF", "GA", "GD", "Pts", "Start Month", "Start Year", "Manager",
]


def make_record(season="10", division=1, position=1, team="Blue FC", **kwargs):
    return StandingRecord(
        season=season, division=division, position=position, team=team, **kwargs
    )


def make_row(season, division, position, team, points, manager=""):
    return [
        str(season), str(division), str(position), team,
        "38", "20", "10", "8", "60", "40", "20", str(points), "Aug", "2015", manager,
    ]


@pytest.fixture
def standings_table():
    """Two seasons of a two-division league, header first."""
    rows = [HEADER]
    for season, base in (("10", 90), ("11", 88)):
        for division in (1, 3):
            for position in range(1, 21):
                rows.append(
                    make_row(
                        season,
                        division,
                        position,
                        f"Team {division}-{position}",
                        base - division * 5 - position * 3,
                        manager=f"Manager {position % 4}",
                    )
                )
    return rows


@pytest.fixture
def winners_table():
    return [
        ["Season", "Division 1", "Division 3 Play-off", "Division 4 Play-off"],
        ["10", "Team 1-1", "Team 3-5", ""],
        ["11", "Team 1-1", "Somebody Else", "Team 4-4"],
    ]
