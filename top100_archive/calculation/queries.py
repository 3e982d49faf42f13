# top100_archive/calculation/queries.py
"""Read-only views over standing records.

Nothing here remembers a "current" season or division; callers pass the
selection in on every call.
"""
from typing import Any, List, Optional

from top100_archive.models.enums import StandingsSort
from top100_archive.models.standing import StandingRecord
from top100_archive.normalization.keys import season_sort_key
from top100_archive.normalization.normalizer import clean_str, parse_int


def available_seasons(records: List[StandingRecord]) -> List[str]:
    """Distinct seasons, most recent first."""
    seasons = {r.season.strip() for r in records if r.season.strip()}
    return sorted(seasons, key=season_sort_key, reverse=True)


def available_divisions(records: List[StandingRecord], season: Any) -> List[int]:
    wanted = clean_str(season)
    return sorted({r.division for r in records if r.season.strip() == wanted and r.division})


def filter_standings(
    records: List[StandingRecord],
    season: Optional[Any] = None,
    division: Optional[Any] = None,
    sort: StandingsSort = StandingsSort.POSITION,
) -> List[StandingRecord]:
    rows = list(records)
    if season:
        wanted_season = clean_str(season)
        rows = [r for r in rows if r.season.strip() == wanted_season]
    if division not in (None, ""):
        wanted = parse_int(division)
        rows = [r for r in rows if r.division == wanted]

    if sort == StandingsSort.POINTS:
        return sorted(rows, key=lambda r: -r.points)
    if sort == StandingsSort.TEAM:
        return sorted(rows, key=lambda r: r.team)
    if sort == StandingsSort.MANAGER:
        return sorted(rows, key=lambda r: r.manager)
    if sort == StandingsSort.DIVISION:
        return sorted(rows, key=lambda r: (r.division, r.position))
    return sorted(rows, key=lambda r: r.position)


def search(records: List[StandingRecord], term: str) -> List[StandingRecord]:
    """Rows whose team or manager contains the term, newest season first."""
    needle = (term or "").strip().lower()
    hits = [
        r
        for r in records
        if needle in r.team.lower() or (r.manager and needle in r.manager.lower())
    ]
    hits.sort(key=lambda r: (r.division, r.position))
    hits.sort(key=lambda r: season_sort_key(r.season), reverse=True)
    return hits
