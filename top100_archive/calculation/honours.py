# top100_archive/calculation/honours.py
"""Honours roll views built from the winners spreadsheet."""
from collections import defaultdict
from typing import Dict, List, Optional

from top100_archive.models.enums import WinnerKind
from top100_archive.models.honour import (
    CompetitionLeaderboard,
    HonourEntry,
    HonoursLeaderboardEntry,
)
from top100_archive.normalization.keys import season_sort_key


def filter_honours(
    entries: List[HonourEntry],
    kind: Optional[WinnerKind] = None,
    season: Optional[str] = None,
    competition: Optional[str] = None,
    term: str = "",
) -> List[HonourEntry]:
    needle = (term or "").strip().lower()
    result = []
    for entry in entries:
        if kind and entry.kind != kind:
            continue
        if season and entry.season != season:
            continue
        if competition and entry.competition != competition:
            continue
        if needle:
            haystack = f"{entry.winner} {entry.competition} {entry.season}".lower()
            if needle not in haystack:
                continue
        result.append(entry)
    return result


def _count_winners(entries: List[HonourEntry]) -> List[HonoursLeaderboardEntry]:
    # Clubs and managers with the same name are counted separately
    counts: Dict[tuple, int] = defaultdict(int)
    for entry in entries:
        counts[(entry.kind, entry.winner)] += 1
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0][1], kv[0][0].value))
    return [
        HonoursLeaderboardEntry(winner=winner, kind=kind, count=count)
        for (kind, winner), count in ranked
    ]


def honours_leaderboard(
    entries: List[HonourEntry], limit: int = 50
) -> List[HonoursLeaderboardEntry]:
    return _count_winners(entries)[:limit]


def honours_by_competition(
    entries: List[HonourEntry], limit: int = 10
) -> List[CompetitionLeaderboard]:
    by_competition: Dict[str, List[HonourEntry]] = defaultdict(list)
    for entry in entries:
        by_competition[entry.competition].append(entry)
    return [
        CompetitionLeaderboard(
            competition=competition, rows=_count_winners(rows)[:limit]
        )
        for competition, rows in sorted(by_competition.items())
    ]


def competitions(entries: List[HonourEntry]) -> List[str]:
    return sorted({entry.competition for entry in entries})


def season_table(
    entries: List[HonourEntry], limit: int = 20
) -> Dict[str, Dict[str, List[str]]]:
    """Most recent seasons first: season -> competition -> sorted winners."""
    table: Dict[str, Dict[str, set]] = defaultdict(lambda: defaultdict(set))
    for entry in entries:
        table[entry.season][entry.competition].add(entry.winner)

    seasons = sorted(table, key=season_sort_key, reverse=True)[:limit]
    return {
        season: {
            competition: sorted(winners)
            for competition, winners in sorted(table[season].items())
        }
        for season in seasons
    }
