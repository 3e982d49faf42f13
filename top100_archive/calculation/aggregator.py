from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from loguru import logger

from top100_archive.calculation.playoffs import PlayoffWinners
from top100_archive.calculation.rules import (
    is_auto_promoted,
    is_auto_sacked,
    is_champion,
    is_relegated,
)
from top100_archive.models.enums import Achievement, GroupKey, Marker, Metric, SortOrder
from top100_archive.models.leaderboard import LeaderboardEntry, Leaderboards, RecordEntry
from top100_archive.models.standing import StandingRecord
from top100_archive.models.threshold import ThresholdPoint, ThresholdRow
from top100_archive.normalization.keys import season_sort_key
from top100_archive.normalization.normalizer import clean_str, parse_int

RECORDS_LIMIT = 50

# Achievement -> predicate(record, confirmed play-off winner)
ACHIEVEMENT_RULES: Dict[Achievement, Callable[[StandingRecord, bool], bool]] = {
    Achievement.TITLES: lambda r, won: is_champion(r.position),
    Achievement.PROMOTIONS: lambda r, won: is_auto_promoted(r.division, r.position) or won,
    Achievement.RELEGATIONS: lambda r, won: is_relegated(r.division, r.position),
    Achievement.SACKINGS: lambda r, won: is_auto_sacked(r.position),
}

# Marker -> (position, divisions it applies to; None = every division)
MARKER_POSITIONS: Dict[Marker, Tuple[int, Optional[range]]] = {
    Marker.WIN: (1, None),
    Marker.AUTO_PROMOTION: (3, range(2, 6)),
    Marker.PLAYOFFS: (7, range(2, 6)),
    Marker.AVOID_RELEGATION: (16, range(1, 5)),
    Marker.AVOID_SACKING: (17, None),
}

METRIC_FIELDS: Dict[Metric, str] = {
    Metric.POINTS: "points",
    Metric.GOALS_FOR: "goals_for",
    Metric.GOALS_AGAINST: "goals_against",
    Metric.GOAL_DIFFERENCE: "goal_difference",
}


def _record_group_key(record: StandingRecord, group: GroupKey) -> str:
    value = getattr(record, group.value)
    if isinstance(value, int):
        return str(value) if value else ""
    return value.strip()


def group_keys(record: StandingRecord, group: GroupKey) -> List[str]:
    """Leaderboard keys for a record; managers fan out to every joint name."""
    if group == GroupKey.MANAGER:
        return record.manager_keys
    key = _record_group_key(record, group)
    return [key] if key else []


def count_by(
    items: Iterable[Any],
    key_fn: Callable[[Any], List[str]],
    unknown_label: Optional[str] = None,
) -> List[LeaderboardEntry]:
    """Counts items per key, most first, ties broken alphabetically.

    Items without a key are skipped unless an unknown_label bucket is asked for.
    """
    counts: Dict[str, int] = defaultdict(int)
    for item in items:
        keys = key_fn(item)
        if not keys:
            if unknown_label is None:
                continue
            keys = [unknown_label]
        for key in keys:
            counts[key] += 1
    return [
        LeaderboardEntry(key=key, count=count)
        for key, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    ]


def qualifying_records(
    records: Iterable[StandingRecord],
    achievement: Achievement,
    winners: Optional[PlayoffWinners] = None,
) -> List[StandingRecord]:
    rule = ACHIEVEMENT_RULES[achievement]
    return [
        r
        for r in records
        if rule(r, winners is not None and winners.is_winner(r))
    ]


def build_leaderboard(
    records: Iterable[StandingRecord],
    achievement: Achievement,
    group: GroupKey = GroupKey.TEAM,
    winners: Optional[PlayoffWinners] = None,
    unknown_label: Optional[str] = None,
) -> List[LeaderboardEntry]:
    rows = qualifying_records(records, achievement, winners)
    return count_by(rows, lambda r: group_keys(r, group), unknown_label)


def build_leaderboards(
    records: List[StandingRecord],
    group: GroupKey = GroupKey.TEAM,
    winners: Optional[PlayoffWinners] = None,
    unknown_label: Optional[str] = None,
) -> Leaderboards:
    """Titles, promotions, relegations and sackings counted per team or manager."""
    if group not in (GroupKey.TEAM, GroupKey.MANAGER):
        raise ValueError(f"Leaderboards group by team or manager, not {group.value}.")
    boards = {
        achievement.value: build_leaderboard(
            records, achievement, group, winners, unknown_label
        )
        for achievement in Achievement
    }
    return Leaderboards(**boards)


def round_half_up(value: Decimal, places: str = "0.1") -> float:
    return float(value.quantize(Decimal(places), rounding=ROUND_HALF_UP))


def _season_division_groups(
    records: Iterable[StandingRecord],
) -> List[Tuple[Tuple[str, int], Dict[int, StandingRecord]]]:
    """Records indexed by position within each (season, division), in season order."""
    groups: Dict[Tuple[str, int], Dict[int, StandingRecord]] = defaultdict(dict)
    for r in records:
        season = r.season.strip()
        if not season or not r.division:
            continue
        # Later rows win when a position repeats
        groups[(season, r.division)][r.position] = r
    return sorted(
        groups.items(), key=lambda item: (season_sort_key(item[0][0]), item[0][1])
    )


def threshold_history(
    records: Iterable[StandingRecord],
) -> Dict[Marker, List[ThresholdPoint]]:
    """Raw (season, division, points) at every marker position, for charting."""
    history: Dict[Marker, List[ThresholdPoint]] = {marker: [] for marker in Marker}
    for (season, division), by_position in _season_division_groups(records):
        for marker, (position, divisions) in MARKER_POSITIONS.items():
            if divisions is not None and division not in divisions:
                continue
            row = by_position.get(position)
            if row is None:
                continue
            history[marker].append(
                ThresholdPoint(season=season, division=division, points=row.points)
            )
    return history


def summarize(points: Iterable[ThresholdPoint]) -> List[ThresholdRow]:
    by_division: Dict[int, List[int]] = defaultdict(list)
    for point in points:
        by_division[point.division].append(point.points)

    rows: List[ThresholdRow] = []
    for division in sorted(by_division):
        values = by_division[division]
        if not values:
            continue
        avg = Decimal(sum(values)) / Decimal(len(values))
        rows.append(
            ThresholdRow(
                division=division,
                min=min(values),
                avg=round_half_up(avg),
                max=max(values),
                samples=len(values),
            )
        )
    return rows


def compute_thresholds(
    records: Iterable[StandingRecord],
) -> Dict[Marker, List[ThresholdRow]]:
    """Min / average / max points at each marker position, one row per division."""
    history = threshold_history(records)
    thresholds = {marker: summarize(points) for marker, points in history.items()}
    row_counts = {marker.value: len(rows) for marker, rows in thresholds.items()}
    logger.debug(f"Computed threshold rows per marker: {row_counts}")
    return thresholds


def chart_series(points: Iterable[ThresholdPoint]) -> List[Dict[str, Any]]:
    """Pivots a marker's history into one row per season with a "D<n>" column per division."""
    by_season: Dict[str, Dict[str, Any]] = {}
    for point in points:
        row = by_season.setdefault(point.season, {"season": point.season})
        row[f"D{point.division}"] = point.points
    return [by_season[s] for s in sorted(by_season, key=season_sort_key)]


def build_records(
    records: Iterable[StandingRecord],
    metric: Metric = Metric.POINTS,
    group: GroupKey = GroupKey.TEAM,
    order: SortOrder = SortOrder.DESC,
    season: Optional[Any] = None,
    division: Optional[Any] = None,
    limit: int = RECORDS_LIMIT,
) -> List[RecordEntry]:
    """Best single record per group for a metric (not a sum), at most `limit` rows."""
    rows = list(records)
    if season:
        wanted_season = clean_str(season)
        rows = [r for r in rows if r.season.strip() == wanted_season]
    if division not in (None, ""):
        wanted = parse_int(division)
        rows = [r for r in rows if r.division == wanted]

    field = METRIC_FIELDS[metric]
    rows.sort(key=lambda r: r.position)
    rows.sort(key=lambda r: getattr(r, field), reverse=order == SortOrder.DESC)

    seen = set()
    result: List[RecordEntry] = []
    for r in rows:
        key = _record_group_key(r, group)
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(RecordEntry(record=r, value=getattr(r, field)))
        if len(result) >= limit:
            break
    return result
