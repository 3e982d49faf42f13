from typing import Any, Optional

from loguru import logger

from top100_archive.calculation.aggregator import (
    build_leaderboards,
    compute_thresholds,
    threshold_history,
)
from top100_archive.calculation.classifier import classify_all
from top100_archive.calculation.playoffs import PlayoffWinners
from top100_archive.models.enums import GroupKey
from top100_archive.models.report import ArchiveReport
from top100_archive.normalization.normalizer import StandingsNormalizer, Table


def run_pipeline(
    standings_table: Table,
    winners_table: Optional[Any] = None,
    tolerant: bool = False,
) -> ArchiveReport:
    """Runs ingestion, classification and aggregation over one pair of tables.

    Args:
        standings_table: Raw standings sheet, header row first.
        winners_table: Raw winners (Clubs) sheet, or None when unavailable.
        tolerant: Also match play-off winners on the prefix-stripped team name.

    Returns:
        An ArchiveReport; identical inputs always give an identical report.

    Raises:
        TableFormatError: If the standings input is not a two-dimensional table.
    """
    records = StandingsNormalizer().normalize(standings_table)
    winners = PlayoffWinners.from_table(winners_table, tolerant=tolerant)

    classified = classify_all(records, winners)
    report = ArchiveReport(
        records=classified,
        by_team=build_leaderboards(records, GroupKey.TEAM, winners),
        by_manager=build_leaderboards(records, GroupKey.MANAGER, winners),
        thresholds=compute_thresholds(records),
        threshold_history=threshold_history(records),
        playoff_winner_keys=len(winners),
    )
    promoted = sum(1 for c in classified if c.playoff_winner)
    logger.info(
        f"Pipeline complete: {len(classified)} records classified, {promoted} promoted via play-offs."
    )
    return report
