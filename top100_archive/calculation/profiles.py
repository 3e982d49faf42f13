from collections import defaultdict
from typing import Dict, List, Optional

from loguru import logger

from top100_archive.calculation.classifier import classify
from top100_archive.calculation.playoffs import PlayoffWinners
from top100_archive.calculation.rules import (
    is_auto_promoted,
    is_auto_sacked,
    is_champion,
    is_relegated,
)
from top100_archive.models.profile import ManagerProfile
from top100_archive.models.standing import StandingRecord
from top100_archive.normalization.keys import normalize_season, season_sort_key


def list_managers(records: List[StandingRecord], query: str = "") -> List[str]:
    """Every manager key in the archive, alphabetically, optionally filtered by substring."""
    names = {key for r in records for key in r.manager_keys}
    needle = (query or "").strip().lower()
    return sorted(name for name in names if needle in name.lower())


def build_manager_profile(
    manager: str,
    records: List[StandingRecord],
    winners: Optional[PlayoffWinners] = None,
) -> ManagerProfile:
    """Career totals for one manager from the records that list them."""
    career = sorted(records, key=lambda r: r.sort_key)
    playoff_wins = sum(1 for r in career if winners is not None and winners.is_winner(r))
    teams = sorted({r.team for r in career})
    seasons = sorted({normalize_season(r.season) for r in career}, key=season_sort_key)
    return ManagerProfile(
        manager=manager,
        appearances=len(career),
        titles=sum(1 for r in career if is_champion(r.position)),
        auto_promotions=sum(1 for r in career if is_auto_promoted(r.division, r.position)),
        playoff_wins=playoff_wins,
        relegations=sum(1 for r in career if is_relegated(r.division, r.position)),
        sackings=sum(1 for r in career if is_auto_sacked(r.position)),
        teams=teams,
        seasons=seasons,
        team_count=len(teams),
        season_count=len(seasons),
        career=[classify(r, winners) for r in career],
    )


def build_manager_profiles(
    records: List[StandingRecord], winners: Optional[PlayoffWinners] = None
) -> Dict[str, ManagerProfile]:
    by_manager: Dict[str, List[StandingRecord]] = defaultdict(list)
    for r in records:
        for key in r.manager_keys:
            by_manager[key].append(r)

    profiles = {
        manager: build_manager_profile(manager, rows, winners)
        for manager, rows in sorted(by_manager.items())
    }
    logger.info(f"Built {len(profiles)} manager profiles.")
    return profiles
