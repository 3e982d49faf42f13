# top100_archive/normalization/winners.py
"""Readers for the winners spreadsheet (Clubs and Managers tabs)."""
import re
from typing import Any, List, Optional

from loguru import logger

from top100_archive.models.enums import WinnerKind
from top100_archive.models.honour import HonourEntry
from top100_archive.models.standing import PlayoffWinnerEntry
from top100_archive.normalization.normalizer import clean_str, ensure_table, get_cell

PLAYOFF_COLUMN = re.compile(r"division\s*([2-5])\s*play-?off", re.IGNORECASE)

KNOWN_COMPETITIONS = [
    "Division 1",
    "Division 2",
    "Division 3",
    "Division 4",
    "Division 5",
    "Top 100 Cup",
    "Top 100 Shield",
    "Youth Cup",
    "Youth Shield",
    "World Club Cup",
    "World Club Shield",
    "Charity Shield",
    "Division 2 Play-off",
    "Division 3 Play-off",
    "Division 4 Play-off",
    "Division 5 Play-off",
    "SMFA Super Cup",
    "SMFA Champions Cup",
    "SMFA Shield",
    "Youth Spoon",
    "World Cup",
]


def find_season_column(header: List[Any]) -> Optional[int]:
    for index, cell in enumerate(header):
        if clean_str(cell).lower() == "season":
            return index
    return None


def canonical_competition(raw_header: Any) -> str:
    """Maps a header to its known competition name, case-insensitively."""
    header = clean_str(raw_header)
    for name in KNOWN_COMPETITIONS:
        if name.lower() == header.lower():
            return name
    return header


def parse_playoff_winners(table: Any) -> List[PlayoffWinnerEntry]:
    """Reads every play-off winner cell from the Clubs tab.

    Only columns named like "Division 3 Play-off" are considered, so the
    division is always within 2-5. An empty table or one without a season
    column yields no entries.
    """
    if table is None:
        return []
    rows = ensure_table(table)
    if not rows or not rows[0]:
        return []

    header, data_rows = list(rows[0]), rows[1:]
    season_index = find_season_column(header)
    if season_index is None:
        logger.warning("Winners table has no 'season' column; no play-off winners read.")
        return []

    playoff_columns = []
    for index, cell in enumerate(header):
        match = PLAYOFF_COLUMN.search(clean_str(cell).lower())
        if match:
            playoff_columns.append((index, int(match.group(1))))
    logger.debug(f"Found {len(playoff_columns)} play-off columns in winners table.")

    entries: List[PlayoffWinnerEntry] = []
    for row in data_rows:
        if not row:
            continue
        season = get_cell(row, season_index)
        if not season:
            continue
        for index, division in playoff_columns:
            winner = get_cell(row, index)
            if not winner:
                continue
            entries.append(
                PlayoffWinnerEntry(
                    season=season, division=division, winning_team_raw=winner
                )
            )
    return entries


def parse_honours(table: Any, kind: WinnerKind) -> List[HonourEntry]:
    """Flattens a winners tab into one entry per (season, competition, winner) cell."""
    if table is None:
        return []
    rows = ensure_table(table)
    if not rows or not rows[0]:
        return []

    header, data_rows = list(rows[0]), rows[1:]
    season_index = find_season_column(header)
    if season_index is None:
        logger.warning(f"Honours tab ({kind.value}) has no 'season' column.")
        return []

    competition_columns = [
        (index, canonical_competition(cell))
        for index, cell in enumerate(header)
        if index != season_index
    ]

    entries: List[HonourEntry] = []
    for row in data_rows:
        if not row:
            continue
        season = get_cell(row, season_index)
        if not season:
            continue
        for index, competition in competition_columns:
            winner = get_cell(row, index)
            if winner:
                entries.append(
                    HonourEntry(
                        season=season, competition=competition, winner=winner, kind=kind
                    )
                )
    logger.info(f"Read {len(entries)} honours from the {kind.value} tab.")
    return entries
