# top100_archive/calculation/playoffs.py
from typing import Any, FrozenSet, Iterable

from loguru import logger

from top100_archive.calculation.rules import PROMOTION_DIVISIONS, is_playoff_band
from top100_archive.models.standing import PlayoffWinnerEntry, StandingRecord
from top100_archive.normalization.keys import build_key, build_loose_key
from top100_archive.normalization.normalizer import ArchiveError
from top100_archive.normalization.winners import parse_playoff_winners


class PlayoffWinners:
    """Set of normalized (season, division, team) keys for play-off winners.

    Joins the independently maintained winners sheet against standings rows.
    A record is promoted via the play-offs only when it finished in the
    play-off band and its key is in the set.
    """

    def __init__(self, keys: Iterable[str] = (), tolerant: bool = False):
        self.keys: FrozenSet[str] = frozenset(keys)
        self.tolerant = tolerant

    @classmethod
    def empty(cls, tolerant: bool = False) -> "PlayoffWinners":
        return cls((), tolerant=tolerant)

    @classmethod
    def from_entries(
        cls, entries: Iterable[PlayoffWinnerEntry], tolerant: bool = False
    ) -> "PlayoffWinners":
        keys = set()
        for entry in entries:
            if entry.division not in PROMOTION_DIVISIONS:
                logger.debug(
                    f"Ignoring play-off winner '{entry.winning_team_raw}' for division {entry.division} (season {entry.season})."
                )
                continue
            keys.add(build_key(entry.season, entry.division, entry.winning_team_raw))
        return cls(keys, tolerant=tolerant)

    @classmethod
    def from_table(cls, table: Any, tolerant: bool = False) -> "PlayoffWinners":
        """Builds the resolver from the raw winners table; never raises.

        A missing, empty or unreadable table is treated as "no play-off
        winners", leaving every play-off band record unpromoted.
        """
        if table is None:
            logger.warning("No winners table supplied; play-off winners unavailable.")
            return cls.empty(tolerant=tolerant)
        try:
            entries = parse_playoff_winners(table)
        except ArchiveError as e:
            logger.warning(f"Could not read winners table, ignoring it: {e}")
            return cls.empty(tolerant=tolerant)
        winners = cls.from_entries(entries, tolerant=tolerant)
        logger.info(f"Loaded {len(winners)} play-off winner keys.")
        return winners

    def __len__(self) -> int:
        return len(self.keys)

    def matches(self, season: Any, division: Any, team: Any) -> bool:
        if build_key(season, division, team) in self.keys:
            return True
        if self.tolerant and build_loose_key(season, division, team) in self.keys:
            return True
        return False

    def is_winner(self, record: StandingRecord) -> bool:
        if not is_playoff_band(record.division, record.position):
            return False
        return self.matches(record.season, record.division, record.team)
