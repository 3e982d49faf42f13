from typing import List

from pydantic import BaseModel, ConfigDict

from .standing import StandingRecord


class LeaderboardEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    count: int


class Leaderboards(BaseModel):
    """Achievement counts for one grouping key, each list sorted by count then key."""

    model_config = ConfigDict(frozen=True)

    titles: List[LeaderboardEntry] = []
    promotions: List[LeaderboardEntry] = []
    relegations: List[LeaderboardEntry] = []
    sackings: List[LeaderboardEntry] = []


class RecordEntry(BaseModel):
    """Best single record for a group under the chosen metric."""

    model_config = ConfigDict(frozen=True)

    record: StandingRecord
    value: int
