# top100_archive/models/profile.py
from typing import List

from pydantic import BaseModel, ConfigDict

from .classification import ClassifiedRecord


class ManagerProfile(BaseModel):
    """Career summary for a single manager key."""

    model_config = ConfigDict(frozen=True)

    manager: str
    appearances: int = 0
    titles: int = 0
    auto_promotions: int = 0
    playoff_wins: int = 0
    relegations: int = 0
    sackings: int = 0
    teams: List[str] = []
    seasons: List[str] = []
    team_count: int = 0
    season_count: int = 0
    career: List[ClassifiedRecord] = []  # Sorted by season, division, position
