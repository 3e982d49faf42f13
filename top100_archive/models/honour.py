from typing import List

from pydantic import BaseModel, ConfigDict

from .enums import WinnerKind


class HonourEntry(BaseModel):
    """A single competition win read from the winners spreadsheet."""

    model_config = ConfigDict(frozen=True)

    season: str
    competition: str
    winner: str
    kind: WinnerKind


class HonoursLeaderboardEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    winner: str
    kind: WinnerKind
    count: int


class CompetitionLeaderboard(BaseModel):
    model_config = ConfigDict(frozen=True)

    competition: str
    rows: List[HonoursLeaderboardEntry] = []
