from typing import List

from pydantic import BaseModel, ConfigDict, computed_field

from top100_archive.normalization.keys import manager_keys, season_sort_key


class StandingRecord(BaseModel):
    """One team's result in one season and division."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    season: str  # Opaque, compared numerically via sort_key
    division: int = 0  # 0 when the source value was malformed
    position: int = 0
    team: str
    manager: str = ""  # May hold joint management ("A / B")

    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0

    start_date: str = ""  # "<month> <year>", either part may be missing

    @computed_field  # type: ignore[misc]
    @property
    def manager_keys(self) -> List[str]:
        """Every grouping key this record's manager string contributes."""
        return manager_keys(self.manager)

    @property
    def sort_key(self) -> tuple:
        return (season_sort_key(self.season), self.division, self.position)


class PlayoffWinnerEntry(BaseModel):
    """One play-off promotion result read from the winners table."""

    model_config = ConfigDict(frozen=True)

    season: str
    division: int  # Only 2-5 are meaningful; others are ignored by the resolver
    winning_team_raw: str
