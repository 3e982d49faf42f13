from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from .classification import ClassifiedRecord
from .enums import Marker
from .leaderboard import Leaderboards
from .threshold import ThresholdPoint, ThresholdRow


class ArchiveReport(BaseModel):
    """Everything the pipeline derives from one pair of input tables."""

    model_config = ConfigDict(frozen=True)

    records: List[ClassifiedRecord] = []
    by_team: Leaderboards = Leaderboards()
    by_manager: Leaderboards = Leaderboards()
    thresholds: Dict[Marker, List[ThresholdRow]] = {}
    threshold_history: Dict[Marker, List[ThresholdPoint]] = {}
    playoff_winner_keys: int = 0  # Size of the resolver's key set
