from pydantic import BaseModel, ConfigDict, Field


class ThresholdPoint(BaseModel):
    """Points held by the marker position in one season and division."""

    model_config = ConfigDict(frozen=True)

    season: str
    division: int
    points: int


class ThresholdRow(BaseModel):
    """Summary of a marker position's points across all seasons of a division."""

    model_config = ConfigDict(frozen=True)

    division: int
    min: int
    avg: float  # Rounded to one decimal, half away from zero
    max: int
    samples: int = Field(..., ge=1)
