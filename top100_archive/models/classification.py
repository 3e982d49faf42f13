from typing import List

from pydantic import BaseModel, ConfigDict, computed_field

from .enums import BadgeKind, Category
from .standing import StandingRecord


class Tag(BaseModel):
    """A status label attached to a standing row, with an opaque style token."""

    model_config = ConfigDict(frozen=True)

    category: Category
    style: str

    @computed_field  # type: ignore[misc]
    @property
    def label(self) -> str:
        return self.category.value


class Badge(BaseModel):
    """The single compact badge shown for a row."""

    model_config = ConfigDict(frozen=True)

    kind: BadgeKind = BadgeKind.NONE
    color: str = "gray"
    icon: str = ""


class ClassifiedRecord(BaseModel):
    """A standing record together with everything the classifier derived for it."""

    model_config = ConfigDict(frozen=True)

    record: StandingRecord
    tags: List[Tag] = []
    badge: Badge = Badge()
    row_style: str = "plain"
    playoff_winner: bool = False

    def has(self, category: Category) -> bool:
        return any(tag.category == category for tag in self.tags)

    @property
    def promoted(self) -> bool:
        return self.has(Category.AUTO_PROMOTED) or self.playoff_winner
