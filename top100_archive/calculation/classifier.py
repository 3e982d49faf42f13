from typing import Callable, List, Optional, Tuple

from top100_archive.calculation.playoffs import PlayoffWinners
from top100_archive.calculation.rules import (
    is_auto_promoted,
    is_auto_sacked,
    is_champion,
    is_continental,
    is_playoff_band,
    is_relegated,
    is_shield,
)
from top100_archive.models.classification import Badge, ClassifiedRecord, Tag
from top100_archive.models.enums import BadgeKind, Category
from top100_archive.models.standing import StandingRecord

RecordPredicate = Callable[[StandingRecord, bool], bool]

# (predicate, category, style); the bool argument is "confirmed play-off winner".
# Evaluated in this order, every match becomes a tag.
TAG_RULES: List[Tuple[RecordPredicate, Category, str]] = [
    (lambda r, won: is_champion(r.position), Category.CHAMPION, "yellow"),
    (lambda r, won: is_continental(r.division, r.position), Category.CONTINENTAL, "purple"),
    (lambda r, won: is_shield(r.division, r.position), Category.SHIELD, "indigo"),
    (lambda r, won: is_auto_promoted(r.division, r.position), Category.AUTO_PROMOTED, "green"),
    (lambda r, won: is_playoff_band(r.division, r.position), Category.PLAYOFF_BAND, "blue"),
    (lambda r, won: is_relegated(r.division, r.position), Category.RELEGATED, "red"),
    (lambda r, won: is_auto_sacked(r.position), Category.AUTO_SACKED, "rose"),
    (lambda r, won: won, Category.PLAYOFF_PROMOTED, "emerald"),
]

# Highest precedence first; the first match is the record's badge.
BADGE_RULES: List[Tuple[RecordPredicate, Badge]] = [
    (
        lambda r, won: is_auto_sacked(r.position),
        Badge(kind=BadgeKind.AUTO_SACKED, color="rose", icon="⛔"),
    ),
    (
        lambda r, won: is_relegated(r.division, r.position),
        Badge(kind=BadgeKind.RELEGATED, color="red", icon="⬇️"),
    ),
    (
        lambda r, won: is_champion(r.position),
        Badge(kind=BadgeKind.CHAMPION, color="yellow", icon="👑"),
    ),
    (
        lambda r, won: is_auto_promoted(r.division, r.position) or won,
        Badge(kind=BadgeKind.PROMOTED, color="green", icon="⬆️"),
    ),
    (
        lambda r, won: is_continental(r.division, r.position),
        Badge(kind=BadgeKind.CONTINENTAL, color="purple", icon="🏆"),
    ),
    (
        lambda r, won: is_shield(r.division, r.position),
        Badge(kind=BadgeKind.SHIELD, color="indigo", icon="🛡️"),
    ),
]

NO_BADGE = Badge()

ROW_STYLE_RULES: List[Tuple[RecordPredicate, str]] = [
    (lambda r, won: is_champion(r.position), "champion"),
    (lambda r, won: is_auto_promoted(r.division, r.position), "promoted"),
    (lambda r, won: is_relegated(r.division, r.position), "relegated"),
    (lambda r, won: is_playoff_band(r.division, r.position), "playoffs"),
    (lambda r, won: is_auto_sacked(r.position), "sacked"),
]


def _playoff_winner(record: StandingRecord, winners: Optional[PlayoffWinners]) -> bool:
    return winners is not None and winners.is_winner(record)


def get_tags(
    record: StandingRecord, winners: Optional[PlayoffWinners] = None
) -> List[Tag]:
    won = _playoff_winner(record, winners)
    return [
        Tag(category=category, style=style)
        for predicate, category, style in TAG_RULES
        if predicate(record, won)
    ]


def get_badge(record: StandingRecord, winners: Optional[PlayoffWinners] = None) -> Badge:
    won = _playoff_winner(record, winners)
    for predicate, badge in BADGE_RULES:
        if predicate(record, won):
            return badge
    return NO_BADGE


def get_row_style(record: StandingRecord) -> str:
    for predicate, style in ROW_STYLE_RULES:
        if predicate(record, False):
            return style
    return "plain"


def classify(
    record: StandingRecord, winners: Optional[PlayoffWinners] = None
) -> ClassifiedRecord:
    won = _playoff_winner(record, winners)
    return ClassifiedRecord(
        record=record,
        tags=get_tags(record, winners),
        badge=get_badge(record, winners),
        row_style=get_row_style(record),
        playoff_winner=won,
    )


def classify_all(
    records: List[StandingRecord], winners: Optional[PlayoffWinners] = None
) -> List[ClassifiedRecord]:
    return [classify(record, winners) for record in records]
