# top100_archive/calculation/rules.py
"""League rules as pure predicates over (division, position).

Values go through the same lenient integer parse as the normalizer, so a
malformed division or position is 0 and satisfies no rule.
"""
from typing import Any

from top100_archive.normalization.normalizer import parse_int

PROMOTION_DIVISIONS = range(2, 6)  # Divisions 2-5 promote
RELEGATION_DIVISIONS = range(1, 5)  # Divisions 1-4 relegate


def is_champion(position: Any) -> bool:
    return parse_int(position) == 1


def is_continental(division: Any, position: Any) -> bool:
    return parse_int(division) == 1 and 2 <= parse_int(position) <= 4


def is_shield(division: Any, position: Any) -> bool:
    return parse_int(division) == 1 and 5 <= parse_int(position) <= 10


def is_auto_promoted(division: Any, position: Any) -> bool:
    return parse_int(division) in PROMOTION_DIVISIONS and parse_int(position) in (2, 3)


def is_playoff_band(division: Any, position: Any) -> bool:
    return parse_int(division) in PROMOTION_DIVISIONS and 4 <= parse_int(position) <= 7


def is_relegated(division: Any, position: Any) -> bool:
    return parse_int(division) in RELEGATION_DIVISIONS and 17 <= parse_int(position) <= 20


def is_auto_sacked(position: Any) -> bool:
    return 18 <= parse_int(position) <= 20
