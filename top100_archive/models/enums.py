from enum import Enum


class Category(str, Enum):
    CHAMPION = "Champions"
    CONTINENTAL = "SMFA Champions Cup"
    SHIELD = "SMFA Shield"
    AUTO_PROMOTED = "Auto-Promoted"
    PLAYOFF_BAND = "Playoff Band"
    RELEGATED = "Relegated"
    AUTO_SACKED = "Auto-Sacked"
    PLAYOFF_PROMOTED = "Promoted via Playoff"


class BadgeKind(str, Enum):
    AUTO_SACKED = "AUTO_SACKED"
    RELEGATED = "RELEGATED"
    CHAMPION = "CHAMPION"
    PROMOTED = "PROMOTED"  # Auto-promotion or confirmed playoff win
    CONTINENTAL = "CONTINENTAL"
    SHIELD = "SHIELD"
    NONE = "NONE"


class Achievement(str, Enum):
    TITLES = "titles"
    PROMOTIONS = "promotions"
    RELEGATIONS = "relegations"
    SACKINGS = "sackings"


class GroupKey(str, Enum):
    TEAM = "team"
    MANAGER = "manager"
    SEASON = "season"
    DIVISION = "division"
    POSITION = "position"


class Metric(str, Enum):
    POINTS = "points"
    GOALS_FOR = "goals_for"
    GOALS_AGAINST = "goals_against"
    GOAL_DIFFERENCE = "goal_difference"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class StandingsSort(str, Enum):
    POSITION = "position"
    POINTS = "points"
    TEAM = "team"
    MANAGER = "manager"
    DIVISION = "division"


class Marker(str, Enum):
    WIN = "win"  # Position 1, every division
    AUTO_PROMOTION = "auto_promotion"  # Position 3, divisions 2-5
    PLAYOFFS = "playoffs"  # Position 7, divisions 2-5
    AVOID_RELEGATION = "avoid_relegation"  # Position 16, divisions 1-4
    AVOID_SACKING = "avoid_sacking"  # Position 17, every division


class WinnerKind(str, Enum):
    CLUB = "club"
    MANAGER = "manager"
