# top100_archive/normalization/schema.py
from typing import Any, Dict, List, Optional, Sequence

# Logical field -> accepted header aliases, in lookup order.
# Comparison is always trimmed + case-insensitive.
STANDINGS_ALIASES: Dict[str, List[str]] = {
    "season": ["season"],
    "division": ["division", "div"],
    "position": ["pos", "position", "rank"],
    "team": ["team", "club"],
    "played": ["p", "played"],
    "won": ["w", "won"],
    "drawn": ["d", "drawn"],
    "lost": ["l", "lost"],
    "goals_for": ["gf", "goals for", "goals_for"],
    "goals_against": ["ga", "goals against", "goals_against"],
    "goal_difference": ["gd", "goal difference", "goal_difference"],
    "points": ["pts", "points", "pnts"],
    # Start date is split across two columns in the source sheet
    "start_month": ["start month", "month", "start date (month)"],
    "start_year": ["start year", "year", "start date (year)"],
    "manager": ["manager", "manager name"],
}

REQUIRED_FIELDS = ("season", "team")

ColumnMap = Dict[str, Optional[int]]


def normalize_header(header: Sequence[Any]) -> List[str]:
    return ["" if cell is None else str(cell).strip().lower() for cell in header]


def find_column(normalized_header: List[str], aliases: Sequence[str]) -> Optional[int]:
    """Index of the first alias present in the header, or None."""
    for alias in aliases:
        wanted = alias.strip().lower()
        if wanted in normalized_header:
            return normalized_header.index(wanted)
    return None


def map_header(
    header: Sequence[Any], aliases: Optional[Dict[str, List[str]]] = None
) -> ColumnMap:
    """Resolves each logical field to a column index, None when no alias matches."""
    aliases = STANDINGS_ALIASES if aliases is None else aliases
    normalized = normalize_header(header)
    return {field: find_column(normalized, names) for field, names in aliases.items()}


def missing_fields(column_map: ColumnMap) -> List[str]:
    return [field for field, index in column_map.items() if index is None]
