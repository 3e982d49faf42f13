import re
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from top100_archive.models.standing import StandingRecord
from top100_archive.normalization.schema import (
    STANDINGS_ALIASES,
    ColumnMap,
    map_header,
    missing_fields,
)

LEADING_INTEGER = re.compile(r"-?\d+")
UNICODE_MINUS = "\u2212"

NUMERIC_FIELDS = (
    "division",
    "position",
    "played",
    "won",
    "drawn",
    "lost",
    "goals_for",
    "goals_against",
    "goal_difference",
    "points",
)

# Type alias for the raw input: a header row followed by data rows
Table = Sequence[Sequence[Any]]


class ArchiveError(Exception):
    """Base exception for the archive engine."""

    pass


class TableFormatError(ArchiveError):
    """Raised when the input is not a two-dimensional table at all."""

    pass


def clean_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_int(value: Any) -> int:
    """Lenient integer parse: the first signed run of digits, 0 when there is none.

    "1.0" reads as 1, "12 pts" as 12 and a Unicode minus as a sign.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    match = LEADING_INTEGER.search(clean_str(value).replace(UNICODE_MINUS, "-"))
    if not match:
        return 0
    return int(match.group(0))


def ensure_table(table: Any) -> List[Optional[Sequence[Any]]]:
    """Checks the input is a sequence of rows and returns it as a list."""
    if table is None or isinstance(table, (str, bytes)) or not isinstance(
        table, (list, tuple)
    ):
        raise TableFormatError(
            f"Expected a list of rows, got {type(table).__name__}."
        )
    rows = list(table)
    for index, row in enumerate(rows):
        if row is None:
            continue
        if isinstance(row, (str, bytes)) or not isinstance(row, (list, tuple)):
            raise TableFormatError(
                f"Row {index} is a {type(row).__name__}, expected a list of cells."
            )
    return rows


def get_cell(row: Sequence[Any], index: Optional[int]) -> str:
    if index is None or index < 0 or index >= len(row):
        return ""
    return clean_str(row[index])


def normalize_row(row: Sequence[Any], column_map: ColumnMap) -> Optional[StandingRecord]:
    """Builds a StandingRecord from one data row, or None when season or team is missing."""
    season = get_cell(row, column_map.get("season"))
    team = get_cell(row, column_map.get("team"))
    if not season or not team:
        return None

    start_month = get_cell(row, column_map.get("start_month"))
    start_year = get_cell(row, column_map.get("start_year"))
    start_date = " ".join(part for part in (start_month, start_year) if part)

    numbers = {
        field: parse_int(get_cell(row, column_map.get(field)))
        for field in NUMERIC_FIELDS
    }
    return StandingRecord(
        season=season,
        team=team,
        manager=get_cell(row, column_map.get("manager")),
        start_date=start_date,
        **numbers,
    )


class StandingsNormalizer:
    """Turns the raw standings table into StandingRecord objects."""

    def __init__(self, aliases: Optional[Dict[str, List[str]]] = None):
        self.aliases = aliases or STANDINGS_ALIASES
        logger.debug(
            f"StandingsNormalizer initialized with {len(self.aliases)} logical fields."
        )

    def normalize(self, table: Table) -> List[StandingRecord]:
        """Normalizes a header row plus data rows into standing records.

        Args:
            table: The raw standings sheet, header first, every cell a string.

        Returns:
            A list of records in input order. Rows without a season or team are
            dropped; missing optional columns default to "" or 0.

        Raises:
            TableFormatError: If the input is not a two-dimensional table.
        """
        rows = ensure_table(table)
        if not rows or not rows[0]:
            logger.warning("Standings table is empty or has no header row.")
            return []

        header, data_rows = rows[0], rows[1:]
        column_map = map_header(header, self.aliases)
        absent = missing_fields(column_map)
        if absent:
            logger.warning(f"Standings header is missing columns: {absent}")

        records: List[StandingRecord] = []
        dropped = 0
        for row in data_rows:
            if not row:
                continue
            record = normalize_row(row, column_map)
            if record is None:
                dropped += 1
                logger.debug(f"Dropping standings row without season/team: {list(row)}")
                continue
            records.append(record)

        logger.info(
            f"Normalization complete. Produced {len(records)} standing records ({dropped} dropped)."
        )
        return records
