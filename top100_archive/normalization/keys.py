# top100_archive/normalization/keys.py
"""Comparison keys for joining the standings and winners tables.

The two sheets are maintained by different people, so team names are
compared through a lossy canonical form: "Atlético FC (ESP)" and "Atletico"
both become "atletico".
"""
import re
import unicodedata
from typing import Any, List, Tuple

CLUB_STOP_WORDS = re.compile(r"\b(fc|cf|afc|sc|club)\b", re.IGNORECASE)
PARENTHETICAL = re.compile(r"\([^)]*\)")
NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
FIRST_DIGITS = re.compile(r"\d+")

# Leading tokens the tolerant key may drop ("Real Betis" -> "betis")
LOOSE_PREFIXES = frozenset(
    {
        "rcd", "real", "rb", "ac", "as", "ss", "ud", "sd", "cd", "cf",
        "fc", "sc", "afc", "ssc", "psv", "deportivo", "club",
    }
)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_division(raw: Any) -> str:
    """First run of digits ("Division 3" -> "3"), else the trimmed raw value."""
    text = _text(raw)
    match = FIRST_DIGITS.search(text)
    return match.group(0) if match else text.strip()


def normalize_season(raw: Any) -> str:
    text = _text(raw)
    match = FIRST_DIGITS.search(text)
    return match.group(0) if match else text.strip()


def season_sort_key(raw: Any) -> Tuple[int, int, str]:
    """Numeric seasons first, in numeric order; anything else after, by text."""
    text = _text(raw).strip()
    match = FIRST_DIGITS.search(text)
    if match:
        return (0, int(match.group(0)), text)
    return (1, 0, text)


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_team_name(raw: Any) -> str:
    text = PARENTHETICAL.sub(" ", _text(raw))
    text = CLUB_STOP_WORDS.sub(" ", text)
    text = strip_diacritics(text).lower()
    return NON_ALPHANUMERIC.sub(" ", text).strip()


def strip_prefixes(name: str) -> str:
    """Drops up to two leading club-type or very short tokens, never the whole name."""
    tokens = [token for token in name.split(" ") if token]
    i = 0
    while i < len(tokens) and i < 2 and (tokens[i] in LOOSE_PREFIXES or len(tokens[i]) <= 3):
        i += 1
    return " ".join(tokens[i:]).strip() or name


def build_key(season: Any, division: Any, team: Any) -> str:
    return f"{_text(season).strip()}|{normalize_division(division)}|{normalize_team_name(team)}"


def build_loose_key(season: Any, division: Any, team: Any) -> str:
    loose_name = strip_prefixes(normalize_team_name(team))
    return f"{_text(season).strip()}|{normalize_division(division)}|{loose_name}"


def manager_keys(manager: Any) -> List[str]:
    """Grouping keys for a manager cell: the full string plus each "/"-separated name."""
    full = _text(manager).strip()
    if not full:
        return []
    keys = [full]
    for part in full.split("/"):
        name = part.strip()
        if name and name not in keys:
            keys.append(name)
    return keys
