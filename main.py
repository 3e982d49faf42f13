import sys
import csv
from pathlib import Path
from typing import List, Optional

# --- Settings/Logging ---
from top100_archive.logging.setup import setup_logging
from top100_archive.config.settings import settings

setup_logging()

from loguru import logger

from top100_archive.calculation.aggregator import build_records
from top100_archive.calculation.pipeline import run_pipeline
from top100_archive.models.enums import Marker
from top100_archive.models.leaderboard import LeaderboardEntry
from top100_archive.normalization.normalizer import ArchiveError

from rich import print
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()

MARKER_TITLES = {
    Marker.WIN: "Win Division (Pos 1)",
    Marker.AUTO_PROMOTION: "Auto-Promotion (Pos 3 in D2-D5)",
    Marker.PLAYOFFS: "Playoffs (Pos 7 in D2-D5)",
    Marker.AVOID_RELEGATION: "Avoid Relegation (Pos 16 in D1-D4)",
    Marker.AVOID_SACKING: "Avoid Sacking (Pos 17 in all Divs)",
}


def read_csv(path: Optional[Path]) -> Optional[List[List[str]]]:
    """Reads a sheet export into a list of rows; None when the file is unavailable."""
    if path is None:
        return None
    try:
        with open(path, newline="", encoding="utf-8") as f:
            return [row for row in csv.reader(f)]
    except OSError as e:
        logger.error(f"Failed to read {path}: {e}")
        return None


def leaderboard_table(title: str, rows: List[LeaderboardEntry], limit: int = 10) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Count", justify="right")
    for i, entry in enumerate(rows[:limit], start=1):
        table.add_row(str(i), entry.key, str(entry.count))
    return table


def main() -> int:
    logger.info("Starting Top 100 archive run")

    standings_path = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.standings_csv
    winners_path = Path(sys.argv[2]) if len(sys.argv) > 2 else settings.winners_csv

    standings = read_csv(standings_path)
    if standings is None:
        logger.critical("No standings export available (set STANDINGS_CSV). Exiting.")
        return 1

    try:
        report = run_pipeline(
            standings,
            read_csv(winners_path),
            tolerant=settings.tolerant_playoff_matching,
        )
    except ArchiveError as e:
        logger.error(f"Standings export could not be processed: {e}")
        return 1

    print(
        Panel(
            f"{len(report.records)} standing records, "
            f"{report.playoff_winner_keys} play-off winners",
            title="Top 100 Archive",
        )
    )

    for label, boards in (("Team", report.by_team), ("Manager", report.by_manager)):
        console.print(leaderboard_table(f"Most titles by {label}", boards.titles))
        console.print(leaderboard_table(f"Most promotions by {label}", boards.promotions))

    for marker, rows in report.thresholds.items():
        table = Table(title=MARKER_TITLES[marker])
        for column in ("Division", "Min", "Avg", "Max", "Samples"):
            table.add_column(column, justify="right")
        for row in rows:
            table.add_row(
                f"D{row.division}", str(row.min), f"{row.avg:.1f}", str(row.max), str(row.samples)
            )
        console.print(table)

    records = build_records(
        [c.record for c in report.records], limit=settings.records_limit
    )
    best = Table(title="Best points tally per team")
    for column in ("Team", "Season", "Division", "Points"):
        best.add_column(column)
    for entry in records[:10]:
        best.add_row(
            entry.record.team,
            entry.record.season,
            str(entry.record.division),
            str(entry.value),
        )
    console.print(best)

    logger.success("Archive run complete.")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
