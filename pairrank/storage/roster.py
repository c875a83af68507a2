"""
Roster ingestion and result persistence.

Rosters are CSV-ish text files with one entity per line:

    Alice
    Bob, goalie
    # comments and blank lines are ignored

Results are written as CSV with a header row.
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from pairrank.core.types import Entity, RatingVector

logger = logging.getLogger(__name__)

GOALIE_MARKERS = {"goalie", "goalkeeper", "g", "gk", "true", "yes", "1"}


class RosterStore:
    """
    File-backed roster and results.

    Paths default to the global Settings (`PAIRRANK_ROSTER_PATH`,
    `PAIRRANK_RESULTS_PATH`).
    """

    def __init__(
        self,
        roster_path: Optional[Union[str, Path]] = None,
        results_path: Optional[Union[str, Path]] = None
    ):
        if roster_path is None or results_path is None:
            from pairrank.config.settings import get_settings
            settings = get_settings()
            roster_path = roster_path or settings.roster_path
            results_path = results_path or settings.results_path

        self.roster_path = Path(roster_path)
        self.results_path = Path(results_path)

    def load_entities(self) -> List[Tuple[str, bool]]:
        """
        Read `(name, is_goalie)` records from the roster file.

        Raises:
            FileNotFoundError: If the roster file does not exist
            ValueError: If a name appears twice
        """
        records: List[Tuple[str, bool]] = []
        seen = set()

        with self.roster_path.open(newline="", encoding="utf-8") as f:
            for line_no, row in enumerate(csv.reader(f), start=1):
                if not row or not row[0].strip() or row[0].lstrip().startswith("#"):
                    continue
                name = row[0].strip()
                is_goalie = len(row) > 1 and row[1].strip().lower() in GOALIE_MARKERS
                if name in seen:
                    raise ValueError(f"{self.roster_path}:{line_no}: duplicate name {name!r}")
                seen.add(name)
                records.append((name, is_goalie))

        logger.info(f"Loaded {len(records)} entities from {self.roster_path}")
        return records

    def store_results(
        self,
        rows: Iterable[Sequence],
        header: Optional[Sequence[str]] = None
    ) -> int:
        """
        Write `(name, rating, ...)` rows.

        Returns:
            Number of rows written (excluding the header)
        """
        self.results_path.parent.mkdir(parents=True, exist_ok=True)
        count = 0
        with self.results_path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            if header:
                writer.writerow(header)
            for row in rows:
                writer.writerow(row)
                count += 1

        logger.info(f"Stored {count} results in {self.results_path}")
        return count


def build_entities(records: Iterable[Tuple[str, bool]]) -> List[Entity]:
    """Assign stable indices to `(name, is_goalie)` records."""
    return [
        Entity(index=i, name=name, is_goalie=bool(is_goalie))
        for i, (name, is_goalie) in enumerate(records)
    ]


def result_rows(*vectors: RatingVector) -> List[Tuple]:
    """
    Combine rating vectors over the same entities into `(name, r1, r2, ...)` rows,
    highest first by the first vector.
    """
    if not vectors:
        return []
    primary = vectors[0]
    for vector in vectors[1:]:
        if vector.entities != primary.entities:
            raise ValueError("Rating vectors cover different entities")

    return [
        (entity.name,) + tuple(vector[entity] for vector in vectors)
        for entity, _ in primary.ranked()
    ]


def result_header(*vectors: RatingVector) -> List[str]:
    return ["name"] + [vector.attribute for vector in vectors]
