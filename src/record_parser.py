"""
Parsing of raw table rows into coordinate records.

Each data row carries (x, character, y) in its first three cells. Rows whose
coordinates are not plain base-10 integers are dropped without raising; bad
rows are expected noise in hand-edited documents.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits only. int() alone would also accept
# underscores and non-ASCII digits.
INTEGER_PATTERN = re.compile(r'^[+-]?[0-9]+$')


@dataclass(frozen=True)
class CoordinateRecord:
    """A single character placed at (x, y) on the grid."""
    x: int
    y: int
    character: str

    def __str__(self) -> str:
        return f"X: {self.x}, Char: '{self.character}', Y: {self.y}"


def parse_coordinate(text: str) -> Optional[int]:
    """
    Parse a trimmed coordinate cell.

    Returns:
        int or None: The value, or None if the text is not a signed base-10 integer
    """
    if text is None:
        return None
    text = text.strip()
    if not INTEGER_PATTERN.match(text):
        return None
    return int(text)


def parse_row(cells: Sequence[str]) -> Optional[CoordinateRecord]:
    """
    Build a record from one row's cell texts, or return None if the row is malformed.
    """
    if len(cells) < 3:
        return None

    x_text, char_text, y_text = cells[0], cells[1], cells[2]
    x = parse_coordinate(x_text)
    y = parse_coordinate(y_text)
    if x is None or y is None:
        return None

    return CoordinateRecord(x=x, y=y, character=(char_text or '').strip())


def parse_records(rows: Iterable[Sequence[str]]) -> List[CoordinateRecord]:
    """
    Convert raw rows into records, preserving input order.

    Args:
        rows: Cell-text tuples, typically from TableExtractor.iter_rows()

    Returns:
        List[CoordinateRecord]: One record per well-formed row
    """
    records = []
    skipped = 0

    for cells in rows:
        record = parse_row(cells)
        if record is None:
            skipped += 1
            logger.debug(f"parse_records(): Discarding malformed row: {tuple(cells)}")
            continue
        records.append(record)

    logger.info(f"parse_records(): Parsed {len(records)} records, skipped {skipped} malformed rows")
    return records
