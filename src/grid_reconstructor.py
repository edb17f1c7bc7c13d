"""
Reconstruction of the dense character grid from sparse coordinate records.

Classes:
    GridBounds: Bounding box over all record coordinates
    GridReconstructor: Renders records as a rectangular character grid

The grid covers the empirical bounding box of the records, so negative or
offset coordinates need no special handling. Duplicate positions resolve to
the last record seen.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from record_parser import CoordinateRecord


@dataclass(frozen=True)
class GridBounds:
    """Inclusive axis-aligned bounding box."""
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


def compute_bounds(records: Sequence[CoordinateRecord]) -> Optional[GridBounds]:
    """Return the bounding box of the records, or None when there are none."""
    if not records:
        return None
    xs = [record.x for record in records]
    ys = [record.y for record in records]
    return GridBounds(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))


def build_lookup(records: Sequence[CoordinateRecord]) -> Dict[Tuple[int, int], str]:
    """Map (x, y) to character; later records overwrite earlier ones."""
    lookup = {}
    for record in records:
        lookup[(record.x, record.y)] = record.character
    return lookup


class GridReconstructor:
    """
    Builds the spatial view of a record set.

    Every render method returns None for an empty record set ("no data"),
    which callers report rather than treat as an error.
    """

    DEFAULT_PLACEHOLDER = ' '

    def __init__(self, placeholder: str = DEFAULT_PLACEHOLDER, logger: Optional[logging.Logger] = None):
        """
        Initialize GridReconstructor.

        Args:
            placeholder (str): Text emitted for positions with no record
            logger (logging.Logger, optional): Logger instance
        """
        self.placeholder = placeholder
        self.logger = logger or logging.getLogger(__name__)

    def reconstruct(self, records: Sequence[CoordinateRecord]) -> Optional[List[str]]:
        """
        Produce the grid as a list of row strings, top row (min_y) first.

        Args:
            records: Coordinate records in input order

        Returns:
            Optional[List[str]]: One string per y in the bounding box, or None if empty
        """
        bounds = compute_bounds(records)
        if bounds is None:
            self.logger.info("reconstruct(): No records, no grid data")
            return None

        lookup = build_lookup(records)
        self.logger.info(
            f"reconstruct(): {len(lookup)} distinct positions from {len(records)} records, "
            f"grid {bounds.width}x{bounds.height} "
            f"(x {bounds.min_x}..{bounds.max_x}, y {bounds.min_y}..{bounds.max_y})"
        )

        rows = []
        for y in range(bounds.min_y, bounds.max_y + 1):
            rows.append(''.join(
                lookup.get((x, y), self.placeholder)
                for x in range(bounds.min_x, bounds.max_x + 1)
            ))
        return rows

    def render(self, records: Sequence[CoordinateRecord]) -> Optional[str]:
        """Return the grid as newline-separated rows, or None if there is no data."""
        rows = self.reconstruct(records)
        if rows is None:
            return None
        return '\n'.join(rows)

    def render_annotated(self, records: Sequence[CoordinateRecord]) -> Optional[str]:
        """
        Return the grid with every position labelled by coordinate and code point.

        Occupied cells read "[x,y] 'c' (U+XXXX)" using the first code point of the
        character text (0000 when empty); unoccupied cells read "[x,y] (empty)".
        Each cell is followed by a tab.
        """
        bounds = compute_bounds(records)
        if bounds is None:
            return None

        lookup = build_lookup(records)
        rows = []
        for y in range(bounds.min_y, bounds.max_y + 1):
            cells = []
            for x in range(bounds.min_x, bounds.max_x + 1):
                if (x, y) in lookup:
                    character = lookup[(x, y)]
                    code_point = ord(character[0]) if character else 0
                    cells.append(f"[{x},{y}] '{character}' (U+{code_point:04X})\t")
                else:
                    cells.append(f"[{x},{y}] (empty)\t")
            rows.append(''.join(cells))
        return '\n'.join(rows)
