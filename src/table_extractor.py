"""
Table extraction from published HTML documents.

Locates the first <table> in a document and yields the text of each data row's
cells. BeautifulSoup does the parsing; the module only decides which rows are
eligible.

Classes:
    TableExtractor: Yields cell-text tuples from the first table of a document

Key responsibilities:
    - Find the first table in document order
    - Walk rows and header/data cells in document order
    - Skip rows too short to carry a coordinate, and the header row
"""

import logging
from typing import Iterator, Optional, Tuple

from bs4 import BeautifulSoup


class TableExtractor:
    """
    Pulls raw row text out of the first table of an HTML document.
    """

    CELL_TAGS = ['th', 'td']

    # A row needs x, character and y cells to be eligible
    MIN_CELLS = 3

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize TableExtractor.

        Args:
            logger (logging.Logger, optional): Logger instance for logging extraction details
        """
        self.logger = logger or logging.getLogger(__name__)

    def iter_rows(self, html_content: str) -> Iterator[Tuple[str, ...]]:
        """
        Yield the cell texts of every eligible, non-header row of the first table.

        A missing table is not an error; the generator is simply empty.

        Args:
            html_content (str): Raw HTML document

        Yields:
            Tuple[str, ...]: Text of each cell in the row, in document order
        """
        soup = BeautifulSoup(html_content or '', 'html.parser')

        table = soup.find('table')
        if table is None:
            self.logger.info("iter_rows(): No table found in document")
            return

        rows = table.find_all('tr')
        if not rows:
            self.logger.info("iter_rows(): Table has no rows")
            return

        header_skipped = False
        short_rows = 0
        yielded = 0

        for row in rows:
            cells = row.find_all(self.CELL_TAGS)
            if len(cells) < self.MIN_CELLS:
                short_rows += 1
                continue

            if not header_skipped:
                header_skipped = True
                self.logger.debug(f"iter_rows(): Skipping header row: {self._cell_texts(cells)}")
                continue

            yielded += 1
            yield self._cell_texts(cells)

        self.logger.info(
            f"iter_rows(): {len(rows)} rows in table, {yielded} data rows, "
            f"{short_rows} skipped as too short"
        )

    @staticmethod
    def _cell_texts(cells) -> Tuple[str, ...]:
        return tuple(cell.get_text() for cell in cells)
