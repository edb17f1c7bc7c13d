"""
Decode the secret message hidden in a published coordinate table.

This script fetches the document named in config/config.yaml, extracts the
first table, parses each row into an (x, character, y) record and prints:

    - every parsed record,
    - the "Secret Message:" header (optionally followed by the decoded message),
    - the reconstructed character grid.

Classes:
    DecodeResult: Records plus both decoded views of one document
    SecretMessagePipeline: Fetch-and-decode driver configured from YAML

Functions:
    decode_document(html, placeholder): Pure decode of an HTML document
    format_report(result, ...): Console report text
    main(): Script entry point

Usage:
    python src/secret_message.py
"""

import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from dotenv import load_dotenv

# Add this directory to path for imports when run as a script
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config_manager import ConfigManager
from document_fetcher import DocumentFetcher, DocumentFetchError
from grid_reconstructor import GridBounds, GridReconstructor, compute_bounds
from logging_config import resolve_level, setup_logging
from message_decoder import decode_message
from record_parser import CoordinateRecord, parse_records
from table_extractor import TableExtractor

NO_RECORDS_NOTICE = "No table or data found in the document."
NO_GRID_NOTICE = "No grid data to display."


@dataclass(frozen=True)
class DecodeResult:
    """Everything decoded from one document."""
    records: Tuple[CoordinateRecord, ...]
    message: str
    grid: Optional[str]
    bounds: Optional[GridBounds]

    @property
    def has_data(self) -> bool:
        return bool(self.records)


def decode_document(html_content: str, placeholder: str = GridReconstructor.DEFAULT_PLACEHOLDER) -> DecodeResult:
    """
    Decode an HTML document into records, message and grid.

    A document without a usable table yields an empty result, never an exception.

    Args:
        html_content (str): Raw HTML
        placeholder (str): Grid text for unoccupied positions

    Returns:
        DecodeResult: Both views of the same record set
    """
    records = tuple(parse_records(TableExtractor().iter_rows(html_content)))

    reconstructor = GridReconstructor(placeholder=placeholder)
    return DecodeResult(
        records=records,
        message=decode_message(records),
        grid=reconstructor.render(records),
        bounds=compute_bounds(records),
    )


def format_report(result: DecodeResult, echo_message: bool = False, show_unicode: bool = False) -> str:
    """
    Build the console report for a decode result.

    Args:
        result (DecodeResult): Decoded document
        echo_message (bool): Print the decoded message after its header
        show_unicode (bool): Use the coordinate/code point grid instead of the plain one

    Returns:
        str: Report text, newline-terminated
    """
    lines = ["Grid Cells:"]
    if result.has_data:
        lines.extend(str(record) for record in result.records)
    else:
        lines.append(NO_RECORDS_NOTICE)

    lines.append("")
    lines.append(f"Secret Message: {result.message}" if echo_message else "Secret Message:")

    # The annotated view is only built when asked for
    if show_unicode:
        header = "Grid of Characters (Unicode and Coordinates):"
        grid = GridReconstructor().render_annotated(result.records)
    else:
        header = "Grid of Unicode Characters:"
        grid = result.grid

    if grid is None:
        lines.append(NO_GRID_NOTICE)
    else:
        lines.extend(["", header])
        lines.extend(grid.split('\n'))

    return '\n'.join(lines) + '\n'


class SecretMessagePipeline:
    """
    Fetches the configured document and decodes it.
    """

    def __init__(self, config: Dict[str, Any], fetcher: Optional[DocumentFetcher] = None):
        """
        Initialize SecretMessagePipeline.

        Args:
            config (dict): Parsed config.yaml
            fetcher (DocumentFetcher, optional): Fetcher to use instead of one built from config
        """
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

        document_config = config.get('document') or {}
        self.url = document_config.get('url')
        self.fetcher = fetcher or DocumentFetcher(
            timeout=document_config.get('timeout', DocumentFetcher.DEFAULT_TIMEOUT),
            logger=self.logger,
        )

        grid_config = config.get('grid') or {}
        self.placeholder = grid_config.get('placeholder', GridReconstructor.DEFAULT_PLACEHOLDER)
        self.show_unicode = bool(grid_config.get('show_unicode', False))

        output_config = config.get('output') or {}
        self.echo_message = bool(output_config.get('echo_message', False))

    def run(self) -> DecodeResult:
        """
        Fetch the document and decode it.

        Raises:
            DocumentFetchError: If the document cannot be retrieved
        """
        if not self.url:
            raise ValueError("document.url is not configured")

        html_content = self.fetcher.fetch(self.url)
        result = decode_document(html_content, placeholder=self.placeholder)

        if result.has_data:
            self.logger.info(
                f"run(): Decoded {len(result.records)} records into a "
                f"{result.bounds.width}x{result.bounds.height} grid"
            )
        else:
            self.logger.warning(f"run(): No coordinate records found at {self.url}")
        return result

    def report(self, result: DecodeResult) -> str:
        return format_report(result, echo_message=self.echo_message, show_unicode=self.show_unicode)


def main():
    """
    Script entry point: fetch, decode and print the report.
    """
    load_dotenv()

    ConfigManager.validate_required(['document'])
    config = ConfigManager.get_instance().config

    setup_logging('secret_message', level=resolve_level(ConfigManager.get('logging.level')))
    logger = logging.getLogger(__name__)

    start_time = datetime.now()
    logger.info(f"\n\nsecret_message.py starting at {start_time}")

    pipeline = SecretMessagePipeline(config)
    try:
        result = pipeline.run()
    except DocumentFetchError as e:
        logger.error(f"main(): Fatal fetch error: {e}")
        raise

    print(pipeline.report(result), end='')

    logger.info(f"main(): Finished, total time taken: {datetime.now() - start_time}\n\n")
    return result


if __name__ == "__main__":
    main()
