"""
Linear decoding of coordinate records into the secret message.

Records are read in (x, y) order: column by column, top to bottom within a
column. Duplicated coordinates are not collapsed, so both characters appear.
"""

import logging
from typing import List, Sequence

from record_parser import CoordinateRecord

logger = logging.getLogger(__name__)


def decode_key(record: CoordinateRecord):
    return (record.x, record.y)


def order_records(records: Sequence[CoordinateRecord]) -> List[CoordinateRecord]:
    """Return a new list sorted by x then y; ties keep input order."""
    return sorted(records, key=decode_key)


def decode_message(records: Sequence[CoordinateRecord]) -> str:
    """
    Concatenate record characters in decode order.

    Args:
        records: Coordinate records; not modified

    Returns:
        str: The decoded message, empty when there are no records
    """
    message = ''.join(record.character for record in order_records(records))
    logger.info(f"decode_message(): Decoded {len(message)} chars from {len(records)} records")
    return message
