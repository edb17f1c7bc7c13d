"""Tests for linear message decoding."""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from message_decoder import decode_message, order_records
from record_parser import CoordinateRecord as R


class TestDecodeMessage:
    """Test suite for decode_message()."""

    def test_empty_records_give_empty_message(self):
        """Test no records decode to an empty string."""
        assert decode_message([]) == ""

    def test_column_major_order(self):
        """Test records are read by x first, then y."""
        records = [R(0, 0, "H"), R(1, 0, "I"), R(0, 1, "!")]
        assert decode_message(records) == "H!I"

    def test_smaller_y_first_within_column_regardless_of_input_order(self):
        """Verify smaller y precedes within a column regardless of input order."""
        records = [R(2, 5, "b"), R(2, 1, "a")]
        assert decode_message(records) == "ab"

    def test_duplicates_contribute_both_in_input_order(self):
        """Test duplicate coordinates contribute both characters in input order."""
        records = [R(1, 1, "z"), R(0, 0, "A"), R(0, 0, "B")]
        assert decode_message(records) == "ABz"

    def test_full_character_text_used(self):
        """Test the full character text is concatenated."""
        assert decode_message([R(1, 0, "cd"), R(0, 0, "ab")]) == "abcd"

    def test_negative_coordinates_sort_first(self):
        """Test negative x sorts before zero."""
        assert decode_message([R(0, 0, "b"), R(-1, 3, "a")]) == "ab"

    def test_input_is_not_mutated(self):
        """Verify decoding does not reorder the caller's list."""
        records = [R(1, 0, "b"), R(0, 0, "a")]
        decode_message(records)
        assert records == [R(1, 0, "b"), R(0, 0, "a")]


class TestOrderRecords:
    """Test suite for order_records()."""

    def test_returns_new_list(self):
        """Test order_records() returns a new list."""
        records = [R(0, 0, "a")]
        ordered = order_records(records)
        assert ordered == records
        assert ordered is not records

    def test_stable_for_equal_keys(self):
        """Verify equal keys keep their input order."""
        first, second = R(3, 3, "first"), R(3, 3, "second")
        assert order_records([second, first]) == [second, first]
