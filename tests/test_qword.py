"""
Tests for the qword byte dumper.
"""

import pytest

from wsframe_inspector.rendering import DEFAULT_THEME, format_qword_table
from wsframe_inspector.rendering.qword import format_qword_row, format_qword_table_header


TABLE_HEADER = (
    "       +--------+--------+--------+--------+--------+--------+--------+--------+\n"
    " Bytes | Byte 0 | Byte 1 | Byte 2 | Byte 3 | Byte 4 | Byte 5 | Byte 6 | Byte 7 |\n"
    "+------+--------+--------+--------+--------+--------+--------+--------+--------+\n"
)


class TestQwordTable:
    """Tests for format_qword_table."""

    def test_header(self):
        assert format_qword_table_header() == TABLE_HEADER

    def test_single_byte(self):
        assert format_qword_table(bytes([129])) == TABLE_HEADER + (
            "|QWORD |10000001|\n"
            "|  1   |   (129)|\n"
            "+------+--------+\n"
        )

    def test_full_row_has_no_trailing_row(self):
        table = format_qword_table(bytes(range(8)))
        assert table.count("QWORD") == 1
        assert table.endswith("+------+" + "--------+" * 8 + "\n")

    def test_partial_last_row(self):
        table = format_qword_table(bytes(range(9)))
        lines = table.splitlines()
        assert lines[3] == "|QWORD |00000000|00000001|00000010|00000011|00000100|00000101|00000110|00000111|"
        assert lines[4] == "|  1   |     (0)|     (1)|     (2)|     (3)|     (4)|     (5)|     (6)|     (7)|"
        assert lines[6] == "|QWORD |00001000|"
        assert lines[7] == "|  2   |     (8)|"
        assert lines[8] == "+------+--------+"

    def test_empty_buffer_is_header_only(self):
        assert format_qword_table(b"") == TABLE_HEADER

    def test_accepts_memoryview(self):
        assert format_qword_table(memoryview(b"\x81")) == format_qword_table(b"\x81")

    def test_themed_table_is_coloured(self):
        assert "\x1b[" in format_qword_table(b"\x81", DEFAULT_THEME)


class TestQwordRow:
    """Tests for format_qword_row."""

    def test_size_mismatch_is_inline_error(self):
        assert format_qword_row(3, b"\x01\x02", 3) == (
            "ERROR: Data must contain exactly 3 bytes. QWORD: 3\n"
        )

    @pytest.mark.parametrize("num_bytes", [1, 4, 8])
    def test_row_width(self, num_bytes):
        row = format_qword_row(1, bytes(num_bytes), num_bytes)
        for line in row.splitlines():
            assert len(line) == 8 + 9 * num_bytes
