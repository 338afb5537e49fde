"""
Qword Byte Dumper
=================

Raw dump of an arbitrary byte buffer, eight bytes per row, each byte shown in
binary and as a decimal value. Used to show the complete input next to the
decoded frame diagram.

       +--------+--------+--------+--------+--------+--------+--------+--------+
 Bytes | Byte 0 | Byte 1 | Byte 2 | Byte 3 | Byte 4 | Byte 5 | Byte 6 | Byte 7 |
+------+--------+--------+--------+--------+--------+--------+--------+--------+
|QWORD |10000001|
|  1   |   (129)|
+------+--------+
"""

import logging
from typing import Optional

from wsframe_inspector.rendering.bits import BITS_IN_BYTE, delim
from wsframe_inspector.rendering.theme import PLAIN_THEME, StyleTheme


logger = logging.getLogger(__name__)


BYTES_IN_QWORD = 8
BYTE_COLUMN = "--------+"


def format_qword_table_header(theme: StyleTheme = PLAIN_THEME) -> str:
    """Top border, column titles and separator of the qword table."""
    pipe = theme.paint("|", "border")
    titles = "".join(
        theme.paint(f" Byte {i} ", "title") + pipe for i in range(BYTES_IN_QWORD)
    )
    return (
        "       " + theme.paint("+" + BYTE_COLUMN * BYTES_IN_QWORD, "border") + "\n"
        + " " + theme.paint("Bytes", "title") + " " + pipe + titles + "\n"
        + theme.paint("+------+" + BYTE_COLUMN * BYTES_IN_QWORD, "border") + "\n"
    )


def format_qword_row(
    qword_number: int,
    data: bytes,
    num_bytes: int,
    theme: StyleTheme = PLAIN_THEME,
) -> str:
    """
    Render one row of up to eight bytes.

    Args:
        qword_number: Row number (1-based)
        data: Bytes of this row
        num_bytes: Number of bytes the row is expected to hold
        theme: Colours to apply

    Returns:
        Three newline-terminated lines, or an inline error marker when data
        does not hold exactly num_bytes bytes
    """
    if len(data) != num_bytes:
        logger.warning(
            f"QWORD {qword_number}: expected {num_bytes} bytes, got {len(data)}"
        )
        return f"ERROR: Data must contain exactly {num_bytes} bytes. QWORD: {qword_number}\n"

    pipe = theme.paint("|", "border")
    bits = "".join(
        theme.paint(f"{byte:0>{BITS_IN_BYTE}b}", "bit") + pipe for byte in data
    )
    values = "".join(
        theme.paint(f"{delim(byte):>{BITS_IN_BYTE}}", "byte_value") + pipe for byte in data
    )
    return (
        pipe + theme.paint("QWORD ", "title") + pipe + bits + "\n"
        + pipe + theme.paint(f"{qword_number:^6}", "title") + pipe + values + "\n"
        + theme.paint("+------+" + BYTE_COLUMN * num_bytes, "border") + "\n"
    )


def format_qword_table(data: bytes, theme: Optional[StyleTheme] = None) -> str:
    """
    Dump a byte buffer as a qword table.

    Args:
        data: Any bytes-like buffer
        theme: Colours to apply (no colour when omitted)

    Returns:
        Newline-terminated table text. A buffer whose length is a multiple of
        eight has no trailing partial row.
    """
    theme = theme if theme is not None else PLAIN_THEME
    data = bytes(data)
    result = format_qword_table_header(theme)

    full_rows, remainder = divmod(len(data), BYTES_IN_QWORD)
    for i in range(full_rows):
        start = i * BYTES_IN_QWORD
        result += format_qword_row(i + 1, data[start:start + BYTES_IN_QWORD], BYTES_IN_QWORD, theme)

    if remainder:
        start = full_rows * BYTES_IN_QWORD
        result += format_qword_row(full_rows + 1, data[start:], remainder, theme)

    return result
