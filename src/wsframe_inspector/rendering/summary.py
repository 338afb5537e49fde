"""
Frame Summary
=============

One-line description of a decoded frame, printed above the diagram on request.

    Text (0x1) FIN=1 RSV=000 Short length 3 key=5a0e9136 payload='abc'
"""

from typing import Optional

from wsframe_inspector.models.frame import WebSocketFrame
from wsframe_inspector.rendering.bits import bit_str
from wsframe_inspector.rendering.theme import PLAIN_THEME, StyleTheme


# Longest payload preview before truncating with "..."
MAX_PREVIEW_CHARS = 32


def format_summary(frame: WebSocketFrame, theme: Optional[StyleTheme] = None) -> str:
    """
    Summarize a frame on a single newline-terminated line.

    Args:
        frame: Decoded frame
        theme: Colours to apply; the opcode label uses theme.opcode_colors

    Returns:
        Summary line
    """
    theme = theme if theme is not None else PLAIN_THEME
    preview = "".join(frame.payload_chars[:MAX_PREVIEW_CHARS])
    if len(frame.payload_chars) > MAX_PREVIEW_CHARS:
        preview += "..."
    rsv = bit_str(frame.rsv1) + bit_str(frame.rsv2) + bit_str(frame.rsv3)

    return (
        f"{theme.paint_opcode(frame.opcode.value, frame.opcode)} "
        f"(0x{frame.opcode_bits:X}) "
        f"FIN={bit_str(frame.fin)} RSV={rsv} "
        f"{frame.payload_length.label} length {frame.payload_length.value} "
        f"key={frame.masking_key.hex()} "
        f"payload={theme.paint(repr(preview), 'char_preview')}\n"
    )
