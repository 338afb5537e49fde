"""
Frame Diagram Renderer
======================

Renders a decoded WebSocketFrame as a bit-level table.

Output Structure:
    1. Header block (byte columns, masked / length-variant labels, ruler)
    2. Fixed header rows, laid out per length variant:

       Short  DWORD 1: header bits | masking key (part 1)
              DWORD 2: masking key (part 2) | payload bytes 0-1
       Medium DWORD 1: header bits | extended length (16 bits)
              DWORD 2: masking key (32 bits)
       Long   DWORD 1: header bits | extended length (part 1)
              DWORD 2: extended length (part 2)
              DWORD 3: extended length (part 3) | masking key (part 1)
              DWORD 4: masking key (part 2) | payload bytes 0-1

    3. Payload body: the bytes not folded into the fixed rows, four per
       DWORD row, with a final 1-3 byte row for any remainder

Numbering:
    - DWORD numbers continue directly after the fixed rows
    - Payload part numbers count byte pairs: bytes 0-1 are part 1, bytes 2-3
      part 2, and so on; a row is labelled with the pair of its first byte

Example:
    from wsframe_inspector.decoding import decode_frame
    from wsframe_inspector.rendering import format_frame

    frame = decode_frame(bytes.fromhex("81835a0e91363b6cf2"))
    print(format_frame(frame), end="")
"""

import logging
from typing import List, Optional

from wsframe_inspector.decoding.errors import UnsupportedFrameError
from wsframe_inspector.models.frame import WebSocketFrame
from wsframe_inspector.models.payload_length import LongLength, MediumLength, ShortLength
from wsframe_inspector.rendering.header import format_header_block
from wsframe_inspector.rendering.rows import assemble_row, format_border, format_payload_row
from wsframe_inspector.rendering.segments import (
    BYTES_IN_DWORD,
    Segment,
    blank_segment,
    field_segment,
    header_bits_segment,
    payload_segment,
)
from wsframe_inspector.rendering.theme import PLAIN_THEME, StyleTheme


logger = logging.getLogger(__name__)


# Payload bytes drawn inside the fixed rows of Short and Long frames
HEADER_FOLDED_PAYLOAD = 2


class FrameDiagramRenderer:
    """
    Renders frames with an injected StyleTheme.

    The renderer holds no per-frame state, so one instance can render any
    number of frames.

    Attributes:
        theme: Colours applied to every rendered piece

    Example:
        renderer = FrameDiagramRenderer(PLAIN_THEME)
        text = renderer.render(frame)
    """

    def __init__(self, theme: Optional[StyleTheme] = None) -> None:
        self.theme = theme if theme is not None else PLAIN_THEME

    def render(self, frame: WebSocketFrame) -> str:
        """
        Render the full diagram.

        Args:
            frame: Decoded frame

        Returns:
            Newline-terminated diagram text

        Raises:
            UnsupportedFrameError: If the frame carries an unknown length variant
        """
        fixed_rows = self.fixed_rows(frame)
        folded = self.folded_payload_size(frame)

        result = format_header_block(frame, self.theme)
        result += format_border(fixed_rows[0], self.theme)
        for dword_number, segments in enumerate(fixed_rows, start=1):
            result += assemble_row(segments, dword_number, self.theme)
        result += self.format_payload_body(frame, folded, len(fixed_rows) + 1)
        return result

    # =========================================================================
    # Fixed Header Rows
    # =========================================================================

    def folded_payload_size(self, frame: WebSocketFrame) -> int:
        """Number of payload byte slots drawn inside the fixed rows."""
        length = frame.payload_length
        if isinstance(length, (ShortLength, LongLength)):
            return HEADER_FOLDED_PAYLOAD
        if isinstance(length, MediumLength):
            return 0
        raise UnsupportedFrameError(f"Unknown payload length variant: {length!r}")

    def fixed_rows(self, frame: WebSocketFrame) -> List[List[Segment]]:
        """
        Lay out the header fields for the frame's length variant.

        Returns:
            One list of segments per fixed DWORD row
        """
        theme = self.theme
        length = frame.payload_length
        key = frame.masking_key
        header = header_bits_segment(frame, theme)

        if isinstance(length, ShortLength):
            return [
                [header, field_segment(key[0:2], "Masking-key (part 1)", "(16 bits)", theme)],
                [
                    field_segment(key[2:4], "Masking-key (part 2)", "(16 bits)", theme),
                    *self._header_payload_segments(frame),
                ],
            ]

        if isinstance(length, MediumLength):
            extension = length.extension_bytes()
            return [
                [
                    header,
                    field_segment(
                        extension, "Extended payload length", "(16 bits)", theme,
                        note=f"({length.value})",
                    ),
                ],
                [field_segment(key, "Masking-key", "(32 bits)", theme)],
            ]

        if isinstance(length, LongLength):
            extension = length.extension_bytes()
            return [
                [header, field_segment(extension[0:2], "Extended payload len (part 1)", "(16 bits)", theme)],
                [field_segment(extension[2:6], "Extended payload len (part 2)", "(32 bits)", theme)],
                [
                    field_segment(
                        extension[6:8], "Extended payload len (part 3)", "(16 bits)", theme,
                        note=f"({length.value})",
                    ),
                    field_segment(key[0:2], "Masking-key (part 1)", "(16 bits)", theme),
                ],
                [
                    field_segment(key[2:4], "Masking-key (part 2)", "(16 bits)", theme),
                    *self._header_payload_segments(frame),
                ],
            ]

        raise UnsupportedFrameError(f"Unknown payload length variant: {length!r}")

    def _header_payload_segments(self, frame: WebSocketFrame) -> List[Segment]:
        available = min(len(frame.masked_payload), HEADER_FOLDED_PAYLOAD)
        segments = []
        if available:
            segments.append(
                payload_segment(frame, 0, available, part_number=1, theme=self.theme, split=False)
            )
        if available < HEADER_FOLDED_PAYLOAD:
            segments.append(blank_segment(HEADER_FOLDED_PAYLOAD - available, self.theme))
        return segments

    # =========================================================================
    # Payload Body
    # =========================================================================

    def format_payload_body(self, frame: WebSocketFrame, folded: int, first_dword: int) -> str:
        """
        Render the payload bytes not folded into the fixed rows.

        Args:
            frame: Decoded frame
            folded: Payload bytes already drawn in the fixed rows
            first_dword: DWORD number of the first body row

        Returns:
            Rendered rows (empty when nothing is left)
        """
        remaining = max(len(frame.masked_payload) - folded, 0)
        full_rows, remainder = divmod(remaining, BYTES_IN_DWORD)

        result = ""
        for i in range(full_rows):
            from_byte_ix = folded + i * BYTES_IN_DWORD
            result += format_payload_row(
                frame,
                from_byte_ix,
                from_byte_ix + BYTES_IN_DWORD,
                first_dword + i,
                part_number_for(from_byte_ix),
                self.theme,
            )

        if remainder:
            from_byte_ix = folded + full_rows * BYTES_IN_DWORD
            result += format_payload_row(
                frame,
                from_byte_ix,
                from_byte_ix + remainder,
                first_dword + full_rows,
                part_number_for(from_byte_ix),
                self.theme,
            )

        logger.debug(
            f"Rendered {full_rows + (1 if remainder else 0)} payload rows "
            f"for {len(frame.masked_payload)} payload bytes"
        )
        return result


def part_number_for(from_byte_ix: int) -> int:
    """Payload label number of a row starting at from_byte_ix."""
    return from_byte_ix // 2 + 1


def format_frame(frame: WebSocketFrame, theme: Optional[StyleTheme] = None) -> str:
    """
    Render a decoded frame as a diagram.

    Args:
        frame: Decoded frame
        theme: Colours to apply (no colour when omitted)

    Returns:
        Newline-terminated diagram text
    """
    return FrameDiagramRenderer(theme).render(frame)
