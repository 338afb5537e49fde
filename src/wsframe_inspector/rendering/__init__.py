"""
Rendering Module
================

Text output for decoded frames.

This module provides:
    - FrameDiagramRenderer / format_frame: Bit-level frame diagram
    - format_payload_row: Single payload DWORD row (inline error on bad ranges)
    - format_qword_table: Raw eight-bytes-per-row dump of any buffer
    - format_summary: One-line frame description
    - StyleTheme, Color, get_theme: Injected colour themes

DESIGN RULES:
    - Rendering never changes decoded values
    - Themes are passed in, never read from global state
    - A bad row request degrades to an inline marker; it never aborts a render
"""

from wsframe_inspector.rendering.theme import (
    BUILTIN_THEMES,
    DEFAULT_THEME,
    PLAIN_THEME,
    Color,
    StyleTheme,
    get_theme,
)
from wsframe_inspector.rendering.segments import RenderRangeError
from wsframe_inspector.rendering.rows import ROW_ERROR_TEMPLATE, format_payload_row
from wsframe_inspector.rendering.diagram import FrameDiagramRenderer, format_frame
from wsframe_inspector.rendering.qword import format_qword_table
from wsframe_inspector.rendering.summary import format_summary


__all__ = [
    "FrameDiagramRenderer",
    "format_frame",
    "format_payload_row",
    "format_qword_table",
    "format_summary",
    "RenderRangeError",
    "ROW_ERROR_TEMPLATE",
    "StyleTheme",
    "Color",
    "get_theme",
    "BUILTIN_THEMES",
    "DEFAULT_THEME",
    "PLAIN_THEME",
]
