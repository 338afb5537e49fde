"""
Tests for style themes and the frame summary line.
"""

import pytest
from colorama import Fore, Style
from pydantic import ValidationError

from wsframe_inspector.decoding import decode_frame
from wsframe_inspector.models import Opcode
from wsframe_inspector.rendering import (
    DEFAULT_THEME,
    PLAIN_THEME,
    Color,
    StyleTheme,
    format_summary,
    get_theme,
)


class TestStyleTheme:
    """Tests for StyleTheme.paint and friends."""

    def test_plain_theme_passes_text_through(self):
        assert PLAIN_THEME.paint("|", "border") == "|"

    def test_default_theme_wraps_text(self):
        assert DEFAULT_THEME.paint("|", "border") == f"{Fore.BLUE}|{Style.RESET_ALL}"

    def test_empty_text_is_not_wrapped(self):
        assert DEFAULT_THEME.paint("", "title") == ""

    def test_unknown_role(self):
        with pytest.raises(ValueError, match="Unknown theme role"):
            DEFAULT_THEME.paint("x", "background")

    def test_unset_role_is_uncoloured(self):
        theme = StyleTheme(name="borders-only", border=Color.RED)
        assert theme.paint("DWORD", "title") == "DWORD"
        assert theme.paint("+", "border") == f"{Fore.RED}+{Style.RESET_ALL}"

    def test_paint_opcode(self):
        assert DEFAULT_THEME.paint_opcode("Ping", Opcode.PING) == (
            f"{Fore.YELLOW}Ping{Style.RESET_ALL}"
        )
        assert PLAIN_THEME.paint_opcode("Ping", Opcode.PING) == "Ping"

    def test_theme_from_mapping(self):
        theme = StyleTheme.model_validate(
            {"name": "mine", "bit": "green", "opcode_colors": {"Text": "cyan"}}
        )
        assert theme.bit == Color.GREEN
        assert theme.opcode_colors == {Opcode.TEXT: Color.CYAN}

    def test_unknown_colour_is_rejected(self):
        with pytest.raises(ValidationError):
            StyleTheme.model_validate({"border": "octarine"})

    def test_colour_ansi(self):
        assert Color.MAGENTA.ansi == Fore.MAGENTA


class TestGetTheme:
    """Tests for built-in theme lookup."""

    def test_lookup(self):
        assert get_theme("plain") is PLAIN_THEME
        assert get_theme("Default") is DEFAULT_THEME

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown theme"):
            get_theme("neon")


class TestFormatSummary:
    """Tests for format_summary."""

    def test_abc_frame(self, abc_frame_bytes):
        summary = format_summary(decode_frame(abc_frame_bytes))
        assert summary == (
            "Text (0x1) FIN=1 RSV=000 Short length 3 key=5a0e9136 payload='abc'\n"
        )

    def test_close_frame(self, build_frame_bytes):
        frame = decode_frame(build_frame_bytes(b"\x03\xe8", opcode=0x8))
        summary = format_summary(frame)
        assert summary.startswith("CloseConnection (0x8) FIN=1")
        assert "payload='.è'" in summary

    def test_long_preview_is_truncated(self, build_frame_bytes):
        frame = decode_frame(build_frame_bytes(b"z" * 200))
        summary = format_summary(frame)
        assert "Medium length 200" in summary
        assert "payload='" + "z" * 32 + "...'" in summary

    def test_themed_opcode(self, abc_frame_bytes):
        summary = format_summary(decode_frame(abc_frame_bytes), DEFAULT_THEME)
        assert summary.startswith(f"{Fore.GREEN}Text{Style.RESET_ALL}")
