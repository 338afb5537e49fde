"""
Style Themes
============

Named colours injected into the renderers.

A StyleTheme is pure data: it maps rendering roles (borders, tick marks,
titles, bit values, byte values, notes, character previews) to terminal
colours. Themes never change what is decoded or how columns are laid out;
paint() only wraps already-padded text in ANSI codes.

Example:
    from wsframe_inspector.rendering.theme import DEFAULT_THEME, PLAIN_THEME

    DEFAULT_THEME.paint("|", "border")   # '\\x1b[34m|\\x1b[0m'
    PLAIN_THEME.paint("|", "border")     # '|'
"""

import logging
from enum import Enum
from typing import Dict, Optional

from colorama import Fore, Style
from pydantic import BaseModel, Field

from wsframe_inspector.models.opcode import Opcode


logger = logging.getLogger(__name__)


class Color(str, Enum):
    """Terminal foreground colours available to themes."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BLACK = "black"

    @property
    def ansi(self) -> str:
        """colorama foreground escape sequence for this colour."""
        return getattr(Fore, self.name)


THEME_ROLES = (
    "border",
    "tick",
    "title",
    "bit",
    "byte_value",
    "note",
    "char_preview",
)


class StyleTheme(BaseModel):
    """
    Colour assignment for every rendering role.

    Unset roles render without colour.

    Attributes:
        name: Theme name used for lookup and logging
        border: Table borders and column separators
        tick: Bit-index ruler digits
        title: Column headings, field names and payload part labels
        bit: Individual bit values
        byte_value: Decimal byte values such as (97)
        note: Annotations such as MASKED / UNM and variant labels
        char_preview: Quoted character previews such as 'a'
        opcode_colors: Colour of the opcode label in frame summaries
    """

    name: str = Field(default="custom", description="Theme name")
    border: Optional[Color] = Field(default=None, description="Borders and separators")
    tick: Optional[Color] = Field(default=None, description="Bit-index ruler")
    title: Optional[Color] = Field(default=None, description="Headings and labels")
    bit: Optional[Color] = Field(default=None, description="Bit values")
    byte_value: Optional[Color] = Field(default=None, description="Decimal byte values")
    note: Optional[Color] = Field(default=None, description="Annotations")
    char_preview: Optional[Color] = Field(default=None, description="Character previews")
    opcode_colors: Dict[Opcode, Color] = Field(
        default_factory=dict,
        description="Opcode label colours for frame summaries",
    )

    def paint(self, text: str, role: str) -> str:
        """
        Colour text for a rendering role.

        Args:
            text: Already padded text
            role: One of THEME_ROLES

        Returns:
            text wrapped in ANSI codes, or text unchanged when the role has no
            colour or text is empty

        Raises:
            ValueError: If role is not a known rendering role
        """
        if role not in THEME_ROLES:
            raise ValueError(f"Unknown theme role: {role!r}")
        color = getattr(self, role)
        if color is None or not text:
            return text
        return f"{color.ansi}{text}{Style.RESET_ALL}"

    def paint_opcode(self, text: str, opcode: Opcode) -> str:
        """Colour an opcode label using opcode_colors."""
        color = self.opcode_colors.get(opcode)
        if color is None or not text:
            return text
        return f"{color.ansi}{text}{Style.RESET_ALL}"


PLAIN_THEME = StyleTheme(name="plain")

DEFAULT_THEME = StyleTheme(
    name="default",
    border=Color.BLUE,
    tick=Color.CYAN,
    title=Color.WHITE,
    bit=Color.GREEN,
    byte_value=Color.YELLOW,
    note=Color.MAGENTA,
    char_preview=Color.RED,
    opcode_colors={
        Opcode.CONTINUATION: Color.WHITE,
        Opcode.TEXT: Color.GREEN,
        Opcode.BINARY: Color.CYAN,
        Opcode.CLOSE_CONNECTION: Color.RED,
        Opcode.PING: Color.YELLOW,
        Opcode.PONG: Color.YELLOW,
        Opcode.RESERVED_FUTURE: Color.MAGENTA,
        Opcode.UNRECOGNIZED: Color.MAGENTA,
    },
)

BUILTIN_THEMES = {
    PLAIN_THEME.name: PLAIN_THEME,
    DEFAULT_THEME.name: DEFAULT_THEME,
}


def get_theme(name: str) -> StyleTheme:
    """
    Look up a built-in theme by name.

    Args:
        name: "default" or "plain" (case-insensitive)

    Returns:
        The matching StyleTheme

    Raises:
        ValueError: If no built-in theme has that name
    """
    theme = BUILTIN_THEMES.get(name.lower())
    if theme is None:
        raise ValueError(
            f"Unknown theme {name!r}; expected one of {sorted(BUILTIN_THEMES)}"
        )
    logger.debug(f"Using theme: {theme.name}")
    return theme
