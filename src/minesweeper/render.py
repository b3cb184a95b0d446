"""
Terminal rendering for Minesweeper.

Draws a game as text with column letters, row numbers and a border,
optionally coloured with ANSI escape codes.
"""
from enum import Enum
from typing import Dict

from .cell import Cell
from .game import Game
from .parser import column_label


# ============================================================================
# Colours
# ============================================================================

class Color(Enum):
    """ANSI colour escape sequences."""

    BLUE = "\033[34m"
    GREEN = "\033[32m"
    RED = "\033[31m"
    NAVY = "\033[34;1m"
    MAROON = "\033[31;1m"
    TEAL = "\033[36m"
    BLACK = "\033[30m"
    GRAY = "\033[90m"
    YELLOW = "\033[33m"
    RESET = "\033[0m"


NUMBER_COLORS: Dict[int, Color] = {
    1: Color.BLUE,
    2: Color.GREEN,
    3: Color.RED,
    4: Color.NAVY,
    5: Color.MAROON,
    6: Color.TEAL,
    7: Color.BLACK,
    8: Color.GRAY,
}

HIDDEN_GLYPH = "#"
FLAG_GLYPH = "F"
MINE_GLYPH = "*"


def colorize(text: str, color: Color, enabled: bool = True) -> str:
    """Wrap text in a colour code and a reset, or return it untouched."""
    if not enabled:
        return text
    return f"{color.value}{text}{Color.RESET.value}"


# ============================================================================
# Board Rendering
# ============================================================================

def render_cell(cell: Cell, color: bool = True) -> str:
    """
    Render one cell as a three character block.

    Hidden cells stay opaque; flags, mines and numbers only show
    what the player is allowed to see.
    """
    if cell.is_hidden:
        return f" {HIDDEN_GLYPH} "
    if cell.is_flagged:
        return f" {colorize(FLAG_GLYPH, Color.RED, color)} "
    if cell.is_mine:
        return f" {MINE_GLYPH} "
    if cell.is_number:
        count = str(cell.adjacent_mines)
        return f" {colorize(count, NUMBER_COLORS[cell.adjacent_mines], color)} "
    return "   "


def render_column_label(column: int, color: bool = True) -> str:
    """Three character header block; two-letter labels lose the right pad."""
    label = column_label(column)
    return " " + colorize(label, Color.YELLOW, color) + " " * (2 - len(label))


def render_board(game: Game, color: bool = True) -> str:
    """
    Render the whole board.

    Args:
        game: Game to draw.
        color: Emit ANSI colour codes.

    Returns:
        Multi-line string, no trailing newline.
    """
    letters = "".join(
        render_column_label(column, color) for column in range(game.columns)
    )
    border = "   +" + "-" * (3 * game.columns) + "+"

    lines = ["    " + letters, border]
    for row in range(game.rows):
        label = colorize(f"{row + 1:>2}", Color.YELLOW, color)
        cells = "".join(
            render_cell(game.get_cell(column, row), color)
            for column in range(game.columns)
        )
        lines.append(f"{label} |{cells}|")
    lines.append(border)
    return "\n".join(lines)


def render_prompt(color: bool = True) -> str:
    """Help text shown before asking for a move."""
    flag = colorize("F", Color.RED, color)
    reveal = colorize("R", Color.TEAL, color)
    return "\n".join([
        f"Choose a column ({colorize('A', Color.YELLOW, color)}), "
        f"a row ({colorize('1', Color.YELLOW, color)}) "
        f"and your action ({flag}, {reveal})",
        f" - {flag} stands for Flag and marks a cell with a flag",
        f" - {reveal} stands for Reveal and uncovers a cell",
        f" - If you want to reveal, you can omit the {reveal}",
        "Valid input examples: A9 F, B3 R, C4",
    ])
