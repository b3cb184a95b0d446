"""
Player input parsing.

Turns text such as ``"B3 F"`` into a Move and ``"10x8"`` into board
dimensions. Columns are lettered like spreadsheet columns (A..Z, then
AA, AB, ...). Coordinates come out zero based; whether they fit the
board is the game's concern.
"""
import re
import string
from typing import NamedTuple, Tuple

from .exceptions import InvalidInputError
from .game import Action

MIN_BOARD_SIDE = 5
MAX_BOARD_SIDE = 30

_MOVE_PATTERN = re.compile(r"([A-Z]{1,2})([1-9][0-9]?)(?:\s+([FR]))?")
_SIZE_PATTERN = re.compile(r"([0-9]+)X([0-9]+)")


class Move(NamedTuple):
    """A parsed player move."""

    column: int
    row: int
    action: Action


def column_label(column: int) -> str:
    """Letters for a zero based column: 0 -> A, 25 -> Z, 26 -> AA."""
    label = ""
    column += 1
    while column:
        column, remainder = divmod(column - 1, 26)
        label = string.ascii_uppercase[remainder] + label
    return label


def column_index(label: str) -> int:
    """Inverse of column_label."""
    index = 0
    for letter in label:
        index = index * 26 + string.ascii_uppercase.index(letter) + 1
    return index - 1


def parse_move(text: str) -> Move:
    """
    Parse a move like ``A1``, ``b3 f``, ``AB12`` or ``C4 R``.

    The letters pick the column, the number the row, and the optional
    trailing F/R the action. Reveal is the default.

    Raises:
        InvalidInputError: If the text does not match the move format.
    """
    match = _MOVE_PATTERN.fullmatch(text.strip().upper())
    if match is None:
        raise InvalidInputError(f"Invalid move: {text!r}")
    letters, number, action = match.groups()
    return Move(
        column=column_index(letters),
        row=int(number) - 1,
        action=Action(action) if action else Action.REVEAL,
    )


def parse_board_size(text: str) -> Tuple[int, int]:
    """
    Parse ``COLUMNSxROWS`` into a (columns, rows) pair.

    Raises:
        InvalidInputError: On bad format or sides outside 5..30.
    """
    match = _SIZE_PATTERN.fullmatch(text.strip().upper())
    if match is None:
        raise InvalidInputError(
            "Invalid format. Use 'number x number', for example '10x8'"
        )
    columns, rows = (int(group) for group in match.groups())
    for side in (columns, rows):
        if not MIN_BOARD_SIDE <= side <= MAX_BOARD_SIDE:
            raise InvalidInputError(
                f"Dimensions must be between {MIN_BOARD_SIDE}x{MIN_BOARD_SIDE}"
                f" and {MAX_BOARD_SIDE}x{MAX_BOARD_SIDE}"
            )
    return columns, rows


def format_coordinate(column: int, row: int) -> str:
    """Label a cell the way players type it, e.g. (1, 2) -> ``B3``."""
    return f"{column_label(column)}{row + 1}"
