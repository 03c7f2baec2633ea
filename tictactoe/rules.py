"""
board rules: win lines, full board check, keyboard focus movement.
everything here is pure and works on any 9-cell board, reachable or not.
"""
from enum import Enum
from typing import Optional, Sequence, Tuple

from .config import BOARD_SIZE, CELL_COUNT


class Mark(str, Enum):
    """
    contents of one cell
    """
    EMPTY = ''
    X = 'X'
    O = 'O'

    def opposite(self) -> "Mark":
        """the other player (EMPTY has no opposite)"""
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        raise ValueError("empty cell has no opposite mark")


Board = Tuple[Mark, ...]
Line = Tuple[int, int, int]

# row-major indices, checked in this order
WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def empty_board() -> Board:
    return (Mark.EMPTY,) * CELL_COUNT


def find_winning_line(board: Sequence[Mark]) -> Optional[Line]:
    """
    first line (in WINNING_LINES order) holding three identical marks,
    or None if no line is complete
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] != Mark.EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def is_full(board: Sequence[Mark]) -> bool:
    """true when no cell is empty"""
    return all(cell != Mark.EMPTY for cell in board)


def row_col(index: int) -> Tuple[int, int]:
    return divmod(index, BOARD_SIZE)


# -----------------------------------------------------------------------------
# KEYBOARD NAVIGATION
# -----------------------------------------------------------------------------

def move_focus(index: int, direction: str) -> int:
    """
    next focused cell for an arrow key, wrapping inside the same row/column.
    unknown directions keep the current index.
    """
    row, col = row_col(index)
    last = BOARD_SIZE - 1
    if direction == "right":
        col = col + 1 if col < last else 0
    elif direction == "left":
        col = col - 1 if col > 0 else last
    elif direction == "down":
        row = row + 1 if row < last else 0
    elif direction == "up":
        row = row - 1 if row > 0 else last
    return row * BOARD_SIZE + col
