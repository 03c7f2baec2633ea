import pytest

from tictactoe.rules import (
    Mark, WINNING_LINES, empty_board, find_winning_line, is_full, move_focus,
)

E, X, O = Mark.EMPTY, Mark.X, Mark.O


def board_from(text):
    """'XO.X..O..' -> board tuple"""
    return tuple({"X": X, "O": O, ".": E}[ch] for ch in text)


# ------------------------------------------------------------
# Winning lines
# ------------------------------------------------------------
def test_empty_board_has_no_line():
    assert find_winning_line(empty_board()) is None


@pytest.mark.parametrize("line", WINNING_LINES)
def test_each_line_is_detected(line):
    board = [E] * 9
    for i in line:
        board[i] = O
    assert find_winning_line(board) == line


def test_mixed_line_is_not_a_win():
    assert find_winning_line(board_from("XXO......")) is None


def test_first_line_in_order_wins_on_unreachable_board():
    # row 0 and column 0 both complete; rows come first
    board = board_from("XXXX..X..")
    assert find_winning_line(board) == (0, 1, 2)


def test_two_players_complete_lines():
    board = board_from("OOOXXX...")
    assert find_winning_line(board) == (0, 1, 2)


# ------------------------------------------------------------
# Full board
# ------------------------------------------------------------
def test_is_full():
    assert not is_full(empty_board())
    assert not is_full(board_from("XOXOXOXO."))
    assert is_full(board_from("XOXXOOOXX"))


def test_opposite():
    assert X.opposite() is O
    assert O.opposite() is X
    with pytest.raises(ValueError):
        E.opposite()


# ------------------------------------------------------------
# Keyboard navigation
# ------------------------------------------------------------
@pytest.mark.parametrize("start, direction, expected", [
    (2, "right", 0),
    (0, "left", 2),
    (8, "down", 2),
    (1, "up", 7),
    (4, "right", 5),
    (4, "left", 3),
    (4, "up", 1),
    (4, "down", 7),
    (5, "right", 3),
    (6, "left", 8),
])
def test_move_focus_wraps_within_row_and_column(start, direction, expected):
    assert move_focus(start, direction) == expected


def test_move_focus_ignores_unknown_direction():
    assert move_focus(4, "diagonal") == 4
