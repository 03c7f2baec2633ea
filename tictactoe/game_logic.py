"""
tic-tac-toe rules and state.

sessions and scores are immutable values; every operation returns a new one
and leaves its input alone.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .config import CELL_COUNT, SCORE_RESET_TEXT
from .rules import Board, Line, Mark, empty_board, find_winning_line, is_full


class IllegalMove(ValueError):
    """
    move rejected: game over, index out of range, or cell taken
    """
    def __init__(self, index, reason):
        super().__init__(f"illegal move at {index!r}: {reason}")
        self.index = index
        self.reason = reason


# -----------------------------------------------------------------------------
# STATUS
# -----------------------------------------------------------------------------

class InProgress(Enum):
    """game still running (single value: IN_PROGRESS)"""
    IN_PROGRESS = "in_progress"


class Drawn(Enum):
    """board full, no line (single value: DRAWN)"""
    DRAWN = "drawn"


IN_PROGRESS = InProgress.IN_PROGRESS
DRAWN = Drawn.DRAWN


@dataclass(frozen=True)
class Won:
    winner: Mark
    line: Line


Status = Union[InProgress, Won, Drawn]


# -----------------------------------------------------------------------------
# SESSION + SCORE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Session:
    board: Board
    active_player: Mark
    status: Status

    @property
    def is_over(self) -> bool:
        return self.status is not IN_PROGRESS

    @property
    def winning_line(self) -> Optional[Line]:
        return self.status.line if isinstance(self.status, Won) else None


@dataclass(frozen=True)
class Score:
    x: int = 0
    o: int = 0
    draws: int = 0


class NotificationKind(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"


def new_session() -> Session:
    """
    empty board, X to move
    """
    return Session(board=empty_board(), active_player=Mark.X, status=IN_PROGRESS)


def reset_game(session: Session) -> Session:
    # nothing from the old session survives
    return new_session()


def apply_move(session: Session, index) -> Session:
    """
    place the active player's mark at index and evaluate the result.
    raises IllegalMove without touching the session.
    """
    if session.is_over:
        raise IllegalMove(index, "game is already over")
    if isinstance(index, bool) or not isinstance(index, int) \
       or not 0 <= index < CELL_COUNT:
        raise IllegalMove(index, "index must be 0-8")
    if session.board[index] != Mark.EMPTY:
        raise IllegalMove(index, f"cell taken by {session.board[index].value}")

    player = session.active_player
    board = session.board[:index] + (player,) + session.board[index + 1:]

    line = find_winning_line(board)
    if line is not None:
        # mover wins, turn does not pass
        return Session(board, player, Won(player, line))
    if is_full(board):
        return Session(board, player, DRAWN)
    return Session(board, player.opposite(), IN_PROGRESS)


def update_score(score: Score, outcome: Status) -> Score:
    """
    count one finished game
    """
    if isinstance(outcome, Won):
        if outcome.winner == Mark.X:
            return replace(score, x=score.x + 1)
        return replace(score, o=score.o + 1)
    if outcome is DRAWN:
        return replace(score, draws=score.draws + 1)
    raise ValueError(f"cannot score an unfinished game: {outcome!r}")


def reset_score(score: Score) -> Score:
    return Score()


def outcome_message(outcome: Status) -> Tuple[str, NotificationKind]:
    """text and kind of the notification announcing a finished game"""
    if isinstance(outcome, Won):
        return f"Player {outcome.winner.value} wins!", NotificationKind.SUCCESS
    if outcome is DRAWN:
        return "It's a draw!", NotificationKind.WARNING
    raise ValueError(f"game is not finished: {outcome!r}")


def score_reset_message() -> Tuple[str, NotificationKind]:
    return SCORE_RESET_TEXT, NotificationKind.WARNING
