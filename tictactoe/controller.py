"""
game session controller: owns the current session and score and tells the
notification / audio collaborators what happened.

no qt in here; the window feeds inputs in and re-reads session and score.
"""
import logging

from .audio import SilentPlayer, SoundCue
from .game_logic import (
    DRAWN, IllegalMove, Score, Won, apply_move, new_session, outcome_message,
    reset_game, reset_score, score_reset_message, update_score,
)
from .rules import Mark

logger = logging.getLogger(__name__)


class _NullNotifier:
    def show(self, text, kind):
        pass

    def clear(self):
        pass


class GameController:
    """
    one instance per window, mutated only through its public methods.

    notifier: object with show(text, kind) and clear()
    audio: object with play(cue) and toggle_mute()
    """

    def __init__(self, notifier=None, audio=None):
        self.notifier = notifier or _NullNotifier()
        self.audio = audio or SilentPlayer()
        self._session = new_session()
        self._score = Score()
        self._counted = False       # terminal outcome of _session already scored

    @property
    def session(self):
        return self._session

    @property
    def score(self):
        return self._score

    # -------------------------------------------------------------------------
    # inputs
    # -------------------------------------------------------------------------

    def select_cell(self, index):
        """
        play index for the active player. illegal moves are ignored and the
        unchanged session comes back.
        """
        try:
            session = apply_move(self._session, index)
        except IllegalMove as e:
            logger.debug("ignored: %s", e)
            return self._session

        self._session = session
        self.audio.play(SoundCue.MOVE)
        if session.is_over:
            self.report_outcome()
        return session

    def report_outcome(self):
        """
        score the finished game, announce it and play its cue.
        does nothing for a running game or one already counted.
        """
        status = self._session.status
        if not self._session.is_over or self._counted:
            return self._score
        self._counted = True
        self._score = update_score(self._score, status)

        text, kind = outcome_message(status)
        logger.info("%s score x=%d o=%d draws=%d", text,
                    self._score.x, self._score.o, self._score.draws)
        self.notifier.show(text, kind)
        self.audio.play(SoundCue.WIN if isinstance(status, Won) else SoundCue.DRAW)
        return self._score

    def request_new_game(self):
        self._session = reset_game(self._session)
        self._counted = False
        self.notifier.clear()
        return self._session

    def request_score_reset(self):
        self._score = reset_score(self._score)
        text, kind = score_reset_message()
        logger.info("score reset")
        self.notifier.show(text, kind)
        return self._score

    def toggle_mute(self):
        return self.audio.toggle_mute()

    # -------------------------------------------------------------------------
    # text for the window
    # -------------------------------------------------------------------------

    def turn_label(self):
        status = self._session.status
        if isinstance(status, Won):
            return f"Player {status.winner.value} wins!"
        if status is DRAWN:
            return "It's a draw!"
        return f"Player {self._session.active_player.value}'s turn"

    def cell_label(self, index):
        """accessible name of a cell, numbered from 1"""
        mark = self._session.board[index]
        if mark != Mark.EMPTY:
            return f"Cell {index + 1}, {mark.value}"
        return (f"Cell {index + 1}, empty, press to place "
                f"{self._session.active_player.value}")
