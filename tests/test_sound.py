"""
QtMultimedia tone player on the offscreen platform. Whatever audio the host
has (none, a null device, a real sink), playing must never raise.
"""

import logging
import sys
import types

import pytest

from tictactoe.audio import AudioUnavailable, SoundCue
from tictactoe.game_logic import Score
from tictactoe.ui import sound
from tictactoe.ui.sound import QtTonePlayer, load_multimedia


def _fake_multimedia(null=True):
    class Device:
        def isNull(self):
            return null

        def isFormatSupported(self, fmt):
            return False

    class QMediaDevices:
        @staticmethod
        def defaultAudioOutput():
            return Device()

    class QAudioFormat:
        Int16 = 2

        def setSampleRate(self, rate):
            pass

        def setChannelCount(self, n):
            pass

        def setSampleFormat(self, f):
            pass

    return types.SimpleNamespace(QMediaDevices=QMediaDevices, QAudioFormat=QAudioFormat)


# ------------------------------------------------------------
# Real backend
# ------------------------------------------------------------
@pytest.mark.parametrize("cue", list(SoundCue))
def test_every_cue_plays_without_raising(qtbot, cue):
    player = QtTonePlayer(muted=False)
    player.play(cue)
    # tones are at most 500 ms; sinks are released once drained
    qtbot.waitUntil(lambda: player._playing == [], timeout=3000)


def test_window_with_real_player_plays_a_game(qtbot):
    from tictactoe.ui.main_window import TicTacToeWindow

    win = TicTacToeWindow(toast_ms=200)
    qtbot.addWidget(win)
    assert isinstance(win.controller.audio, QtTonePlayer)
    for i in (0, 3, 1, 4, 2):
        win.board_widget.cell_selected.emit(i)
    assert win.controller.score == Score(x=1)
    qtbot.waitUntil(lambda: win.controller.audio._playing == [], timeout=3000)


# ------------------------------------------------------------
# Missing audio stack
# ------------------------------------------------------------
def test_unloadable_multimedia_raises_audio_unavailable(monkeypatch):
    # a None entry makes the import fail like a missing libpulse
    monkeypatch.setitem(sys.modules, "PySide6.QtMultimedia", None)
    with pytest.raises(AudioUnavailable):
        load_multimedia()


def test_player_without_multimedia_is_silent(monkeypatch, caplog):
    monkeypatch.setitem(sys.modules, "PySide6.QtMultimedia", None)
    player = QtTonePlayer(muted=False)
    with caplog.at_level(logging.DEBUG, logger="tictactoe.audio"):
        for cue in SoundCue:
            player.play(cue)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert player._playing == []


def test_null_device_is_logged_once(monkeypatch, caplog):
    monkeypatch.setattr(sound, "load_multimedia", lambda: _fake_multimedia(null=True))
    player = QtTonePlayer(muted=False)
    with caplog.at_level(logging.DEBUG, logger="tictactoe.audio"):
        player.play(SoundCue.MOVE)
        player.play(SoundCue.WIN)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "no audio output device" in warnings[0].getMessage()
    assert player._playing == []


def test_unsupported_format_is_swallowed(monkeypatch, caplog):
    monkeypatch.setattr(sound, "load_multimedia", lambda: _fake_multimedia(null=False))
    player = QtTonePlayer(muted=False)
    with caplog.at_level(logging.WARNING, logger="tictactoe.audio"):
        player.play(SoundCue.DRAW)
    assert "16-bit mono" in caplog.text
    assert player._playing == []
