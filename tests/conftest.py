"""
Shared test fixtures.

Engine tests run without Qt: a fake scheduler stands in for QTimer and a
recording player stands in for the sound backend.
"""

import os

# headless Qt for the pytest-qt tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tictactoe.audio import CuePlayer
from tictactoe.controller import GameController
from tictactoe.notifications import ToastBoard


class FakeHandle:
    def __init__(self, scheduler, due, callback):
        self._scheduler = scheduler
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manual clock: callbacks run only when advance() passes their due time."""

    def __init__(self):
        self.now_ms = 0
        self.handles = []

    def call_later(self, delay_ms, callback):
        handle = FakeHandle(self, self.now_ms + delay_ms, callback)
        self.handles.append(handle)
        return handle

    def advance(self, ms):
        self.now_ms += ms
        for handle in list(self.handles):
            if not handle.cancelled and handle.due <= self.now_ms:
                self.handles.remove(handle)
                handle.callback()

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]


class RecordingPlayer(CuePlayer):
    def __init__(self, muted=False):
        super().__init__(muted=muted)
        self.played = []

    def _emit(self, cue):
        self.played.append(cue)


class RecordingNotifier:
    def __init__(self):
        self.events = []

    def show(self, text, kind):
        self.events.append(("show", text, kind))

    def clear(self):
        self.events.append(("clear",))

    @property
    def shown(self):
        return [e for e in self.events if e[0] == "show"]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def toasts(scheduler):
    return ToastBoard(scheduler, duration_ms=3000)


@pytest.fixture
def player():
    return RecordingPlayer()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def controller(notifier, player):
    return GameController(notifier=notifier, audio=player)


def play(controller, *indices):
    """Feed a sequence of cell selections to a controller."""
    for i in indices:
        controller.select_cell(i)
    return controller.session
