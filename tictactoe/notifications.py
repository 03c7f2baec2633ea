"""
short-lived notifications ("toasts").

one notification is live at a time. its expiry is a one-shot callback handed
to a scheduler; showing a new notification cancels the pending callback of
the old one, and a callback only ever clears the notification it was
scheduled for.
"""
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import TOAST_DURATION_MS
from .game_logic import NotificationKind

logger = logging.getLogger(__name__)

__all__ = ["Notification", "NotificationKind", "ToastBoard"]


@dataclass(frozen=True)
class Notification:
    text: str
    kind: NotificationKind
    created_at: float    # monotonic seconds


class ToastBoard:
    """
    holds the live notification and its pending expiry.

    scheduler must provide call_later(delay_ms, callback) returning a handle
    with cancel(); the qt front end passes a QTimer based one.
    """

    def __init__(self, scheduler, duration_ms=TOAST_DURATION_MS,
                 clock: Callable[[], float] = time.monotonic):
        self._scheduler = scheduler
        self.duration_ms = duration_ms
        self._clock = clock
        self._current: Optional[Notification] = None
        self._pending = None                     # scheduler handle
        self._listeners: List[Callable[[Optional[Notification]], None]] = []

    @property
    def current(self) -> Optional[Notification]:
        return self._current

    def subscribe(self, listener):
        """listener(notification or None) runs on every change"""
        self._listeners.append(listener)

    def show(self, text, kind) -> Notification:
        """
        create a notification, superseding whatever is live
        """
        self._cancel_pending()
        note = Notification(text, NotificationKind(kind), self._clock())
        self._current = note
        self._pending = self._scheduler.call_later(
            self.duration_ms, lambda: self._expire(note))
        logger.debug("toast shown: %s (%s)", text, note.kind.value)
        self._notify()
        return note

    def clear(self):
        """drop the live notification, if any"""
        self._cancel_pending()
        if self._current is None:
            return
        self._current = None
        self._notify()

    # user clicked the close button
    dismiss = clear

    def _expire(self, note):
        if self._current is not note:
            # stale: a newer toast replaced this one
            return
        self._pending = None
        self._current = None
        logger.debug("toast expired: %s", note.text)
        self._notify()

    def _cancel_pending(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _notify(self):
        for listener in list(self._listeners):
            listener(self._current)
