from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import QObject, QTimer, Qt, Signal

from ..notifications import NotificationKind

# kind -> (background, border, text)
TOAST_COLORS = {
    NotificationKind.SUCCESS: ("#12391f", "#2f7a45", "#c8f7d4"),
    NotificationKind.WARNING: ("#3d3410", "#8a7420", "#fbeeb0"),
}
TOAST_ICONS = {NotificationKind.SUCCESS: "✔", NotificationKind.WARNING: "⚠"}


class _TimerHandle:
    """
    cancel() handle around a single-shot QTimer
    """
    def __init__(self, timer):
        self._timer = timer

    def cancel(self):
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None


class QtScheduler(QObject):
    """
    call_later on the qt event loop
    """
    def __init__(self, parent=None):
        super().__init__(parent)

    def call_later(self, delay_ms, callback):
        timer = QTimer(self)
        timer.setSingleShot(True)
        handle = _TimerHandle(timer)

        def fire():
            handle.cancel()       # one-shot: release the timer first
            callback()

        timer.timeout.connect(fire)
        timer.start(int(delay_ms))
        return handle


class ToastWidget(QWidget):
    """
    floating notification shown in the window's top-right corner
    """
    dismissed = Signal()

    def __init__(self, board, parent=None):
        super().__init__(parent)
        self.board = board          # ToastBoard that owns the notification
        self.setAttribute(Qt.WA_StyledBackground, True)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 8, 8, 8)
        self.icon_label = QLabel("")
        self.text_label = QLabel("")
        self.text_label.setWordWrap(True)
        self.close_button = QPushButton("✕")
        self.close_button.setFlat(True)
        self.close_button.setFixedSize(24, 24)
        self.close_button.setAccessibleName("Dismiss notification")
        self.close_button.clicked.connect(self._on_close_clicked)
        layout.addWidget(self.icon_label)
        layout.addWidget(self.text_label, 1)
        layout.addWidget(self.close_button)
        self.hide()
        board.subscribe(self.display)

    def display(self, note):
        # None means nothing live
        if note is None:
            self.hide()
            return
        bg, border, fg = TOAST_COLORS[note.kind]
        self.setStyleSheet(
            f"ToastWidget {{ background: {bg}; border: 1px solid {border};"
            f" border-radius: 8px; }} QLabel {{ color: {fg}; font-weight: bold; }}"
            f" QPushButton {{ color: {fg}; border: none; }}"
        )
        self.icon_label.setText(TOAST_ICONS[note.kind])
        self.text_label.setText(note.text)
        self.adjustSize()
        self._place()
        self.show()
        self.raise_()

    def _place(self):
        parent = self.parentWidget()
        if parent is None:
            return
        margin = 16
        self.move(parent.width() - self.width() - margin, margin)

    def _on_close_clicked(self):
        self.board.dismiss()
        self.dismissed.emit()
