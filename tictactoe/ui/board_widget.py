from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import BOARD_SIZE
from ..rules import Mark, move_focus, row_col

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_FILL = QColor(46, 125, 50, 110)
FOCUS_COLOR = QColor("#2a82da")

ARROW_KEYS = {
    Qt.Key_Left: "left", Qt.Key_Right: "right",
    Qt.Key_Up: "up", Qt.Key_Down: "down",
}
SELECT_KEYS = (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_selected = Signal(int)  # emits cell index 0-8 on click or enter

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setFocusPolicy(Qt.StrongFocus)
        self.focus_index = 0          # keyboard cursor

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side / BOARD_SIZE

    def _cell_rect(self, index):
        ox, oy, cell = self._geometry()
        r, c = row_col(index)
        return QRectF(ox + c * cell, oy + r * cell, cell, cell)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, winning line and keyboard focus
        """
        session = self.controller.session
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, cell = self._geometry()
        side = cell * BOARD_SIZE
        painter.fillRect(self.rect(), QColor("#333"))

        # winning cells under everything else
        for i in session.winning_line or ():
            painter.fillRect(self._cell_rect(i), WIN_FILL)

        # grid lines
        painter.setPen(QPen(QColor("#555"), 2))
        for i in range(1, BOARD_SIZE):
            x = ox + i * cell
            painter.drawLine(QPointF(x, oy), QPointF(x, oy + side))
            y = oy + i * cell
            painter.drawLine(QPointF(ox, y), QPointF(ox + side, y))

        # marks
        rad = cell / 2 * 0.6
        for i, mark in enumerate(session.board):
            if mark == Mark.EMPTY:
                continue
            center = self._cell_rect(i).center()
            cx, cy = center.x(), center.y()
            if mark == Mark.X:
                painter.setPen(QPen(X_COLOR, 4))
                # two crossing lines
                painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
            else:
                painter.setPen(QPen(O_COLOR, 4))
                painter.drawEllipse(QPointF(cx, cy), rad, rad)

        if self.hasFocus():
            painter.setPen(QPen(FOCUS_COLOR, 3))
            painter.setBrush(Qt.NoBrush)
            painter.drawRect(self._cell_rect(self.focus_index).adjusted(3, 3, -3, -3))
        painter.end()

    def index_at(self, x, y):
        """
        cell index under widget coords, or None outside the grid
        """
        ox, oy, cell = self._geometry()
        side = cell * BOARD_SIZE
        if cell <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        col = min(int((x - ox) // cell), BOARD_SIZE - 1)
        row = min(int((y - oy) // cell), BOARD_SIZE - 1)
        return row * BOARD_SIZE + col

    def mouseReleaseEvent(self, event):
        # only inside grid
        index = self.index_at(event.position().x(), event.position().y())
        if index is None:
            return
        self.focus_index = index
        self.cell_selected.emit(index)  # notify main window

    def keyPressEvent(self, event):
        key = event.key()
        if key in ARROW_KEYS:
            self.focus_index = move_focus(self.focus_index, ARROW_KEYS[key])
            self.setAccessibleDescription(self.controller.cell_label(self.focus_index))
            self.update()
        elif key in SELECT_KEYS:
            self.cell_selected.emit(self.focus_index)
        else:
            super().keyPressEvent(event)

    def focusInEvent(self, event):
        self.update()
        super().focusInEvent(event)

    def focusOutEvent(self, event):
        self.update()
        super().focusOutEvent(event)
