from ..controller import GameController
from ..notifications import ToastBoard
from ..rules import Mark
from .board_widget import BoardWidget
from .sound import QtTonePlayer
from .toast_widget import QtScheduler, ToastWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QGroupBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtCore import Qt, Slot

TURN_STYLES = {
    Mark.X: "color: #8acaff; font-weight: bold;",
    Mark.O: "color: #ff8a8a; font-weight: bold;",
}


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, muted=False, toast_ms=None, audio=None):
        """
        init collaborators, controller, ui widgets, signals
        """
        super().__init__()
        self.scheduler = QtScheduler(self)
        self.toasts = ToastBoard(self.scheduler) if toast_ms is None \
            else ToastBoard(self.scheduler, duration_ms=toast_ms)
        if audio is None:
            audio = QtTonePlayer(muted=muted, parent=self)
        self.controller = GameController(notifier=self.toasts, audio=audio)
        self.board_widget = BoardWidget(self.controller, parent=self)

        self._setup_ui()
        self.toast_widget = ToastWidget(self.toasts, parent=self)
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.turn_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.turn_label.setFont(f)
        self.turn_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.turn_label)
        self._create_score_box()           # x / o / draws
        self.main_layout.addWidget(self.score_group)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_selected.connect(self._on_cell_selected)

        self._create_bottom_controls()     # new game / reset score / mute
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut(QKeySequence.New)
        new_action.triggered.connect(self.new_game)
        reset_action = QAction("Reset Score", self)
        reset_action.triggered.connect(self.reset_score)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, reset_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_score_box(self):
        '''score counters'''
        self.score_group = QGroupBox("Score")
        grid = QGridLayout()
        self.score_values = {}
        big = QFont(); big.setPointSize(16); big.setBold(True)
        for col, (key, title, color) in enumerate((
                ("x", "Player X", "#8acaff"),
                ("o", "Player O", "#ff8a8a"),
                ("draws", "Draws", "#e6c229"))):
            value = QLabel("0"); value.setFont(big)
            value.setAlignment(Qt.AlignCenter)
            value.setStyleSheet(f"color: {color};")
            caption = QLabel(title); caption.setAlignment(Qt.AlignCenter)
            grid.addWidget(value, 0, col); grid.addWidget(caption, 1, col)
            self.score_values[key] = value
        self.score_group.setLayout(grid)

    def _create_bottom_controls(self):
        # new game + reset score + mute buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.new_game_button = QPushButton("New Game")
        self.new_game_button.setAccessibleName("New Game")
        self.new_game_button.clicked.connect(self.new_game)
        self.reset_score_button = QPushButton("Reset Score")
        self.reset_score_button.setAccessibleName("Reset Score")
        self.reset_score_button.clicked.connect(self.reset_score)
        self.mute_button = QPushButton("")
        self.mute_button.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Preferred)
        self.mute_button.clicked.connect(self.toggle_mute)
        for w in (self.new_game_button, self.reset_score_button, None, self.mute_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def refresh(self):
        '''re-read session + score and redraw'''
        session = self.controller.session
        score = self.controller.score
        self.turn_label.setText(self.controller.turn_label())
        if session.is_over:
            self.turn_label.setStyleSheet("color: lime; font-weight: bold;")
        else:
            self.turn_label.setStyleSheet(TURN_STYLES[session.active_player])
        self.score_values["x"].setText(str(score.x))
        self.score_values["o"].setText(str(score.o))
        self.score_values["draws"].setText(str(score.draws))
        muted = self.controller.audio.muted
        self.mute_button.setText("🔇" if muted else "🔊")
        self.mute_button.setAccessibleName(
            "Unmute sound effects" if muted else "Mute sound effects")
        self.board_widget.setAccessibleDescription(
            self.controller.cell_label(self.board_widget.focus_index))
        self.board_widget.update()

    @Slot(int)
    def _on_cell_selected(self, index):
        self.controller.select_cell(index)
        self.refresh()

    @Slot()
    def new_game(self):
        self.controller.request_new_game()
        self.refresh()

    @Slot()
    def reset_score(self):
        self.controller.request_score_reset()
        self.refresh()

    @Slot()
    def toggle_mute(self):
        self.controller.toggle_mute()
        self.refresh()

    def resizeEvent(self, event):
        # keep the toast pinned to the corner
        super().resizeEvent(event)
        if self.toasts.current is not None:
            self.toast_widget.display(self.toasts.current)

    def closeEvent(self, event):
        # no stale expiry after close
        self.toasts.clear()
        event.accept()
