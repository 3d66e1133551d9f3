from ..game_logic import OutcomeKind
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class MatchWindow(QMainWindow):
    """
    main window: board, status line, new game
    """
    def __init__(self, new_match):
        """
        new_match: callable returning a fresh MatchController
        """
        super().__init__()
        self._new_match = new_match
        self.controller = new_match()
        self.board_widget = BoardWidget(self.controller, parent=self)

        self._setup_ui()
        self._show_turn()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + button
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + new game button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.new_game_button = QPushButton("New Game")
        self.new_game_button.clicked.connect(self.new_game)
        hl.addWidget(self.message_label); hl.addStretch(1)
        hl.addWidget(self.new_game_button)

    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _show_turn(self):
        player = self.controller.get_active_player()
        self._update_message(f"{player.name}'s turn...", is_turn=True)

    @Slot(int, int)
    def _on_cell_clicked(self, column, row):
        outcome = self.controller.play_turn(column, row)
        kind = outcome.kind
        if outcome.placed:
            self.board_widget.update()
        if kind is OutcomeKind.WIN:
            self._handle_game_over(f"{outcome.player.name} has won!!")
        elif kind is OutcomeKind.DRAW:
            self._handle_game_over("It's a draw!")
        elif kind is OutcomeKind.CONTINUE:
            self._show_turn()
        elif kind is OutcomeKind.NO_OP:
            self._update_message("cell taken", is_error=True)
        elif kind is OutcomeKind.INVALID_COORDINATE:
            self._update_message("that cell is off the board", is_error=True)

    def _handle_game_over(self, msg):
        # end game UI updates
        self._update_message(msg, is_success=True)
        self.board_widget.set_accept_clicks(False)

    @Slot()
    def new_game(self):
        # fresh controller, the finished one is dropped
        self.controller = self._new_match()
        self.board_widget.set_controller(self.controller)
        self.board_widget.set_accept_clicks(True)
        self._show_turn()
