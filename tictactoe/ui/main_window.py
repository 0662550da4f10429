from ..session import GameSession
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit,
    QCheckBox, QGroupBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

class TicTacToeWindow(QMainWindow):
    """
    main window: names, cpu toggle, board and status
    """
    def __init__(self, session=None, cpu_enabled=False):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.session = session if session is not None else GameSession(parent=self)
        self.board_widget = BoardWidget(self.session, parent=self)

        self._setup_ui()
        self.session.changed.connect(self._render)
        if cpu_enabled:
            self.cpu_checkbox.setChecked(True)  # fires the toggled slot once
        self._render()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QGroupBox { color: #ccc; }
            QLineEdit:disabled { color: #777; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_player_controls()     # names + cpu toggle
        self.main_layout.addWidget(self.player_controls_group)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_player_controls(self):
        '''player names group'''
        self.player_controls_group = QGroupBox("Players")
        layout = QVBoxLayout()
        self.name_x_input = QLineEdit(); self.name_x_input.setPlaceholderText("Player X")
        self.name_o_input = QLineEdit(); self.name_o_input.setPlaceholderText("Player O")
        for label, edit in (("X:", self.name_x_input), ("O:", self.name_o_input)):
            row = QHBoxLayout(); row.addWidget(QLabel(label)); row.addWidget(edit)
            layout.addLayout(row)
            edit.textEdited.connect(self._on_names_edited)
        # single handler for the toggle
        self.cpu_checkbox = QCheckBox("Play against CPU (O)")
        self.cpu_checkbox.toggled.connect(self._on_cpu_toggled)
        layout.addWidget(self.cpu_checkbox)
        self.player_controls_group.setLayout(layout)

    def _create_bottom_controls(self):
        # status + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success:   style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot()
    def _render(self):
        # pull everything from the session
        s = self.session
        self._update_message(s.status_text(), is_success=s.winner is not None,
                             is_turn=s.winner is None)
        self.name_x_input.setEnabled(s.names_editable)
        self.name_o_input.setEnabled(s.name_o_editable)
        self.board_widget.setCursor(Qt.ForbiddenCursor if s.input_locked else Qt.PointingHandCursor)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        self.session.play(index)

    @Slot(bool)
    def _on_cpu_toggled(self, checked):
        self.session.set_cpu_enabled(checked)

    @Slot()
    def _on_names_edited(self):
        self.session.set_player_names(self.name_x_input.text(), self.name_o_input.text())

    @Slot()
    def reset_game(self):
        # names and cpu setting carry over
        self.session.reset()
        self.cpu_checkbox.setChecked(self.session.cpu_enabled)
