import pytest

from conftest import FakeScheduler, FixedChoice
from tictactoe.game_logic import O, X
from tictactoe.session import GameSession


class CountingSession(GameSession):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.toggles = 0

    def set_cpu_enabled(self, enabled):
        self.toggles += 1
        super().set_cpu_enabled(enabled)


@pytest.fixture
def window(qapp):
    from tictactoe.ui.main_window import TicTacToeWindow
    sched = FakeScheduler()
    session = CountingSession(schedule=sched, rng=FixedChoice(0, 0, 0))
    w = TicTacToeWindow(session=session)
    w.scheduler = sched
    yield w
    w.close()
    w.deleteLater()


def test_initial_render(window):
    assert window.message_label.text() == "Player X's turn"
    assert window.name_x_input.isEnabled()
    assert window.name_o_input.isEnabled()
    assert not window.cpu_checkbox.isChecked()


def test_board_widget_cell_mapping(window):
    board = window.board_widget
    board.resize(300, 300)
    assert board.cell_at(10, 10) == 0
    assert board.cell_at(150, 150) == 4
    assert board.cell_at(299, 299) == 8
    assert board.cell_at(250, 20) == 2
    assert board.cell_at(-1, 5) is None


def test_cell_click_plays_and_freezes_names(window):
    window.board_widget.cell_clicked.emit(4)
    assert window.session.board[4] == X
    assert window.message_label.text() == "Player O's turn"
    assert not window.name_x_input.isEnabled()
    assert not window.name_o_input.isEnabled()


def test_cpu_toggle_runs_one_handler(window):
    window.board_widget.cell_clicked.emit(0)
    window.cpu_checkbox.setChecked(True)
    assert window.session.toggles == 1
    assert len(window.scheduler.calls) == 1
    assert window.message_label.text() == "CPU's turn"
    window.scheduler.fire()
    assert window.session.board[4] == O
    assert window.message_label.text() == "Player X's turn"


def test_names_flow_into_status(window):
    window.name_x_input.setText("Ann")
    window.name_x_input.textEdited.emit("Ann")
    assert window.message_label.text() == "Ann's turn"


def test_reset_keeps_cpu_setting(window):
    window.cpu_checkbox.setChecked(True)
    assert not window.name_o_input.isEnabled()
    window.board_widget.cell_clicked.emit(4)
    window.reset_game()
    assert window.cpu_checkbox.isChecked()
    assert window.session.board == [None] * 9
    assert window.name_x_input.isEnabled()
    assert not window.name_o_input.isEnabled()
    # the dropped timer from the old game is harmless
    window.scheduler.fire_all()
    assert window.session.board == [None] * 9


def test_cpu_flag_from_constructor(qapp):
    from tictactoe.ui.main_window import TicTacToeWindow
    session = GameSession(schedule=FakeScheduler())
    w = TicTacToeWindow(session=session, cpu_enabled=True)
    try:
        assert session.cpu_enabled
        assert w.cpu_checkbox.isChecked()
    finally:
        w.close()
