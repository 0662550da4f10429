import logging
import random

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .game_logic import (
    DRAW, O, GameConfig, InvalidMove, apply_move, reset_game,
)
from .move_policy import select_move

log = logging.getLogger(__name__)

CPU_DELAY_MS = 250  # cpu "thinking" time


class GameSession(QObject):
    """
    owns the live game and drives the cpu opponent

    every mutation goes through the engine functions; the ui only reads the
    properties below and listens to `changed`
    """
    changed = Signal()

    def __init__(self, schedule=None, rng=None, cpu_delay_ms=CPU_DELAY_MS,
                 parent=None):
        super().__init__(parent)
        self._schedule = schedule or self._qt_schedule
        self._rng = rng or random.Random()
        self.cpu_delay_ms = cpu_delay_ms
        self.config = GameConfig()
        self.generation = 0        # bumped on reset, stale cpu moves check it
        self.names_frozen = False  # names lock after the first move
        self.state = reset_game(self.config)

    # ----- read model -----
    @property
    def board(self): return list(self.state.board)

    @property
    def current(self): return self.state.current

    @property
    def winner(self): return self.state.winner

    @property
    def win_line(self): return self.state.win_line

    @property
    def cpu_enabled(self): return self.state.vs_cpu

    @property
    def cpu_move_pending(self): return self.state.locked

    @property
    def input_locked(self):
        return self.state.locked or self.state.winner is not None

    @property
    def names_editable(self): return not self.names_frozen

    @property
    def name_o_editable(self):
        return not self.names_frozen and not self.state.vs_cpu

    def is_cell_disabled(self, index):
        return self.input_locked or self.state.board[index] is not None

    def status_text(self):
        s = self.state
        if s.winner == DRAW:
            return "It's a draw."
        if s.winner:
            return f"{s.players[s.winner]} wins!"
        return f"{s.players[s.current]}'s turn"

    # ----- inputs -----
    @Slot(int)
    def play(self, index):
        """
        human move; refused moves are dropped quietly
        """
        try:
            apply_move(self.state, index)
        except InvalidMove as e:
            log.debug("move %s ignored: %s", index, e)
            return False
        self.names_frozen = True
        self._maybe_schedule_cpu()
        self.changed.emit()
        return True

    @Slot(bool)
    def set_cpu_enabled(self, enabled):
        enabled = bool(enabled)
        self.config.vs_cpu = enabled
        self.state.vs_cpu = enabled
        self.state.players = self.config.players()
        log.info("cpu opponent %s", "on" if enabled else "off")
        # switched on during O's turn: cpu plays right away
        self._maybe_schedule_cpu()
        self.changed.emit()

    def set_player_names(self, name_x, name_o):
        """
        store entered names; refused once the game is under way
        """
        if self.names_frozen:
            log.debug("name change ignored mid-game")
            return False
        self.config.name_x = name_x; self.config.name_o = name_o
        self.state.players = self.config.players()
        self.changed.emit()
        return True

    @Slot()
    def reset(self):
        self.generation += 1
        self.state = reset_game(self.config)
        self.names_frozen = False
        log.info("new game (generation %d, cpu=%s)",
                 self.generation, self.state.vs_cpu)
        self.changed.emit()

    # ----- cpu -----
    def _qt_schedule(self, delay_ms, callback):
        # timer dies with the session
        QTimer.singleShot(delay_ms, self, callback)

    def _maybe_schedule_cpu(self):
        s = self.state
        if s.winner is not None or not s.vs_cpu or s.current != O:
            return
        if s.locked:
            return  # already in flight
        s.locked = True
        gen = self.generation
        log.debug("cpu move scheduled in %d ms", self.cpu_delay_ms)
        self._schedule(self.cpu_delay_ms, lambda: self._run_cpu_move(gen))

    def _run_cpu_move(self, gen):
        if gen != self.generation:
            log.debug("dropping cpu move from generation %d", gen)
            return
        s = self.state
        s.locked = False
        if s.winner is None and s.vs_cpu and s.current == O:
            idx = select_move(s.board, self._rng, O)
            if idx is not None:
                apply_move(s, idx)
                log.debug("cpu played %d", idx)
        else:
            log.debug("cpu move abandoned")
        self.changed.emit()
