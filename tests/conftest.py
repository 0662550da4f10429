import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeScheduler:
    """
    records cpu timers instead of starting them
    """
    def __init__(self):
        self.calls = []

    def __call__(self, delay_ms, callback):
        self.calls.append((delay_ms, callback))

    def fire(self, n=0):
        _, cb = self.calls.pop(n)
        cb()

    def fire_all(self):
        while self.calls:
            self.fire()


class FixedChoice:
    """
    rng stub: choice() returns items at the given positions, in order
    """
    def __init__(self, *positions):
        self.positions = list(positions)
        self.seen = []

    def choice(self, seq):
        self.seen.append(list(seq))
        return seq[self.positions.pop(0)]


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def session(qapp, scheduler):
    from tictactoe.session import GameSession
    return GameSession(schedule=scheduler, rng=FixedChoice(0, 0, 0, 0))
