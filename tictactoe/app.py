import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from .session import CPU_DELAY_MS, GameSession
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK THEME
# -----------------------------------------------------------------------------

DISABLED_GREY = QColor(127, 127, 127)

DARK_PALETTE = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}


def apply_dark_palette(app: QApplication):
    """
    Fusion dark theme; disabled widgets (locked name fields) go grey.
    """
    palette = QPalette()
    for role, color in DARK_PALETTE.items():
        palette.setColor(role, color)
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_GREY)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    """
    returns (options, qt_argv); flags we do not know are passed on to Qt
    """
    if argv is None:
        argv = sys.argv[1:]
    p = argparse.ArgumentParser(description="Tic-tac-toe with an optional CPU opponent")
    p.add_argument("--cpu", action="store_true", help="Start with the CPU playing O")
    p.add_argument("--delay", type=int, default=CPU_DELAY_MS,
                   help="CPU thinking delay in milliseconds (default: %(default)s)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    ns, rest = p.parse_known_args(argv)
    if ns.delay < 0:
        p.error("--delay must be >= 0")
    return ns, [p.prog] + rest


def run(argv=None):
    ns, qt_argv = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(qt_argv)
    app.setStyle('Fusion')
    apply_dark_palette(app)

    session = GameSession(cpu_delay_ms=ns.delay)
    window = TicTacToeWindow(session=session, cpu_enabled=ns.cpu)
    window.show()
    return app.exec()

