from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, X

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_FILL = QColor(120, 200, 120, 90)
LOCKED_FILL = QColor(0, 0, 0, 60)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # row-major cell index

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session  # read-only view of the live game
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / BOARD_SIZE
        r, c = divmod(index, BOARD_SIZE)
        return QRectF(ox + c * cell, oy + r * cell, cell, cell)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = min(int((x - ox) // cell), BOARD_SIZE - 1)
        row = min(int((y - oy) // cell), BOARD_SIZE - 1)
        return row * BOARD_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), QColor("#333"))
            win_line = self.session.win_line or ()
            board = self.session.board
            # cell backgrounds: winning line + locked tint
            for i in range(len(board)):
                if i in win_line:
                    painter.fillRect(self.cell_rect(i), WIN_FILL)
                elif self.session.cpu_move_pending:
                    painter.fillRect(self.cell_rect(i), LOCKED_FILL)
            # grid lines
            cell = side / BOARD_SIZE
            painter.setPen(QPen(QColor("#555"), 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # marks
            for i, sym in enumerate(board):
                if sym is None: continue
                center = self.cell_rect(i).center()
                cx, cy = center.x(), center.y()
                rad = cell / 2 * 0.7
                if sym == X:
                    painter.setPen(QPen(X_COLOR, 4))
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(O_COLOR, 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to a cell and emit if it is playable
        """
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        idx = self.cell_at(pos.x(), pos.y())
        if idx is None or self.session.is_cell_disabled(idx):
            return
        self.cell_clicked.emit(idx)  # notify main window
