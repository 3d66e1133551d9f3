from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (EMPTY, BOARD_BACKGROUND, GRID_LINE_COLOR, WIN_LINE_COLOR,
                      MARK_COLORS, FALLBACK_MARK_COLOR)


def board_square(width, height):
    """
    largest centred square: (offset_x, offset_y, side)
    """
    side = min(width, height)
    return (width - side) / 2, (height - side) / 2, side


def cell_at(x, y, width, height, size):
    """
    map widget coords to (column, row), None outside the grid
    """
    ox, oy, side = board_square(width, height)
    if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
        return None
    cell = side / size
    col = int((x - ox) // cell); row = int((y - oy) // cell)
    # float edge cases can land one past the end
    return min(col, size - 1), min(row, size - 1)


class BoardWidget(QWidget):
    """
    draws a match snapshot and reports clicked cells
    """
    cell_clicked = Signal(int, int)  # emits column, row on click

    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller  # only read from, never written
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True

    def set_controller(self, controller):
        # swap in a new match and redraw
        self.controller = controller
        self.update()

    def set_accept_clicks(self, accept):
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def paintEvent(self, event):
        """
        draw grid, marks, and the winning line if any
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = board_square(self.width(), self.height())
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            board = self.controller.get_board_snapshot()
            size = len(board)
            cell_size = side / size
            # grid lines
            painter.setPen(QPen(QColor(GRID_LINE_COLOR), 2))
            for i in range(1, size):
                x = ox + i*cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy+side))
                y = oy + i*cell_size
                painter.drawLine(int(ox), int(y), int(ox+side), int(y))
            # marks
            for r, row in enumerate(board):
                for c, mark in enumerate(row):
                    if mark == EMPTY: continue
                    cx = ox + c*cell_size + cell_size/2
                    cy = oy + r*cell_size + cell_size/2
                    self._draw_mark(painter, mark, cx, cy, cell_size/2 * 0.7)
            line = self.controller.winning_line()
            if line:
                first, last = line[0], line[-1]
                painter.setPen(QPen(QColor(WIN_LINE_COLOR), 6, Qt.SolidLine, Qt.RoundCap))
                painter.drawLine(
                    QPointF(ox + (first[0]+0.5)*cell_size, oy + (first[1]+0.5)*cell_size),
                    QPointF(ox + (last[0]+0.5)*cell_size, oy + (last[1]+0.5)*cell_size))
        finally:
            painter.end()

    def _draw_mark(self, painter, mark, cx, cy, rad):
        color = QColor(MARK_COLORS.get(mark, FALLBACK_MARK_COLOR))
        painter.setPen(QPen(color, 4))
        if mark == 'X':
            # two crossing lines
            painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
            painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
        elif mark == 'O':
            painter.drawEllipse(QPointF(cx, cy), rad, rad)
        else:
            painter.drawText(QPointF(cx, cy), mark)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.controller.get_status().is_over:
            return
        size = self.controller.board_size
        pos = event.position()
        cell = cell_at(pos.x(), pos.y(), self.width(), self.height(), size)
        if cell is None:
            return
        self.cell_clicked.emit(*cell)  # notify main window
