import pytest

pytest.importorskip("PySide6.QtWidgets")

from gridmatch.ui.board_widget import board_square, cell_at


def test_board_square_centres():
    assert board_square(300, 300) == (0, 0, 300)
    assert board_square(400, 300) == (50, 0, 300)
    assert board_square(300, 500) == (0, 100, 300)


@pytest.mark.parametrize("x,y,expected", [
    (10, 10, (0, 0)),
    (150, 10, (1, 0)),
    (290, 150, (2, 1)),
    (50, 299, (0, 2)),
])
def test_cell_at_square(x, y, expected):
    assert cell_at(x, y, 300, 300, 3) == expected


def test_cell_at_offset_board():
    # 400x300 widget, board starts at x=50
    assert cell_at(60, 10, 400, 300, 3) == (0, 0)
    assert cell_at(40, 10, 400, 300, 3) is None
    assert cell_at(360, 10, 400, 300, 3) is None


def test_cell_at_degenerate():
    assert cell_at(0, 0, 0, 0, 3) is None
